"""Sample rows for local development and demos.

Loaded only into an empty database, through the same repositories the API uses.
"""
import logging
from datetime import date

from sqlmodel import Session

from .infrastructure.persistence.sqlalchemy.repositories.appointment_repository_sql import SqlAppointmentRepository
from .infrastructure.persistence.sqlalchemy.repositories.department_repository_sql import SqlDepartmentRepository
from .infrastructure.persistence.sqlalchemy.repositories.doctor_repository_sql import SqlDoctorRepository
from .infrastructure.persistence.sqlalchemy.repositories.patient_repository_sql import SqlPatientRepository

logger = logging.getLogger(__name__)

DEPARTMENTS = [
    ("Cardiology", "Block A - 1st floor"),
    ("Pediatrics", "Block B - 2nd floor"),
    ("Orthopedics", "Block C - Ground floor"),
]

DOCTORS = [
    # name, crm, specialty, hire date, index into DEPARTMENTS
    ("Dr. Ana Souza", "CRM12345", "Cardiologist", date(2020, 1, 10), 0),
    ("Dr. Pedro Lima", "CRM67890", "Pediatrician", date(2018, 7, 22), 1),
    ("Dr. Lucas Pereira", "CRM54321", "Orthopedist", date(2021, 3, 5), 2),
]

PATIENTS = [
    ("Joao da Silva", "52998224725", date(1985, 4, 23), "Rua das Flores, 123"),
    ("Maria Oliveira", "11144477735", date(1992, 11, 10), "Av. Paulista, 999"),
    ("Carlos Santos", "12345678909", date(1978, 6, 15), "Rua Central, 45"),
]

APPOINTMENTS = [
    # patient index, doctor index, date, minutes, diagnosis, notes
    (0, 0, date(2025, 11, 1), 30, "Controlled hypertension", "Patient in good condition."),
    (1, 1, date(2025, 11, 3), 20, "Mild flu", "Flu medication prescribed."),
    (2, 2, date(2025, 11, 5), 40, "Knee pain", "Imaging exam requested."),
]


def seed_demo_data(session: Session) -> bool:
    """Insert the sample rows unless departments already exist. Returns True when rows were added."""
    departments = SqlDepartmentRepository(session)
    if departments.list():
        logger.info("Demo data skipped: database is not empty")
        return False

    doctors = SqlDoctorRepository(session)
    patients = SqlPatientRepository(session)
    appointments = SqlAppointmentRepository(session)

    department_ids = [departments.insert(name, location).id for name, location in DEPARTMENTS]
    doctor_ids = [
        doctors.insert(name, crm, specialty, hired, department_ids[dept]).id
        for name, crm, specialty, hired, dept in DOCTORS
    ]
    patient_ids = [
        patients.insert(name, cpf, born, address).id
        for name, cpf, born, address in PATIENTS
    ]
    for patient, doctor, day, minutes, diagnosis, notes in APPOINTMENTS:
        appointments.insert(patient_ids[patient], doctor_ids[doctor], day, minutes, diagnosis, notes)

    logger.info(
        f"Demo data loaded: {len(DEPARTMENTS)} departments, {len(DOCTORS)} doctors, "
        f"{len(PATIENTS)} patients, {len(APPOINTMENTS)} appointments"
    )
    return True
