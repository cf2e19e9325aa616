from datetime import date

import pytest

from hospital_api.application.ports.errors import MissingReference, UniqueViolation
from hospital_api.infrastructure.persistence.sqlalchemy.repositories.appointment_repository_sql import SqlAppointmentRepository
from hospital_api.infrastructure.persistence.sqlalchemy.repositories.department_repository_sql import SqlDepartmentRepository
from hospital_api.infrastructure.persistence.sqlalchemy.repositories.doctor_repository_sql import SqlDoctorRepository
from hospital_api.infrastructure.persistence.sqlalchemy.repositories.patient_repository_sql import SqlPatientRepository
from hospital_api.seed import seed_demo_data


def test_unique_constraint_is_final_authority(session):
    patients = SqlPatientRepository(session)
    patients.insert("Joao", "52998224725", None, None)
    with pytest.raises(UniqueViolation):
        patients.insert("Outro", "52998224725", None, None)
    # the session is usable again after the rollback
    assert [p.name for p in patients.list()] == ["Joao"]


def test_appointment_triple_unique(session):
    patient = SqlPatientRepository(session).insert("Joao", "52998224725", None, None)
    doctor = SqlDoctorRepository(session).insert("Dr. Ana", "CRM1", None, None, None)
    appointments = SqlAppointmentRepository(session)
    appointments.insert(patient.id, doctor.id, date(2025, 11, 1), 30, None, None)
    assert appointments.exists_by_slot(patient.id, doctor.id, date(2025, 11, 1))
    assert not appointments.exists_by_slot(patient.id, doctor.id, date(2025, 11, 2))
    with pytest.raises(UniqueViolation):
        appointments.insert(patient.id, doctor.id, date(2025, 11, 1), 45, "other", None)


def test_foreign_keys_enforced(session):
    with pytest.raises(MissingReference):
        SqlAppointmentRepository(session).insert(99, 98, date(2025, 11, 1), 30, None, None)
    with pytest.raises(MissingReference):
        SqlDoctorRepository(session).insert("Dr. Ana", "CRM1", None, None, 42)


def test_exists_checks_honour_exclude_id(session):
    departments = SqlDepartmentRepository(session)
    cardio = departments.insert("Cardiology", None)
    assert departments.exists_by_name("Cardiology")
    assert not departments.exists_by_name("Cardiology", exclude_id=cardio.id)
    assert departments.exists_by_id(cardio.id)
    assert not departments.exists_by_id(cardio.id + 1)


def test_update_and_delete_missing_rows_return_none(session):
    doctors = SqlDoctorRepository(session)
    assert doctors.update(5, "x", "y", None, None, None) is None
    assert doctors.delete(5) is None
    assert doctors.get_by_id(5) is None


def test_delete_department_clears_doctor_reference(session):
    departments = SqlDepartmentRepository(session)
    doctors = SqlDoctorRepository(session)
    cardio = departments.insert("Cardiology", None)
    ana = doctors.insert("Dr. Ana", "CRM1", None, date(2020, 1, 10), cardio.id)
    removed = departments.delete(cardio.id)
    assert removed.name == "Cardiology"
    session.expire_all()
    assert doctors.get_by_id(ana.id).department_id is None


def test_seed_demo_data_only_once(session):
    assert seed_demo_data(session) is True
    assert len(SqlAppointmentRepository(session).list()) == 3
    assert [d.name for d in SqlDepartmentRepository(session).list()] == ["Cardiology", "Pediatrics", "Orthopedics"]
    assert seed_demo_data(session) is False
    assert len(SqlPatientRepository(session).list()) == 3
