# hospital_api/db/models/hospital/appointment.py
from typing import Optional
from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field
from datetime import date

class Appointment(SQLModel, table=True):
    __tablename__ = "appointments"
    # One appointment per patient, doctor and day
    __table_args__ = (
        UniqueConstraint("patient_id", "doctor_id", "appointment_date", name="uq_appointment_patient_doctor_date"),
    )
    id: Optional[int] = Field(default=None, primary_key=True)
    patient_id: int = Field(foreign_key="patients.id", ondelete="CASCADE")
    doctor_id: int = Field(foreign_key="doctors.id", ondelete="CASCADE")
    appointment_date: date
    duration_minutes: int
    diagnosis: Optional[str] = None
    notes: Optional[str] = None
