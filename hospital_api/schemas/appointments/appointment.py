# hospital_api/schemas/appointment.py
from pydantic import BaseModel, StrictInt
from typing import Optional, Union
from datetime import date

class AppointmentBase(BaseModel):
    patient_id: Optional[Union[StrictInt, str]] = None
    doctor_id: Optional[Union[StrictInt, str]] = None
    appointment_date: Optional[str] = None  # YYYY-MM-DD
    duration_minutes: Optional[Union[StrictInt, str]] = None
    diagnosis: Optional[str] = None
    notes: Optional[str] = None

class AppointmentCreate(AppointmentBase):
    pass

class AppointmentUpdate(AppointmentBase):
    pass

class AppointmentResponse(BaseModel):
    id: int
    patient_id: int
    doctor_id: int
    appointment_date: date
    duration_minutes: int
    diagnosis: Optional[str] = None
    notes: Optional[str] = None
