# hospital_api/schemas/doctor.py
from pydantic import BaseModel, StrictInt
from typing import Optional, Union
from datetime import date

class DoctorBase(BaseModel):
    name: Optional[str] = None
    crm: Optional[str] = None
    specialty: Optional[str] = None
    hire_date: Optional[str] = None  # YYYY-MM-DD
    department_id: Optional[Union[StrictInt, str]] = None

class DoctorCreate(DoctorBase):
    pass

class DoctorUpdate(DoctorBase):
    pass

class DoctorResponse(BaseModel):
    id: int
    name: str
    crm: str
    specialty: Optional[str] = None
    hire_date: Optional[date] = None
    department_id: Optional[int] = None
