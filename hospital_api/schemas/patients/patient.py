# hospital_api/schemas/patient.py
from pydantic import BaseModel
from typing import Optional
from datetime import date

class PatientBase(BaseModel):
    name: Optional[str] = None
    cpf: Optional[str] = None  # digits, punctuation allowed
    birth_date: Optional[str] = None  # YYYY-MM-DD
    address: Optional[str] = None

class PatientCreate(PatientBase):
    pass

class PatientUpdate(PatientBase):
    pass

class PatientResponse(BaseModel):
    id: int
    name: str
    cpf: str
    birth_date: Optional[date] = None
    address: Optional[str] = None
