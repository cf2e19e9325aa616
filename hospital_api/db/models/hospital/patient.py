# hospital_api/db/models/hospital/patient.py
from typing import Optional
from sqlmodel import SQLModel, Field
from datetime import date

class Patient(SQLModel, table=True):
    __tablename__ = "patients"
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=200)
    cpf: str = Field(max_length=14, unique=True)  # stored as 11 digits
    birth_date: Optional[date] = None
    address: Optional[str] = None
