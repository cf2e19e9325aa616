# hospital_api/db/models/hospital/doctor.py
from typing import Optional
from sqlmodel import SQLModel, Field
from datetime import date

class Doctor(SQLModel, table=True):
    __tablename__ = "doctors"
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=200)
    crm: str = Field(max_length=30, unique=True)
    specialty: Optional[str] = Field(default=None, max_length=100)
    hire_date: Optional[date] = None
    # Removing a department leaves its doctors unassigned
    department_id: Optional[int] = Field(default=None, foreign_key="departments.id", ondelete="SET NULL")
