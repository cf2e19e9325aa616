# hospital_api/db/models/hospital/department.py
from typing import Optional
from sqlmodel import SQLModel, Field

class Department(SQLModel, table=True):
    __tablename__ = "departments"
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100, unique=True)
    location: Optional[str] = Field(default=None, max_length=100)
