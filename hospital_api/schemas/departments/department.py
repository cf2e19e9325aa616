# hospital_api/schemas/department.py
from pydantic import BaseModel
from typing import Optional

class DepartmentBase(BaseModel):
    name: Optional[str] = None
    location: Optional[str] = None

class DepartmentCreate(DepartmentBase):
    pass

class DepartmentUpdate(DepartmentBase):
    pass

class DepartmentResponse(BaseModel):
    id: int
    name: str
    location: Optional[str] = None
