from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Protocol


@dataclass
class DoctorDto:
    id: int
    name: str
    crm: str
    specialty: Optional[str]
    hire_date: Optional[date]
    department_id: Optional[int]


class DoctorRepository(Protocol):
    def list(self) -> List[DoctorDto]:
        ...

    def get_by_id(self, doctor_id: int) -> Optional[DoctorDto]:
        ...

    def exists_by_id(self, doctor_id: int) -> bool:
        ...

    def exists_by_crm(self, crm: str, exclude_id: Optional[int] = None) -> bool:
        ...

    def insert(self, name: str, crm: str, specialty: Optional[str], hire_date: Optional[date], department_id: Optional[int]) -> DoctorDto:
        ...

    def update(self, doctor_id: int, name: str, crm: str, specialty: Optional[str], hire_date: Optional[date], department_id: Optional[int]) -> Optional[DoctorDto]:
        ...

    def delete(self, doctor_id: int) -> Optional[DoctorDto]:
        ...
