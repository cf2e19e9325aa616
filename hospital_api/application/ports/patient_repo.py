from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Protocol


@dataclass
class PatientDto:
    id: int
    name: str
    cpf: str
    birth_date: Optional[date]
    address: Optional[str]


class PatientRepository(Protocol):
    def list(self) -> List[PatientDto]:
        ...

    def get_by_id(self, patient_id: int) -> Optional[PatientDto]:
        ...

    def exists_by_id(self, patient_id: int) -> bool:
        ...

    def exists_by_cpf(self, cpf: str, exclude_id: Optional[int] = None) -> bool:
        ...

    def insert(self, name: str, cpf: str, birth_date: Optional[date], address: Optional[str]) -> PatientDto:
        ...

    def update(self, patient_id: int, name: str, cpf: str, birth_date: Optional[date], address: Optional[str]) -> Optional[PatientDto]:
        ...

    def delete(self, patient_id: int) -> Optional[PatientDto]:
        ...
