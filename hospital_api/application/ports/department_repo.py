from dataclasses import dataclass
from typing import List, Optional, Protocol


@dataclass
class DepartmentDto:
    id: int
    name: str
    location: Optional[str]


class DepartmentRepository(Protocol):
    def list(self) -> List[DepartmentDto]:
        ...

    def get_by_id(self, department_id: int) -> Optional[DepartmentDto]:
        ...

    def exists_by_id(self, department_id: int) -> bool:
        ...

    def exists_by_name(self, name: str, exclude_id: Optional[int] = None) -> bool:
        ...

    def insert(self, name: str, location: Optional[str]) -> DepartmentDto:
        ...

    def update(self, department_id: int, name: str, location: Optional[str]) -> Optional[DepartmentDto]:
        ...

    def delete(self, department_id: int) -> Optional[DepartmentDto]:
        ...
