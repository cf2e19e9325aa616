from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from .....db.models import Department
from .....application.ports.department_repo import DepartmentRepository, DepartmentDto
from ..integrity import translate_integrity_error


class SqlDepartmentRepository(DepartmentRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_dto(self, d: Department) -> DepartmentDto:
        return DepartmentDto(id=d.id, name=d.name, location=d.location)

    def _get(self, department_id: int) -> Optional[Department]:
        return self.session.exec(select(Department).where(Department.id == department_id)).first()

    def _commit(self, department: Department) -> None:
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise translate_integrity_error(e) from e
        self.session.refresh(department)

    def list(self) -> List[DepartmentDto]:
        rows = self.session.exec(select(Department).order_by(Department.id)).all()
        return [self._to_dto(r) for r in rows]

    def get_by_id(self, department_id: int) -> Optional[DepartmentDto]:
        d = self._get(department_id)
        return self._to_dto(d) if d else None

    def exists_by_id(self, department_id: int) -> bool:
        return self._get(department_id) is not None

    def exists_by_name(self, name: str, exclude_id: Optional[int] = None) -> bool:
        query = select(Department.id).where(Department.name == name)
        if exclude_id is not None:
            query = query.where(Department.id != exclude_id)
        return self.session.exec(query).first() is not None

    def insert(self, name: str, location: Optional[str]) -> DepartmentDto:
        d = Department(name=name, location=location)
        self.session.add(d)
        self._commit(d)
        return self._to_dto(d)

    def update(self, department_id: int, name: str, location: Optional[str]) -> Optional[DepartmentDto]:
        d = self._get(department_id)
        if not d:
            return None
        d.name = name
        d.location = location
        self.session.add(d)
        self._commit(d)
        return self._to_dto(d)

    def delete(self, department_id: int) -> Optional[DepartmentDto]:
        d = self._get(department_id)
        if not d:
            return None
        removed = self._to_dto(d)
        self.session.delete(d)
        self.session.commit()
        return removed
