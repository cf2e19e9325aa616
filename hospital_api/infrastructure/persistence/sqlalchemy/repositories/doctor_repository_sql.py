from datetime import date
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from .....db.models import Doctor
from .....application.ports.doctor_repo import DoctorRepository, DoctorDto
from ..integrity import translate_integrity_error


class SqlDoctorRepository(DoctorRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_dto(self, d: Doctor) -> DoctorDto:
        return DoctorDto(
            id=d.id,
            name=d.name,
            crm=d.crm,
            specialty=d.specialty,
            hire_date=d.hire_date,
            department_id=d.department_id,
        )

    def _get(self, doctor_id: int) -> Optional[Doctor]:
        return self.session.exec(select(Doctor).where(Doctor.id == doctor_id)).first()

    def _commit(self, doctor: Doctor) -> None:
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise translate_integrity_error(e) from e
        self.session.refresh(doctor)

    def list(self) -> List[DoctorDto]:
        rows = self.session.exec(select(Doctor).order_by(Doctor.id)).all()
        return [self._to_dto(r) for r in rows]

    def get_by_id(self, doctor_id: int) -> Optional[DoctorDto]:
        d = self._get(doctor_id)
        return self._to_dto(d) if d else None

    def exists_by_id(self, doctor_id: int) -> bool:
        return self._get(doctor_id) is not None

    def exists_by_crm(self, crm: str, exclude_id: Optional[int] = None) -> bool:
        query = select(Doctor.id).where(Doctor.crm == crm)
        if exclude_id is not None:
            query = query.where(Doctor.id != exclude_id)
        return self.session.exec(query).first() is not None

    def insert(self, name: str, crm: str, specialty: Optional[str], hire_date: Optional[date], department_id: Optional[int]) -> DoctorDto:
        d = Doctor(
            name=name,
            crm=crm,
            specialty=specialty,
            hire_date=hire_date,
            department_id=department_id,
        )
        self.session.add(d)
        self._commit(d)
        return self._to_dto(d)

    def update(self, doctor_id: int, name: str, crm: str, specialty: Optional[str], hire_date: Optional[date], department_id: Optional[int]) -> Optional[DoctorDto]:
        d = self._get(doctor_id)
        if not d:
            return None
        d.name = name
        d.crm = crm
        d.specialty = specialty
        d.hire_date = hire_date
        d.department_id = department_id
        self.session.add(d)
        self._commit(d)
        return self._to_dto(d)

    def delete(self, doctor_id: int) -> Optional[DoctorDto]:
        d = self._get(doctor_id)
        if not d:
            return None
        removed = self._to_dto(d)
        self.session.delete(d)
        self.session.commit()
        return removed
