from datetime import date
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from .....db.models import Patient
from .....application.ports.patient_repo import PatientRepository, PatientDto
from ..integrity import translate_integrity_error


class SqlPatientRepository(PatientRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_dto(self, p: Patient) -> PatientDto:
        return PatientDto(
            id=p.id,
            name=p.name,
            cpf=p.cpf,
            birth_date=p.birth_date,
            address=p.address,
        )

    def _get(self, patient_id: int) -> Optional[Patient]:
        return self.session.exec(select(Patient).where(Patient.id == patient_id)).first()

    def _commit(self, patient: Patient) -> None:
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise translate_integrity_error(e) from e
        self.session.refresh(patient)

    def list(self) -> List[PatientDto]:
        rows = self.session.exec(select(Patient).order_by(Patient.id)).all()
        return [self._to_dto(r) for r in rows]

    def get_by_id(self, patient_id: int) -> Optional[PatientDto]:
        p = self._get(patient_id)
        return self._to_dto(p) if p else None

    def exists_by_id(self, patient_id: int) -> bool:
        return self._get(patient_id) is not None

    def exists_by_cpf(self, cpf: str, exclude_id: Optional[int] = None) -> bool:
        query = select(Patient.id).where(Patient.cpf == cpf)
        if exclude_id is not None:
            query = query.where(Patient.id != exclude_id)
        return self.session.exec(query).first() is not None

    def insert(self, name: str, cpf: str, birth_date: Optional[date], address: Optional[str]) -> PatientDto:
        p = Patient(name=name, cpf=cpf, birth_date=birth_date, address=address)
        self.session.add(p)
        self._commit(p)
        return self._to_dto(p)

    def update(self, patient_id: int, name: str, cpf: str, birth_date: Optional[date], address: Optional[str]) -> Optional[PatientDto]:
        p = self._get(patient_id)
        if not p:
            return None
        p.name = name
        p.cpf = cpf
        p.birth_date = birth_date
        p.address = address
        self.session.add(p)
        self._commit(p)
        return self._to_dto(p)

    def delete(self, patient_id: int) -> Optional[PatientDto]:
        p = self._get(patient_id)
        if not p:
            return None
        removed = self._to_dto(p)
        self.session.delete(p)
        self.session.commit()
        return removed
