from datetime import date
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from .....db.models import Appointment
from .....application.ports.appointment_repo import AppointmentRepository, AppointmentDto
from ..integrity import translate_integrity_error


class SqlAppointmentRepository(AppointmentRepository):
    def __init__(self, session: Session):
        self.session = session

    def _to_dto(self, a: Appointment) -> AppointmentDto:
        return AppointmentDto(
            id=a.id,
            patient_id=a.patient_id,
            doctor_id=a.doctor_id,
            appointment_date=a.appointment_date,
            duration_minutes=a.duration_minutes,
            diagnosis=a.diagnosis,
            notes=a.notes,
        )

    def _get(self, appointment_id: int) -> Optional[Appointment]:
        return self.session.exec(select(Appointment).where(Appointment.id == appointment_id)).first()

    def _commit(self, appointment: Appointment) -> None:
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise translate_integrity_error(e) from e
        self.session.refresh(appointment)

    def list(self) -> List[AppointmentDto]:
        rows = self.session.exec(select(Appointment).order_by(Appointment.id)).all()
        return [self._to_dto(r) for r in rows]

    def get_by_id(self, appointment_id: int) -> Optional[AppointmentDto]:
        a = self._get(appointment_id)
        return self._to_dto(a) if a else None

    def exists_by_id(self, appointment_id: int) -> bool:
        return self._get(appointment_id) is not None

    def exists_by_slot(self, patient_id: int, doctor_id: int, appointment_date: date, exclude_id: Optional[int] = None) -> bool:
        query = (
            select(Appointment.id)
            .where(Appointment.patient_id == patient_id)
            .where(Appointment.doctor_id == doctor_id)
            .where(Appointment.appointment_date == appointment_date)
        )
        if exclude_id is not None:
            query = query.where(Appointment.id != exclude_id)
        return self.session.exec(query).first() is not None

    def insert(self, patient_id: int, doctor_id: int, appointment_date: date, duration_minutes: int, diagnosis: Optional[str], notes: Optional[str]) -> AppointmentDto:
        a = Appointment(
            patient_id=patient_id,
            doctor_id=doctor_id,
            appointment_date=appointment_date,
            duration_minutes=duration_minutes,
            diagnosis=diagnosis,
            notes=notes,
        )
        self.session.add(a)
        self._commit(a)
        return self._to_dto(a)

    def update(self, appointment_id: int, patient_id: int, doctor_id: int, appointment_date: date, duration_minutes: int, diagnosis: Optional[str], notes: Optional[str]) -> Optional[AppointmentDto]:
        a = self._get(appointment_id)
        if not a:
            return None
        a.patient_id = patient_id
        a.doctor_id = doctor_id
        a.appointment_date = appointment_date
        a.duration_minutes = duration_minutes
        a.diagnosis = diagnosis
        a.notes = notes
        self.session.add(a)
        self._commit(a)
        return self._to_dto(a)

    def delete(self, appointment_id: int) -> Optional[AppointmentDto]:
        a = self._get(appointment_id)
        if not a:
            return None
        removed = self._to_dto(a)
        self.session.delete(a)
        self.session.commit()
        return removed
