from dataclasses import dataclass
from datetime import date
from typing import Any, List, Optional
import logging

from ...exceptions import Conflict, InvalidArgument, NotFound
from ..ports.appointment_repo import AppointmentRepository, AppointmentDto
from ..ports.audit_logger import AuditLogger
from ..ports.doctor_repo import DoctorRepository
from ..ports.errors import MissingReference, UniqueViolation
from ..ports.patient_repo import PatientRepository
from .common import clean_text, date_field, parse_identifier, positive_int_field, require_fields

logger = logging.getLogger(__name__)


@dataclass
class AppointmentService:
    repo: AppointmentRepository
    patient_repo: PatientRepository
    doctor_repo: DoctorRepository
    audit: Optional[AuditLogger] = None

    def _duplicate_message(self, patient_id: int, doctor_id: int, appointment_date: date) -> str:
        return f"Patient {patient_id} already has an appointment with doctor {doctor_id} on {appointment_date.isoformat()}"

    def _record(self, action: str, appointment: AppointmentDto) -> None:
        logger.info(f"Appointment {appointment.id} {action}")
        if self.audit:
            self.audit.log(
                "appointment",
                action,
                appointment.id,
                {"patient_id": appointment.patient_id, "doctor_id": appointment.doctor_id},
            )

    def _check_references(self, patient_id: int, doctor_id: int) -> None:
        if not self.patient_repo.exists_by_id(patient_id):
            raise InvalidArgument(f"Patient {patient_id} does not exist")
        if not self.doctor_repo.exists_by_id(doctor_id):
            raise InvalidArgument(f"Doctor {doctor_id} does not exist")

    def _validate(self, patient_id: Any, doctor_id: Any, appointment_date: Any, duration_minutes: Any, diagnosis: Any, notes: Any) -> dict:
        require_fields({
            "patient_id": patient_id,
            "doctor_id": doctor_id,
            "appointment_date": appointment_date,
            "duration_minutes": duration_minutes,
        })
        fields = {
            "patient_id": positive_int_field(patient_id, "patient_id"),
            "doctor_id": positive_int_field(doctor_id, "doctor_id"),
            "appointment_date": date_field(appointment_date, "appointment_date"),
            "duration_minutes": positive_int_field(duration_minutes, "duration_minutes"),
            "diagnosis": clean_text(diagnosis),
            "notes": clean_text(notes),
        }
        self._check_references(fields["patient_id"], fields["doctor_id"])
        return fields

    def _write_failed(self, error: Exception, fields: dict) -> InvalidArgument:
        if isinstance(error, UniqueViolation):
            return Conflict(self._duplicate_message(fields["patient_id"], fields["doctor_id"], fields["appointment_date"]))
        # A referenced row vanished between the pre-check and the write
        try:
            self._check_references(fields["patient_id"], fields["doctor_id"])
        except InvalidArgument as missing:
            return missing
        return InvalidArgument("Patient or doctor does not exist")

    def list(self) -> List[AppointmentDto]:
        return self.repo.list()

    def get(self, appointment_id: Any) -> AppointmentDto:
        identifier = parse_identifier(appointment_id, "appointment")
        appointment = self.repo.get_by_id(identifier)
        if not appointment:
            raise NotFound("Appointment not found")
        return appointment

    def create(self, patient_id: Any, doctor_id: Any, appointment_date: Any, duration_minutes: Any, diagnosis: Any = None, notes: Any = None) -> AppointmentDto:
        fields = self._validate(patient_id, doctor_id, appointment_date, duration_minutes, diagnosis, notes)
        if self.repo.exists_by_slot(fields["patient_id"], fields["doctor_id"], fields["appointment_date"]):
            raise InvalidArgument(self._duplicate_message(fields["patient_id"], fields["doctor_id"], fields["appointment_date"]))
        try:
            appointment = self.repo.insert(**fields)
        except (UniqueViolation, MissingReference) as e:
            raise self._write_failed(e, fields)
        self._record("created", appointment)
        return appointment

    def update(self, appointment_id: Any, patient_id: Any, doctor_id: Any, appointment_date: Any, duration_minutes: Any, diagnosis: Any = None, notes: Any = None) -> AppointmentDto:
        identifier = parse_identifier(appointment_id, "appointment")
        if not self.repo.exists_by_id(identifier):
            raise NotFound("Appointment not found")
        fields = self._validate(patient_id, doctor_id, appointment_date, duration_minutes, diagnosis, notes)
        if self.repo.exists_by_slot(fields["patient_id"], fields["doctor_id"], fields["appointment_date"], exclude_id=identifier):
            raise InvalidArgument(self._duplicate_message(fields["patient_id"], fields["doctor_id"], fields["appointment_date"]))
        try:
            appointment = self.repo.update(identifier, **fields)
        except (UniqueViolation, MissingReference) as e:
            raise self._write_failed(e, fields)
        if not appointment:
            raise NotFound("Appointment not found")
        self._record("updated", appointment)
        return appointment

    def delete(self, appointment_id: Any) -> AppointmentDto:
        identifier = parse_identifier(appointment_id, "appointment")
        appointment = self.repo.delete(identifier)
        if not appointment:
            raise NotFound("Appointment not found")
        self._record("deleted", appointment)
        return appointment
