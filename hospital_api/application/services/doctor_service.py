from dataclasses import dataclass
from typing import Any, List, Optional
import logging

from ...exceptions import Conflict, InvalidArgument, NotFound
from ..ports.audit_logger import AuditLogger
from ..ports.department_repo import DepartmentRepository
from ..ports.doctor_repo import DoctorRepository, DoctorDto
from ..ports.errors import MissingReference, UniqueViolation
from .common import check_lengths, clean_text, date_field, parse_identifier, positive_int_field, require_fields

logger = logging.getLogger(__name__)


@dataclass
class DoctorService:
    repo: DoctorRepository
    department_repo: DepartmentRepository
    audit: Optional[AuditLogger] = None

    def _duplicate_message(self, crm: str) -> str:
        return f"CRM '{crm}' is already registered"

    def _record(self, action: str, doctor: DoctorDto) -> None:
        logger.info(f"Doctor {doctor.id} {action}")
        if self.audit:
            self.audit.log("doctor", action, doctor.id, {"department_id": doctor.department_id})

    def _validate(self, name: Any, crm: Any, specialty: Any, hire_date: Any, department_id: Any) -> dict:
        fields = {"name": clean_text(name), "crm": clean_text(crm)}
        require_fields(fields)
        fields["specialty"] = clean_text(specialty)
        check_lengths(fields, {"name": 200, "crm": 30, "specialty": 100})
        fields["hire_date"] = date_field(hire_date, "hire_date")
        fields["department_id"] = positive_int_field(department_id, "department_id")
        if fields["department_id"] is not None and not self.department_repo.exists_by_id(fields["department_id"]):
            raise InvalidArgument(f"Department {fields['department_id']} does not exist")
        return fields

    def list(self) -> List[DoctorDto]:
        return self.repo.list()

    def get(self, doctor_id: Any) -> DoctorDto:
        identifier = parse_identifier(doctor_id, "doctor")
        doctor = self.repo.get_by_id(identifier)
        if not doctor:
            raise NotFound("Doctor not found")
        return doctor

    def create(self, name: Any, crm: Any, specialty: Any = None, hire_date: Any = None, department_id: Any = None) -> DoctorDto:
        fields = self._validate(name, crm, specialty, hire_date, department_id)
        if self.repo.exists_by_crm(fields["crm"]):
            raise InvalidArgument(self._duplicate_message(fields["crm"]))
        try:
            doctor = self.repo.insert(**fields)
        except UniqueViolation:
            raise Conflict(self._duplicate_message(fields["crm"]))
        except MissingReference:
            raise InvalidArgument(f"Department {fields['department_id']} does not exist")
        self._record("created", doctor)
        return doctor

    def update(self, doctor_id: Any, name: Any, crm: Any, specialty: Any = None, hire_date: Any = None, department_id: Any = None) -> DoctorDto:
        identifier = parse_identifier(doctor_id, "doctor")
        if not self.repo.exists_by_id(identifier):
            raise NotFound("Doctor not found")
        fields = self._validate(name, crm, specialty, hire_date, department_id)
        if self.repo.exists_by_crm(fields["crm"], exclude_id=identifier):
            raise InvalidArgument(self._duplicate_message(fields["crm"]))
        try:
            doctor = self.repo.update(identifier, **fields)
        except UniqueViolation:
            raise Conflict(self._duplicate_message(fields["crm"]))
        except MissingReference:
            raise InvalidArgument(f"Department {fields['department_id']} does not exist")
        if not doctor:
            raise NotFound("Doctor not found")
        self._record("updated", doctor)
        return doctor

    def delete(self, doctor_id: Any) -> DoctorDto:
        """Remove a doctor together with their appointments."""
        identifier = parse_identifier(doctor_id, "doctor")
        doctor = self.repo.delete(identifier)
        if not doctor:
            raise NotFound("Doctor not found")
        self._record("deleted", doctor)
        return doctor
