from dataclasses import dataclass
from typing import Any, List, Optional
import logging

from ...exceptions import Conflict, InvalidArgument, NotFound
from ..ports.audit_logger import AuditLogger
from ..ports.errors import UniqueViolation
from ..ports.patient_repo import PatientRepository, PatientDto
from ..validators import is_valid_cpf, normalize_cpf
from .common import check_lengths, clean_text, date_field, parse_identifier, require_fields

logger = logging.getLogger(__name__)


@dataclass
class PatientService:
    repo: PatientRepository
    audit: Optional[AuditLogger] = None

    def _duplicate_message(self, cpf: str) -> str:
        return f"CPF '{cpf}' is already registered"

    def _record(self, action: str, patient: PatientDto) -> None:
        # CPF stays out of the logs
        logger.info(f"Patient {patient.id} {action}")
        if self.audit:
            self.audit.log("patient", action, patient.id)

    def _validate(self, name: Any, cpf: Any, birth_date: Any, address: Any) -> dict:
        fields = {"name": clean_text(name), "cpf": clean_text(cpf)}
        require_fields(fields)
        check_lengths(fields, {"name": 200})
        if not is_valid_cpf(fields["cpf"]):
            raise InvalidArgument("Invalid CPF")
        fields["cpf"] = normalize_cpf(fields["cpf"])
        fields["birth_date"] = date_field(birth_date, "birth_date")
        fields["address"] = clean_text(address)
        return fields

    def list(self) -> List[PatientDto]:
        return self.repo.list()

    def get(self, patient_id: Any) -> PatientDto:
        identifier = parse_identifier(patient_id, "patient")
        patient = self.repo.get_by_id(identifier)
        if not patient:
            raise NotFound("Patient not found")
        return patient

    def create(self, name: Any, cpf: Any, birth_date: Any = None, address: Any = None) -> PatientDto:
        fields = self._validate(name, cpf, birth_date, address)
        if self.repo.exists_by_cpf(fields["cpf"]):
            raise InvalidArgument(self._duplicate_message(fields["cpf"]))
        try:
            patient = self.repo.insert(**fields)
        except UniqueViolation:
            raise Conflict(self._duplicate_message(fields["cpf"]))
        self._record("created", patient)
        return patient

    def update(self, patient_id: Any, name: Any, cpf: Any, birth_date: Any = None, address: Any = None) -> PatientDto:
        identifier = parse_identifier(patient_id, "patient")
        if not self.repo.exists_by_id(identifier):
            raise NotFound("Patient not found")
        fields = self._validate(name, cpf, birth_date, address)
        if self.repo.exists_by_cpf(fields["cpf"], exclude_id=identifier):
            raise InvalidArgument(self._duplicate_message(fields["cpf"]))
        try:
            patient = self.repo.update(identifier, **fields)
        except UniqueViolation:
            raise Conflict(self._duplicate_message(fields["cpf"]))
        if not patient:
            raise NotFound("Patient not found")
        self._record("updated", patient)
        return patient

    def delete(self, patient_id: Any) -> PatientDto:
        """Remove a patient together with their appointments."""
        identifier = parse_identifier(patient_id, "patient")
        patient = self.repo.delete(identifier)
        if not patient:
            raise NotFound("Patient not found")
        self._record("deleted", patient)
        return patient
