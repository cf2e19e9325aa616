from dataclasses import dataclass
from typing import Any, List, Optional
import logging

from ...exceptions import Conflict, InvalidArgument, NotFound
from ..ports.audit_logger import AuditLogger
from ..ports.department_repo import DepartmentRepository, DepartmentDto
from ..ports.errors import UniqueViolation
from .common import check_lengths, clean_text, parse_identifier, require_fields

logger = logging.getLogger(__name__)


@dataclass
class DepartmentService:
    repo: DepartmentRepository
    audit: Optional[AuditLogger] = None

    def _duplicate_message(self, name: str) -> str:
        return f"A department named '{name}' already exists"

    def _record(self, action: str, department: DepartmentDto) -> None:
        logger.info(f"Department {department.id} {action}")
        if self.audit:
            self.audit.log("department", action, department.id)

    def _validate(self, name: Any, location: Any):
        name = clean_text(name)
        require_fields({"name": name})
        location = clean_text(location)
        check_lengths({"name": name, "location": location}, {"name": 100, "location": 100})
        return name, location

    def list(self) -> List[DepartmentDto]:
        return self.repo.list()

    def get(self, department_id: Any) -> DepartmentDto:
        identifier = parse_identifier(department_id, "department")
        department = self.repo.get_by_id(identifier)
        if not department:
            raise NotFound("Department not found")
        return department

    def create(self, name: Any, location: Any = None) -> DepartmentDto:
        name, location = self._validate(name, location)
        if self.repo.exists_by_name(name):
            raise InvalidArgument(self._duplicate_message(name))
        try:
            department = self.repo.insert(name, location)
        except UniqueViolation:
            raise Conflict(self._duplicate_message(name))
        self._record("created", department)
        return department

    def update(self, department_id: Any, name: Any, location: Any = None) -> DepartmentDto:
        identifier = parse_identifier(department_id, "department")
        if not self.repo.exists_by_id(identifier):
            raise NotFound("Department not found")
        name, location = self._validate(name, location)
        if self.repo.exists_by_name(name, exclude_id=identifier):
            raise InvalidArgument(self._duplicate_message(name))
        try:
            department = self.repo.update(identifier, name, location)
        except UniqueViolation:
            raise Conflict(self._duplicate_message(name))
        if not department:
            raise NotFound("Department not found")
        self._record("updated", department)
        return department

    def delete(self, department_id: Any) -> DepartmentDto:
        """Remove a department. Doctors assigned to it are kept and lose the assignment."""
        identifier = parse_identifier(department_id, "department")
        department = self.repo.delete(identifier)
        if not department:
            raise NotFound("Department not found")
        self._record("deleted", department)
        return department
