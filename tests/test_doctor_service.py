from datetime import date

import pytest

from hospital_api.application.ports.doctor_repo import DoctorDto
from hospital_api.application.ports.errors import MissingReference, UniqueViolation
from hospital_api.application.services.doctor_service import DoctorService
from hospital_api.exceptions import Conflict, InvalidArgument, NotFound


class FakeDepartmentRepo:
    def __init__(self, ids):
        self.ids = set(ids)

    def exists_by_id(self, department_id):
        return department_id in self.ids


class FakeDoctorRepo:
    def __init__(self):
        self._id = 1
        self.rows = {}
        self.fail_with = None

    def list(self):
        return [self.rows[k] for k in sorted(self.rows)]

    def get_by_id(self, doctor_id):
        return self.rows.get(doctor_id)

    def exists_by_id(self, doctor_id):
        return doctor_id in self.rows

    def exists_by_crm(self, crm, exclude_id=None):
        return any(d.crm == crm and d.id != exclude_id for d in self.rows.values())

    def insert(self, name, crm, specialty, hire_date, department_id):
        if self.fail_with:
            raise self.fail_with
        d = DoctorDto(self._id, name, crm, specialty, hire_date, department_id)
        self.rows[d.id] = d
        self._id += 1
        return d

    def update(self, doctor_id, name, crm, specialty, hire_date, department_id):
        if doctor_id not in self.rows:
            return None
        self.rows[doctor_id] = DoctorDto(doctor_id, name, crm, specialty, hire_date, department_id)
        return self.rows[doctor_id]

    def delete(self, doctor_id):
        return self.rows.pop(doctor_id, None)


def make_service(department_ids=(1,)):
    repo = FakeDoctorRepo()
    return DoctorService(repo=repo, department_repo=FakeDepartmentRepo(department_ids)), repo


def test_create_success_parses_fields():
    svc, _ = make_service()
    out = svc.create("Dr. Ana", "CRM1", "Cardiology", "2020-01-10", "1")
    assert out.id == 1
    assert out.hire_date == date(2020, 1, 10)
    assert out.department_id == 1


def test_create_without_optional_fields():
    svc, _ = make_service()
    out = svc.create("Dr. Ana", "CRM1")
    assert out.department_id is None
    assert out.hire_date is None
    assert out.specialty is None


def test_missing_required_fields_listed():
    svc, _ = make_service()
    with pytest.raises(InvalidArgument) as exc:
        svc.create(None, "")
    assert exc.value.detail == "Missing required fields: name, crm"


def test_invalid_hire_date():
    svc, _ = make_service()
    with pytest.raises(InvalidArgument) as exc:
        svc.create("Dr. Ana", "CRM1", hire_date="2023-02-29")
    assert exc.value.detail == "Invalid hire_date. Use YYYY-MM-DD"


def test_invalid_department_id():
    svc, _ = make_service()
    with pytest.raises(InvalidArgument) as exc:
        svc.create("Dr. Ana", "CRM1", department_id="abc")
    assert exc.value.detail == "Invalid department_id. Must be a positive integer"


def test_unknown_department_rejected():
    svc, _ = make_service()
    with pytest.raises(InvalidArgument) as exc:
        svc.create("Dr. Ana", "CRM1", department_id=9)
    assert exc.value.detail == "Department 9 does not exist"


def test_department_removed_during_insert():
    svc, repo = make_service()
    repo.fail_with = MissingReference("fk")
    with pytest.raises(InvalidArgument) as exc:
        svc.create("Dr. Ana", "CRM1", department_id=1)
    assert exc.value.detail == "Department 1 does not exist"


def test_crm_update_to_own_value_succeeds_and_to_other_fails():
    svc, _ = make_service()
    ana = svc.create("Dr. Ana", "CRM1")
    svc.create("Dr. Pedro", "CRM2")
    assert svc.update(ana.id, "Dr. Ana Souza", "CRM1").name == "Dr. Ana Souza"
    with pytest.raises(InvalidArgument) as exc:
        svc.update(ana.id, "Dr. Ana", "CRM2")
    assert exc.value.detail == "CRM 'CRM2' is already registered"


def test_update_missing_doctor_is_not_found():
    svc, _ = make_service()
    with pytest.raises(NotFound):
        svc.update(5, "Dr. Ana", "CRM1")


def test_get_and_delete_validate_identifier():
    svc, _ = make_service()
    with pytest.raises(InvalidArgument):
        svc.get("abc")
    with pytest.raises(InvalidArgument):
        svc.delete("0")
    with pytest.raises(NotFound):
        svc.get("3")


def test_crm_unique_violation_race_maps_to_conflict():
    svc, repo = make_service()
    repo.fail_with = UniqueViolation("duplicate key")
    with pytest.raises(Conflict) as exc:
        svc.create("Dr. Ana", "CRM1")
    assert exc.value.status_code == 400
    assert exc.value.detail == "CRM 'CRM1' is already registered"


def test_text_lengths_bounded_by_columns():
    svc, _ = make_service()
    with pytest.raises(InvalidArgument) as exc:
        svc.create("x" * 201, "CRM1")
    assert exc.value.detail == "Invalid name. Must be at most 200 characters"
    with pytest.raises(InvalidArgument) as exc:
        svc.create("Dr. Ana", "C" * 31)
    assert exc.value.detail == "Invalid crm. Must be at most 30 characters"
    with pytest.raises(InvalidArgument) as exc:
        svc.create("Dr. Ana", "CRM1", specialty="s" * 101)
    assert exc.value.detail == "Invalid specialty. Must be at most 100 characters"
    assert svc.create("x" * 200, "C" * 30, "s" * 100).id == 1


def test_department_id_beyond_integer_range():
    svc, _ = make_service(department_ids=(2**31,))
    with pytest.raises(InvalidArgument) as exc:
        svc.create("Dr. Ana", "CRM1", department_id=2**31)
    assert exc.value.detail == "Invalid department_id. Must be a positive integer"
