from dataclasses import dataclass, replace
from datetime import date

import pytest

from hospital_api.application.ports.errors import MissingReference, UniqueViolation
from hospital_api.application.services.appointment_service import AppointmentService
from hospital_api.exceptions import Conflict, InvalidArgument, NotFound


@dataclass
class Appt:
    id: int
    patient_id: int
    doctor_id: int
    appointment_date: date
    duration_minutes: int
    diagnosis: str
    notes: str


class FakeIds:
    def __init__(self, ids):
        self.ids = set(ids)

    def exists_by_id(self, identifier):
        return identifier in self.ids


class FakeApptRepo:
    def __init__(self):
        self._id = 1
        self.appts = []
        self.fail_with = None

    def list(self):
        return list(self.appts)

    def get_by_id(self, appointment_id):
        return next((a for a in self.appts if a.id == appointment_id), None)

    def exists_by_id(self, appointment_id):
        return self.get_by_id(appointment_id) is not None

    def exists_by_slot(self, patient_id, doctor_id, appointment_date, exclude_id=None):
        return any(
            a.patient_id == patient_id and a.doctor_id == doctor_id
            and a.appointment_date == appointment_date and a.id != exclude_id
            for a in self.appts
        )

    def insert(self, patient_id, doctor_id, appointment_date, duration_minutes, diagnosis, notes):
        if self.fail_with:
            raise self.fail_with
        a = Appt(self._id, patient_id, doctor_id, appointment_date, duration_minutes, diagnosis, notes)
        self.appts.append(a)
        self._id += 1
        return a

    def update(self, appointment_id, **fields):
        a = self.get_by_id(appointment_id)
        if not a:
            return None
        updated = replace(a, **fields)
        self.appts[self.appts.index(a)] = updated
        return updated

    def delete(self, appointment_id):
        a = self.get_by_id(appointment_id)
        if a:
            self.appts.remove(a)
        return a


def make_service(patients=(1, 2), doctors=(1,)):
    repo = FakeApptRepo()
    svc = AppointmentService(repo=repo, patient_repo=FakeIds(patients), doctor_repo=FakeIds(doctors))
    return svc, repo


def test_book_success():
    svc, _ = make_service()
    out = svc.create(1, 1, "2025-11-01", "30", "Flu", None)
    assert out.id == 1
    assert out.appointment_date == date(2025, 11, 1)
    assert out.duration_minutes == 30
    assert svc.get(out.id) == out


def test_missing_required_fields():
    svc, _ = make_service()
    with pytest.raises(InvalidArgument) as exc:
        svc.create(1, None, None, 30)
    assert exc.value.detail == "Missing required fields: doctor_id, appointment_date"


def test_duration_must_be_positive():
    svc, _ = make_service()
    for bad in (0, -10, "abc"):
        with pytest.raises(InvalidArgument) as exc:
            svc.create(1, 1, "2025-11-01", bad)
        assert exc.value.detail == "Invalid duration_minutes. Must be a positive integer"


def test_invalid_appointment_date():
    svc, _ = make_service()
    with pytest.raises(InvalidArgument) as exc:
        svc.create(1, 1, "2025-02-30", 30)
    assert exc.value.detail == "Invalid appointment_date. Use YYYY-MM-DD"


def test_missing_patient_and_doctor_named():
    svc, _ = make_service()
    with pytest.raises(InvalidArgument) as exc:
        svc.create(7, 1, "2025-11-01", 30)
    assert exc.value.detail == "Patient 7 does not exist"
    with pytest.raises(InvalidArgument) as exc:
        svc.create(1, 8, "2025-11-01", 30)
    assert exc.value.detail == "Doctor 8 does not exist"


def test_duplicate_triple_rejected_regardless_of_other_fields():
    svc, _ = make_service()
    svc.create(1, 1, "2025-11-01", 30, "Flu", "first")
    with pytest.raises(InvalidArgument) as exc:
        svc.create(1, 1, "2025-11-01", 45, "Other", "second")
    assert exc.value.detail == "Patient 1 already has an appointment with doctor 1 on 2025-11-01"
    # a different patient on the same day is fine
    assert svc.create(2, 1, "2025-11-01", 30).id == 2


def test_unique_violation_race_maps_to_conflict():
    svc, repo = make_service()
    repo.fail_with = UniqueViolation("uq")
    with pytest.raises(Conflict) as exc:
        svc.create(1, 1, "2025-11-01", 30)
    assert exc.value.status_code == 400


def test_missing_reference_race_names_reference():
    svc, repo = make_service()

    def insert(*args, **kwargs):
        svc.patient_repo.ids.discard(1)
        raise MissingReference("fk")

    repo.insert = insert
    with pytest.raises(InvalidArgument) as exc:
        svc.create(1, 1, "2025-11-01", 30)
    assert exc.value.detail == "Patient 1 does not exist"


def test_update_excludes_itself_from_duplicate_check():
    svc, _ = make_service()
    a = svc.create(1, 1, "2025-11-01", 30)
    out = svc.update(a.id, 1, 1, "2025-11-01", 60, "Checked", None)
    assert out.duration_minutes == 60
    assert out.diagnosis == "Checked"


def test_update_into_taken_slot_rejected():
    svc, _ = make_service()
    svc.create(1, 1, "2025-11-01", 30)
    b = svc.create(1, 1, "2025-11-02", 30)
    with pytest.raises(InvalidArgument):
        svc.update(b.id, 1, 1, "2025-11-01", 30)


def test_update_and_delete_unknown_appointment():
    svc, _ = make_service()
    with pytest.raises(NotFound):
        svc.update(99, None, None, None, None)
    with pytest.raises(NotFound):
        svc.delete("99")
    with pytest.raises(InvalidArgument):
        svc.delete("x")


def test_duration_beyond_integer_range():
    svc, _ = make_service()
    with pytest.raises(InvalidArgument) as exc:
        svc.create(1, 1, "2025-11-01", 3000000000)
    assert exc.value.detail == "Invalid duration_minutes. Must be a positive integer"
    assert svc.create(1, 1, "2025-11-01", 2**31 - 1).duration_minutes == 2**31 - 1
