from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Protocol


@dataclass
class AppointmentDto:
    id: int
    patient_id: int
    doctor_id: int
    appointment_date: date
    duration_minutes: int
    diagnosis: Optional[str]
    notes: Optional[str]


class AppointmentRepository(Protocol):
    def list(self) -> List[AppointmentDto]:
        ...

    def get_by_id(self, appointment_id: int) -> Optional[AppointmentDto]:
        ...

    def exists_by_id(self, appointment_id: int) -> bool:
        ...

    def exists_by_slot(self, patient_id: int, doctor_id: int, appointment_date: date, exclude_id: Optional[int] = None) -> bool:
        ...

    def insert(self, patient_id: int, doctor_id: int, appointment_date: date, duration_minutes: int, diagnosis: Optional[str], notes: Optional[str]) -> AppointmentDto:
        ...

    def update(self, appointment_id: int, patient_id: int, doctor_id: int, appointment_date: date, duration_minutes: int, diagnosis: Optional[str], notes: Optional[str]) -> Optional[AppointmentDto]:
        ...

    def delete(self, appointment_id: int) -> Optional[AppointmentDto]:
        ...
