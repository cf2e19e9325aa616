# Models package (re-export table models for stable imports)
from .hospital.department import Department
from .hospital.doctor import Doctor
from .hospital.patient import Patient
from .hospital.appointment import Appointment

__all__ = [
    "Department",
    "Doctor",
    "Patient",
    "Appointment",
]
