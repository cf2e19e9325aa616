"""Hospital records REST API: departments, doctors, patients and appointments."""

__version__ = "1.0.0"
