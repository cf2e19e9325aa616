# Routers package
from . import departments_router
from . import doctors_router
from . import patients_router
from . import appointments_router

__all__ = [
    "departments_router",
    "doctors_router",
    "patients_router",
    "appointments_router",
]
