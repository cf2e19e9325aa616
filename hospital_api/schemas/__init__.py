# Schemas package (re-export feature modules for stable imports)
from .departments.department import *
from .doctors.doctor import *
from .patients.patient import *
from .appointments.appointment import *
from .common.common import *
