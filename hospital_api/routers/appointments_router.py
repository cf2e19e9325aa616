from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session
import logging

from ..database import get_session
from ..exceptions import Internal, create_success_response
from ..application.services.appointment_service import AppointmentService
from ..infrastructure.audit.std_logger import StdAuditLogger
from ..infrastructure.persistence.sqlalchemy.repositories.appointment_repository_sql import SqlAppointmentRepository
from ..infrastructure.persistence.sqlalchemy.repositories.doctor_repository_sql import SqlDoctorRepository
from ..infrastructure.persistence.sqlalchemy.repositories.patient_repository_sql import SqlPatientRepository
from ..schemas.common.common import ApiResponse, ERROR_RESPONSES
from ..schemas.appointments.appointment import AppointmentCreate, AppointmentUpdate, AppointmentResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/appointments", tags=["Appointments"], responses=ERROR_RESPONSES)


def get_appointment_service(session: Session = Depends(get_session)) -> AppointmentService:
    return AppointmentService(
        repo=SqlAppointmentRepository(session),
        patient_repo=SqlPatientRepository(session),
        doctor_repo=SqlDoctorRepository(session),
        audit=StdAuditLogger(),
    )


@router.get("", response_model=ApiResponse[List[AppointmentResponse]])
def list_appointments(service: AppointmentService = Depends(get_appointment_service)):
    try:
        return create_success_response(service.list())
    except Exception as e:
        logger.error(f"Error retrieving appointments: {str(e)}")
        raise Internal("Failed to retrieve appointments")


@router.get("/{appointment_id}", response_model=ApiResponse[AppointmentResponse])
def get_appointment(appointment_id: str, service: AppointmentService = Depends(get_appointment_service)):
    try:
        return create_success_response(service.get(appointment_id))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error retrieving appointment {appointment_id}: {str(e)}")
        raise Internal("Failed to retrieve appointment")


@router.post("", response_model=ApiResponse[AppointmentResponse], status_code=201)
def book_appointment(payload: AppointmentCreate, service: AppointmentService = Depends(get_appointment_service)):
    try:
        appointment = service.create(
            patient_id=payload.patient_id,
            doctor_id=payload.doctor_id,
            appointment_date=payload.appointment_date,
            duration_minutes=payload.duration_minutes,
            diagnosis=payload.diagnosis,
            notes=payload.notes,
        )
        return create_success_response(appointment)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error booking appointment: {str(e)}")
        raise Internal("Failed to book appointment")


@router.put("/{appointment_id}", response_model=ApiResponse[AppointmentResponse])
def update_appointment(appointment_id: str, payload: AppointmentUpdate, service: AppointmentService = Depends(get_appointment_service)):
    try:
        appointment = service.update(
            appointment_id,
            patient_id=payload.patient_id,
            doctor_id=payload.doctor_id,
            appointment_date=payload.appointment_date,
            duration_minutes=payload.duration_minutes,
            diagnosis=payload.diagnosis,
            notes=payload.notes,
        )
        return create_success_response(appointment)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating appointment {appointment_id}: {str(e)}")
        raise Internal("Failed to update appointment")


@router.delete("/{appointment_id}", response_model=ApiResponse[AppointmentResponse])
def cancel_appointment(appointment_id: str, service: AppointmentService = Depends(get_appointment_service)):
    try:
        return create_success_response(service.delete(appointment_id))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting appointment {appointment_id}: {str(e)}")
        raise Internal("Failed to delete appointment")
