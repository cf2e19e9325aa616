from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session
import logging

from ..database import get_session
from ..exceptions import Internal, create_success_response
from ..application.services.doctor_service import DoctorService
from ..infrastructure.audit.std_logger import StdAuditLogger
from ..infrastructure.persistence.sqlalchemy.repositories.department_repository_sql import SqlDepartmentRepository
from ..infrastructure.persistence.sqlalchemy.repositories.doctor_repository_sql import SqlDoctorRepository
from ..schemas.common.common import ApiResponse, ERROR_RESPONSES
from ..schemas.doctors.doctor import DoctorCreate, DoctorUpdate, DoctorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/doctors", tags=["Doctors"], responses=ERROR_RESPONSES)


def get_doctor_service(session: Session = Depends(get_session)) -> DoctorService:
    return DoctorService(
        repo=SqlDoctorRepository(session),
        department_repo=SqlDepartmentRepository(session),
        audit=StdAuditLogger(),
    )


@router.get("", response_model=ApiResponse[List[DoctorResponse]])
def list_doctors(service: DoctorService = Depends(get_doctor_service)):
    try:
        return create_success_response(service.list())
    except Exception as e:
        logger.error(f"Error retrieving doctors: {str(e)}")
        raise Internal("Failed to retrieve doctors")


@router.get("/{doctor_id}", response_model=ApiResponse[DoctorResponse])
def get_doctor(doctor_id: str, service: DoctorService = Depends(get_doctor_service)):
    try:
        return create_success_response(service.get(doctor_id))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error retrieving doctor {doctor_id}: {str(e)}")
        raise Internal("Failed to retrieve doctor")


@router.post("", response_model=ApiResponse[DoctorResponse], status_code=201)
def create_doctor(payload: DoctorCreate, service: DoctorService = Depends(get_doctor_service)):
    try:
        doctor = service.create(
            name=payload.name,
            crm=payload.crm,
            specialty=payload.specialty,
            hire_date=payload.hire_date,
            department_id=payload.department_id,
        )
        return create_success_response(doctor)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error creating doctor: {str(e)}")
        raise Internal("Failed to create doctor")


@router.put("/{doctor_id}", response_model=ApiResponse[DoctorResponse])
def update_doctor(doctor_id: str, payload: DoctorUpdate, service: DoctorService = Depends(get_doctor_service)):
    try:
        doctor = service.update(
            doctor_id,
            name=payload.name,
            crm=payload.crm,
            specialty=payload.specialty,
            hire_date=payload.hire_date,
            department_id=payload.department_id,
        )
        return create_success_response(doctor)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating doctor {doctor_id}: {str(e)}")
        raise Internal("Failed to update doctor")


@router.delete("/{doctor_id}", response_model=ApiResponse[DoctorResponse])
def delete_doctor(doctor_id: str, service: DoctorService = Depends(get_doctor_service)):
    try:
        return create_success_response(service.delete(doctor_id))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting doctor {doctor_id}: {str(e)}")
        raise Internal("Failed to delete doctor")
