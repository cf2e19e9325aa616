from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session
import logging

from ..database import get_session
from ..exceptions import Internal, create_success_response
from ..application.services.patient_service import PatientService
from ..infrastructure.audit.std_logger import StdAuditLogger
from ..infrastructure.persistence.sqlalchemy.repositories.patient_repository_sql import SqlPatientRepository
from ..schemas.common.common import ApiResponse, ERROR_RESPONSES
from ..schemas.patients.patient import PatientCreate, PatientUpdate, PatientResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/patients", tags=["Patients"], responses=ERROR_RESPONSES)


def get_patient_service(session: Session = Depends(get_session)) -> PatientService:
    return PatientService(repo=SqlPatientRepository(session), audit=StdAuditLogger())


@router.get("", response_model=ApiResponse[List[PatientResponse]])
def list_patients(service: PatientService = Depends(get_patient_service)):
    try:
        return create_success_response(service.list())
    except Exception as e:
        logger.error(f"Error retrieving patients: {str(e)}")
        raise Internal("Failed to retrieve patients")


@router.get("/{patient_id}", response_model=ApiResponse[PatientResponse])
def get_patient(patient_id: str, service: PatientService = Depends(get_patient_service)):
    try:
        return create_success_response(service.get(patient_id))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error retrieving patient {patient_id}: {str(e)}")
        raise Internal("Failed to retrieve patient")


@router.post("", response_model=ApiResponse[PatientResponse], status_code=201)
def create_patient(payload: PatientCreate, service: PatientService = Depends(get_patient_service)):
    try:
        patient = service.create(
            name=payload.name,
            cpf=payload.cpf,
            birth_date=payload.birth_date,
            address=payload.address,
        )
        return create_success_response(patient)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error creating patient: {str(e)}")
        raise Internal("Failed to create patient")


@router.put("/{patient_id}", response_model=ApiResponse[PatientResponse])
def update_patient(patient_id: str, payload: PatientUpdate, service: PatientService = Depends(get_patient_service)):
    try:
        patient = service.update(
            patient_id,
            name=payload.name,
            cpf=payload.cpf,
            birth_date=payload.birth_date,
            address=payload.address,
        )
        return create_success_response(patient)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating patient {patient_id}: {str(e)}")
        raise Internal("Failed to update patient")


@router.delete("/{patient_id}", response_model=ApiResponse[PatientResponse])
def delete_patient(patient_id: str, service: PatientService = Depends(get_patient_service)):
    try:
        return create_success_response(service.delete(patient_id))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting patient {patient_id}: {str(e)}")
        raise Internal("Failed to delete patient")
