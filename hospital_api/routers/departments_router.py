from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session
import logging

from ..database import get_session
from ..exceptions import Internal, create_success_response
from ..application.services.department_service import DepartmentService
from ..infrastructure.audit.std_logger import StdAuditLogger
from ..infrastructure.persistence.sqlalchemy.repositories.department_repository_sql import SqlDepartmentRepository
from ..schemas.common.common import ApiResponse, ERROR_RESPONSES
from ..schemas.departments.department import DepartmentCreate, DepartmentUpdate, DepartmentResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/departments", tags=["Departments"], responses=ERROR_RESPONSES)


def get_department_service(session: Session = Depends(get_session)) -> DepartmentService:
    return DepartmentService(repo=SqlDepartmentRepository(session), audit=StdAuditLogger())


@router.get("", response_model=ApiResponse[List[DepartmentResponse]])
def list_departments(service: DepartmentService = Depends(get_department_service)):
    try:
        return create_success_response(service.list())
    except Exception as e:
        logger.error(f"Error retrieving departments: {str(e)}")
        raise Internal("Failed to retrieve departments")


@router.get("/{department_id}", response_model=ApiResponse[DepartmentResponse])
def get_department(department_id: str, service: DepartmentService = Depends(get_department_service)):
    try:
        return create_success_response(service.get(department_id))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error retrieving department {department_id}: {str(e)}")
        raise Internal("Failed to retrieve department")


@router.post("", response_model=ApiResponse[DepartmentResponse], status_code=201)
def create_department(payload: DepartmentCreate, service: DepartmentService = Depends(get_department_service)):
    try:
        return create_success_response(service.create(payload.name, payload.location))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error creating department: {str(e)}")
        raise Internal("Failed to create department")


@router.put("/{department_id}", response_model=ApiResponse[DepartmentResponse])
def update_department(department_id: str, payload: DepartmentUpdate, service: DepartmentService = Depends(get_department_service)):
    try:
        return create_success_response(service.update(department_id, payload.name, payload.location))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating department {department_id}: {str(e)}")
        raise Internal("Failed to update department")


@router.delete("/{department_id}", response_model=ApiResponse[DepartmentResponse])
def delete_department(department_id: str, service: DepartmentService = Depends(get_department_service)):
    try:
        return create_success_response(service.delete(department_id))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting department {department_id}: {str(e)}")
        raise Internal("Failed to delete department")
