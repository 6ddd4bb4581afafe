"""Employee API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from config.database import get_db
from schemas.employee import EmployeeCreate, EmployeeResponse, EmployeeUpdate, ErrorResponse
from services.employee_service import EmployeeService
from services.exceptions import NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter()


def get_employee_service(db: Annotated[Session, Depends(get_db)]) -> EmployeeService:
    """Dependency that provides an EmployeeService bound to the request session."""
    return EmployeeService(db)


ServiceDep = Annotated[EmployeeService, Depends(get_employee_service)]


def internal_error(service: EmployeeService) -> HTTPException:
    """Roll back the request session and build a 500 response.

    The error text stays in the log; clients only get a generic detail.
    """
    service.db.rollback()
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
    )


@router.get(
    "/all",
    response_model=list[EmployeeResponse],
    summary="List Employees",
)
def get_all_employees(service: ServiceDep) -> list[EmployeeResponse]:
    """Return every employee."""
    try:
        employees = service.find_all_employees()
    except Exception as e:
        logger.exception("Unexpected error listing employees")
        raise internal_error(service) from e
    return [EmployeeResponse.model_validate(employee) for employee in employees]


@router.get(
    "/find/{employee_id}",
    response_model=EmployeeResponse,
    summary="Get Employee",
    responses={404: {"model": ErrorResponse, "description": "Employee not found"}},
)
def get_employee_by_id(employee_id: int, service: ServiceDep) -> EmployeeResponse:
    """Return a single employee by ID."""
    try:
        employee = service.find_employee_by_id(employee_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except Exception as e:
        logger.exception("Unexpected error fetching employee_id=%s", employee_id)
        raise internal_error(service) from e
    return EmployeeResponse.model_validate(employee)


@router.post(
    "/add",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add Employee",
    description="Create an employee. A new employee code is always generated.",
)
def add_employee(payload: EmployeeCreate, service: ServiceDep) -> EmployeeResponse:
    """Create an employee."""
    try:
        employee = service.add_employee(payload.to_model())
    except Exception as e:
        logger.exception("Unexpected error adding employee")
        raise internal_error(service) from e
    return EmployeeResponse.model_validate(employee)


@router.put(
    "/update",
    response_model=EmployeeResponse,
    summary="Update Employee",
    description="""
    Replace an employee record.

    The payload is saved as given: a payload without an ID, or with an ID
    that does not exist, creates a new record.
    """,
)
def update_employee(payload: EmployeeUpdate, service: ServiceDep) -> EmployeeResponse:
    """Replace an employee record."""
    try:
        employee = service.update_employee(payload.to_model())
    except Exception as e:
        logger.exception("Unexpected error updating employee_id=%s", payload.id)
        raise internal_error(service) from e
    return EmployeeResponse.model_validate(employee)


@router.delete(
    "/delete/{employee_id}",
    status_code=status.HTTP_200_OK,
    summary="Delete Employee",
    description="Delete an employee. Unknown IDs are accepted without error.",
)
def delete_employee(employee_id: int, service: ServiceDep) -> Response:
    """Delete an employee by ID."""
    try:
        service.delete_employee(employee_id)
    except Exception as e:
        logger.exception("Unexpected error deleting employee_id=%s", employee_id)
        raise internal_error(service) from e
    return Response(status_code=status.HTTP_200_OK)
