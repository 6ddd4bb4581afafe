"""Services package."""

from services.employee_service import EmployeeService
from services.exceptions import NotFoundError, ServiceError

__all__ = ["EmployeeService", "NotFoundError", "ServiceError"]
