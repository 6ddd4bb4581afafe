"""Models package."""

from models.base import Base, TimestampMixin
from models.employee import Employee, generate_employee_code

__all__ = [
    "Base",
    "TimestampMixin",
    "Employee",
    "generate_employee_code",
]
