"""Repository for employee database operations."""

import logging
from abc import ABC, abstractmethod

from sqlalchemy.orm import Session

from models.employee import Employee

logger = logging.getLogger(__name__)


class EmployeeStore(ABC):
    """Persistence operations over employee records."""

    @abstractmethod
    def save(self, employee: Employee) -> Employee:
        """Insert a new employee or update the one with the same ID."""

    @abstractmethod
    def find_all(self) -> list[Employee]:
        """Return every stored employee."""

    @abstractmethod
    def find_by_id(self, employee_id: int) -> Employee | None:
        """Return the employee with the given ID, or None."""

    @abstractmethod
    def delete_by_id(self, employee_id: int) -> None:
        """Remove the employee with the given ID if it exists."""


class EmployeeRepository(EmployeeStore):
    """Data access layer for employee records.

    Every method flushes but never commits; the caller owns the transaction.
    """

    def __init__(self, db: Session):
        """Initialize repository with database session.

        Args:
            db: SQLAlchemy database session.
        """
        self.db = db

    def save(self, employee: Employee) -> Employee:
        """Persist an employee (upsert by identity).

        An employee without an ID is inserted. An employee with an ID is
        merged into the session: the stored row is updated when it exists,
        otherwise a new row is inserted under that ID.

        Args:
            employee: The employee to persist.

        Returns:
            The persistent Employee instance with datastore-assigned fields.
        """
        if employee.id is None:
            self.db.add(employee)
            persisted = employee
        else:
            persisted = self.db.merge(employee)
        self.db.flush()
        logger.info(
            "Saved employee record: id=%s code=%s",
            persisted.id,
            persisted.employee_code,
        )
        return persisted

    def find_all(self) -> list[Employee]:
        """Get all employee records.

        Returns:
            List of Employee records in the database's default order.
        """
        return self.db.query(Employee).all()

    def find_by_id(self, employee_id: int) -> Employee | None:
        """Get an employee by its ID.

        Args:
            employee_id: The employee's ID.

        Returns:
            Employee record if exists, None otherwise.
        """
        return self.db.query(Employee).filter(Employee.id == employee_id).first()

    def delete_by_id(self, employee_id: int) -> None:
        """Delete an employee by its ID. Missing IDs are ignored.

        Args:
            employee_id: The employee's ID.
        """
        employee = self.find_by_id(employee_id)
        if employee is None:
            logger.debug("No employee record to delete: id=%s", employee_id)
            return
        self.db.delete(employee)
        self.db.flush()
        logger.info("Deleted employee record: id=%s", employee_id)
