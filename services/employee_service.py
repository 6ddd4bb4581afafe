"""Employee management service."""

import logging

from sqlalchemy.orm import Session

from config.database import transaction
from models.employee import Employee, generate_employee_code
from repositories.employee_repository import EmployeeRepository, EmployeeStore
from services.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class EmployeeService:
    """Service for creating, reading, updating and deleting employees."""

    def __init__(self, db: Session, store: EmployeeStore | None = None):
        """Initialize the service.

        Args:
            db: SQLAlchemy session; every write commits on it.
            store: Persistence backend. Defaults to an EmployeeRepository
                bound to ``db``.
        """
        self.db = db
        self.store = store if store is not None else EmployeeRepository(db)

    def add_employee(self, employee: Employee) -> Employee:
        """Create a new employee with a freshly generated employee code.

        Any code supplied by the caller is overwritten. An employee carrying
        an existing ID is merged into that row, which replaces its code.

        Args:
            employee: The employee to create.

        Returns:
            The persisted employee.
        """
        employee.employee_code = generate_employee_code()
        with transaction(self.db):
            saved = self.store.save(employee)
        logger.info("Added employee: id=%s code=%s", saved.id, saved.employee_code)
        return saved

    def find_all_employees(self) -> list[Employee]:
        """Return every employee."""
        return self.store.find_all()

    def update_employee(self, employee: Employee) -> Employee:
        """Save an employee record as given.

        An employee without an ID, or with an ID that does not exist yet,
        is inserted as a new record.
        """
        with transaction(self.db):
            saved = self.store.save(employee)
        logger.info("Updated employee: id=%s", saved.id)
        return saved

    def lookup_employee(self, employee_id: int) -> Employee | NotFoundError:
        """Look up an employee, returning the failure as a value.

        Args:
            employee_id: The employee's ID.

        Returns:
            The Employee, or a NotFoundError describing the missing ID.
        """
        employee = self.store.find_by_id(employee_id)
        if employee is None:
            return NotFoundError(employee_id)
        return employee

    def find_employee_by_id(self, employee_id: int) -> Employee:
        """Get an employee by ID.

        Raises:
            NotFoundError: If no employee has this ID.
        """
        result = self.lookup_employee(employee_id)
        if isinstance(result, NotFoundError):
            logger.info("Employee lookup failed: %s", result)
            raise result
        return result

    def delete_employee(self, employee_id: int) -> None:
        """Delete an employee in a single transaction.

        Deleting an ID that does not exist succeeds without effect.
        """
        with transaction(self.db):
            self.store.delete_by_id(employee_id)
        logger.info("Delete requested for employee: id=%s", employee_id)
