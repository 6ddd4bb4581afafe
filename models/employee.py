"""Employee model.

The employee code is assigned once, when the row is first inserted, and is
never written by an UPDATE.
"""

import uuid

from sqlalchemy import BigInteger, Column, Integer, String, Text

from models.base import Base, TimestampMixin


def generate_employee_code() -> str:
    """Return a new random employee code in canonical UUID form."""
    return str(uuid.uuid4())


class Employee(TimestampMixin, Base):
    """Employee model mapping to the employee table."""

    __tablename__ = "employee"

    # SQLite only autoincrements INTEGER primary keys
    id = Column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        index=True,
        autoincrement=True,
    )
    name = Column(String(255), nullable=False)
    email = Column(String(255))
    job_title = Column(String(255))
    phone = Column(String(64))
    image_url = Column(Text)
    employee_code = Column(
        String(36),
        unique=True,
        nullable=False,
        default=generate_employee_code,
    )

    def __repr__(self) -> str:
        return f"<Employee id={self.id} code={self.employee_code!r} name={self.name!r}>"
