"""Pydantic schemas for employee API request/response bodies.

Field names are exposed in camelCase (``jobTitle``, ``imageUrl``,
``employeeCode``) and accepted in either form.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from models.employee import Employee


class EmployeeBase(BaseModel):
    """Business fields shared by every employee payload."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    name: str = Field(description="Full name")
    email: str | None = Field(default=None, description="Contact email address")
    job_title: str | None = Field(default=None, description="Job title")
    phone: str | None = Field(default=None, description="Contact phone number")
    image_url: str | None = Field(
        default=None,
        description="Avatar URL or data URL",
    )


class EmployeeCreate(EmployeeBase):
    """Request body for creating an employee.

    A supplied employee code is accepted but always replaced by a newly
    generated one.
    """

    employee_code: str | None = Field(default=None, description="Ignored on create")

    def to_model(self) -> Employee:
        """Build a transient Employee from this payload."""
        return Employee(
            name=self.name,
            email=self.email,
            job_title=self.job_title,
            phone=self.phone,
            image_url=self.image_url,
            employee_code=self.employee_code,
        )


class EmployeeUpdate(EmployeeBase):
    """Request body for replacing an employee record.

    Every business field is written, so omitted optional fields are cleared.
    The employee code is not part of the update and stays as stored.
    """

    id: int | None = Field(default=None, description="ID of the employee to replace")

    def to_model(self) -> Employee:
        """Build a transient Employee carrying this payload's identity."""
        return Employee(
            id=self.id,
            name=self.name,
            email=self.email,
            job_title=self.job_title,
            phone=self.phone,
            image_url=self.image_url,
        )


class EmployeeResponse(EmployeeBase):
    """Response schema for a stored employee."""

    id: int = Field(description="Database ID")
    employee_code: str = Field(description="Unique employee code (UUID)")

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Ann Smith",
                "email": "ann.smith@example.com",
                "jobTitle": "Software Engineer",
                "phone": "+1 555 0100",
                "imageUrl": "https://example.com/avatars/ann.png",
                "employeeCode": "123e4567-e89b-12d3-a456-426614174000",
            }
        },
    )


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    detail: str = Field(
        description="Error message",
    )
