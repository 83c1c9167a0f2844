"""Pydantic schemas for employee API requests and responses.

JSON payloads use camelCase keys (reportsTo, createdAt, ...); snake_case field
names are accepted on input as well.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialised with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def _blank_reference_to_none(value):
    # An empty string or 0 means "no manager"
    if value in ("", 0):
        return None
    return value


class EmployeeFields(CamelModel):
    """Writable employee fields shared by create and update."""

    name: str = Field(min_length=1, max_length=255, description="Employee name")
    email: str = Field(min_length=1, max_length=255, description="Unique email address")
    description: str | None = Field(default=None, description="Free text description")
    phone: str | None = Field(default=None, max_length=50, description="Phone number")
    reports_to: int | None = Field(default=None, description="ID of the employee's manager")

    @field_validator("name", "email", mode="before")
    @classmethod
    def strip_required(cls, v):
        """Trim surrounding whitespace so blank values fail min_length."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("reports_to", mode="before")
    @classmethod
    def normalize_reports_to(cls, v):
        return _blank_reference_to_none(v)


class EmployeeCreate(EmployeeFields):
    """Payload for creating an employee."""

    img: str | None = Field(default=None, description="Image reference")


class EmployeeUpdate(EmployeeFields):
    """Payload for replacing an employee's mutable fields.

    name and email are required. description, phone and reportsTo are
    replaced as sent, so omitting one clears it.
    """

    def changes(self) -> dict:
        """Return the column values this update writes."""
        return self.model_dump(include={"name", "description", "email", "phone", "reports_to"})


class EmployeeResponse(CamelModel):
    """Full employee record."""

    id: int
    name: str
    email: str
    description: str | None = None
    phone: str | None = None
    reports_to: int | None = None
    img: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class EmployeeSummary(CamelModel):
    """Identifier and name only."""

    id: int
    name: str


class ManagerSummary(EmployeeSummary):
    """Populated manager reference in search results."""


class EmployeeSearchItem(EmployeeResponse):
    """Search hit with the manager reference populated."""

    reports_to: ManagerSummary | None = Field(
        default=None,
        validation_alias="manager",
        serialization_alias="reportsTo",
    )


class EmployeeNode(EmployeeResponse):
    """Employee with its direct reports nested beneath it."""

    children: list["EmployeeNode"] = Field(default_factory=list)


class EmployeeSearchResponse(CamelModel):
    """A page of search results."""

    data: list[EmployeeSearchItem]
    total_results: int = Field(description="Number of matches across all pages")
    page: int
    rows_per_page: int


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    detail: str = Field(
        description="Error message",
    )
