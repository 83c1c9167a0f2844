"""Schemas package."""

from schemas.employee import (
    EmployeeCreate,
    EmployeeNode,
    EmployeeResponse,
    EmployeeSearchItem,
    EmployeeSearchResponse,
    EmployeeSummary,
    EmployeeUpdate,
    ErrorResponse,
    ManagerSummary,
    MessageResponse,
)

__all__ = [
    "EmployeeCreate",
    "EmployeeUpdate",
    "EmployeeResponse",
    "EmployeeSummary",
    "EmployeeSearchItem",
    "EmployeeSearchResponse",
    "EmployeeNode",
    "ManagerSummary",
    "MessageResponse",
    "ErrorResponse",
]
