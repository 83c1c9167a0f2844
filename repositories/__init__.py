"""Repositories package."""

from repositories.employee_repository import SEARCHABLE_FIELDS, EmployeeRepository

__all__ = ["EmployeeRepository", "SEARCHABLE_FIELDS"]
