"""Models package."""

from models.base import Base, TimestampMixin
from models.employee import Employee

__all__ = [
    "Base",
    "TimestampMixin",
    "Employee",
]
