"""Employee model.

Employees form a forest through the self-referential reports_to column.
"""

from sqlalchemy import Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from models.base import Base, TimestampMixin


class Employee(TimestampMixin, Base):
    """Employee model mapping to the employee table."""

    __tablename__ = "employee"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text)
    email = Column(String(255), unique=True, nullable=False)
    phone = Column(String(50))
    reports_to = Column(
        Integer,
        ForeignKey("employee.id", ondelete="SET NULL"),
        nullable=True,
        default=None,
        index=True,
    )
    img = Column(Text)

    manager = relationship(
        "Employee",
        remote_side=[id],
        foreign_keys=[reports_to],
        lazy="select",
    )

    def __repr__(self) -> str:
        return f"<Employee id={self.id} name={self.name!r}>"
