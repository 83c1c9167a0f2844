"""Repository for employee database operations."""

import logging
from typing import Any

from sqlalchemy import and_, func, or_, select
from sqlalchemy.orm import Session, joinedload

from models.employee import Employee

logger = logging.getLogger(__name__)

# Columns matched by the free-text search, in the order they are tried
SEARCHABLE_FIELDS = ("name", "email", "phone", "description")


class EmployeeRepository:
    """Data access layer for employee records."""

    def __init__(self, db: Session):
        """Initialize repository with database session.

        Args:
            db: SQLAlchemy database session.
        """
        self.db = db

    def create(self, **values: Any) -> Employee:
        """Create a new employee record.

        Args:
            **values: Column values for the new employee.

        Returns:
            The created Employee, with its identifier assigned.

        Raises:
            IntegrityError: If the email is already taken.
        """
        employee = Employee(**values)
        self.db.add(employee)
        self.db.flush()
        logger.info("Created employee: id=%s", employee.id)
        return employee

    def get_by_id(self, employee_id: int) -> Employee | None:
        """Get an employee by its ID.

        Args:
            employee_id: The employee's ID.

        Returns:
            Employee if it exists, None otherwise.
        """
        return self.db.get(Employee, employee_id)

    def list_simple(self) -> list[tuple[int, str]]:
        """Return (id, name) for every employee."""
        rows = self.db.execute(select(Employee.id, Employee.name).order_by(Employee.id))
        return [tuple(row) for row in rows]

    def list_all(self) -> list[Employee]:
        """Return every employee ordered by ID."""
        return list(self.db.scalars(select(Employee).order_by(Employee.id)))

    def search(
        self,
        search_term: str = "",
        page: int = 1,
        rows_per_page: int = 20,
        group: str | None = None,
        circle_of: Employee | None = None,
    ) -> tuple[list[Employee], int]:
        """Search employees with a case-insensitive substring match.

        Args:
            search_term: Text to look for. An empty term matches everything.
            page: 1-based page number.
            rows_per_page: Page size.
            group: Restrict matching to this single field when it is one of
                SEARCHABLE_FIELDS; otherwise all of them are searched.
            circle_of: When given, only this employee and the employees
                sharing its manager are returned.

        Returns:
            Tuple of (employees on the requested page, total match count).
        """
        criteria = []

        if search_term:
            fields = [group] if group in SEARCHABLE_FIELDS else list(SEARCHABLE_FIELDS)
            criteria.append(
                or_(
                    *(
                        getattr(Employee, field).icontains(search_term, autoescape=True)
                        for field in fields
                    )
                )
            )

        if circle_of is not None:
            criteria.append(self._circle_clause(circle_of))

        where = and_(*criteria) if criteria else None

        query = select(Employee).options(joinedload(Employee.manager))
        count_query = select(func.count()).select_from(Employee)
        if where is not None:
            query = query.where(where)
            count_query = count_query.where(where)

        offset = (page - 1) * rows_per_page
        items = list(
            self.db.scalars(query.order_by(Employee.id).offset(offset).limit(rows_per_page))
        )
        total = self.db.scalar(count_query) or 0
        return items, total

    @staticmethod
    def _circle_clause(employee: Employee):
        # Top-level employees have no peers
        if employee.reports_to is None:
            return Employee.id == employee.id
        return or_(
            Employee.id == employee.id,
            Employee.reports_to == employee.reports_to,
        )

    def update(self, employee: Employee, **values: Any) -> Employee:
        """Apply new column values to an employee.

        Args:
            employee: The employee to update.
            **values: Column values to write.

        Returns:
            The updated Employee.
        """
        for key, value in values.items():
            setattr(employee, key, value)
        self.db.flush()
        logger.info("Updated employee: id=%s", employee.id)
        return employee

    def delete(self, employee: Employee) -> None:
        """Delete an employee, detaching its direct reports first.

        Args:
            employee: The employee to remove.
        """
        detached = (
            self.db.query(Employee)
            .filter(Employee.reports_to == employee.id)
            .update({Employee.reports_to: None}, synchronize_session="fetch")
        )
        self.db.delete(employee)
        self.db.flush()
        logger.info("Deleted employee: id=%s (detached %s reports)", employee.id, detached)
