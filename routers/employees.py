"""Employee API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from config.database import get_db
from config.settings import settings
from models.employee import Employee
from repositories.employee_repository import EmployeeRepository
from schemas.employee import (
    EmployeeCreate,
    EmployeeNode,
    EmployeeResponse,
    EmployeeSearchItem,
    EmployeeSearchResponse,
    EmployeeSummary,
    EmployeeUpdate,
    ErrorResponse,
    MessageResponse,
)
from services.hierarchy_service import build_hierarchy

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND = "Employee not found"
MY_CIRCLE = "my_circle"

# Upper bounds keep the computed offset within a 64-bit integer
MAX_PAGE = 1_000_000
MAX_ROWS_PER_PAGE = 1000


def get_repository(db: Annotated[Session, Depends(get_db)]) -> EmployeeRepository:
    """Dependency that provides an EmployeeRepository bound to the request session."""
    return EmployeeRepository(db)


Repository = Annotated[EmployeeRepository, Depends(get_repository)]


def get_employee_or_404(repo: EmployeeRepository, employee_id: int) -> Employee:
    """Load an employee or raise a 404.

    Raises:
        HTTPException: 404 if no employee has this ID.
    """
    employee = repo.get_by_id(employee_id)
    if employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return employee


def integrity_error(e: IntegrityError) -> HTTPException:
    """Translate a constraint violation into a 400 response."""
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=f"Constraint violation: {e.orig}",
    )


@router.post(
    "",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Employee",
    responses={
        400: {"model": ErrorResponse, "description": "Email already in use"},
        422: {"description": "Missing or invalid field"},
    },
)
def create_employee(payload: EmployeeCreate, repo: Repository) -> EmployeeResponse:
    """Create an employee and return it with its assigned ID and timestamps."""
    try:
        employee = repo.create(**payload.model_dump())
        repo.db.commit()
        return EmployeeResponse.model_validate(employee)
    except IntegrityError as e:
        repo.db.rollback()
        logger.warning("Rejected employee create: %s", e.orig)
        raise integrity_error(e) from e
    except Exception as e:
        repo.db.rollback()
        logger.exception("Unexpected error creating employee")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal server error: {str(e)}",
        ) from e


@router.get(
    "/simple",
    response_model=list[EmployeeSummary],
    summary="List Employee Names",
)
def list_employees_simple(repo: Repository) -> list[EmployeeSummary]:
    """Return the ID and name of every employee."""
    try:
        return [EmployeeSummary(id=id_, name=name) for id_, name in repo.list_simple()]
    except Exception as e:
        logger.exception("Unexpected error listing employees")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal server error: {str(e)}",
        ) from e


@router.get(
    "/hierarchy",
    response_model=None,
    summary="Reporting Hierarchy",
    description="All employees nested under their managers. Top-level employees are the roots.",
    responses={200: {"model": list[EmployeeNode], "description": "The reporting forest"}},
)
def get_hierarchy(repo: Repository) -> JSONResponse:
    """Return the reporting forest."""
    try:
        return JSONResponse(content=build_hierarchy(repo.list_all()))
    except Exception as e:
        logger.exception("Unexpected error building hierarchy")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal server error: {str(e)}",
        ) from e


@router.get(
    "/search",
    response_model=EmployeeSearchResponse,
    summary="Search Employees",
    description="""
    Case-insensitive substring search over name, email, phone and description.

    - `group` restricts matching to one of those fields.
    - `filter=my_circle` keeps only the given employee and the employees
      sharing its manager (or the employee alone when it has no manager).
    """,
    responses={404: {"model": ErrorResponse, "description": "Circle employee not found"}},
)
def search_employees(
    repo: Repository,
    search_term: Annotated[str, Query(alias="searchTerm")] = "",
    page: Annotated[int, Query(le=MAX_PAGE)] = 1,
    rows_per_page: Annotated[int | None, Query(alias="rowsPerPage", le=MAX_ROWS_PER_PAGE)] = None,
    group: str | None = None,
    filter_: Annotated[str, Query(alias="filter")] = "none",
    employee_id: Annotated[
        int | None,
        Query(alias="employeeId", description="Employee whose circle my_circle uses"),
    ] = None,
) -> EmployeeSearchResponse:
    """Return one page of matching employees and the total match count."""
    page = max(1, page)
    if rows_per_page is None:
        rows_per_page = settings.default_rows_per_page
    rows_per_page = max(1, rows_per_page)

    try:
        circle_of = None
        if filter_ == MY_CIRCLE:
            me_id = employee_id if employee_id is not None else settings.current_employee_id
            circle_of = repo.get_by_id(me_id) if me_id is not None else None
            if circle_of is None:
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND,
                    detail="Current employee not found",
                )

        items, total = repo.search(
            search_term=search_term,
            page=page,
            rows_per_page=rows_per_page,
            group=group,
            circle_of=circle_of,
        )
        return EmployeeSearchResponse(
            data=[EmployeeSearchItem.model_validate(item) for item in items],
            total_results=total,
            page=page,
            rows_per_page=rows_per_page,
        )
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unexpected error searching employees")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal server error: {str(e)}",
        ) from e


@router.get(
    "/{employee_id}",
    response_model=EmployeeResponse,
    summary="Get Employee",
    responses={404: {"model": ErrorResponse, "description": "Employee not found"}},
)
def get_employee(employee_id: int, repo: Repository) -> EmployeeResponse:
    """Return a single employee."""
    try:
        return EmployeeResponse.model_validate(get_employee_or_404(repo, employee_id))
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unexpected error loading employee %s", employee_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal server error: {str(e)}",
        ) from e


@router.put(
    "/{employee_id}",
    response_model=EmployeeResponse,
    summary="Update Employee",
    responses={
        400: {"model": ErrorResponse, "description": "Email already in use"},
        404: {"model": ErrorResponse, "description": "Employee not found"},
    },
)
def update_employee(
    employee_id: int,
    payload: EmployeeUpdate,
    repo: Repository,
) -> EmployeeResponse:
    """Replace the mutable fields of an employee."""
    try:
        employee = get_employee_or_404(repo, employee_id)
        repo.update(employee, **payload.changes())
        repo.db.commit()
        return EmployeeResponse.model_validate(employee)
    except HTTPException:
        raise
    except IntegrityError as e:
        repo.db.rollback()
        logger.warning("Rejected update of employee %s: %s", employee_id, e.orig)
        raise integrity_error(e) from e
    except Exception as e:
        repo.db.rollback()
        logger.exception("Unexpected error updating employee %s", employee_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal server error: {str(e)}",
        ) from e


@router.delete(
    "/{employee_id}",
    response_model=MessageResponse,
    summary="Delete Employee",
    responses={404: {"model": ErrorResponse, "description": "Employee not found"}},
)
def delete_employee(employee_id: int, repo: Repository) -> MessageResponse:
    """Delete an employee. Its direct reports become top-level."""
    try:
        employee = get_employee_or_404(repo, employee_id)
        repo.delete(employee)
        repo.db.commit()
    except HTTPException:
        raise
    except Exception as e:
        repo.db.rollback()
        logger.exception("Unexpected error deleting employee %s", employee_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal server error: {str(e)}",
        ) from e
    return MessageResponse(message="Deleted successfully")
