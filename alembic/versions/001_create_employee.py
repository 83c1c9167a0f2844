"""Create employee table

Revision ID: 001_create_employee
Revises:
Create Date: 2026-10-18

This migration:
1. Creates the employee table with a self-referential reports_to column
2. Indexes name and reports_to for search and hierarchy lookups
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001_create_employee"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "employee",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column("reports_to", sa.Integer(), nullable=True),
        sa.Column("img", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["reports_to"],
            ["employee.id"],
            name="fk_employee_reports_to",
            ondelete="SET NULL",
        ),
        sa.UniqueConstraint("email", name="uq_employee_email"),
    )

    op.create_index("ix_employee_id", "employee", ["id"])
    op.create_index("ix_employee_name", "employee", ["name"])
    op.create_index("ix_employee_reports_to", "employee", ["reports_to"])


def downgrade() -> None:
    op.drop_index("ix_employee_reports_to", table_name="employee")
    op.drop_index("ix_employee_name", table_name="employee")
    op.drop_index("ix_employee_id", table_name="employee")

    op.drop_table("employee")
