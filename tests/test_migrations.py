"""Tests that the alembic migrations build the same schema as the models."""

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect, text
from sqlalchemy.exc import IntegrityError

from config.settings import settings
from models.base import Base

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def migration_db(tmp_path, monkeypatch):
    url = f"sqlite:///{tmp_path / 'migrations.db'}"
    # env.py reads the URL from the application settings
    monkeypatch.setattr(settings, "database_url", url)

    # No ini file, so env.py leaves the test logging configuration alone
    cfg = Config()
    cfg.set_main_option("script_location", str(PROJECT_ROOT / "alembic"))

    engine = create_engine(url)
    yield cfg, engine
    engine.dispose()


def test_upgrade_matches_models(migration_db):
    cfg, engine = migration_db
    command.upgrade(cfg, "head")

    inspector = inspect(engine)
    model_table = Base.metadata.tables["employee"]

    columns = {c["name"] for c in inspector.get_columns("employee")}
    assert columns == {c.name for c in model_table.columns}

    indexes = {ix["name"] for ix in inspector.get_indexes("employee")}
    assert {ix.name for ix in model_table.indexes} <= indexes

    foreign_keys = inspector.get_foreign_keys("employee")
    assert [(fk["constrained_columns"], fk["referred_table"]) for fk in foreign_keys] == [
        (["reports_to"], "employee")
    ]


def test_upgrade_enforces_unique_email(migration_db):
    cfg, engine = migration_db
    command.upgrade(cfg, "head")

    insert = text("INSERT INTO employee (name, email) VALUES (:name, :email)")
    with engine.begin() as conn:
        conn.execute(insert, {"name": "One", "email": "dup@example.com"})

    with pytest.raises(IntegrityError):
        with engine.begin() as conn:
            conn.execute(insert, {"name": "Two", "email": "dup@example.com"})


def test_downgrade_drops_table(migration_db):
    cfg, engine = migration_db
    command.upgrade(cfg, "head")
    command.downgrade(cfg, "base")

    assert "employee" not in inspect(engine).get_table_names()
