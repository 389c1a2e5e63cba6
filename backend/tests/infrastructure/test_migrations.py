"""Migrations: the Alembic scripts build the same schema the models describe.

Tests cover:
    - Offline mode renders both tables, the FK and the circle_id index as SQL
    - Offline downgrade drops what upgrade created
    - Online upgrade against a fresh SQLite file, with DATABASE_URL taken
      through Settings
"""

import io
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from circles.config import get_settings

BACKEND_DIR = Path(__file__).resolve().parents[2]


def _alembic_config(buffer: io.StringIO | None = None) -> Config:
    config = Config(output_buffer=buffer)
    config.set_main_option("script_location", str(BACKEND_DIR / "alembic"))
    return config


@pytest.fixture
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_offline_upgrade_renders_schema():
    buffer = io.StringIO()

    command.upgrade(_alembic_config(buffer), "head", sql=True)

    sql = buffer.getvalue()
    assert "CREATE TABLE circles" in sql
    assert "CREATE TABLE members" in sql
    assert "ON DELETE CASCADE" in sql
    assert "CREATE INDEX ix_members_circle_id" in sql


def test_offline_downgrade_drops_tables():
    buffer = io.StringIO()

    command.downgrade(_alembic_config(buffer), "001_circles_members:base", sql=True)

    sql = buffer.getvalue()
    assert "DROP INDEX ix_members_circle_id" in sql
    assert sql.index("DROP TABLE members") < sql.index("DROP TABLE circles")


def test_online_upgrade_matches_models(tmp_path, monkeypatch, fresh_settings):
    db_file = tmp_path / "migrated.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{db_file}")

    command.upgrade(_alembic_config(), "head")

    engine = create_engine(f"sqlite:///{db_file}")
    try:
        inspector = inspect(engine)
        assert {"circles", "members", "alembic_version"} <= set(inspector.get_table_names())
        member_columns = {c["name"] for c in inspector.get_columns("members")}
        assert member_columns == {"id", "name", "age", "grade", "major", "circle_id"}
        assert [fk["referred_table"] for fk in inspector.get_foreign_keys("members")] == [
            "circles",
        ]
    finally:
        engine.dispose()
