"""
Unit Tests for config.settings and config.database modules.
"""

import pytest

from config.database import engine_options, transaction
from config.settings import Settings
from models.employee import Employee


class TestSettings:
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db/employees")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        loaded = Settings(_env_file=None)

        assert loaded.database_url == "postgresql://u:p@db/employees"
        assert loaded.log_level == "DEBUG"
        assert loaded.db_pool_size == 10


class TestEngineOptions:
    def test_sqlite_has_no_pool_sizing(self):
        options = engine_options("sqlite:///./employees.db")

        assert options["connect_args"] == {"check_same_thread": False}
        assert "pool_size" not in options

    def test_server_database_uses_pool(self):
        options = engine_options("postgresql://u:p@db/employees")

        assert options["pool_pre_ping"] is True
        assert options["pool_size"] == 10
        assert options["max_overflow"] == 20


class TestTransaction:
    def test_commits_on_success(self, db_session, session_factory):
        with transaction(db_session):
            db_session.add(Employee(name="Ann", employee_code="c-1"))

        with session_factory() as other:
            assert other.query(Employee).count() == 1

    def test_rolls_back_and_reraises(self, db_session):
        with pytest.raises(ValueError):
            with transaction(db_session):
                db_session.add(Employee(name="Ann", employee_code="c-1"))
                db_session.flush()
                raise ValueError("boom")

        assert db_session.query(Employee).count() == 0
