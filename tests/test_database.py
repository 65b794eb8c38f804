"""Unit tests for enumeratio.infra.persistence.database."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from pydantic import ValidationError
from sqlalchemy import text
from sqlalchemy.pool import StaticPool

from enumeratio.infra.persistence.database import (
    DatabaseManager,
    DatabaseSettings,
    get_database_manager,
)


@pytest.mark.unit
class TestDatabaseSettings:
    def test_default_url(self) -> None:
        with patch.dict("os.environ", {}, clear=True):
            settings = DatabaseSettings(_env_file=None)  # type: ignore[call-arg]
            assert settings.url == "sqlite+pysqlite:///:memory:"
            assert settings.echo is False
            assert settings.is_memory_sqlite is True

    def test_env_var_override(self) -> None:
        env = {"ENUM_DATABASE_URL": "sqlite:////tmp/enums.db", "ENUM_DATABASE_ECHO": "true"}
        with patch.dict("os.environ", env, clear=True):
            settings = DatabaseSettings(_env_file=None)  # type: ignore[call-arg]
            assert settings.url == "sqlite:////tmp/enums.db"
            assert settings.echo is True
            assert settings.is_memory_sqlite is False

    def test_invalid_url_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Invalid database connection URL"):
            DatabaseSettings(url="not a url")


@pytest.mark.unit
class TestDatabaseManager:
    def test_memory_sqlite_uses_static_pool(self) -> None:
        manager = DatabaseManager(DatabaseSettings(url="sqlite://"))
        try:
            engine = manager.get_sync_engine()
            assert isinstance(engine.pool, StaticPool)
            assert manager.get_sync_engine() is engine
        finally:
            manager.dispose()

    def test_sessions_share_memory_database(self) -> None:
        manager = DatabaseManager(DatabaseSettings(url="sqlite://"))
        try:
            factory = manager.get_sync_session_factory()
            assert manager.get_sync_session_factory() is factory
            with factory() as session:
                session.execute(text("CREATE TABLE t (x INTEGER)"))
                session.execute(text("INSERT INTO t VALUES (1)"))
                session.commit()
            with factory() as session:
                assert session.execute(text("SELECT x FROM t")).scalar_one() == 1
        finally:
            manager.dispose()

    def test_dispose_is_idempotent(self) -> None:
        manager = DatabaseManager(DatabaseSettings(url="sqlite://"))
        first = manager.get_sync_engine()
        manager.dispose()
        manager.dispose()
        assert manager.get_sync_engine() is not first
        manager.dispose()


@pytest.mark.unit
class TestGetDatabaseManager:
    def test_cached_returns_same_instance(self) -> None:
        get_database_manager.cache_clear()
        try:
            with patch.dict("os.environ", {}, clear=True):
                assert get_database_manager() is get_database_manager()
        finally:
            get_database_manager().dispose()
            get_database_manager.cache_clear()
