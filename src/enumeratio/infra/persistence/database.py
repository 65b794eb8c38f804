"""Centralized sync database session factory for lookup queries.

Lookup strategies query with short-lived sync sessions; the engine and
session factory are built lazily from ``DatabaseSettings``.

Usage:
    from enumeratio.infra.persistence.database import get_sync_session_factory
    session_factory = get_sync_session_factory()
    with session_factory() as session:
        ...

    # DatabaseManager (advanced, e.g. tests or multiple databases)
    manager = DatabaseManager(DatabaseSettings(url="sqlite://"))
    engine = manager.get_sync_engine()
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy import Engine, create_engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool


class DatabaseSettings(BaseSettings):
    """Database connection configuration from environment variables.

    Loads configuration from environment variables with ``ENUM_DATABASE_`` prefix:
    - ENUM_DATABASE_URL: SQLAlchemy URL (default: in-memory SQLite)
    - ENUM_DATABASE_ECHO: Echo SQL statements to log (default: false)

    Example:
        >>> settings = DatabaseSettings()
        >>> settings.url
        'sqlite+pysqlite:///:memory:'
    """

    model_config = SettingsConfigDict(
        env_prefix="ENUM_DATABASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    url: str = Field(default="sqlite+pysqlite:///:memory:", description="SQLAlchemy URL")
    echo: bool = Field(default=False, description="Echo SQL statements to log")
    pool_pre_ping: bool = Field(default=True, description="Test connections on checkout")

    @model_validator(mode="after")
    def _validate_connection_url(self) -> DatabaseSettings:
        """Validate the connection URL is parseable by SQLAlchemy."""
        try:
            make_url(self.url)
        except Exception as exc:
            msg = f"Invalid database connection URL: {exc}"
            raise ValueError(msg) from exc
        return self

    @property
    def is_memory_sqlite(self) -> bool:
        """True for in-memory SQLite, which needs a single shared connection."""
        url = make_url(self.url)
        return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


class DatabaseManager:
    """Encapsulates the sync engine and session factory lifecycle.

    Usage:
        manager = DatabaseManager(DatabaseSettings())
        factory = manager.get_sync_session_factory()
        manager.dispose()
    """

    def __init__(self, settings: DatabaseSettings) -> None:
        self._settings = settings
        self._sync_engine: Engine | None = None
        self._sync_session_factory: sessionmaker[Session] | None = None

    @property
    def settings(self) -> DatabaseSettings:
        """The settings used by this manager."""
        return self._settings

    def get_sync_engine(self) -> Engine:
        """Get or create the sync database engine.

        In-memory SQLite uses a StaticPool so every session sees the same
        database.
        """
        if self._sync_engine is None:
            s = self._settings
            if s.is_memory_sqlite:
                self._sync_engine = create_engine(
                    s.url,
                    connect_args={"check_same_thread": False},
                    poolclass=StaticPool,
                    echo=s.echo,
                )
            else:
                self._sync_engine = create_engine(
                    s.url,
                    pool_pre_ping=s.pool_pre_ping,
                    echo=s.echo,
                )
        return self._sync_engine

    def get_sync_session_factory(self) -> sessionmaker[Session]:
        """Get or create the sync session factory."""
        if self._sync_session_factory is None:
            self._sync_session_factory = sessionmaker(
                self.get_sync_engine(),
                expire_on_commit=False,
                autoflush=False,
            )
        return self._sync_session_factory

    def dispose(self) -> None:
        """Dispose of the engine and its pool. Safe to call multiple times."""
        if self._sync_engine is not None:
            self._sync_engine.dispose()
            self._sync_engine = None
            self._sync_session_factory = None


@lru_cache(maxsize=1)
def get_database_manager() -> DatabaseManager:
    """Get the default DatabaseManager singleton.

    Returns:
        DatabaseManager configured from environment variables.
    """
    return DatabaseManager(DatabaseSettings())


def get_sync_engine() -> Engine:
    """Get the default sync engine. Delegates to the default DatabaseManager."""
    return get_database_manager().get_sync_engine()


def get_sync_session_factory() -> sessionmaker[Session]:
    """Get the default sync session factory. Delegates to the default DatabaseManager."""
    return get_database_manager().get_sync_session_factory()


def dispose_engine() -> None:
    """Dispose of the default engine. Delegates to the default DatabaseManager."""
    get_database_manager().dispose()
