"""Shared fixtures for enumeratio tests."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

import pytest
from sqlalchemy import Enum as SQLEnum
from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from enumeratio.foundation.application.config_registry import (
    ConfigRegistry,
    get_config_registry,
)
from enumeratio.foundation.application.resolver import builtin_strategy_classes
from enumeratio.foundation.application.settings import EnumSettings, get_enum_settings
from enumeratio.infra.persistence.database import DatabaseManager, DatabaseSettings
from enumeratio.infra.persistence.lookup_model import EnumLookup, create_lookup_table

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy.orm import Session, sessionmaker

    from enumeratio.foundation.application.strategy import Strategy


class Color(enum.Enum):
    RED = "r"
    GREEN = "g"
    BLUE = "b"


class Base(DeclarativeBase):
    pass


class Article(Base):
    """Mapped model carrying provider constants."""

    __tablename__ = "articles"

    STATUS_DRAFT = 0
    STATUS_PUBLISHED = 1
    STATUS_ARCHIVED = 2
    KIND_NEWS = "news"
    KIND_BLOG = "blog"

    id: Mapped[int] = mapped_column(primary_key=True)
    status: Mapped[int | None] = mapped_column(default=None)
    priority: Mapped[str | None] = mapped_column(String(16), default=None)
    color: Mapped[Color | None] = mapped_column(SQLEnum(Color), default=None)
    size: Mapped[str | None] = mapped_column(
        SQLEnum("small", "large", name="article_size"), default=None
    )


@pytest.fixture(autouse=True)
def _reset_singletons() -> Iterator[None]:
    """Isolate cached settings and the process-wide registry between tests."""
    get_enum_settings.cache_clear()
    get_config_registry().clear()
    yield
    get_enum_settings.cache_clear()
    get_config_registry().clear()


@pytest.fixture()
def settings() -> EnumSettings:
    """Settings with entry-point discovery disabled."""
    return EnumSettings(default_strategy="lookup", discover_entry_points=False)


@pytest.fixture()
def strategy_classes() -> dict[str, type[Strategy]]:
    return builtin_strategy_classes()


@pytest.fixture()
def registry() -> ConfigRegistry:
    return ConfigRegistry()


@pytest.fixture()
def database() -> Iterator[DatabaseManager]:
    """In-memory SQLite database with the lookup table created."""
    manager = DatabaseManager(DatabaseSettings(url="sqlite+pysqlite:///:memory:"))
    create_lookup_table(manager.get_sync_engine())
    yield manager
    manager.dispose()


@pytest.fixture()
def session_factory(database: DatabaseManager) -> sessionmaker[Session]:
    """Session factory over a lookup table holding PRIORITY and STATE rows."""
    factory = database.get_sync_session_factory()
    with factory() as session:
        session.add_all(
            [
                EnumLookup(prefix="PRIORITY", label="LOW", value="1"),
                EnumLookup(prefix="PRIORITY", label="NORMAL", value="2"),
                EnumLookup(prefix="PRIORITY", label="HIGH", value="3"),
                EnumLookup(prefix="STATE", label="OPEN", value="open"),
                EnumLookup(prefix="STATE", label="CLOSED", value="closed"),
            ]
        )
        session.commit()
    return factory


@pytest.fixture()
def article_model() -> type[Article]:
    """Mapped class with STATUS_* and KIND_* constants and enum columns."""
    return Article


@pytest.fixture()
def color_enum() -> type[Color]:
    return Color
