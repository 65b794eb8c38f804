"""Integration tests for attaching behaviors to SQLAlchemy models."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from enumeratio.foundation.application.behavior import EnumBehavior
from enumeratio.foundation.domain.exceptions import ConfigurationError, UnknownLabelError
from enumeratio.infra.persistence.mapping import (
    BEHAVIOR_ATTRIBUTE,
    attach_enum_behavior,
    detach_enum_behavior,
    get_enum_behavior,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy.orm import Session, sessionmaker

    from enumeratio.foundation.application.settings import EnumSettings
    from enumeratio.infra.persistence.database import DatabaseManager


class _Base(DeclarativeBase):
    pass


class Ticket(_Base):
    __tablename__ = "tickets"

    STATE_OPEN = "o"
    STATE_CLOSED = "c"

    id: Mapped[int] = mapped_column(primary_key=True)
    state: Mapped[str | None] = mapped_column(String(1), default=None)
    priority: Mapped[int | None] = mapped_column(default=None)
    title: Mapped[str | None] = mapped_column(String(64), default=None)


@pytest.fixture()
def ticket(
    settings: EnumSettings, session_factory: sessionmaker[Session]
) -> Iterator[EnumBehavior]:
    behavior = attach_enum_behavior(
        Ticket,
        settings=settings,
        providers={
            "state": {"strategy": "const"},
            "priority": {"session_factory": session_factory, "coerce": int},
        },
    )
    yield behavior
    detach_enum_behavior(Ticket)


@pytest.mark.integration
class TestAttachEnumBehavior:
    def test_constructor_kwargs_marshalled(self, ticket: EnumBehavior) -> None:
        record = Ticket(state="CLOSED", priority="HIGH", title="Printer on fire")
        assert record.state == "c"
        assert record.priority == 3
        assert record.title == "Printer on fire"

    def test_empty_and_absent_fields_untouched(self, ticket: EnumBehavior) -> None:
        record = Ticket(state="", title="x")
        assert record.state == ""
        assert record.priority is None

    def test_unknown_label_aborts_construction(self, ticket: EnumBehavior) -> None:
        with pytest.raises(UnknownLabelError):
            Ticket(state="REOPENED")

    def test_enum_published_on_model(self, ticket: EnumBehavior) -> None:
        assert Ticket.enum("state") == {"OPEN": "o", "CLOSED": "c"}  # type: ignore[attr-defined]
        assert Ticket().enum("priority") == {"LOW": 1, "NORMAL": 2, "HIGH": 3}  # type: ignore[attr-defined]

    def test_behavior_registered(self, ticket: EnumBehavior) -> None:
        assert get_enum_behavior(Ticket) is ticket
        assert ticket.owner is Ticket

    def test_attach_twice_fails(self, ticket: EnumBehavior, settings: EnumSettings) -> None:
        with pytest.raises(ConfigurationError, match="already attached"):
            attach_enum_behavior(Ticket, settings=settings)

    def test_records_persist_stored_values(
        self,
        ticket: EnumBehavior,
        database: DatabaseManager,
        session_factory: sessionmaker[Session],
    ) -> None:
        _Base.metadata.create_all(database.get_sync_engine())
        with session_factory() as session:
            session.add(Ticket(id=1, state="OPEN", priority="LOW"))
            session.commit()
            stored: Any = session.get(Ticket, 1)
        assert (stored.state, stored.priority) == ("o", 1)


@pytest.mark.integration
class TestAttachValidation:
    def test_unmapped_class_rejected(self, settings: EnumSettings) -> None:
        with pytest.raises(ConfigurationError, match="not a mapped class"):
            attach_enum_behavior(dict, settings=settings)

    def test_published_name_clash(self, settings: EnumSettings) -> None:
        with pytest.raises(ConfigurationError, match="attribute already defined"):
            attach_enum_behavior(
                Ticket, settings=settings, implemented_methods={"title": "enum"}
            )
        assert get_enum_behavior(Ticket) is None


@pytest.mark.integration
class TestDetachEnumBehavior:
    def test_restores_model(self, settings: EnumSettings) -> None:
        attach_enum_behavior(Ticket, settings=settings, providers={"state": {"strategy": "const"}})
        detach_enum_behavior(Ticket)
        assert get_enum_behavior(Ticket) is None
        assert not hasattr(Ticket, "enum")
        assert BEHAVIOR_ATTRIBUTE not in Ticket.__dict__
        assert Ticket(state="OPEN").state == "OPEN"

    def test_detach_without_behavior_is_noop(self) -> None:
        detach_enum_behavior(Ticket)
        assert get_enum_behavior(Ticket) is None
