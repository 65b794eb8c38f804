"""ORM model for the shared lookup table.

One table holds the rows of every lookup-backed provider; rows are
grouped by ``prefix``::

    id | prefix   | label  | value
    ---+----------+--------+------
     1 | PRIORITY | LOW    | 1
     2 | PRIORITY | HIGH   | 3
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

if TYPE_CHECKING:
    from sqlalchemy import Engine


class LookupBase(DeclarativeBase):
    """Declarative base owning the lookup table metadata."""


class EnumLookup(LookupBase):
    """A single label/value row of a lookup-backed provider."""

    __tablename__ = "enum_lookups"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    prefix: Mapped[str] = mapped_column(String(64), index=True)
    label: Mapped[str] = mapped_column(String(255))
    value: Mapped[str] = mapped_column(String(255))

    def __repr__(self) -> str:
        return f"EnumLookup(prefix={self.prefix!r}, label={self.label!r}, value={self.value!r})"


def create_lookup_table(engine: Engine) -> None:
    """Create the lookup table if it does not exist."""
    LookupBase.metadata.create_all(engine, tables=[EnumLookup.__table__])
