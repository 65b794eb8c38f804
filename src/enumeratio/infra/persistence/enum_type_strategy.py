"""Enum-type strategy.

Enumerates a Python :class:`enum.Enum` given through the ``enum`` option,
or, when the option is omitted, the SQLAlchemy ``Enum`` type of the
owner's mapped column for the provider field. Labels are member names and
stored values are the members themselves, which is what an ORM attribute
typed ``Enum(SomeEnum)`` expects. String-only column enums map each value
to itself.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from sqlalchemy import Enum as SQLEnum
from sqlalchemy import inspect as sa_inspect

from enumeratio.foundation.application.strategy import Strategy
from enumeratio.foundation.domain.exceptions import ConfigurationError
from enumeratio.foundation.domain.provider_config import StrategyKind

if TYPE_CHECKING:
    from enumeratio.foundation.domain.provider_config import EnumMapping, ProviderConfig


class EnumTypeStrategy(Strategy):
    """Enumerates the members of an enum type."""

    kind = StrategyKind.ENUM.value

    def initialize(self, config: ProviderConfig) -> ProviderConfig:
        enum_class = config.option("enum")
        if enum_class is not None:
            if not (isinstance(enum_class, type) and issubclass(enum_class, Enum)):
                raise ConfigurationError(
                    "Option 'enum' must be an Enum subclass",
                    alias=config.alias,
                    strategy=self.kind,
                )
            return super().initialize(config)

        column_type = self._column_type(config.field)
        if column_type is None:
            raise ConfigurationError(
                "No enum type given and no SQLAlchemy Enum column mapped",
                alias=config.alias,
                field=config.field,
                strategy=self.kind,
            )
        if column_type.enum_class is not None:
            return super().initialize(config.with_extra(enum=column_type.enum_class))
        return super().initialize(config.with_extra(enums=tuple(column_type.enums)))

    def enum(self, config: ProviderConfig | None = None) -> EnumMapping:
        config = self._resolve_config(config)
        enum_class = config.option("enum")
        if enum_class is not None:
            return {member.name: member for member in enum_class}
        return {value: value for value in config.option("enums", ())}

    def _column_type(self, field: str) -> Any | None:
        mapper = sa_inspect(self.owner, raiseerr=False)
        columns = getattr(mapper, "columns", None)
        if columns is None:
            return None
        column = columns.get(field)
        if column is None or not isinstance(column.type, SQLEnum):
            return None
        return column.type
