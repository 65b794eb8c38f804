"""Provider configuration value objects.

A provider is a named group of enumerated values configured on an owning
entity. Raw provider options are loosely typed; the normalizer turns them
into :class:`ProviderConfig` instances, which are immutable for the life
of the owning entity.

Example::

    ProviderConfig(alias="priority", strategy=StrategyKind.LOOKUP)
    # -> field="priority", prefix="PRIORITY"
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

#: Ordered label -> stored value mapping exposed by a provider.
EnumMapping = dict[str, Any]

#: Option keys consumed by the normalizer; anything else is strategy-specific.
RESERVED_OPTIONS: frozenset[str] = frozenset({"strategy", "prefix", "field"})


class StrategyKind(StrEnum):
    """Built-in strategy kinds.

    Uses StrEnum so kinds compare equal to their configuration strings
    (``StrategyKind.LOOKUP == "lookup"``).
    """

    CONST = "const"
    LOOKUP = "lookup"
    CONFIG = "config"
    ENUM = "enum"
    CUSTOM = "custom"


class ProviderConfig(BaseModel):
    """Canonical configuration of one provider.

    Attributes:
        alias: Provider name, unique per owning entity.
        strategy: Strategy kind identifier (a StrategyKind value or a
            registered custom name).
        field: Record field the provider marshals. Defaults to ``alias``.
        prefix: Naming prefix used to locate constants, registry entries or
            lookup rows. Defaults to ``alias.upper()``.
        extra: Strategy-specific options (read-only).
    """

    model_config = ConfigDict(frozen=True)

    alias: str = Field(min_length=1)
    strategy: str = Field(default=StrategyKind.LOOKUP.value, min_length=1)
    field: str = ""
    prefix: str = ""
    extra: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)

    @model_validator(mode="before")
    @classmethod
    def _fill_defaults(cls, data: Any) -> Any:
        """Resolve empty ``field`` and ``prefix`` from the alias."""
        if not isinstance(data, dict):
            return data
        alias = data.get("alias")
        if not isinstance(alias, str):
            return data
        data = dict(data)
        if not data.get("field"):
            data["field"] = alias
        if not data.get("prefix"):
            data["prefix"] = alias.upper()
        return data

    @field_validator("extra", mode="after")
    @classmethod
    def _freeze_extra(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(v))

    def option(self, name: str, default: Any = None) -> Any:
        """Read a strategy-specific option."""
        return self.extra.get(name, default)

    def with_extra(self, **options: Any) -> ProviderConfig:
        """Return a copy with ``options`` merged into ``extra``."""
        return self.model_copy(update={"extra": MappingProxyType({**self.extra, **options})})
