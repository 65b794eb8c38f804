"""Constant-based strategy.

Candidate constants are registered explicitly through the ``constants``
option, either as a ``{NAME: value}`` mapping or as a holder class whose
upper-case attributes are read. Without the option the owning entity
itself is the holder. Only names starting with ``<PREFIX>_`` belong to
the provider; the remainder of the name is the label::

    class Article(Base):
        STATUS_DRAFT = 0
        STATUS_PUBLISHED = 1

    # provider "status" -> {"DRAFT": 0, "PUBLISHED": 1}
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from enumeratio.foundation.application.strategy import Strategy
from enumeratio.foundation.domain.exceptions import ConfigurationError
from enumeratio.foundation.domain.provider_config import StrategyKind

if TYPE_CHECKING:
    from enumeratio.foundation.domain.provider_config import EnumMapping, ProviderConfig


def _public_constants(source: Any) -> dict[str, Any]:
    """Collect ``NAME -> value`` pairs from a mapping, class or object."""
    if isinstance(source, Mapping):
        return dict(source)
    if isinstance(source, type):
        namespace: dict[str, Any] = {}
        for klass in reversed(source.__mro__):
            if klass is object:
                continue
            namespace.update(vars(klass))
    elif hasattr(source, "__dict__"):
        namespace = dict(vars(source))
    else:
        msg = f"cannot read constants from {type(source).__name__}"
        raise TypeError(msg)
    return {
        name: value
        for name, value in namespace.items()
        if not name.startswith("_") and name.isupper()
    }


class ConstStrategy(Strategy):
    """Enumerates constants sharing the provider prefix."""

    kind = StrategyKind.CONST.value

    def initialize(self, config: ProviderConfig) -> ProviderConfig:
        source = config.option("constants", self.owner)
        if source is None:
            raise ConfigurationError(
                "No constants registered", alias=config.alias, strategy=self.kind
            )
        try:
            _public_constants(source)
        except TypeError as exc:
            raise ConfigurationError(
                f"Option 'constants' is invalid: {exc}",
                alias=config.alias,
                strategy=self.kind,
            ) from exc
        return super().initialize(config.with_extra(constants=source))

    def enum(self, config: ProviderConfig | None = None) -> EnumMapping:
        config = self._resolve_config(config)
        prefix = f"{config.prefix}_"
        constants = _public_constants(config.option("constants", self.owner))
        return {
            name[len(prefix) :]: value
            for name, value in constants.items()
            if name.startswith(prefix) and len(name) > len(prefix)
        }
