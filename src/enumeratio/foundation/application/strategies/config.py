"""Configuration-registry strategy.

Reads the provider's list from a runtime configuration registry under
``<namespace>.<PREFIX>``. A missing entry is an empty enumeration, not an
error.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from enumeratio.foundation.application.config_registry import get_config_registry
from enumeratio.foundation.application.strategy import Strategy
from enumeratio.foundation.domain.exceptions import ConfigurationError
from enumeratio.foundation.domain.ports import ConfigRegistryPort
from enumeratio.foundation.domain.provider_config import StrategyKind

if TYPE_CHECKING:
    from enumeratio.foundation.domain.provider_config import EnumMapping, ProviderConfig

logger = logging.getLogger(__name__)


class ConfigStrategy(Strategy):
    """Enumerates a list stored in a configuration registry.

    Options:
        registry: ConfigRegistryPort to read from. Defaults to the
            process-wide registry.
        namespace: Key namespace. Defaults to ``config_namespace`` of the
            bound settings.
    """

    kind = StrategyKind.CONFIG.value

    def initialize(self, config: ProviderConfig) -> ProviderConfig:
        registry = config.option("registry")
        if registry is None:
            registry = get_config_registry()
        elif not isinstance(registry, ConfigRegistryPort):
            raise ConfigurationError(
                "Option 'registry' must provide read(key)",
                alias=config.alias,
                strategy=self.kind,
            )
        namespace = config.option("namespace") or self.settings.config_namespace
        return super().initialize(config.with_extra(registry=registry, namespace=namespace))

    def key(self, config: ProviderConfig | None = None) -> str:
        """Registry key holding the provider list."""
        config = self._resolve_config(config)
        return f"{config.option('namespace')}.{config.prefix}"

    def enum(self, config: ProviderConfig | None = None) -> EnumMapping:
        config = self._resolve_config(config)
        key = self.key(config)
        entries = config.option("registry").read(key)
        if not entries:
            logger.debug("config_enum_missing", extra={"alias": self.alias, "key": key})
            return {}
        if isinstance(entries, Mapping):
            return dict(entries)
        if isinstance(entries, (list, tuple)):
            return {entry: entry for entry in entries}
        raise ConfigurationError(
            f"Registry entry {key!r} must be a mapping or a list",
            alias=self.alias,
            strategy=self.kind,
        )
