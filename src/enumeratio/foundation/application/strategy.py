"""Base class for enumeration strategies.

A strategy is bound to one provider of one owning entity. It is built by
the resolver with ``(alias, owner)``, initialized once with the provider's
configuration, and then answers ``enum`` / ``get`` / ``find`` for the
lifetime of the owner.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from enumeratio.foundation.application.settings import EnumSettings, get_enum_settings
from enumeratio.foundation.domain.exceptions import (
    ConfigurationError,
    UnknownLabelError,
    UnknownValueError,
)
from enumeratio.foundation.domain.provider_config import StrategyKind

if TYPE_CHECKING:
    from enumeratio.foundation.domain.provider_config import EnumMapping, ProviderConfig

logger = logging.getLogger(__name__)


class Strategy(ABC):
    """Resolution mechanism backing a single provider.

    Subclasses implement :meth:`enum`; label and value resolution are
    derived from it.

    Args:
        alias: Provider alias this instance serves.
        owner: The owning entity (usually a mapped class).
    """

    kind: ClassVar[str] = StrategyKind.CUSTOM.value
    _settings: EnumSettings | None = None

    def __init__(self, alias: str, owner: Any) -> None:
        self.alias = alias
        self.owner = owner
        self._config: ProviderConfig | None = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(alias={self.alias!r})"

    @property
    def config(self) -> ProviderConfig:
        """Configuration stored by :meth:`initialize`.

        Raises:
            ConfigurationError: If the strategy was never initialized.
        """
        if self._config is None:
            raise ConfigurationError("Strategy used before initialization", alias=self.alias)
        return self._config

    @property
    def settings(self) -> EnumSettings:
        """Settings bound by the resolver, or the environment settings."""
        return self._settings if self._settings is not None else get_enum_settings()

    @settings.setter
    def settings(self, settings: EnumSettings) -> None:
        self._settings = settings

    @property
    def bound_settings(self) -> EnumSettings | None:
        return self._settings

    @property
    def initialized(self) -> bool:
        return self._config is not None

    def initialize(self, config: ProviderConfig) -> ProviderConfig:
        """Validate options and store the canonical configuration.

        Subclasses override to check or augment ``config.extra`` and call
        ``super().initialize()`` with the result.

        Args:
            config: Preliminary provider configuration.

        Returns:
            The configuration to keep as canonical.
        """
        self._config = config
        return config

    @abstractmethod
    def enum(self, config: ProviderConfig | None = None) -> EnumMapping:
        """Return the full label -> stored value mapping.

        Args:
            config: Provider configuration. Defaults to the stored one.
        """

    def get(self, label: Any) -> Any:
        """Resolve ``label`` to its stored value.

        Raises:
            UnknownLabelError: If the label is not enumerated.
        """
        mapping = self.enum()
        try:
            value = mapping[label]
        except (KeyError, TypeError):
            raise UnknownLabelError(self.alias, label, strategy=self.kind) from None
        logger.debug(
            "label_resolved",
            extra={"alias": self.alias, "strategy": self.kind, "label": label},
        )
        return value

    def find(self, value: Any) -> str:
        """Resolve a stored ``value`` back to its label.

        Raises:
            UnknownValueError: If no label maps to the value.
        """
        for label, stored in self.enum().items():
            if stored == value:
                return label
        raise UnknownValueError(self.alias, value, strategy=self.kind)

    def _resolve_config(self, config: ProviderConfig | None) -> ProviderConfig:
        return config if config is not None else self.config
