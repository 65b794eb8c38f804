"""Port interface shared by every enumeration strategy.

The provider engine only talks to strategies through this contract, which
keeps storage knowledge (class constants, lookup tables, registries) out
of the resolver and the facade.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from enumeratio.foundation.domain.provider_config import EnumMapping, ProviderConfig


@runtime_checkable
class StrategyPort(Protocol):
    """Capability implemented by every strategy variant."""

    def initialize(self, config: ProviderConfig) -> ProviderConfig:
        """Validate strategy options and return the canonical config.

        Raises:
            ConfigurationError: If a required option is missing or invalid.
        """
        ...

    def enum(self, config: ProviderConfig | None = None) -> EnumMapping:
        """Return the full label -> stored value mapping."""
        ...

    def get(self, label: Any) -> Any:
        """Resolve a label to its stored value.

        Raises:
            UnknownLabelError: If the label is not enumerated.
        """
        ...

    def find(self, value: Any) -> str:
        """Resolve a stored value back to its label.

        Raises:
            UnknownValueError: If the value is not enumerated.
        """
        ...
