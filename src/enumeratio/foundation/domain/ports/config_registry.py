"""Port interface for runtime configuration registries.

Example:
    >>> from enumeratio.foundation.domain.ports import ConfigRegistryPort
    >>> def statuses(registry: ConfigRegistryPort) -> list[str]:
    ...     return registry.read("Enum.STATUS") or []
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ConfigRegistryPort(Protocol):
    """Read access to a key/value configuration registry.

    Keys are dotted paths (``"Enum.STATUS"``). Implementations return
    ``None`` for absent keys instead of raising.
    """

    def read(self, key: str) -> Any | None:
        """Read the value stored under ``key``.

        Args:
            key: Dotted configuration path.

        Returns:
            The stored value, or None if the key is absent.
        """
        ...
