"""In-memory runtime configuration registry.

Values are addressed by dotted paths and stored in nested dicts, so
``write("Enum.STATUS", [...])`` and ``read("Enum")`` see the same data.
The config strategy reads provider lists from here.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

_MISSING = object()


class ConfigRegistry:
    """Dotted-path key/value store implementing ``ConfigRegistryPort``.

    Args:
        initial: Optional nested mapping to start from.
    """

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(initial or {})

    def write(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, creating intermediate levels."""
        *parents, leaf = self._split(key)
        node = self._data
        for part in parents:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        node[leaf] = value

    def read(self, key: str, default: Any = None) -> Any:
        """Read the value under ``key`` or ``default`` when absent."""
        node: Any = self._data
        for part in self._split(key):
            if not isinstance(node, dict):
                return default
            node = node.get(part, _MISSING)
            if node is _MISSING:
                return default
        return node

    def check(self, key: str) -> bool:
        """Return True if ``key`` holds a non-None value."""
        return self.read(key) is not None

    def delete(self, key: str) -> None:
        """Remove ``key``. Missing keys are ignored."""
        *parents, leaf = self._split(key)
        node: Any = self._data
        for part in parents:
            node = node.get(part) if isinstance(node, dict) else None
            if node is None:
                return
        if isinstance(node, dict):
            node.pop(leaf, None)

    def clear(self) -> None:
        self._data.clear()

    @staticmethod
    def _split(key: str) -> list[str]:
        parts = key.split(".")
        if not key or any(not part for part in parts):
            msg = f"Invalid configuration key: {key!r}"
            raise ValueError(msg)
        return parts


@lru_cache(maxsize=1)
def get_config_registry() -> ConfigRegistry:
    """Get the process-wide configuration registry.

    Returns:
        Singleton ConfigRegistry instance.
    """
    return ConfigRegistry()
