"""Enumeration engine configuration using Pydantic settings.

Settings are loaded from environment variables with the ``ENUM_`` prefix
and supply the defaults a behavior falls back to when its own
configuration omits them.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnumSettings(BaseSettings):
    """Defaults for enumeration providers.

    Environment Variables:
        ENUM_DEFAULT_STRATEGY: Strategy kind used by providers that do not
            name one (default: lookup)
        ENUM_CONFIG_NAMESPACE: Registry namespace read by the config
            strategy (default: Enum)
        ENUM_DISCOVER_ENTRY_POINTS: Load strategies from the
            ``enumeratio.strategies`` entry-point group (default: true)

    Example:
        >>> settings = EnumSettings()
        >>> settings.default_strategy
        'lookup'
    """

    model_config = SettingsConfigDict(
        env_prefix="ENUM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_strategy: str = Field(
        default="lookup",
        description="Strategy kind for providers without an explicit strategy",
    )
    config_namespace: str = Field(
        default="Enum",
        min_length=1,
        description="Configuration registry namespace for the config strategy",
    )
    discover_entry_points: bool = Field(
        default=True,
        description="Discover custom strategies from installed entry points",
    )

    @field_validator("default_strategy", mode="before")
    @classmethod
    def normalize_default_strategy(cls, v: object) -> str:
        """Strip surrounding whitespace from the strategy kind.

        Case is kept: custom kinds are registered under case-sensitive names.

        Raises:
            ValueError: If the kind is empty.
        """
        value = str(v).strip()
        if not value:
            msg = "default_strategy must not be empty"
            raise ValueError(msg)
        return value


@lru_cache(maxsize=1)
def get_enum_settings() -> EnumSettings:
    """Get cached enumeration settings singleton.

    Clear with ``get_enum_settings.cache_clear()`` in tests.

    Returns:
        EnumSettings instance loaded from environment.
    """
    return EnumSettings()
