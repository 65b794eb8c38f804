"""Enumeratio Foundation Domain: provider value objects, errors and ports."""

from enumeratio.foundation.domain.exceptions import (
    ConfigurationError,
    EnumError,
    UnknownLabelError,
    UnknownProviderError,
    UnknownStrategyError,
    UnknownValueError,
)
from enumeratio.foundation.domain.ports import ConfigRegistryPort, StrategyPort
from enumeratio.foundation.domain.provider_config import (
    RESERVED_OPTIONS,
    EnumMapping,
    ProviderConfig,
    StrategyKind,
)

__all__ = [
    "RESERVED_OPTIONS",
    "ConfigRegistryPort",
    "ConfigurationError",
    "EnumError",
    "EnumMapping",
    "ProviderConfig",
    "StrategyKind",
    "StrategyPort",
    "UnknownLabelError",
    "UnknownProviderError",
    "UnknownStrategyError",
    "UnknownValueError",
]
