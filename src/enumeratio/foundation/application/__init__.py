"""Enumeratio Foundation Application: strategy resolution and the behavior facade."""

from enumeratio.foundation.application.behavior import IMPLEMENTED_METHODS, EnumBehavior
from enumeratio.foundation.application.config_registry import (
    ConfigRegistry,
    get_config_registry,
)
from enumeratio.foundation.application.discovery import (
    STRATEGY_GROUP,
    DiscoveredStrategy,
    discover_strategies,
)
from enumeratio.foundation.application.normalizer import (
    normalize_provider,
    normalize_providers,
)
from enumeratio.foundation.application.resolver import (
    StrategyResolver,
    builtin_strategy_classes,
    default_strategy_classes,
)
from enumeratio.foundation.application.settings import EnumSettings, get_enum_settings
from enumeratio.foundation.application.strategies import ConfigStrategy, ConstStrategy
from enumeratio.foundation.application.strategy import Strategy

__all__ = [
    "IMPLEMENTED_METHODS",
    "STRATEGY_GROUP",
    "ConfigRegistry",
    "ConfigStrategy",
    "ConstStrategy",
    "DiscoveredStrategy",
    "EnumBehavior",
    "EnumSettings",
    "Strategy",
    "StrategyResolver",
    "builtin_strategy_classes",
    "default_strategy_classes",
    "discover_strategies",
    "get_config_registry",
    "get_enum_settings",
    "normalize_provider",
    "normalize_providers",
]
