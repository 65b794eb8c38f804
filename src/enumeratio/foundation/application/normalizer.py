"""Provider configuration normalization.

Turns the loosely-typed ``providers`` configuration of a behavior into
canonical :class:`ProviderConfig` values. Accepted entry shapes::

    ["status", "priority"]               # bare aliases (positional)
    {0: "status"}                        # same, numeric keys
    {"priority": "prio"}                 # prefix shorthand -> PREFIX "PRIO"
    {"status": None}                     # no options
    {"type": {"strategy": "const", "prefix": "TYPE", "field": "type_id"}}

Every provider gets its strategy from the resolver, and the strategy's
``initialize`` hook returns the configuration that is kept.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from enumeratio.foundation.application.strategy import Strategy
from enumeratio.foundation.domain.exceptions import ConfigurationError
from enumeratio.foundation.domain.provider_config import (
    RESERVED_OPTIONS,
    ProviderConfig,
    StrategyKind,
)

if TYPE_CHECKING:
    from enumeratio.foundation.application.resolver import StrategyRef, StrategyResolver

logger = logging.getLogger(__name__)


def _is_numeric_key(key: Any) -> bool:
    if isinstance(key, bool):
        return False
    if isinstance(key, int):
        return True
    return isinstance(key, str) and key.isdigit()


def _entries(raw: Any) -> list[tuple[Any, Any]]:
    if raw is None:
        return []
    if isinstance(raw, Mapping):
        return list(raw.items())
    if isinstance(raw, Sequence) and not isinstance(raw, (str, bytes)):
        return list(enumerate(raw))
    raise ConfigurationError(
        f"'providers' must be a mapping or a list, got {type(raw).__name__}"
    )


def _strategy_kind(strategy: StrategyRef) -> str:
    """Kind identifier recorded in the canonical config."""
    if isinstance(strategy, Strategy) or (
        isinstance(strategy, type) and issubclass(strategy, Strategy)
    ):
        return strategy.kind or StrategyKind.CUSTOM.value
    return str(strategy)


def normalize_provider(
    alias: Any,
    options: Any,
    resolver: StrategyResolver,
    default_strategy: StrategyRef,
) -> ProviderConfig:
    """Normalize a single provider entry and initialize its strategy.

    Args:
        alias: Provider alias (already rewritten from positional entries).
        options: Options mapping, prefix shorthand string, or None.
        resolver: Resolver owning the strategy cache.
        default_strategy: Strategy used when ``options`` names none.

    Returns:
        The canonical configuration returned by the strategy.

    Raises:
        ConfigurationError: If the entry is malformed or the strategy
            rejects its options.
    """
    if not isinstance(alias, str) or not alias:
        raise ConfigurationError(f"Provider alias must be a non-empty string, got {alias!r}")

    if options is None:
        options = {}
    elif isinstance(options, str):
        options = {"prefix": options.upper()}
    elif isinstance(options, Mapping):
        options = dict(options)
    else:
        raise ConfigurationError(
            f"Options must be a mapping or a prefix string, got {type(options).__name__}",
            alias=alias,
        )

    if not options.get("strategy"):
        options["strategy"] = default_strategy
    for name in ("field", "prefix"):
        if options.get(name) is not None and not isinstance(options[name], str):
            raise ConfigurationError(f"Option {name!r} must be a string", alias=alias)

    strategy = resolver.resolve(alias, options["strategy"])
    try:
        config = ProviderConfig(
            alias=alias,
            strategy=_strategy_kind(options["strategy"]),
            field=options.get("field") or "",
            prefix=options.get("prefix") or "",
            extra={k: v for k, v in options.items() if k not in RESERVED_OPTIONS},
        )
    except PydanticValidationError as exc:
        raise ConfigurationError(str(exc), alias=alias) from exc

    config = strategy.initialize(config)
    logger.debug(
        "provider_normalized",
        extra={
            "alias": alias,
            "strategy": config.strategy,
            "field": config.field,
            "prefix": config.prefix,
        },
    )
    return config


def normalize_providers(
    raw: Any,
    resolver: StrategyResolver,
    default_strategy: StrategyRef,
) -> Mapping[str, ProviderConfig]:
    """Normalize the whole ``providers`` configuration.

    Meant to run once per owning entity: strategies cached by an earlier
    run are reused as-is by the resolver.

    Args:
        raw: Mapping or list of provider entries (see module docstring).
        resolver: Resolver owning the strategy cache.
        default_strategy: Strategy for providers without one.

    Returns:
        Read-only mapping alias -> ProviderConfig, in configuration order.

    Raises:
        ConfigurationError: On malformed entries or duplicate aliases.
    """
    providers: dict[str, ProviderConfig] = {}
    for key, options in _entries(raw):
        if _is_numeric_key(key):
            alias, options = options, None
        else:
            alias = key
        if isinstance(alias, str) and alias in providers:
            raise ConfigurationError(f"Duplicate provider alias {alias!r}", alias=alias)
        providers[alias] = normalize_provider(alias, options, resolver, default_strategy)

    logger.info("providers_normalized", extra={"aliases": list(providers)})
    return MappingProxyType(providers)
