"""Enumeration behavior attached to an owning entity.

The behavior is the entry point of the engine: it normalizes the provider
configuration once, exposes ``enum(group)`` for listing a provider's
values, and rewrites labels into stored values before a record is built.

Example::

    behavior = EnumBehavior(
        Article,
        providers={
            "status": {"strategy": "const"},
            "priority": {"strategy": "lookup", "coerce": int},
        },
    )
    behavior.enum("status")              # {"DRAFT": 0, "PUBLISHED": 1}
    behavior.before_marshal({"status": "PUBLISHED"})  # {"status": 1}
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from enumeratio.foundation.application.normalizer import normalize_providers
from enumeratio.foundation.application.resolver import (
    StrategyResolver,
    default_strategy_classes,
)
from enumeratio.foundation.application.settings import EnumSettings, get_enum_settings
from enumeratio.foundation.domain.exceptions import UnknownProviderError

if TYPE_CHECKING:
    from collections.abc import Mapping, MutableMapping

    from enumeratio.foundation.application.resolver import StrategyRef
    from enumeratio.foundation.application.strategy import Strategy
    from enumeratio.foundation.domain.provider_config import EnumMapping, ProviderConfig

logger = logging.getLogger(__name__)

#: Behavior methods published on the owning entity, as ``{owner_name: method_name}``.
IMPLEMENTED_METHODS: dict[str, str] = {"enum": "enum"}


def _is_empty(value: Any) -> bool:
    """A field without an enum selection (None, "", 0, False or an empty container)."""
    return not value


class EnumBehavior:
    """Named enumeration providers for one owning entity.

    Args:
        owner: The owning entity (usually a mapped class).
        providers: Raw provider configuration (mapping or list).
        default_strategy: Strategy for providers that name none. Defaults to
            ``EnumSettings.default_strategy``.
        settings: Settings to read defaults from. Defaults to the cached
            environment settings.
        strategies: Kind -> Strategy class table. Defaults to the built-in
            strategies plus entry-point contributions.
        implemented_methods: Methods to publish on the owner.

    Raises:
        ConfigurationError: If any provider is misconfigured.
    """

    def __init__(
        self,
        owner: Any,
        *,
        providers: Any = None,
        default_strategy: StrategyRef | None = None,
        settings: EnumSettings | None = None,
        strategies: Mapping[str, type[Strategy]] | None = None,
        implemented_methods: Mapping[str, str] | None = None,
    ) -> None:
        self._settings = settings if settings is not None else get_enum_settings()
        self._owner = owner
        self._default_strategy: StrategyRef = (
            default_strategy if default_strategy is not None else self._settings.default_strategy
        )
        self._implemented_methods = dict(
            implemented_methods if implemented_methods is not None else IMPLEMENTED_METHODS
        )
        if strategies is None:
            strategies = default_strategy_classes(discover=self._settings.discover_entry_points)
        self._resolver = StrategyResolver(owner, strategies, settings=self._settings)
        self._providers = normalize_providers(providers, self._resolver, self._default_strategy)

    @property
    def owner(self) -> Any:
        return self._owner

    @property
    def providers(self) -> Mapping[str, ProviderConfig]:
        """Normalized provider configuration (read-only)."""
        return self._providers

    @property
    def resolver(self) -> StrategyResolver:
        return self._resolver

    @property
    def default_strategy(self) -> StrategyRef:
        return self._default_strategy

    @property
    def implemented_methods(self) -> dict[str, str]:
        return dict(self._implemented_methods)

    def strategy(self, alias: str, strategy: StrategyRef) -> Strategy:
        """Return the cached strategy for ``alias``, building it if needed."""
        return self._resolver.resolve(alias, strategy)

    def provider(self, group: str) -> ProviderConfig:
        """Return the normalized configuration of ``group``.

        Raises:
            UnknownProviderError: If ``group`` was never configured.
        """
        config = self._providers.get(group)
        if config is None:
            raise UnknownProviderError(group, owner=getattr(self._owner, "__name__", None))
        return config

    def enum(self, group: str) -> EnumMapping:
        """Return the full label -> stored value mapping of a provider.

        Built fresh on every call.

        Raises:
            UnknownProviderError: If ``group`` was never configured.
        """
        config = self.provider(group)
        return self.strategy(group, config.strategy).enum(config)

    def get(self, group: str, label: Any) -> Any:
        """Resolve ``label`` to its stored value within ``group``.

        Raises:
            UnknownProviderError: If ``group`` was never configured.
            UnknownLabelError: If the label is not enumerated.
        """
        config = self.provider(group)
        return self.strategy(group, config.strategy).get(label)

    def find(self, group: str, value: Any) -> str:
        """Resolve a stored value back to its label within ``group``.

        Raises:
            UnknownProviderError: If ``group`` was never configured.
            UnknownValueError: If no label maps to the value.
        """
        config = self.provider(group)
        return self.strategy(group, config.strategy).find(value)

    def before_marshal(self, data: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
        """Rewrite provider fields of ``data`` from labels to stored values.

        Fields that are absent or falsy (``None``, ``""``, ``0``, ``False``,
        empty containers) carry no enum selection and are left untouched.
        ``data`` is modified in place and returned.

        Raises:
            UnknownLabelError: If a field holds a label its provider does not
                enumerate. The record must not be built.
        """
        for alias, config in self._providers.items():
            label = data.get(config.field)
            if _is_empty(label):
                continue
            data[config.field] = self.strategy(alias, config.strategy).get(label)
            logger.debug(
                "field_marshalled",
                extra={"alias": alias, "field": config.field},
            )
        return data
