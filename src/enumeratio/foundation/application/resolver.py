"""Strategy resolution and per-owner caching.

Each owning entity has one resolver; the resolver holds exactly one
strategy instance per provider alias, built lazily on first request and
kept for the owner's lifetime.

Resolution order for ``resolve(alias, strategy)``:
  1. an instance already cached for ``alias`` (``strategy`` is ignored)
  2. ``strategy`` is a Strategy instance: cached as-is
  3. ``strategy`` is a Strategy subclass: constructed
  4. ``strategy`` is a kind name: looked up in the kind -> class table
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from enumeratio.foundation.application.discovery import discover_strategies
from enumeratio.foundation.application.strategies import ConfigStrategy, ConstStrategy
from enumeratio.foundation.application.strategy import Strategy
from enumeratio.foundation.domain.exceptions import UnknownStrategyError
from enumeratio.foundation.domain.provider_config import StrategyKind

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from enumeratio.foundation.application.settings import EnumSettings

logger = logging.getLogger(__name__)

StrategyRef = str | Strategy | type[Strategy]


def builtin_strategy_classes() -> dict[str, type[Strategy]]:
    """Return the built-in kind -> class table.

    SQLAlchemy-backed strategies are imported lazily so the application
    layer does not import infrastructure at module load.
    """
    from enumeratio.infra.persistence.enum_type_strategy import EnumTypeStrategy
    from enumeratio.infra.persistence.lookup_strategy import LookupStrategy

    return {
        StrategyKind.CONST.value: ConstStrategy,
        StrategyKind.CONFIG.value: ConfigStrategy,
        StrategyKind.ENUM.value: EnumTypeStrategy,
        StrategyKind.LOOKUP.value: LookupStrategy,
    }


def default_strategy_classes(*, discover: bool = True) -> dict[str, type[Strategy]]:
    """Built-in strategies plus those contributed through entry points.

    Built-in kinds cannot be overridden by entry points.
    """
    classes = builtin_strategy_classes()
    if discover:
        for contribution in discover_strategies(exclude_names=frozenset(classes)):
            classes[contribution.name] = contribution.value
    return classes


class StrategyResolver:
    """Returns the cached strategy of a provider, building it on first use.

    Args:
        owner: The owning entity strategies are bound to.
        classes: Kind -> Strategy class table. Defaults to
            :func:`default_strategy_classes`.
        settings: Settings bound to every strategy this resolver builds.
            Strategies fall back to the environment settings when omitted.
    """

    def __init__(
        self,
        owner: Any,
        classes: Mapping[str, type[Strategy]] | None = None,
        *,
        settings: EnumSettings | None = None,
    ) -> None:
        self._owner = owner
        self._settings = settings
        self._classes: dict[str, type[Strategy]] = (
            dict(classes) if classes is not None else default_strategy_classes()
        )
        self._strategies: dict[str, Strategy] = {}

    @property
    def owner(self) -> Any:
        return self._owner

    @property
    def settings(self) -> EnumSettings | None:
        return self._settings

    @property
    def classes(self) -> Mapping[str, type[Strategy]]:
        return dict(self._classes)

    def register(self, name: str, strategy_class: type[Strategy]) -> None:
        """Register a strategy class under a kind name for this resolver.

        Raises:
            TypeError: If ``strategy_class`` is not a Strategy subclass.
        """
        if not (isinstance(strategy_class, type) and issubclass(strategy_class, Strategy)):
            msg = f"{strategy_class!r} is not a Strategy subclass"
            raise TypeError(msg)
        self._classes[str(name)] = strategy_class

    def resolve(self, alias: str, strategy: StrategyRef) -> Strategy:
        """Return the strategy instance for ``alias``.

        A cached instance is returned unconditionally, even if ``strategy``
        names a different kind.

        Args:
            alias: Provider alias.
            strategy: Kind name, Strategy subclass or Strategy instance.

        Returns:
            The cached (or newly built) strategy instance.

        Raises:
            UnknownStrategyError: If ``strategy`` is an unregistered kind.
        """
        cached = self._strategies.get(alias)
        if cached is not None:
            return cached

        if isinstance(strategy, Strategy):
            instance = strategy
        else:
            if isinstance(strategy, type) and issubclass(strategy, Strategy):
                strategy_class = strategy
            else:
                strategy_class = self._lookup(alias, strategy)
            instance = strategy_class(alias, self._owner)

        if self._settings is not None and instance.bound_settings is None:
            instance.settings = self._settings

        self._strategies[alias] = instance
        logger.debug(
            "strategy_resolved",
            extra={"alias": alias, "strategy": instance.kind, "class": type(instance).__name__},
        )
        return instance

    def get(self, alias: str) -> Strategy | None:
        """Return the cached strategy for ``alias`` without building one."""
        return self._strategies.get(alias)

    @property
    def aliases(self) -> list[str]:
        return list(self._strategies)

    def __contains__(self, alias: object) -> bool:
        return alias in self._strategies

    def __iter__(self) -> Iterator[str]:
        return iter(self._strategies)

    def __len__(self) -> int:
        return len(self._strategies)

    def _lookup(self, alias: str, strategy: Any) -> type[Strategy]:
        name = str(strategy) if strategy is not None else ""
        strategy_class = self._classes.get(name)
        if strategy_class is None:
            raise UnknownStrategyError(name, alias=alias)
        return strategy_class
