"""Entry-point-based discovery of custom strategies.

Packages contribute strategies by declaring them in the
``enumeratio.strategies`` entry-point group::

    [project.entry-points."enumeratio.strategies"]
    country = "myapp.enums:CountryStrategy"

The entry-point name becomes the strategy kind.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib.metadata import entry_points

from enumeratio.foundation.application.strategy import Strategy

logger = logging.getLogger(__name__)

STRATEGY_GROUP = "enumeratio.strategies"


@dataclass(frozen=True, slots=True)
class DiscoveredStrategy:
    """A single discovered strategy contribution.

    Attributes:
        name: Entry point name, used as the strategy kind.
        group: Entry point group.
        value: The loaded Strategy subclass.
    """

    name: str
    group: str
    value: type[Strategy]


def discover_strategies(
    group: str = STRATEGY_GROUP,
    *,
    exclude_names: frozenset[str] = frozenset(),
) -> list[DiscoveredStrategy]:
    """Discover and load strategy classes for an entry-point group.

    Entry points that fail to load, or that do not resolve to a Strategy
    subclass, are logged and skipped (fail-soft).

    Args:
        group: The entry point group name.
        exclude_names: Entry point names to skip.

    Returns:
        List of successfully loaded strategies.
    """
    discovered: list[DiscoveredStrategy] = []

    for ep in entry_points(group=group):
        if ep.name in exclude_names:
            logger.debug("Skipping excluded entry point %s:%s", group, ep.name)
            continue
        try:
            loaded = ep.load()
        except Exception:
            logger.exception("Failed to load entry point %s:%s", group, ep.name)
            continue
        if not (isinstance(loaded, type) and issubclass(loaded, Strategy)):
            logger.warning("Entry point %s:%s is not a Strategy subclass", group, ep.name)
            continue
        discovered.append(DiscoveredStrategy(name=ep.name, group=group, value=loaded))
        logger.debug("Loaded entry point %s:%s", group, ep.name)

    logger.info("Discovered %d strategies in group %r", len(discovered), group)
    return discovered
