"""Lookup-table strategy.

Enumerates the rows of a lookup table whose ``prefix`` column matches the
provider prefix. Rows are read on every ``enum()`` call since the table
can change while the owning entity is alive.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import inspect as sa_inspect
from sqlalchemy import select

from enumeratio.foundation.application.strategy import Strategy
from enumeratio.foundation.domain.exceptions import ConfigurationError
from enumeratio.foundation.domain.provider_config import StrategyKind
from enumeratio.infra.persistence.database import get_sync_session_factory
from enumeratio.infra.persistence.lookup_model import EnumLookup

if TYPE_CHECKING:
    from enumeratio.foundation.domain.provider_config import EnumMapping, ProviderConfig

logger = logging.getLogger(__name__)

_LOOKUP_COLUMNS = ("prefix", "label", "value")


class LookupStrategy(Strategy):
    """Enumerates label/value rows of a lookup table.

    Options:
        session_factory: Callable returning a SQLAlchemy Session context
            manager. Defaults to the process-wide sync session factory.
        model: Mapped class with ``prefix``, ``label`` and ``value``
            attributes. Defaults to :class:`EnumLookup`.
        coerce: Optional callable applied to each stored value
            (e.g. ``int`` for numeric codes kept in a text column).
    """

    kind = StrategyKind.LOOKUP.value

    def initialize(self, config: ProviderConfig) -> ProviderConfig:
        model = config.option("model") or EnumLookup
        missing = [name for name in _LOOKUP_COLUMNS if not hasattr(model, name)]
        if missing or sa_inspect(model, raiseerr=False) is None:
            raise ConfigurationError(
                "Option 'model' must be a mapped class with prefix, label and value",
                alias=config.alias,
                strategy=self.kind,
                missing=",".join(missing),
            )
        coerce = config.option("coerce")
        if coerce is not None and not callable(coerce):
            raise ConfigurationError(
                "Option 'coerce' must be callable", alias=config.alias, strategy=self.kind
            )

        session_factory = config.option("session_factory") or get_sync_session_factory()
        table = model.__table__
        with session_factory() as session:
            exists = sa_inspect(session.get_bind()).has_table(table.name, schema=table.schema)
        if not exists:
            raise ConfigurationError(
                f"Lookup table {table.name!r} does not exist",
                alias=config.alias,
                strategy=self.kind,
            )

        return super().initialize(
            config.with_extra(session_factory=session_factory, model=model)
        )

    def enum(self, config: ProviderConfig | None = None) -> EnumMapping:
        config = self._resolve_config(config)
        model: Any = config.option("model")
        coerce = config.option("coerce")
        stmt = (
            select(model.label, model.value)
            .where(model.prefix == config.prefix)
            .order_by(*sa_inspect(model).primary_key)
        )
        with config.option("session_factory")() as session:
            rows = session.execute(stmt).all()
        logger.debug(
            "lookup_enum_loaded",
            extra={"alias": self.alias, "prefix": config.prefix, "rows": len(rows)},
        )
        if coerce is None:
            return {label: value for label, value in rows}
        return {label: coerce(value) for label, value in rows}
