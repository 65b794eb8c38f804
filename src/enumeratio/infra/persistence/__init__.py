"""Enumeratio Infra Persistence: SQLAlchemy-backed strategies and model attachment."""

from enumeratio.infra.persistence.database import (
    DatabaseManager,
    DatabaseSettings,
    dispose_engine,
    get_database_manager,
    get_sync_engine,
    get_sync_session_factory,
)
from enumeratio.infra.persistence.enum_type_strategy import EnumTypeStrategy
from enumeratio.infra.persistence.lookup_model import EnumLookup, LookupBase, create_lookup_table
from enumeratio.infra.persistence.lookup_strategy import LookupStrategy
from enumeratio.infra.persistence.mapping import (
    attach_enum_behavior,
    detach_enum_behavior,
    get_enum_behavior,
)

__all__ = [
    "DatabaseManager",
    "DatabaseSettings",
    "EnumLookup",
    "EnumTypeStrategy",
    "LookupBase",
    "LookupStrategy",
    "attach_enum_behavior",
    "create_lookup_table",
    "detach_enum_behavior",
    "dispose_engine",
    "get_database_manager",
    "get_enum_behavior",
    "get_sync_engine",
    "get_sync_session_factory",
]
