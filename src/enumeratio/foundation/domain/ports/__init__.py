"""Port interfaces for the collaborators an enumeration provider relies on.

Ports define the contracts the engine uses; implementations live in the
application and infrastructure layers.
"""

from enumeratio.foundation.domain.ports.config_registry import ConfigRegistryPort
from enumeratio.foundation.domain.ports.strategy import StrategyPort

__all__ = ["ConfigRegistryPort", "StrategyPort"]
