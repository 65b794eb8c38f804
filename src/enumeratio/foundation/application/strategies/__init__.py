"""Framework-agnostic strategy variants."""

from enumeratio.foundation.application.strategies.config import ConfigStrategy
from enumeratio.foundation.application.strategies.const import ConstStrategy

__all__ = ["ConfigStrategy", "ConstStrategy"]
