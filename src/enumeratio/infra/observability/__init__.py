"""Enumeratio Infra Observability: structured logging."""

from enumeratio.infra.observability.logging import (
    LoggingSettings,
    configure_logging,
    get_logger,
    get_logging_settings,
)

__all__ = [
    "LoggingSettings",
    "configure_logging",
    "get_logger",
    "get_logging_settings",
]
