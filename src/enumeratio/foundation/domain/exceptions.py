"""Exception hierarchy for enumeration providers.

Every error raised by the provider engine derives from :class:`EnumError`
and carries a machine-readable error code plus structured context, so a
validation layer can report the failing provider and label without parsing
messages.

Example:
    >>> from enumeratio.foundation.domain.exceptions import UnknownLabelError
    >>> raise UnknownLabelError("status", "ARCHIVED")
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "ConfigurationError",
    "EnumError",
    "UnknownLabelError",
    "UnknownProviderError",
    "UnknownStrategyError",
    "UnknownValueError",
]


class EnumError(Exception):
    """Base class for all enumeration errors.

    Attributes:
        error_code: Machine-readable error code.
        message: Human-readable error description.
        context: Structured debugging information (alias, label, strategy).
    """

    error_code: str = "ENUM_ERROR"

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """String representation including context for logging."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, context={self.context!r})"


class ConfigurationError(EnumError):
    """Raised when a provider entry or a strategy option is missing or invalid.

    Raised while the owning entity is being set up. Setup must abort.

    Example:
        >>> raise ConfigurationError("Lookup table does not exist", alias="priority")
        ConfigurationError: Invalid enum configuration: Lookup table does not exist (alias=priority)
    """

    error_code: str = "ENUM_CONFIGURATION_ERROR"

    def __init__(self, reason: str, **context: Any) -> None:
        """Initialize configuration error.

        Args:
            reason: What is wrong with the configuration.
            **context: Additional debugging context (alias, option, strategy).
        """
        self.reason = reason
        super().__init__(f"Invalid enum configuration: {reason}", context)


class UnknownStrategyError(ConfigurationError):
    """Raised when a strategy kind has no registered implementation.

    Attributes:
        strategy: The requested strategy identifier.
    """

    error_code: str = "ENUM_UNKNOWN_STRATEGY"

    def __init__(self, strategy: str, **context: Any) -> None:
        self.strategy = strategy
        super().__init__(f"Class not found for strategy ({strategy})", strategy=strategy, **context)


class UnknownProviderError(EnumError):
    """Raised when a caller asks for a provider alias that was never configured.

    Attributes:
        alias: The requested provider alias.
    """

    error_code: str = "ENUM_UNKNOWN_PROVIDER"

    def __init__(self, alias: str, **extra_context: Any) -> None:
        self.alias = alias
        super().__init__(
            f"Unknown enum provider: {alias}",
            {"alias": alias, **extra_context},
        )


class UnknownLabelError(EnumError):
    """Raised when a label is not part of a provider's enumeration.

    Recoverable: callers validating user input should catch it and report
    the offending field.

    Attributes:
        alias: Provider alias.
        label: The label that could not be resolved.
    """

    error_code: str = "ENUM_UNKNOWN_LABEL"

    def __init__(self, alias: str, label: Any, **extra_context: Any) -> None:
        self.alias = alias
        self.label = label
        super().__init__(
            f"The provided value is invalid: {label!r}",
            {"alias": alias, "label": label, **extra_context},
        )


class UnknownValueError(EnumError):
    """Raised when a stored value has no label in a provider's enumeration."""

    error_code: str = "ENUM_UNKNOWN_VALUE"

    def __init__(self, alias: str, value: Any, **extra_context: Any) -> None:
        self.alias = alias
        self.value = value
        super().__init__(
            f"No label for stored value: {value!r}",
            {"alias": alias, "value": value, **extra_context},
        )
