"""Unified exception hierarchy for amqpbridge.

All library exceptions inherit from AmqpBridgeException, so callers can
catch one type to handle every configuration failure, or catch a specific
subclass for targeted handling.

Categories:
- ConfigurationException: configuration documents that cannot be applied
- UnsupportedOperationException: capabilities this configuration never offers
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class AmqpBridgeException(Exception):
    """Base exception for all amqpbridge errors.

    Carries an optional error code and context dict for structured error data.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "CONVERSION_ERROR").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationException(AmqpBridgeException):
    """Configuration could not be loaded or applied."""


class ConversionException(ConfigurationException):
    """A JSON document does not match the expected options shape or field types."""


# =============================================================================
# Capability Exceptions
# =============================================================================


class UnsupportedOperationException(AmqpBridgeException):
    """The requested setting is permanently unavailable on this options type."""
