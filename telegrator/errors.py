"""Exceptions raised for misconfiguration.

Filters never raise on message data; these cover mistakes made while
building the handler table.
"""


class TelegratorError(Exception):
    """Base class for all telegrator errors."""


class ConfigError(TelegratorError):
    """The router configuration could not be read or validated."""


class UnknownFilterError(ConfigError):
    """A configured filter type has no registered implementation."""

    def __init__(self, filter_type: str) -> None:
        super().__init__(f"Unknown filter type: {filter_type!r}")
        self.filter_type = filter_type


class HandlerRegistrationError(TelegratorError):
    """A handler could not be added to the registry."""
