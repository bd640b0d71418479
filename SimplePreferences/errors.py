"""Exceptions raised by the preferences store."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional


class PreferencesError(Exception):
    """Root of every error the preferences store raises.

    ``details`` carries the offending argument, key, path or text so callers
    and log records can report it without parsing the message.
    """

    def __init__(self, message: str, *, details: Optional[Mapping[str, Any]] = None) -> None:
        super().__init__(message)
        self.details: Dict[str, Any] = dict(details) if details else {}


class InvalidArgumentError(PreferencesError, ValueError):
    """Missing or empty key, namespace or value, or no pending key."""


class NullValueError(PreferencesError, TypeError):
    """A default or value passed to a typed accessor was None."""


class ValueParseError(PreferencesError):
    """Stored text could not be converted to the requested type."""


class PreferencesIOError(PreferencesError):
    """The preferences file could not be read or written."""


class ConfigError(PreferencesError):
    """The settings YAML is unreadable or not shaped as expected."""
