from __future__ import annotations

from typing import Any

from SimplePreferences.errors import InvalidArgumentError, NullValueError


def require_non_null(value: Any, name: str = "value") -> Any:
    if value is None:
        raise NullValueError(f"'{name}' can't be None", details={"argument": name})
    return value


def require_non_empty(value: Any, name: str = "value") -> str:
    """Reject None, non-strings and blank strings with InvalidArgumentError."""
    if value is None or not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(
            f"'{name}' can't be None or empty",
            details={"argument": name, "value": value},
        )
    return value


def require_type(value: Any, expected: type | tuple, name: str = "value") -> Any:
    # bool is an int subclass; only accept it where bool is expected.
    expected_types = expected if isinstance(expected, tuple) else (expected,)
    if isinstance(value, bool) and bool not in expected_types:
        raise InvalidArgumentError(
            f"'{name}' must not be a bool", details={"argument": name, "value": value}
        )
    if not isinstance(value, expected_types):
        names = ", ".join(t.__name__ for t in expected_types)
        raise InvalidArgumentError(
            f"'{name}' must be of type {names}, got {type(value).__name__}",
            details={"argument": name, "value": value},
        )
    return value
