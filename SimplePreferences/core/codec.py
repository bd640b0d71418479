"""Canonical text forms for the supported preference value types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

from SimplePreferences.core.validator import require_type
from SimplePreferences.errors import InvalidArgumentError, ValueParseError

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _encode_bool(value: bool) -> str:
    return "true" if value else "false"


def _decode_bool(text: str) -> bool:
    lowered = text.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ValueError(f"not a boolean: {text!r}")


def _decode_float(text: str) -> float:
    return float(text.strip())


def _decode_int(text: str) -> int:
    return int(text.strip(), 10)


@dataclass(frozen=True)
class ValueCodec:
    name: str
    accepts: Tuple[type, ...]
    encoder: Callable[[Any], str]
    decoder: Callable[[str], Any]
    minimum: Optional[int] = None
    maximum: Optional[int] = None

    def _in_range(self, value: Any) -> bool:
        if self.minimum is not None and value < self.minimum:
            return False
        if self.maximum is not None and value > self.maximum:
            return False
        return True

    def check(self, value: Any, name: str = "value") -> Any:
        """Validate a caller-supplied value and return it in its stored type."""
        require_type(value, self.accepts, name)
        if not self._in_range(value):
            raise InvalidArgumentError(
                f"'{name}' is out of range for {self.name}: {value}",
                details={"argument": name, "value": value, "type": self.name},
            )
        if self.name == "float":
            try:
                return float(value)
            except OverflowError:
                raise InvalidArgumentError(
                    f"'{name}' is too large to store as {self.name}",
                    details={"argument": name, "value": value, "type": self.name},
                ) from None
        return value

    def encode(self, value: Any) -> str:
        return self.encoder(self.check(value))

    def decode(self, text: str) -> Any:
        try:
            value = self.decoder(text)
        except (TypeError, ValueError) as exc:
            raise ValueParseError(
                f"Can't convert '{text}' to {self.name}",
                details={"text": text, "type": self.name},
            ) from exc
        if not self._in_range(value):
            raise ValueParseError(
                f"'{text}' is out of range for {self.name}",
                details={"text": text, "type": self.name},
            )
        return value


BOOLEAN = ValueCodec("boolean", (bool,), _encode_bool, _decode_bool)
FLOAT = ValueCodec("float", (float, int), repr, _decode_float)
INT = ValueCodec("int", (int,), str, _decode_int, INT32_MIN, INT32_MAX)
LONG = ValueCodec("long", (int,), str, _decode_int, INT64_MIN, INT64_MAX)
STRING = ValueCodec("string", (str,), str, str)

CODECS: Dict[str, ValueCodec] = {
    codec.name: codec for codec in (BOOLEAN, FLOAT, INT, LONG, STRING)
}


def codec_for(type_name: str) -> ValueCodec:
    try:
        return CODECS[type_name]
    except KeyError:
        raise InvalidArgumentError(
            f"Unknown value type '{type_name}'",
            details={"type": type_name, "known": sorted(CODECS)},
        ) from None
