"""One-shot key session: declare a key, then do exactly one get or put."""

from __future__ import annotations

import logging
from typing import Any, Optional

from SimplePreferences.core import codec as codecs
from SimplePreferences.core.codec import ValueCodec
from SimplePreferences.core.scope import ScopeResolver
from SimplePreferences.core.store import PreferencesStore
from SimplePreferences.core.validator import require_non_empty, require_non_null
from SimplePreferences.errors import InvalidArgumentError, ValueParseError

logger = logging.getLogger(__name__)


class PreferencesSession:
    """Scoped access to a store; each get/put consumes the pending key.

    Sessions are short-lived values handed out by ``Preferences.application()``
    and ``Preferences.module()``. The pending key is cleared after every typed
    call, whether it returned normally or raised.
    """

    def __init__(self, store: PreferencesStore, resolver: ScopeResolver) -> None:
        self.store = store
        self.resolver = resolver
        self.pending_key: Optional[str] = None

    @property
    def prefix(self) -> Optional[str]:
        return self.resolver.prefix

    def key(self, short_key: str) -> "PreferencesSession":
        self.pending_key = require_non_empty(short_key, "key")
        logger.debug("Pending key set to '%s'", short_key)
        return self

    def _take_key(self) -> str:
        if self.pending_key is None:
            raise InvalidArgumentError("No 'key' is previously defined with PreferencesSession.key()")
        return self.resolver.build_fully_qualified_key(self.pending_key)

    def get(self, codec: ValueCodec, default: Any) -> Any:
        try:
            require_non_null(default, "default")
            if codec is codecs.STRING:
                require_non_empty(default, "default")
            default = codec.check(default, "default")
            full_key = self._take_key()
            text = self.store.get(full_key)
            if text is None:
                logger.debug("Key '%s' not found, returning default value", full_key)
                return default
            try:
                value = codec.decode(text)
            except ValueParseError as exc:
                logger.warning("%s. Using default value: %r", exc, default)
                return default
            logger.debug("Load %s=%r", full_key, value)
            return value
        finally:
            self.pending_key = None

    def put(self, codec: ValueCodec, value: Any) -> None:
        try:
            require_non_null(value, "value")
            if codec is codecs.STRING:
                require_non_empty(value, "value")
            text = codec.encode(value)
            full_key = self._take_key()
            self.store.put(full_key, text)
            logger.debug("Save %s=%s", full_key, text)
        finally:
            self.pending_key = None

    def get_boolean(self, default: bool) -> bool:
        return self.get(codecs.BOOLEAN, default)

    def get_float(self, default: float) -> float:
        return self.get(codecs.FLOAT, default)

    def get_int(self, default: int) -> int:
        return self.get(codecs.INT, default)

    def get_long(self, default: int) -> int:
        return self.get(codecs.LONG, default)

    def get_string(self, default: str) -> str:
        return self.get(codecs.STRING, default)

    def put_boolean(self, value: bool) -> None:
        self.put(codecs.BOOLEAN, value)

    def put_float(self, value: float) -> None:
        self.put(codecs.FLOAT, value)

    def put_int(self, value: int) -> None:
        self.put(codecs.INT, value)

    def put_long(self, value: int) -> None:
        self.put(codecs.LONG, value)

    def put_string(self, value: str) -> None:
        self.put(codecs.STRING, value)
