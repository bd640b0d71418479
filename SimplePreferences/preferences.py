"""Convenience facade composing scope, key and typed get/put in single calls."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from SimplePreferences.config.settings import load_settings, resolve_preferences_path
from SimplePreferences.core import codec as codecs
from SimplePreferences.core.scope import SEPARATOR, ScopeResolver, namespace_of
from SimplePreferences.core.session import PreferencesSession
from SimplePreferences.core.store import PreferencesStore

logger = logging.getLogger(__name__)


class Preferences:
    """Typed preferences backed by one ``PreferencesStore``.

    ``namespace=None`` on the convenience calls means application scope; any
    other value selects module scope (a namespace string, a module, a class
    or a function).
    """

    def __init__(self, store: PreferencesStore) -> None:
        self.store = store

    @classmethod
    def open(
        cls,
        path: str | Path | None = None,
        settings: Optional[Dict[str, Any]] = None,
        drop: bool = False,
    ) -> "Preferences":
        """Build a facade over ``path`` or the configured default file."""
        settings = settings or load_settings()
        file_path = Path(path) if path is not None else resolve_preferences_path(settings)
        encoding = str((settings.get("preferences") or {}).get("encoding") or "utf-8")
        logger.debug("Opening preferences file %s", file_path)
        preferences = cls(PreferencesStore(file_path, encoding=encoding))
        if drop:
            preferences.drop()
        return preferences

    @property
    def path(self) -> Path:
        return self.store.path

    def init(self, drop: bool = False) -> None:
        """Reload from disk, deleting the file first when ``drop`` is set."""
        if drop:
            self.store.drop()
        else:
            self.store.reload()

    def drop(self) -> None:
        self.store.drop()

    def application(self) -> PreferencesSession:
        return PreferencesSession(self.store, ScopeResolver().activate_application_scope())

    def module(self, namespace: Any) -> PreferencesSession:
        return PreferencesSession(self.store, ScopeResolver().activate_module_scope(namespace))

    def session(self, namespace: Any = None) -> PreferencesSession:
        if namespace is None:
            return self.application()
        return self.module(namespace)

    def items(self, namespace: Any = None) -> List[Tuple[str, str]]:
        if namespace is None:
            return self.store.items()
        return self.store.items(prefix=namespace_of(namespace) + SEPARATOR)

    def get(self, type_name: str, key: str, default: Any, namespace: Any = None) -> Any:
        return self.session(namespace).key(key).get(codecs.codec_for(type_name), default)

    def put(self, type_name: str, key: str, value: Any, namespace: Any = None) -> None:
        self.session(namespace).key(key).put(codecs.codec_for(type_name), value)

    def get_boolean(self, key: str, default: bool, namespace: Any = None) -> bool:
        return self.session(namespace).key(key).get_boolean(default)

    def get_float(self, key: str, default: float, namespace: Any = None) -> float:
        return self.session(namespace).key(key).get_float(default)

    def get_int(self, key: str, default: int, namespace: Any = None) -> int:
        return self.session(namespace).key(key).get_int(default)

    def get_long(self, key: str, default: int, namespace: Any = None) -> int:
        return self.session(namespace).key(key).get_long(default)

    def get_string(self, key: str, default: str, namespace: Any = None) -> str:
        return self.session(namespace).key(key).get_string(default)

    def put_boolean(self, key: str, value: bool, namespace: Any = None) -> None:
        self.session(namespace).key(key).put_boolean(value)

    def put_float(self, key: str, value: float, namespace: Any = None) -> None:
        self.session(namespace).key(key).put_float(value)

    def put_int(self, key: str, value: int, namespace: Any = None) -> None:
        self.session(namespace).key(key).put_int(value)

    def put_long(self, key: str, value: int, namespace: Any = None) -> None:
        self.session(namespace).key(key).put_long(value)

    def put_string(self, key: str, value: str, namespace: Any = None) -> None:
        self.session(namespace).key(key).put_string(value)
