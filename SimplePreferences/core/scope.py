"""Scope prefixes and fully-qualified key construction."""

from __future__ import annotations

import inspect
import logging
from typing import Any, Optional

from SimplePreferences.core.validator import require_non_empty
from SimplePreferences.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

APPLICATION_NAMESPACE = __name__.split(".")[0]
SEPARATOR = "."


def namespace_of(target: Any) -> str:
    """Map a namespace id, module, class or function to its namespace string."""
    if isinstance(target, str):
        return require_non_empty(target, "namespace_id").strip()
    if inspect.ismodule(target):
        return target.__name__
    if inspect.isclass(target) or inspect.isroutine(target):
        return require_non_empty(getattr(target, "__module__", None), "namespace_id")
    raise InvalidArgumentError(
        "'namespace_id' must be a non-empty string, a module, a class or a function",
        details={"argument": "namespace_id", "value": target},
    )


class ScopeResolver:
    def __init__(self) -> None:
        self.prefix: Optional[str] = None

    def activate_application_scope(self) -> "ScopeResolver":
        self.prefix = APPLICATION_NAMESPACE
        logger.debug("Activated application scope '%s'", self.prefix)
        return self

    def activate_module_scope(self, namespace_id: Any) -> "ScopeResolver":
        self.prefix = namespace_of(namespace_id)
        logger.debug("Activated module scope '%s'", self.prefix)
        return self

    def build_fully_qualified_key(self, short_key: str) -> str:
        if self.prefix is None:
            raise InvalidArgumentError("No scope is activated, use application or module scope first")
        require_non_empty(short_key, "key")
        return f"{self.prefix}{SEPARATOR}{short_key}"
