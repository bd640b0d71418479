"""In-memory preferences mapping mirrored to the backing file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

from SimplePreferences.core import properties_file
from SimplePreferences.errors import PreferencesIOError

logger = logging.getLogger(__name__)


class PreferencesStore:
    """Fully-qualified key -> serialized value, rewritten to disk on every put."""

    def __init__(self, path: str | Path, encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding
        self._entries: Dict[str, str] = {}
        self.reload()

    def reload(self) -> None:
        self._entries = properties_file.load(self.path, self.encoding)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def get(self, key: str) -> Optional[str]:
        return self._entries.get(key)

    def put(self, key: str, text: str) -> None:
        """Insert or overwrite ``key`` and rewrite the whole file."""
        previous = self._entries.get(key)
        existed = key in self._entries
        self._entries[key] = text
        try:
            properties_file.save(self._entries, self.path, self.encoding)
        except PreferencesIOError:
            # Keep memory consistent with what is on disk.
            if existed:
                self._entries[key] = previous
            else:
                del self._entries[key]
            raise

    def items(self, prefix: Optional[str] = None) -> List[Tuple[str, str]]:
        if prefix is None:
            return list(self._entries.items())
        return [(key, value) for key, value in self._entries.items() if key.startswith(prefix)]

    def drop(self) -> None:
        """Delete the backing file and forget every entry."""
        try:
            self.path.unlink(missing_ok=True)
        except OSError as exc:
            raise PreferencesIOError(
                f"Failed to delete preferences file {self.path}: {exc}",
                details={"path": str(self.path)},
            ) from exc
        self._entries = {}
        logger.info("Dropped preferences file %s", self.path)
