"""Read and write the flat ``key=value`` preferences file."""

from __future__ import annotations

import logging
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Mapping, Optional, Tuple

from SimplePreferences.errors import PreferencesIOError

logger = logging.getLogger(__name__)

HEADER = "# SimplePreferences"
COMMENT_PREFIXES = ("#", "!")

_ESCAPES = {"\\": "\\\\", "\n": "\\n", "\r": "\\r", "\t": "\\t"}
_UNESCAPES = {"n": "\n", "r": "\r", "t": "\t"}
# Line boundaries for str.splitlines() other than \n and \r.
_LINE_BREAKS = frozenset("\x0b\x0c\x1c\x1d\x1e\x85\u2028\u2029")


def _unicode_escape(ch: str) -> str:
    return f"\\u{ord(ch):04x}"


def _escape(text: str, *, is_key: bool) -> str:
    # Outer whitespace of a key is written as \uXXXX so the strip on load keeps it.
    lead = len(text) - len(text.lstrip())
    trail = len(text.rstrip())
    out = []
    for index, ch in enumerate(text):
        if ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ch in _LINE_BREAKS:
            out.append(_unicode_escape(ch))
        elif is_key and (index < lead or index >= trail):
            out.append(_unicode_escape(ch))
        elif is_key and ch == "=":
            out.append("\\=")
        elif is_key and index == 0 and ch in COMMENT_PREFIXES:
            out.append("\\" + ch)
        else:
            out.append(ch)
    return "".join(out)


def _unescape(text: str) -> str:
    out = []
    index = 0
    while index < len(text):
        ch = text[index]
        index += 1
        if ch != "\\":
            out.append(ch)
            continue
        nxt = text[index : index + 1]
        index += 1
        digits = text[index : index + 4]
        if nxt == "u" and len(digits) == 4 and all(c in "0123456789abcdefABCDEF" for c in digits):
            out.append(chr(int(digits, 16)))
            index += 4
            continue
        out.append(_UNESCAPES.get(nxt, nxt))
    return "".join(out)


def _split_line(line: str) -> Optional[Tuple[str, str]]:
    """Split on the first unescaped '='; None when there is no separator."""
    escaped = False
    for index, ch in enumerate(line):
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch == "=":
            return line[:index], line[index + 1 :]
    return None


def parse_lines(text: str, source: str = "<string>") -> Tuple[Dict[str, str], int]:
    """Parse file content and return the entries plus the number of skipped lines."""
    entries: Dict[str, str] = {}
    skipped = 0
    for lineno, raw in enumerate(text.split("\n"), start=1):
        raw = raw.removesuffix("\r")
        if not raw.strip() or raw.lstrip().startswith(COMMENT_PREFIXES):
            continue
        parts = _split_line(raw)
        if parts is None:
            logger.warning("Skipping malformed line %d in %s: no '=' separator", lineno, source)
            skipped += 1
            continue
        key = _unescape(parts[0].strip())
        if not key:
            logger.warning("Skipping malformed line %d in %s: empty key", lineno, source)
            skipped += 1
            continue
        entries[key] = _unescape(parts[1])
    return entries, skipped


def format_entries(entries: Mapping[str, str]) -> str:
    stamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    lines = [HEADER, f"# {stamp}"]
    for key, value in entries.items():
        lines.append(f"{_escape(key, is_key=True)}={_escape(value, is_key=False)}")
    return "\n".join(lines) + "\n"


def load(path: str | Path, encoding: str = "utf-8") -> Dict[str, str]:
    """Load the file into a dict; a missing file yields an empty dict."""
    file_path = Path(path)
    if not file_path.exists():
        logger.debug("Preferences file %s does not exist yet", file_path)
        return {}
    try:
        text = file_path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise PreferencesIOError(
            f"Failed to read preferences file {file_path}: {exc}",
            details={"path": str(file_path)},
        ) from exc
    entries, skipped = parse_lines(text, source=str(file_path))
    logger.info(
        "Loaded %d preferences from %s (%d malformed lines skipped)",
        len(entries),
        file_path,
        skipped,
    )
    return entries


def save(entries: Mapping[str, str], path: str | Path, encoding: str = "utf-8") -> None:
    """Rewrite the whole file through a temp file and an atomic replace."""
    file_path = Path(path)
    tmp_path: Optional[str] = None
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            prefix=f".{file_path.name}.", suffix=".tmp", dir=str(file_path.parent)
        )
        with open(fd, "w", encoding=encoding, newline="\n") as handle:
            handle.write(format_entries(entries))
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, file_path)
        tmp_path = None
    except OSError as exc:
        raise PreferencesIOError(
            f"Failed to write preferences file {file_path}: {exc}",
            details={"path": str(file_path)},
        ) from exc
    finally:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.unlink(tmp_path)
    logger.debug("Saved %d preferences to %s", len(entries), file_path)
