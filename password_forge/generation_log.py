"""Structured file-based generation logging.

Writes one JSON line per event. Passwords are never written; callers pass
fingerprints from password_forge.security instead.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path


class GenerationLog:
    """Append-only structured generation log with size rotation."""

    MAX_SIZE = 10 * 1024 * 1024  # 10 MB

    def __init__(self, path: Path):
        self.path = path
        self._entries: list[dict] = []

    def log(self, event: str, **fields: object) -> None:
        entry: dict = {
            "ts": datetime.now(timezone.utc).isoformat(timespec="seconds"),
            "event": event,
        }
        for key, value in fields.items():
            if value is None or value == "" or value == ():
                continue
            entry[key] = list(value) if isinstance(value, tuple) else value
        self._entries.append(entry)

    def _rotate_if_oversized(self) -> None:
        if not self.path.exists() or self.path.stat().st_size <= self.MAX_SIZE:
            return
        # Keep a single previous generation
        self.path.replace(self.path.with_suffix(".log.1"))

    def flush(self) -> None:
        """Append buffered entries to the log file. Symlinked log paths are never written."""
        entries, self._entries = self._entries, []
        if not entries or self.path.is_symlink():
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._rotate_if_oversized()
        lines = [json.dumps(entry, ensure_ascii=False) + "\n" for entry in entries]
        with self.path.open("a", encoding="utf-8") as f:
            f.writelines(lines)

    @property
    def entries(self) -> list[dict]:
        return list(self._entries)

    @property
    def entry_count(self) -> int:
        return len(self._entries)
