"""Persistence backends: where the serialized task document lives."""

import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class Backend(Protocol):
    def read(self) -> str | None: ...

    def write(self, text: str) -> None: ...


class FileBackend:
    """Single JSON file, replaced atomically on every write.

    Atomic per write only: concurrent load-mutate-save cycles from separate
    processes still lose updates (last writer wins).
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def read(self) -> str | None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            return None
        return self.path.read_text(encoding="utf-8")

    def write(self, text: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_text(text, encoding="utf-8")
        tmp_path.replace(self.path)
        logger.debug("Wrote %d bytes to %s", len(text), self.path)

    def __repr__(self) -> str:
        return f"FileBackend({str(self.path)!r})"


class MemoryBackend:
    """Document kept in memory. Used by tests and embedding callers."""

    def __init__(self, text: str | None = None):
        self.text = text
        self.path = None

    def read(self) -> str | None:
        return self.text

    def write(self, text: str) -> None:
        self.text = text

    def __repr__(self) -> str:
        return "MemoryBackend()"
