"""A scratch folder where the agent keeps files while memory is switched on."""

from __future__ import annotations

import shutil
import tempfile
from pathlib import Path

_FOLDER_NAME = "jadio_agent_memory"


class MemoryFolder:
    """Stores files in a folder that exists only while memory is enabled."""

    def __init__(self, directory: str | Path | None = None) -> None:
        self.directory = (
            Path(directory) if directory is not None else Path(tempfile.gettempdir()) / _FOLDER_NAME
        )
        self._enabled = False

    def enable(self) -> None:
        """Create the folder if needed and start keeping files."""
        if not self._enabled:
            self.directory.mkdir(parents=True, exist_ok=True)
            self._enabled = True

    def disable(self) -> None:
        """Delete the folder and everything in it."""
        if self._enabled and self.directory.exists():
            shutil.rmtree(self.directory)
        self._enabled = False

    def store_file(self, filename: str, contents: bytes) -> None:
        """Write ``contents`` to ``filename``; does nothing while disabled."""
        if self._enabled:
            (self.directory / filename).write_bytes(contents)

    def list_files(self) -> list[str]:
        """Names of the stored files; empty while disabled."""
        if not self._enabled:
            return []
        return [entry.name for entry in self.directory.iterdir() if entry.is_file()]

    def read_file(self, filename: str) -> bytes | None:
        """The contents of a stored file, or None if disabled or missing."""
        if not self._enabled:
            return None
        path = self.directory / filename
        return path.read_bytes() if path.exists() else None

    @property
    def enabled(self) -> bool:
        return self._enabled