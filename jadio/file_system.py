"""File and directory operations relative to an optional workspace."""

from __future__ import annotations

import os
import shutil
import stat
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

_TEXT_EXTENSIONS = frozenset(
    {
        "txt", "rs", "py", "js", "ts", "html", "css", "json", "yaml", "yml", "toml",
        "md", "xml", "c", "cpp", "h", "hpp", "java", "php", "rb", "go", "swift",
        "kt", "scala",
    }
)


@dataclass
class FileEntry:
    name: str
    path: Path
    is_directory: bool
    size: int
    modified: datetime | None = None


def _extension(path: Path) -> str | None:
    stem, dot, ext = path.name.rpartition(".")
    if not dot or not stem:
        return None
    return ext


class FileSystem:
    """Reads, writes and lists files; paths may be made relative to the workspace."""

    def __init__(self) -> None:
        self._workspace: Path | None = None

    @property
    def workspace(self) -> Path | None:
        return self._workspace

    @workspace.setter
    def workspace(self, path: str | Path) -> None:
        path = Path(path)
        if not path.is_dir():
            raise FileNotFoundError("Directory not found")
        self._workspace = path

    def list_directory(self, path: str | Path) -> list[FileEntry]:
        """Entries of ``path``: directories first, then files, by name ignoring case."""
        entries: list[FileEntry] = []
        with os.scandir(path) as scan:
            for entry in scan:
                info = entry.stat(follow_symlinks=False)
                entries.append(
                    FileEntry(
                        name=entry.name,
                        path=Path(entry.path),
                        is_directory=stat.S_ISDIR(info.st_mode),
                        size=info.st_size,
                        modified=datetime.fromtimestamp(info.st_mtime, tz=timezone.utc),
                    )
                )
        entries.sort(key=lambda e: (not e.is_directory, e.name.lower()))
        return entries

    def read_file(self, path: str | Path) -> str:
        with open(path, encoding="utf-8", newline="") as handle:
            return handle.read()

    def write_file(self, path: str | Path, content: str) -> None:
        Path(path).write_bytes(content.encode("utf-8"))

    def create_directory(self, path: str | Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def delete_file(self, path: str | Path) -> None:
        """Delete a file, or a directory with everything in it."""
        path = Path(path)
        if path.is_dir():
            shutil.rmtree(path)
        else:
            path.unlink()

    def rename_file(self, source: str | Path, target: str | Path) -> None:
        os.replace(source, target)

    def file_exists(self, path: str | Path) -> bool:
        return Path(path).exists()

    def file_extension(self, path: str | Path) -> str | None:
        """The extension in lower case, or None if the name has none."""
        ext = _extension(Path(path))
        return ext.lower() if ext is not None else None

    def is_text_file(self, path: str | Path) -> bool:
        """Whether the extension is one of the known source or text formats."""
        return self.file_extension(path) in _TEXT_EXTENSIONS

    def relative_path(self, path: str | Path) -> Path | None:
        """``path`` relative to the workspace, or None if outside or unset."""
        if self._workspace is None:
            return None
        try:
            return Path(path).relative_to(self._workspace)
        except ValueError:
            return None

    def create_file(self, path: str | Path) -> None:
        """Create an empty file, truncating one that exists."""
        Path(path).write_bytes(b"")