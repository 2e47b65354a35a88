"""History of changes made to files, per file and overall."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum, auto
from itertools import zip_longest
from pathlib import Path
from typing import Callable

_AUTHOR = "User"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _lines(content: str) -> list[str]:
    """Split text into lines; a final newline does not start a new line."""
    if not content:
        return []
    parts = content.split("\n")
    if parts[-1] == "":
        parts.pop()
        return [p[:-1] if p.endswith("\r") else p for p in parts]
    last = parts.pop()
    return [p[:-1] if p.endswith("\r") else p for p in parts] + [last]


class ChangeType(Enum):
    CREATED = auto()
    MODIFIED = auto()
    DELETED = auto()
    RENAMED = auto()
    MOVED = auto()


class LineChangeKind(Enum):
    ADDED = auto()
    DELETED = auto()
    MODIFIED = auto()


@dataclass
class LineChange:
    line_number: int
    kind: LineChangeKind
    old_content: str | None = None
    new_content: str | None = None


@dataclass
class FileChange:
    """One change to a file; ``old_path`` is set for renames and moves."""

    path: Path
    change_type: ChangeType
    timestamp: datetime
    line_changes: list[LineChange] = field(default_factory=list)
    author: str = _AUTHOR
    description: str | None = None
    old_path: Path | None = None


@dataclass
class ChangeStatistics:
    total_changes: int
    files_changed: int
    lines_added: int
    lines_deleted: int
    lines_modified: int


def compute_line_changes(old_content: str, new_content: str) -> list[LineChange]:
    """Compare two texts line by line at the same positions."""
    changes: list[LineChange] = []
    pairs = zip_longest(_lines(old_content), _lines(new_content))
    for number, (old, new) in enumerate(pairs, start=1):
        if old is not None and new is not None:
            if old != new:
                changes.append(LineChange(number, LineChangeKind.MODIFIED, old, new))
        elif old is not None:
            changes.append(LineChange(number, LineChangeKind.DELETED, old_content=old))
        else:
            changes.append(LineChange(number, LineChangeKind.ADDED, new_content=new))
    return changes


class FileChangeTracker:
    """Records file changes, keeping a bounded history per file and overall."""

    def __init__(
        self,
        max_changes_per_file: int = 100,
        max_recent_changes: int = 500,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.max_changes_per_file = max_changes_per_file
        self.max_recent_changes = max_recent_changes
        self.auto_save_enabled = True
        self._clock = clock if clock is not None else _utc_now
        self._changes: dict[Path, deque[FileChange]] = {}
        self._recent: deque[FileChange] = deque(maxlen=max_recent_changes)
        self._listeners: list[Callable[[FileChange], None]] = []

    def track_file_created(self, path: str | Path, content: str) -> None:
        line_changes = [
            LineChange(number, LineChangeKind.ADDED, new_content=line)
            for number, line in enumerate(_lines(content), start=1)
        ]
        self._add_change(
            FileChange(
                Path(path),
                ChangeType.CREATED,
                self._clock(),
                line_changes,
                description="File created",
            )
        )

    def track_file_modified(self, path: str | Path, old_content: str, new_content: str) -> None:
        self._add_change(
            FileChange(
                Path(path),
                ChangeType.MODIFIED,
                self._clock(),
                compute_line_changes(old_content, new_content),
            )
        )

    def track_file_deleted(self, path: str | Path, content: str) -> None:
        line_changes = [
            LineChange(number, LineChangeKind.DELETED, old_content=line)
            for number, line in enumerate(_lines(content), start=1)
        ]
        self._add_change(
            FileChange(
                Path(path),
                ChangeType.DELETED,
                self._clock(),
                line_changes,
                description="File deleted",
            )
        )

    def track_file_renamed(self, old_path: str | Path, new_path: str | Path) -> None:
        old = Path(old_path)
        self._add_change(
            FileChange(
                Path(new_path),
                ChangeType.RENAMED,
                self._clock(),
                description=f'Renamed from "{old}"',
                old_path=old,
            )
        )

    def _add_change(self, change: FileChange) -> None:
        for listener in self._listeners:
            listener(change)
        history = self._changes.setdefault(
            change.path, deque(maxlen=self.max_changes_per_file)
        )
        history.append(change)
        self._recent.append(change)

    def file_history(self, path: str | Path) -> list[FileChange] | None:
        """Changes to ``path``, oldest first, or None if it has no history."""
        history = self._changes.get(Path(path))
        return list(history) if history is not None else None

    def recent_changes(self, count: int) -> list[FileChange]:
        """The ``count`` most recent changes, newest first."""
        return list(reversed(self._recent))[:count]

    def changes_since(self, since: datetime) -> list[FileChange]:
        """Changes made strictly after ``since``, oldest first."""
        return [change for change in self._recent if change.timestamp > since]

    def undo_last_change(self, path: str | Path) -> FileChange | None:
        """Remove and return the latest change in the history of ``path``."""
        history = self._changes.get(Path(path))
        if not history:
            return None
        return history.pop()

    def clear_file_history(self, path: str | Path) -> None:
        self._changes.pop(Path(path), None)

    def clear_all_history(self) -> None:
        self._changes.clear()
        self._recent.clear()

    def add_change_listener(self, listener: Callable[[FileChange], None]) -> None:
        """Call ``listener`` with every change as it is recorded."""
        self._listeners.append(listener)

    def statistics(self) -> ChangeStatistics:
        counts = {kind: 0 for kind in LineChangeKind}
        for change in self._recent:
            for line_change in change.line_changes:
                counts[line_change.kind] += 1
        return ChangeStatistics(
            total_changes=len(self._recent),
            files_changed=len(self._changes),
            lines_added=counts[LineChangeKind.ADDED],
            lines_deleted=counts[LineChangeKind.DELETED],
            lines_modified=counts[LineChangeKind.MODIFIED],
        )