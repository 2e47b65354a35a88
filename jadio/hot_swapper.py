"""Watches source files and reloads them when their content changes."""

from __future__ import annotations

import hashlib
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

_STATE_PLACEHOLDER = "state_placeholder"


def _default_extensions() -> list[str]:
    return ["rs", "py", "js", "ts", "jsx", "tsx", "css", "html"]


@dataclass
class HotSwapConfig:
    enabled: bool = True
    watch_extensions: list[str] = field(default_factory=_default_extensions)
    reload_delay_ms: int = 500
    max_reload_attempts: int = 3
    preserve_state: bool = True


@dataclass
class ReloadResult:
    path: Path
    success: bool
    error: str | None
    timestamp: datetime


class HotSwapError(Exception):
    """Raised when a file cannot be watched or reloaded."""


@dataclass
class _WatchInfo:
    last_modified: int
    checksum: str
    reload_count: int = 0
    last_reload: float | None = None


def _extension(path: Path) -> str | None:
    stem, dot, ext = path.name.rpartition(".")
    if not dot or not stem:
        return None
    return ext


def _checksum(content: str) -> str:
    return hashlib.blake2b(content.encode("utf-8"), digest_size=8).hexdigest()


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


class HotSwapper:
    """Keeps track of watched files and runs reload handlers for queued ones.

    A reload handler is called with the path being reloaded and signals failure
    by raising HotSwapError.
    """

    def __init__(
        self,
        config: HotSwapConfig | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.config = config if config is not None else HotSwapConfig()
        self._clock = clock if clock is not None else time.monotonic
        self._watched: dict[Path, _WatchInfo] = {}
        self._queue: list[Path] = []
        self._state_cache: dict[str, str] = {}
        self._handlers: list[Callable[[Path], None]] = []

    def watch_file(self, path: str | Path) -> None:
        """Start watching ``path``; files with an unwatched extension are ignored."""
        if not self.config.enabled:
            return
        path = Path(path)
        ext = _extension(path)
        if ext is not None and ext not in self.config.watch_extensions:
            return
        try:
            modified = path.stat().st_mtime_ns
        except OSError as exc:
            raise HotSwapError(f"Failed to get file metadata: {exc}") from exc
        try:
            content = _read(path)
        except (OSError, UnicodeDecodeError) as exc:
            raise HotSwapError(f"Failed to read file: {exc}") from exc
        self._watched[path] = _WatchInfo(last_modified=modified, checksum=_checksum(content))

    def unwatch_file(self, path: str | Path) -> None:
        self._watched.pop(Path(path), None)

    def check_for_changes(self) -> list[Path]:
        """Watched files that are newer on disk and whose content really changed."""
        if not self.config.enabled:
            return []
        changed: list[Path] = []
        for path, info in self._watched.items():
            try:
                modified = path.stat().st_mtime_ns
                if modified <= info.last_modified:
                    continue
                checksum = _checksum(_read(path))
            except (OSError, UnicodeDecodeError):
                continue
            if checksum != info.checksum:
                info.last_modified = modified
                info.checksum = checksum
                changed.append(path)
        return changed

    def queue_reload(self, path: str | Path) -> None:
        path = Path(path)
        if path not in self._queue:
            self._queue.append(path)

    def process_reload_queue(self) -> list[ReloadResult]:
        """Reload every queued file, emptying the queue."""
        paths, self._queue = self._queue, []
        results: list[ReloadResult] = []
        for path in paths:
            error: str | None = None
            try:
                self._reload_file(path)
            except HotSwapError as exc:
                error = str(exc)
            results.append(
                ReloadResult(
                    path=path,
                    success=error is None,
                    error=error,
                    timestamp=datetime.now(timezone.utc),
                )
            )
        return results

    def _reload_file(self, path: Path) -> None:
        info = self._watched.get(path)
        if info is not None:
            if info.reload_count >= self.config.max_reload_attempts:
                raise HotSwapError("Max reload attempts exceeded")
            now = self._clock()
            if info.last_reload is not None:
                elapsed_ms = (now - info.last_reload) * 1000
                if elapsed_ms < self.config.reload_delay_ms:
                    raise HotSwapError("Reload too soon")
            info.reload_count += 1
            info.last_reload = now
        if self.config.preserve_state:
            self._state_cache[str(path)] = _STATE_PLACEHOLDER
        for handler in self._handlers:
            handler(path)

    def add_reload_handler(self, handler: Callable[[Path], None]) -> None:
        self._handlers.append(handler)

    @property
    def enabled(self) -> bool:
        return self.config.enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self.config.enabled = value

    @property
    def watched_files(self) -> list[Path]:
        return list(self._watched)

    def clear_watched_files(self) -> None:
        self._watched.clear()