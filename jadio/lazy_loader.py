"""Resources that are loaded on first use and cached for a while."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")

_DEFAULT_CACHE_LIMIT = 100 * 1024 * 1024
_FILE_TTL_SECONDS = 300
_FILE = "file"
_MODEL = "model"


class LoadingStrategy(Enum):
    EAGER = auto()
    LAZY = auto()
    BACKGROUND = auto()
    SCHEDULED = auto()


@dataclass
class ModelData:
    name: str
    size: int
    loaded: bool


@dataclass
class CacheStats:
    total_resources: int
    cache_size_bytes: int
    cache_limit_bytes: int
    loading_strategies: dict[str, LoadingStrategy]


class ResourceError(Exception):
    """Raised when a resource is unknown, of the wrong kind, or fails to load."""


@dataclass
class LazyResource(Generic[T]):
    """A value produced by ``loader`` and cached, optionally for ``ttl_seconds``."""

    id: str
    loader: Callable[[], T]
    ttl_seconds: int | None = None
    clock: Callable[[], float] = time.monotonic
    cached_value: T | None = None
    last_loaded: float | None = None
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def _expired(self) -> bool:
        if self.cached_value is None:
            return True
        if self.ttl_seconds is None:
            return False
        if self.last_loaded is None:
            return True
        return int(self.clock() - self.last_loaded) > self.ttl_seconds

    def load(self) -> T:
        """Return the cached value, loading it first if absent or expired."""
        with self._lock:
            if self._expired():
                value = self.loader()
                self.cached_value = value
                self.last_loaded = self.clock()
                return value
            return self.cached_value  # type: ignore[return-value]


class LazyLoader:
    """Registry of lazily loaded files and models."""

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock if clock is not None else time.monotonic
        self.resources: dict[str, LazyResource[Any]] = {}
        self._kinds: dict[str, str] = {}
        self._strategies: dict[str, LoadingStrategy] = {}
        self._cache_limit = _DEFAULT_CACHE_LIMIT
        self._cache_size = 0

    def register_file_loader(
        self, resource_id: str, path: str | Path, strategy: LoadingStrategy
    ) -> None:
        """Register a text file, cached for five minutes."""
        file_path = Path(path)

        def load() -> str:
            try:
                return file_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                raise ResourceError(f"Failed to load file: {exc}") from exc

        self.resources[resource_id] = LazyResource(
            resource_id, load, ttl_seconds=_FILE_TTL_SECONDS, clock=self._clock
        )
        self._kinds[resource_id] = _FILE
        self._strategies[resource_id] = strategy

    def register_model_loader(self, resource_id: str, model_path: str | Path) -> None:
        """Register a model file; its description never expires."""
        path = Path(model_path)

        def load() -> ModelData:
            try:
                size = path.stat().st_size
            except OSError:
                size = 0
            return ModelData(name=path.name, size=size, loaded=True)

        self.resources[resource_id] = LazyResource(resource_id, load, clock=self._clock)
        self._kinds[resource_id] = _MODEL
        self._strategies[resource_id] = LoadingStrategy.LAZY

    def get_file(self, resource_id: str) -> str:
        resource = self.resources.get(resource_id)
        if resource is None:
            raise ResourceError(f"Resource '{resource_id}' not found")
        if self._kinds[resource_id] != _FILE:
            raise ResourceError("Resource type mismatch")
        return resource.load()

    def get_model(self, resource_id: str) -> ModelData:
        resource = self.resources.get(resource_id)
        if resource is None:
            raise ResourceError(f"Model '{resource_id}' not found")
        if self._kinds[resource_id] != _MODEL:
            raise ResourceError("Resource type mismatch")
        return resource.load()

    def preload_all(self) -> None:
        """Load every eager or background resource now, ignoring failures."""
        for resource_id in list(self.resources):
            strategy = self._strategies.get(resource_id)
            if strategy not in (LoadingStrategy.EAGER, LoadingStrategy.BACKGROUND):
                continue
            try:
                self.get_file(resource_id)
            except ResourceError:
                try:
                    self.get_model(resource_id)
                except ResourceError:
                    pass

    def invalidate(self, resource_id: str) -> None:
        """Drop the cached value so the next access reloads it."""
        resource = self.resources.get(resource_id)
        if resource is not None:
            with resource._lock:
                resource.cached_value = None

    def invalidate_all(self) -> None:
        for resource_id in list(self.resources):
            self.invalidate(resource_id)

    @property
    def cache_limit(self) -> int:
        return self._cache_limit

    @cache_limit.setter
    def cache_limit(self, limit_bytes: int) -> None:
        self._cache_limit = limit_bytes

    @property
    def cache_stats(self) -> CacheStats:
        return CacheStats(
            total_resources=len(self.resources),
            cache_size_bytes=self._cache_size,
            cache_limit_bytes=self._cache_limit,
            loading_strategies=dict(self._strategies),
        )

    def cleanup_expired(self) -> None:
        """Drop cached values loaded more than twice their TTL ago."""
        now = self._clock()
        for resource in self.resources.values():
            if resource.ttl_seconds is None or resource.last_loaded is None:
                continue
            if int(now - resource.last_loaded) > resource.ttl_seconds * 2:
                with resource._lock:
                    resource.cached_value = None