import os
from pathlib import Path

import pytest

from jadio.hot_swapper import HotSwapConfig, HotSwapError, HotSwapper


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    path = tmp_path / "module.py"
    path.write_text("x = 1\n", encoding="utf-8")
    return path


def _bump_mtime(path: Path) -> None:
    stat = path.stat()
    later = stat.st_mtime_ns + 5_000_000_000
    os.utime(path, ns=(later, later))


def test_watch_and_detect_content_change(source_file):
    swapper = HotSwapper()
    swapper.watch_file(source_file)
    assert swapper.watched_files == [source_file]
    source_file.write_text("x = 2\n", encoding="utf-8")
    _bump_mtime(source_file)
    assert swapper.check_for_changes() == [source_file]
    assert swapper.check_for_changes() == []


def test_touch_without_content_change_is_ignored(source_file):
    swapper = HotSwapper()
    swapper.watch_file(source_file)
    _bump_mtime(source_file)
    assert swapper.check_for_changes() == []


def test_unwatched_extension_is_skipped(tmp_path):
    notes = tmp_path / "notes.txt"
    notes.write_text("hello", encoding="utf-8")
    swapper = HotSwapper()
    swapper.watch_file(notes)
    assert swapper.watched_files == []


def test_missing_file_raises(tmp_path):
    swapper = HotSwapper()
    with pytest.raises(HotSwapError):
        swapper.watch_file(tmp_path / "absent.py")


def test_disabled_swapper_does_nothing(source_file):
    swapper = HotSwapper()
    swapper.enabled = False
    assert swapper.enabled is False
    swapper.watch_file(source_file)
    assert swapper.watched_files == []
    assert swapper.check_for_changes() == []


def test_unwatch_and_clear(source_file, tmp_path):
    other = tmp_path / "other.rs"
    other.write_text("fn main() {}", encoding="utf-8")
    swapper = HotSwapper()
    swapper.watch_file(source_file)
    swapper.watch_file(other)
    swapper.unwatch_file(source_file)
    assert swapper.watched_files == [other]
    swapper.clear_watched_files()
    assert swapper.watched_files == []


def test_reload_runs_handlers_once_per_queued_path(source_file):
    calls = []
    swapper = HotSwapper()
    swapper.watch_file(source_file)
    swapper.add_reload_handler(calls.append)
    swapper.queue_reload(source_file)
    swapper.queue_reload(source_file)
    results = swapper.process_reload_queue()
    assert calls == [source_file]
    assert len(results) == 1
    assert results[0].path == source_file
    assert results[0].success is True
    assert results[0].error is None
    assert swapper.process_reload_queue() == []


def test_handler_failure_is_reported(source_file):
    def failing(path):
        raise HotSwapError("boom")

    swapper = HotSwapper()
    swapper.add_reload_handler(failing)
    swapper.queue_reload(source_file)
    [result] = swapper.process_reload_queue()
    assert result.success is False
    assert result.error == "boom"


def test_max_reload_attempts(source_file):
    config = HotSwapConfig(max_reload_attempts=1, reload_delay_ms=0)
    swapper = HotSwapper(config)
    swapper.watch_file(source_file)
    swapper.queue_reload(source_file)
    assert swapper.process_reload_queue()[0].success is True
    swapper.queue_reload(source_file)
    [result] = swapper.process_reload_queue()
    assert result.success is False
    assert result.error == "Max reload attempts exceeded"


def test_reload_too_soon_then_allowed_after_delay(source_file):
    clock = FakeClock()
    swapper = HotSwapper(clock=clock)
    swapper.watch_file(source_file)
    swapper.queue_reload(source_file)
    assert swapper.process_reload_queue()[0].success is True
    swapper.queue_reload(source_file)
    [result] = swapper.process_reload_queue()
    assert result.error == "Reload too soon"
    clock.now += 1.0
    swapper.queue_reload(source_file)
    assert swapper.process_reload_queue()[0].success is True