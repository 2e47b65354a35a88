"""Saving editor buffers to disk and keeping timestamped backups."""

from __future__ import annotations

import os
import shutil
from datetime import datetime
from pathlib import Path

_BACKUP_STAMP = "%Y%m%d_%H%M%S"


def save_to_file(path: str | Path, content: str) -> None:
    """Write ``content`` to ``path`` and flush it to the disk."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(content)
        handle.flush()
        os.fsync(handle.fileno())


def save_if_changed(path: str | Path, content: str) -> bool:
    """Write ``content`` unless the file already holds it; True if written."""
    try:
        existing = Path(path).read_text(encoding="utf-8", errors="strict")
    except (OSError, UnicodeDecodeError):
        existing = None
    else:
        with open(path, encoding="utf-8", newline="") as handle:
            existing = handle.read()
    if existing == content:
        return False
    save_to_file(path, content)
    return True


def backup_file(file_path: str | Path, backup_dir: str | Path) -> Path:
    """Copy a file into ``backup_dir`` under a local-time-stamped name."""
    source = Path(file_path)
    target_dir = Path(backup_dir)
    target_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime(_BACKUP_STAMP)
    target = target_dir / f"{stamp}_{source.name}"
    shutil.copyfile(source, target)
    return target