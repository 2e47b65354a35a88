"""Plain-text search through every file under a directory."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator


@dataclass
class SearchResult:
    """A line containing the query; ``match_indices`` are (start, end) character offsets."""

    file: Path
    line_number: int
    line: str
    match_indices: list[tuple[int, int]] = field(default_factory=list)


def _lines(content: str) -> list[str]:
    if not content:
        return []
    parts = content.split("\n")
    if parts[-1] == "":
        parts.pop()
        return [p[:-1] if p.endswith("\r") else p for p in parts]
    last = parts.pop()
    return [p[:-1] if p.endswith("\r") else p for p in parts] + [last]


def _files(root: Path) -> Iterator[Path]:
    """Regular files under ``root`` (or ``root`` itself), not following symlinks."""
    if root.is_symlink():
        return
    if root.is_file():
        yield root
        return
    for directory, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for name in sorted(filenames):
            path = Path(directory) / name
            if not path.is_symlink() and path.is_file():
                yield path


def _matches(line: str, query: str) -> list[tuple[int, int]]:
    found: list[tuple[int, int]] = []
    start = line.find(query)
    while start != -1:
        end = start + len(query)
        found.append((start, end))
        start = line.find(query, end)
    return found


def search(root: str | Path, query: str) -> list[SearchResult]:
    """Every line of every readable text file under ``root`` that contains ``query``."""
    if not query:
        raise ValueError("query must not be empty")
    results: list[SearchResult] = []
    for path in _files(Path(root)):
        try:
            with open(path, encoding="utf-8", newline="") as handle:
                content = handle.read()
        except (OSError, UnicodeDecodeError):
            continue
        for number, line in enumerate(_lines(content), start=1):
            indices = _matches(line, query)
            if indices:
                results.append(SearchResult(path, number, line, indices))
    return results