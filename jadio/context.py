"""Tracks open files, recent files and the symbols found in them."""

from __future__ import annotations

import re
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum, auto
from pathlib import Path
from typing import Callable

_MAX_RECENT_FILES = 20
_GLOBAL_SCOPE = "global"


class SymbolKind(Enum):
    FUNCTION = auto()
    CLASS = auto()
    METHOD = auto()
    VARIABLE = auto()
    CONSTANT = auto()
    INTERFACE = auto()
    ENUM = auto()
    MODULE = auto()


@dataclass
class Symbol:
    """A named definition found in a file; line and column count from 1."""

    name: str
    kind: SymbolKind
    line: int
    column: int
    scope: str = _GLOBAL_SCOPE


@dataclass
class FileContext:
    path: Path
    content: str
    language: str
    last_modified: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    symbols: list[Symbol] = field(default_factory=list)


def _lines(content: str) -> list[str]:
    """Split on newlines, dropping one trailing empty line and any carriage returns."""
    if not content:
        return []
    parts = content.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _cut_at_first(name: str, stops: tuple[str, ...]) -> str:
    for stop in stops:
        if stop in name:
            return name[: name.index(stop)]
    return name


def _rust_function_name(line: str) -> str | None:
    parts = line.split()
    if len(parts) < 2 or parts[0] != "fn":
        return None
    return _cut_at_first(parts[1], ("(", "<"))


def _rust_struct_name(line: str) -> str | None:
    parts = line.split()
    if len(parts) < 2 or parts[0] != "struct":
        return None
    return _cut_at_first(parts[1], ("<", "{"))


def _rust_impl_name(line: str) -> str | None:
    after = line[len("impl"):].strip()
    if " for " in after:
        after = after.split(" for ")[1]
    tokens = after.split()
    if not tokens:
        return None
    return f"impl {tokens[0].split('{')[0].strip()}"


def _python_function_name(line: str) -> str | None:
    return line[len("def"):].strip().split("(")[0].strip()


def _python_class_name(line: str) -> str | None:
    return re.split(r"[(:]", line[len("class"):].strip())[0].strip()


_Rule = tuple[str, str, SymbolKind, Callable[[str], "str | None"]]

_RULES: dict[str, tuple[_Rule, ...]] = {
    "rust": (
        ("fn ", "fn", SymbolKind.FUNCTION, _rust_function_name),
        ("struct ", "struct", SymbolKind.CLASS, _rust_struct_name),
        ("impl ", "impl", SymbolKind.CLASS, _rust_impl_name),
    ),
    "python": (
        ("def ", "def", SymbolKind.FUNCTION, _python_function_name),
        ("class ", "class", SymbolKind.CLASS, _python_class_name),
    ),
}


def extract_symbols(content: str, language: str) -> list[Symbol]:
    """Find top-level definitions line by line; only "rust" and "python" are known."""
    rules = _RULES.get(language, ())
    symbols: list[Symbol] = []
    for number, line in enumerate(_lines(content), start=1):
        trimmed = line.strip()
        for prefix, keyword, kind, extract in rules:
            if not trimmed.startswith(prefix):
                continue
            name = extract(trimmed)
            if name is not None:
                column = max(line.find(keyword), 0) + 1
                symbols.append(Symbol(name, kind, number, column))
            break
    return symbols


class ContextManager:
    """Remembers the current file and project, open files and recently used files."""

    def __init__(self) -> None:
        self._current_file: str | None = None
        self._current_project: str | None = None
        self._open_files: dict[str, FileContext] = {}
        self._recent_files: deque[str] = deque()
        self.max_recent_files = _MAX_RECENT_FILES

    def set_current_file(self, file_path: str) -> None:
        """Make ``file_path`` current and put it at the front of the recent files if new."""
        self._current_file = file_path
        if file_path not in self._recent_files:
            self._recent_files.appendleft(file_path)
            while len(self._recent_files) > self.max_recent_files:
                self._recent_files.pop()

    @property
    def current_file(self) -> str | None:
        return self._current_file

    @property
    def current_project(self) -> str | None:
        return self._current_project

    @current_project.setter
    def current_project(self, project_path: str) -> None:
        self._current_project = project_path

    def add_file_context(self, path: str, content: str, language: str) -> None:
        """Open a file, index its symbols and make it current."""
        self._open_files[path] = FileContext(
            path=Path(path),
            content=content,
            language=language,
            symbols=extract_symbols(content, language),
        )
        self.set_current_file(path)

    def update_file_content(self, path: str, content: str) -> None:
        """Replace the content of an open file and re-index it; unknown paths are ignored."""
        context = self._open_files.get(path)
        if context is None:
            return
        context.content = content
        context.last_modified = datetime.now(timezone.utc)
        context.symbols = extract_symbols(content, context.language)

    def remove_file_context(self, path: str) -> None:
        self._open_files.pop(path, None)
        if self._current_file == path:
            self._current_file = None

    def get_file_context(self, path: str) -> FileContext | None:
        return self._open_files.get(path)

    @property
    def open_files(self) -> list[str]:
        return list(self._open_files)

    @property
    def recent_files(self) -> list[str]:
        """Recently used files, most recent first."""
        return list(self._recent_files)

    def symbols_for_file(self, path: str) -> list[Symbol]:
        context = self._open_files.get(path)
        return list(context.symbols) if context is not None else []

    def search_symbols(self, query: str) -> list[tuple[str, Symbol]]:
        """(path, symbol) pairs whose name contains ``query``, ignoring case."""
        needle = query.lower()
        return [
            (path, symbol)
            for path, context in self._open_files.items()
            for symbol in context.symbols
            if needle in symbol.name.lower()
        ]