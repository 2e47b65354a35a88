"""Line-based scan of source files for top-level items."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Union


@dataclass(frozen=True)
class FunctionItem:
    signature: str


@dataclass(frozen=True)
class StructItem:
    name: str


@dataclass(frozen=True)
class EnumItem:
    name: str


@dataclass(frozen=True)
class OtherItem:
    line: str


ParsedItem = Union[FunctionItem, StructItem, EnumItem, OtherItem]


@dataclass
class ParseResult:
    file: str
    items: list[ParsedItem] = field(default_factory=list)


def _second_word(line: str) -> str:
    words = line.split()
    return words[1] if len(words) > 1 else ""


def _classify(trimmed: str) -> ParsedItem:
    if trimmed.startswith(("fn ", "pub fn ")):
        return FunctionItem(trimmed.split("{")[0].strip())
    if trimmed.startswith(("struct ", "pub struct ")):
        return StructItem(_second_word(trimmed))
    if trimmed.startswith(("enum ", "pub enum ")):
        return EnumItem(_second_word(trimmed))
    return OtherItem(trimmed)


def parse_file(path: str | Path) -> ParseResult:
    """Classify every non-blank line as a function, struct, enum or other item."""
    content = Path(path).read_text(encoding="utf-8")
    items = [
        _classify(trimmed)
        for trimmed in (line.rstrip("\r").lstrip() for line in content.split("\n"))
        if trimmed
    ]
    return ParseResult(file=str(path), items=items)