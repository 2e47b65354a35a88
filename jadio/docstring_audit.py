"""Finds functions in source files that lack a doc comment."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

_DOC_PREFIXES = ("///", "/**")
_PASS_THROUGH_PREFIXES = ("#", "pub", "fn ")


@dataclass
class DocstringAuditResult:
    file: str
    missing_docstrings: list[str] = field(default_factory=list)
    total_functions: int = 0
    documented_functions: int = 0


def _lines(content: str) -> list[str]:
    if not content:
        return []
    parts = content.split("\n")
    if parts[-1] == "":
        parts.pop()
        return [p[:-1] if p.endswith("\r") else p for p in parts]
    last = parts.pop()
    return [p[:-1] if p.endswith("\r") else p for p in parts] + [last]


def _has_doc_above(content: str, line: str) -> bool:
    """Walk back from the first occurrence of ``line`` looking for a doc comment."""
    before = content[: max(content.find(line), 0)]
    for previous in reversed(_lines(before)):
        trimmed = previous.lstrip()
        if not trimmed:
            continue
        if trimmed.startswith(_DOC_PREFIXES):
            return True
        if not trimmed.startswith(_PASS_THROUGH_PREFIXES):
            return False
    return False


def audit_file(path: str | Path) -> DocstringAuditResult:
    """Count private ``fn`` items and list the signatures without doc comments."""
    content = Path(path).read_text(encoding="utf-8")
    result = DocstringAuditResult(file=str(path))
    for line in _lines(content):
        trimmed = line.lstrip()
        if not trimmed.startswith("fn "):
            continue
        result.total_functions += 1
        if _has_doc_above(content, line):
            result.documented_functions += 1
        else:
            result.missing_docstrings.append(trimmed.split("{")[0].strip())
    return result


def suggest_docstring(signature: str) -> str:
    return f"/// TODO: Document this function\n{signature}"