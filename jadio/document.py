"""Extracts doc comments from source files and sketches documentation."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

_DOC_PREFIXES = ("///", "/**")
_LINE_DOC = "///"


@dataclass
class DocumentationResult:
    file: str
    doc_comments: list[str] = field(default_factory=list)


def _lines(content: str) -> list[str]:
    return [line[:-1] if line.endswith("\r") else line for line in content.split("\n")]


def extract_doc_comments(path: str | Path) -> DocumentationResult:
    """Every line that starts, after indentation, with a doc comment marker."""
    content = Path(path).read_text(encoding="utf-8")
    comments = [
        trimmed
        for trimmed in (line.lstrip() for line in _lines(content))
        if trimmed.startswith(_DOC_PREFIXES)
    ]
    return DocumentationResult(file=str(path), doc_comments=comments)


def generate_markdown_stub(path: str | Path) -> str:
    """A Markdown page holding the text of every ``///`` comment in the file."""
    content = Path(path).read_text(encoding="utf-8")
    parts = [f"# Documentation for {path}\n\n"]
    for line in _lines(content):
        body = line.lstrip()
        if not body.startswith(_LINE_DOC):
            continue
        while body.startswith(_LINE_DOC):
            body = body[len(_LINE_DOC):]
        parts.append(body.strip() + "\n")
    return "".join(parts)


def suggest_template(name: str, kind: str) -> str:
    """A documented skeleton for a "function", a "struct" or anything else."""
    if kind == "function":
        return f"/// {name}: Describe what this function does.\npub fn {name}() {{}}"
    if kind == "struct":
        return f"/// {name}: Describe the purpose of this struct.\npub struct {name} {{}}"
    return f"/// {name}: Add documentation."