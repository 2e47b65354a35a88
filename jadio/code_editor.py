"""Editor tabs: open files, edit, highlight and save."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from jadio.editor_files import save_if_changed
from jadio.syntax_highlighting import HighlightedToken, SyntaxHighlighter


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


@dataclass
class EditorTab:
    file_path: Path | None = None
    content: str = ""
    is_dirty: bool = False
    highlighted: list[list[HighlightedToken]] = field(default_factory=list)


class CodeEditor:
    """A set of tabs, one of which is current."""

    def __init__(self, highlighter: SyntaxHighlighter | None = None) -> None:
        self.tabs: list[EditorTab] = []
        self.current_tab = 0
        self.highlighter = highlighter if highlighter is not None else SyntaxHighlighter()

    def _highlight(self, content: str) -> list[list[HighlightedToken]]:
        return [self.highlighter.highlight_line(line) for line in _lines(content)]

    def _current(self) -> EditorTab | None:
        if 0 <= self.current_tab < len(self.tabs):
            return self.tabs[self.current_tab]
        return None

    def open_file(self, path: str | Path) -> None:
        """Open ``path`` in a new tab and make it current."""
        path = Path(path)
        with open(path, encoding="utf-8", newline="") as handle:
            content = handle.read()
        self.tabs.append(EditorTab(path, content, False, self._highlight(content)))
        self.current_tab = len(self.tabs) - 1

    def new_tab(self) -> None:
        """Add an empty, unsaved tab and make it current."""
        self.tabs.append(EditorTab())
        self.current_tab = len(self.tabs) - 1

    def edit_current(self, new_content: str) -> None:
        """Replace the content of the current tab and mark it dirty."""
        tab = self._current()
        if tab is None:
            return
        tab.content = new_content
        tab.is_dirty = True
        tab.highlighted = self._highlight(new_content)

    def save_current(self) -> bool:
        """Write the current tab to its file if it differs; True if written."""
        tab = self._current()
        if tab is None or tab.file_path is None:
            return False
        changed = save_if_changed(tab.file_path, tab.content)
        if changed:
            tab.is_dirty = False
        return changed

    @property
    def current_content(self) -> str | None:
        tab = self._current()
        return tab.content if tab is not None else None

    @property
    def current_highlighted(self) -> list[list[HighlightedToken]] | None:
        tab = self._current()
        return tab.highlighted if tab is not None else None