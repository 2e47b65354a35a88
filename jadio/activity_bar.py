"""State of the activity bars on either side of the editor."""

from __future__ import annotations

from enum import Enum, auto
from typing import Callable


class ActivityBarItem(Enum):
    """Views reachable from the left activity bar."""

    EXPLORER = auto()
    SEARCH = auto()
    SOURCE_CONTROL = auto()
    DEBUG = auto()
    EXTENSIONS = auto()
    SETTINGS = auto()


class ActivityBarLeft:
    """Tracks which left-hand view is active and fires callbacks on switch."""

    def __init__(self) -> None:
        self._states: dict[ActivityBarItem, bool] = {item: False for item in ActivityBarItem}
        self._states[ActivityBarItem.EXPLORER] = True
        self._active: ActivityBarItem | None = ActivityBarItem.EXPLORER
        self._callbacks: dict[ActivityBarItem, Callable[[], None]] = {}

    def set_active(self, item: ActivityBarItem) -> None:
        """Make ``item`` the active view and run its callback, if any."""
        if self._active is not None:
            self._states[self._active] = False
        self._states[item] = True
        self._active = item
        callback = self._callbacks.get(item)
        if callback is not None:
            callback()

    @property
    def active(self) -> ActivityBarItem | None:
        return self._active

    def is_active(self, item: ActivityBarItem) -> bool:
        return self._states.get(item, False)

    def register_callback(self, item: ActivityBarItem, callback: Callable[[], None]) -> None:
        """Call ``callback`` whenever ``item`` becomes active."""
        self._callbacks[item] = callback


class CodeAgentActivityItem(Enum):
    """Views reachable from the right-hand (code agent) activity bar."""

    ASSISTANT = auto()
    CODE_ANALYSIS = auto()
    SUGGESTIONS = auto()
    CODE_METRICS = auto()
    CODE_SEARCH = auto()


class ActivityBarRight:
    """Tracks the active code-agent view; switching is blocked while AI is off."""

    def __init__(self) -> None:
        self._states: dict[CodeAgentActivityItem, bool] = {
            item: False for item in CodeAgentActivityItem
        }
        self._states[CodeAgentActivityItem.ASSISTANT] = True
        self._active: CodeAgentActivityItem | None = CodeAgentActivityItem.ASSISTANT
        self._ai_enabled = True

    def set_active(self, item: CodeAgentActivityItem) -> None:
        """Make ``item`` active; does nothing while AI is disabled."""
        if not self._ai_enabled:
            return
        if self._active is not None:
            self._states[self._active] = False
        self._states[item] = True
        self._active = item

    @property
    def active(self) -> CodeAgentActivityItem | None:
        return self._active

    def is_active(self, item: CodeAgentActivityItem) -> bool:
        return self._states.get(item, False)

    @property
    def ai_enabled(self) -> bool:
        return self._ai_enabled

    @ai_enabled.setter
    def ai_enabled(self, enabled: bool) -> None:
        self._ai_enabled = enabled
        if not enabled:
            self._active = None
            for item in self._states:
                self._states[item] = False