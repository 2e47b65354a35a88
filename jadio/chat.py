"""Chat sessions between the user and the code agent."""

from __future__ import annotations

import uuid
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


class MessageRole(Enum):
    USER = "User"
    ASSISTANT = "Assistant"
    SYSTEM = "System"


@dataclass
class MessageMetadata:
    file_context: str | None = None
    line_range: tuple[int, int] | None = None
    language: str | None = None
    tokens_used: int | None = None
    processing_time: float | None = None


@dataclass
class ChatMessage:
    role: MessageRole
    content: str
    id: str = field(default_factory=_new_id)
    timestamp: datetime = field(default_factory=_now)
    metadata: MessageMetadata = field(default_factory=MessageMetadata)


@dataclass
class ChatSession:
    """A conversation; the oldest messages drop off beyond ``max_messages``."""

    id: str = field(default_factory=_new_id)
    messages: deque[ChatMessage] = field(default_factory=deque)
    created_at: datetime = field(default_factory=_now)
    last_activity: datetime = field(default_factory=_now)
    max_messages: int = 1000


def _display(moment: datetime) -> str:
    return moment.strftime("%Y-%m-%d %H:%M:%S.%f") + " UTC"


class ChatManager:
    """Keeps chat sessions, one of which is active."""

    def __init__(self) -> None:
        self.sessions: list[ChatSession] = []
        self._active_index: int | None = None
        self._system_prompt: str | None = None
        self.create_session()

    def create_session(self) -> ChatSession:
        """Start a new active session, seeded with the system prompt if one is set."""
        session = ChatSession()
        self.sessions.append(session)
        self._active_index = len(self.sessions) - 1
        if self._system_prompt is not None:
            self.add_system_message(self._system_prompt)
        return session

    @property
    def active_session(self) -> ChatSession | None:
        if self._active_index is None:
            return None
        return self.sessions[self._active_index]

    def add_user_message(self, content: str) -> ChatMessage | None:
        return self._add_message(MessageRole.USER, content)

    def add_assistant_message(self, content: str) -> ChatMessage | None:
        return self._add_message(MessageRole.ASSISTANT, content)

    def add_system_message(self, content: str) -> ChatMessage | None:
        return self._add_message(MessageRole.SYSTEM, content)

    def _add_message(self, role: MessageRole, content: str) -> ChatMessage | None:
        session = self.active_session
        if session is None:
            return None
        message = ChatMessage(role=role, content=content)
        session.messages.append(message)
        session.last_activity = _now()
        while len(session.messages) > session.max_messages:
            session.messages.popleft()
        return session.messages[-1] if session.messages else None

    def conversation_context(self, max_messages: int) -> list[ChatMessage]:
        """The last ``max_messages`` messages of the active session, oldest first."""
        session = self.active_session
        if session is None:
            return []
        start = max(len(session.messages) - max_messages, 0)
        return list(session.messages)[start:]

    def clear_current_session(self) -> None:
        """Empty the active session, keeping the system prompt."""
        session = self.active_session
        if session is None:
            return
        session.messages.clear()
        session.last_activity = _now()
        if self._system_prompt is not None:
            self.add_system_message(self._system_prompt)

    @property
    def system_prompt(self) -> str | None:
        return self._system_prompt

    @system_prompt.setter
    def system_prompt(self, prompt: str) -> None:
        self._system_prompt = prompt

    def export_session(self, index: int) -> str | None:
        """Render session ``index`` as plain text, or None if there is no such session."""
        if not 0 <= index < len(self.sessions):
            return None
        session = self.sessions[index]
        parts = [
            f"Chat Session: {session.id}\n",
            f"Created: {_display(session.created_at)}\n",
            f"Last Activity: {_display(session.last_activity)}\n\n",
        ]
        parts.extend(
            f"[{m.timestamp:%Y-%m-%d %H:%M:%S}] {m.role.value}: {m.content}\n\n"
            for m in session.messages
        )
        return "".join(parts)

    def search_messages(self, query: str) -> list[ChatMessage]:
        """Messages in any session whose content contains ``query``, ignoring case."""
        needle = query.lower()
        return [
            message
            for session in self.sessions
            for message in session.messages
            if needle in message.content.lower()
        ]