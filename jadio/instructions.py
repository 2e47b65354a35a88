"""A first-in, first-out queue of instructions for the agent."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class AgentInstruction:
    text: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class InstructionQueue:
    """Instructions waiting for the agent, handed out in the order they arrived."""

    def __init__(self) -> None:
        self._queue: deque[AgentInstruction] = deque()

    def add(self, text: str) -> None:
        self._queue.append(AgentInstruction(str(text)))

    def pop(self) -> AgentInstruction | None:
        """Remove and return the oldest instruction, or None if the queue is empty."""
        return self._queue.popleft() if self._queue else None

    def peek(self) -> AgentInstruction | None:
        return self._queue[0] if self._queue else None

    def clear(self) -> None:
        self._queue.clear()

    def __len__(self) -> int:
        return len(self._queue)