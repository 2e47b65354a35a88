"""Request handling and connection bookkeeping for the code agent server."""

from __future__ import annotations

import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Callable

METHOD_NOT_FOUND = -32601

_COMPLETIONS = (
    "// TODO: Implement this function",
    "return result;",
    "console.log('Debug:', ",
)

_SUGGESTIONS = (
    (
        "Add documentation",
        "This function lacks documentation",
        "add_docs",
    ),
    (
        "Extract method",
        "This code block could be extracted into a separate method",
        "extract_method",
    ),
)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _count_lines(text: str) -> int:
    """Number of lines, where a final newline does not start a new line."""
    if not text:
        return 0
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return len(parts)


@dataclass
class AgentServerConfig:
    host: str = "127.0.0.1"
    port: int = 8765
    max_connections: int = 100
    timeout_seconds: int = 300
    enable_cors: bool = True
    allowed_origins: list[str] = field(default_factory=lambda: ["*"])


@dataclass
class ClientConnection:
    id: str
    address: Any
    connected_at: datetime
    last_activity: datetime


@dataclass
class AgentRequest:
    id: str
    method: str
    params: Any = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AgentRequest:
        """Build a request from decoded JSON; raises ValueError if it is malformed."""
        for name in ("id", "method", "params"):
            if name not in data:
                raise ValueError(f"missing field `{name}`")
        for name in ("id", "method"):
            if not isinstance(data[name], str):
                raise ValueError(f"field `{name}` must be a string")
        return cls(id=data["id"], method=data["method"], params=data["params"])


@dataclass
class AgentErrorInfo:
    code: int
    message: str
    data: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "data": self.data}


@dataclass
class AgentResponse:
    id: str
    result: Any = None
    error: AgentErrorInfo | None = None

    def to_dict(self) -> dict[str, Any]:
        """The response as a JSON-ready dictionary."""
        return {
            "id": self.id,
            "result": self.result,
            "error": self.error.to_dict() if self.error is not None else None,
        }


class ServerStateError(RuntimeError):
    """Raised when starting a running server or stopping a stopped one."""


def _string_param(params: dict[str, Any], name: str, default: str) -> str:
    value = params.get(name)
    return value if isinstance(value, str) else default


def _unsigned_param(params: dict[str, Any], name: str, default: int) -> int:
    value = params.get(name)
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return value
    return default


class AgentServer:
    """Answers agent requests and tracks client connections."""

    def __init__(
        self,
        config: AgentServerConfig | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.config = config if config is not None else AgentServerConfig()
        self._clock = clock if clock is not None else _utc_now
        self._running = False
        self._connections: list[ClientConnection] = []
        self._lock = threading.Lock()

    def start(self) -> None:
        with self._lock:
            if self._running:
                raise ServerStateError("Server already running")
            self._running = True
        print(f"Agent server started on {self.config.host}:{self.config.port}")

    def stop(self) -> None:
        """Stop the server and drop every connection."""
        with self._lock:
            if not self._running:
                raise ServerStateError("Server not running")
            self._running = False
            self._connections.clear()
        print("Agent server stopped")

    @property
    def running(self) -> bool:
        with self._lock:
            return self._running

    def handle_request(self, request: AgentRequest) -> AgentResponse:
        """Dispatch a request to its method; unknown methods get an error response."""
        handler = {
            "complete": self._handle_completion,
            "analyze": self._handle_analysis,
            "suggest": self._handle_suggestion,
            "refactor": self._handle_refactor,
        }.get(request.method)
        if handler is None:
            return AgentResponse(
                id=request.id,
                error=AgentErrorInfo(code=METHOD_NOT_FOUND, message="Method not found"),
            )
        params = request.params if isinstance(request.params, dict) else {}
        return AgentResponse(id=request.id, result=handler(params))

    @staticmethod
    def _handle_completion(params: dict[str, Any]) -> dict[str, Any]:
        return {
            "completions": list(_COMPLETIONS),
            "cursor": _unsigned_param(params, "cursor", 0),
        }

    @staticmethod
    def _handle_analysis(params: dict[str, Any]) -> dict[str, Any]:
        code = _string_param(params, "code", "")
        return {
            "issues": [
                {
                    "type": "warning",
                    "message": "Unused variable 'x'",
                    "line": 5,
                    "column": 10,
                }
            ],
            "metrics": {
                "complexity": 5,
                "lines": _count_lines(code),
                "functions": 3,
            },
            "suggestions": [
                "Consider adding error handling",
                "This function could be simplified",
            ],
        }

    @staticmethod
    def _handle_suggestion(params: dict[str, Any]) -> dict[str, Any]:
        """Refactoring suggestions as title, description and action records."""
        return {
            "suggestions": [
                {"title": title, "description": description, "action": action}
                for title, description, action in _SUGGESTIONS
            ]
        }

    @staticmethod
    def _handle_refactor(params: dict[str, Any]) -> dict[str, Any]:
        code = _string_param(params, "code", "")
        kind = _string_param(params, "type", "general")
        if kind == "extract_function":
            refactored = (
                f"function extractedFunction() {{\n  {code}\n}}\n\nextractedFunction();"
            )
        elif kind == "rename_variable":
            refactored = code.replace("oldName", "newName")
        else:
            refactored = code
        return {"refactored_code": refactored, "changes": 1}

    def add_connection(self, address: Any) -> str:
        """Record a new client and return its id; the oldest goes beyond the limit."""
        now = self._clock()
        connection = ClientConnection(
            id=str(uuid.uuid4()), address=address, connected_at=now, last_activity=now
        )
        with self._lock:
            self._connections.append(connection)
            if len(self._connections) > self.config.max_connections:
                self._connections.pop(0)
        return connection.id

    def remove_connection(self, connection_id: str) -> None:
        with self._lock:
            self._connections = [c for c in self._connections if c.id != connection_id]

    @property
    def connections(self) -> list[ClientConnection]:
        """Copies of the current connections."""
        with self._lock:
            return [
                ClientConnection(c.id, c.address, c.connected_at, c.last_activity)
                for c in self._connections
            ]

    def update_activity(self, connection_id: str) -> None:
        with self._lock:
            for connection in self._connections:
                if connection.id == connection_id:
                    connection.last_activity = self._clock()
                    break

    def cleanup_inactive_connections(self) -> None:
        """Drop connections idle for the configured timeout or longer."""
        timeout = timedelta(seconds=self.config.timeout_seconds)
        now = self._clock()
        with self._lock:
            self._connections = [
                c for c in self._connections if now - c.last_activity < timeout
            ]