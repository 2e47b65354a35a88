"""Starting, stopping and watching external server processes."""

from __future__ import annotations

import os
import subprocess
from enum import Enum, auto
from typing import IO, Sequence

_READ_SIZE = 4096


class ServerStatus(Enum):
    STOPPED = auto()
    STARTING = auto()
    RUNNING = auto()
    ERROR = auto()


class ServerNotFoundError(LookupError):
    """Raised when a server name is not known to the manager."""


def _read_chunk(stream: IO[bytes] | None) -> str:
    if stream is None:
        return ""
    try:
        data = os.read(stream.fileno(), _READ_SIZE)
    except (OSError, ValueError):
        return ""
    return data.decode("utf-8", errors="replace")


class ManagedServer:
    """One server command; ``error`` holds the reason when the status is ERROR."""

    def __init__(self, name: str, command: str, args: Sequence[str] = ()) -> None:
        self.name = name
        self.command = command
        self.args = list(args)
        self.status = ServerStatus.STOPPED
        self.error: str | None = None
        self.process: subprocess.Popen[bytes] | None = None

    def start(self) -> None:
        """Start the process with piped output; does nothing if already running."""
        if self.status is ServerStatus.RUNNING:
            return
        self.status = ServerStatus.STARTING
        try:
            self.process = subprocess.Popen(
                [self.command, *self.args],
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            )
        except OSError as exc:
            self.status = ServerStatus.ERROR
            self.error = str(exc)
            raise
        self.error = None
        self.status = ServerStatus.RUNNING

    def stop(self) -> None:
        """Kill the process if there is one."""
        process = self.process
        if process is None:
            return
        try:
            process.kill()
            process.wait()
        except OSError:
            pass
        for stream in (process.stdout, process.stderr):
            if stream is not None:
                stream.close()
        self.process = None
        self.status = ServerStatus.STOPPED

    def is_running(self) -> bool:
        """Whether the process is alive; an exited process is forgotten."""
        if self.process is None:
            return False
        try:
            code = self.process.poll()
        except OSError:
            return False
        if code is not None:
            self.status = ServerStatus.STOPPED
            self.process = None
            return False
        return True

    def read_output(self) -> tuple[str, str]:
        """Read one chunk each of stdout and stderr; blocks until data or end of output."""
        if self.process is None:
            return "", ""
        return _read_chunk(self.process.stdout), _read_chunk(self.process.stderr)


class ServerManager:
    """Servers known to the IDE, by name."""

    def __init__(self) -> None:
        self.servers: dict[str, ManagedServer] = {}

    def add_server(self, name: str, command: str, args: Sequence[str] = ()) -> None:
        """Add a server, replacing any with the same name."""
        self.servers[name] = ManagedServer(name, command, args)

    def _get(self, name: str) -> ManagedServer:
        server = self.servers.get(name)
        if server is None:
            raise ServerNotFoundError("Server not found")
        return server

    def start_server(self, name: str) -> None:
        self._get(name).start()

    def stop_server(self, name: str) -> None:
        self._get(name).stop()

    def status(self, name: str) -> ServerStatus | None:
        """The server's status, refreshed from its process; None if unknown."""
        server = self.servers.get(name)
        if server is None:
            return None
        if server.is_running():
            return ServerStatus.RUNNING
        return server.status

    def read_output(self, name: str) -> tuple[str, str]:
        return self._get(name).read_output()