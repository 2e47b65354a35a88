"""User-configured scripts that can be run from the editor."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field


@dataclass
class ScriptConfig:
    name: str
    command: str
    args: list[str] = field(default_factory=list)
    shortcut: str | None = None


@dataclass
class ScriptRunResult:
    success: bool
    stdout: str
    stderr: str


class ScriptNotFoundError(LookupError):
    """Raised when running a script that has not been configured."""


class ScriptRunner:
    """Keeps script configurations by name and runs them."""

    def __init__(self) -> None:
        self.scripts: dict[str, ScriptConfig] = {}

    def add_script(self, config: ScriptConfig) -> None:
        """Add a script, replacing any with the same name."""
        self.scripts[config.name] = config

    def remove_script(self, name: str) -> None:
        self.scripts.pop(name, None)

    def run_script(self, name: str) -> ScriptRunResult:
        """Run a script and wait for it; raises OSError if it cannot be started."""
        config = self.scripts.get(name)
        if config is None:
            raise ScriptNotFoundError("Script not found")
        completed = subprocess.run([config.command, *config.args], capture_output=True)
        return ScriptRunResult(
            success=completed.returncode == 0,
            stdout=completed.stdout.decode("utf-8", errors="replace"),
            stderr=completed.stderr.decode("utf-8", errors="replace"),
        )

    def list_scripts(self) -> list[ScriptConfig]:
        return list(self.scripts.values())