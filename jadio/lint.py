"""Runs the project's linter over a whole project directory."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

_LINT_COMMAND = ("cargo", "clippy", "--all-targets", "--all-features")


@dataclass
class LintResult:
    success: bool
    stdout: str
    stderr: str


def run_lint(project_dir: str | Path) -> LintResult:
    """Run clippy in ``project_dir``; raises OSError if it cannot be started."""
    completed = subprocess.run(list(_LINT_COMMAND), cwd=project_dir, capture_output=True)
    return LintResult(
        success=completed.returncode == 0,
        stdout=completed.stdout.decode("utf-8", errors="replace"),
        stderr=completed.stderr.decode("utf-8", errors="replace"),
    )