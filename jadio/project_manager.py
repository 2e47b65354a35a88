"""Project detection, scaffolding and the list of recently opened projects."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum, auto
from pathlib import Path

_MAX_RECENT_PROJECTS = 10


class ProjectType(Enum):
    RUST = auto()
    PYTHON = auto()
    JAVASCRIPT = auto()
    TYPESCRIPT = auto()
    HTML = auto()
    MIXED = auto()
    UNKNOWN = auto()


class LineEndings(Enum):
    UNIX = "\n"
    WINDOWS = "\r\n"
    MAC = "\r"


def _platform_line_endings() -> LineEndings:
    return LineEndings.WINDOWS if os.name == "nt" else LineEndings.UNIX


@dataclass
class ProjectSettings:
    auto_save: bool = True
    format_on_save: bool = True
    line_endings: LineEndings = field(default_factory=_platform_line_endings)
    tab_size: int = 4
    use_spaces: bool = True
    enable_linting: bool = True
    enable_ai_assistance: bool = True


@dataclass
class Project:
    name: str
    path: Path
    project_type: ProjectType
    last_opened: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    settings: ProjectSettings = field(default_factory=ProjectSettings)


class ProjectError(Exception):
    """Raised when a project cannot be opened or created."""


def _extension(path: Path) -> str | None:
    stem, dot, ext = path.name.rpartition(".")
    if not dot or not stem:
        return None
    return ext


def _write(path: Path, text: str) -> None:
    path.write_bytes(text.encode("utf-8"))


_MARKER_FILES = (
    (("Cargo.toml",), ProjectType.RUST),
)

_EXTENSION_TYPES = {
    "rs": ProjectType.RUST,
    "py": ProjectType.PYTHON,
    "js": ProjectType.JAVASCRIPT,
    "ts": ProjectType.TYPESCRIPT,
    "html": ProjectType.HTML,
}

# Order in which a dominant extension decides the project type.
_EXTENSION_PRIORITY = (
    ProjectType.RUST,
    ProjectType.PYTHON,
    ProjectType.TYPESCRIPT,
    ProjectType.JAVASCRIPT,
    ProjectType.HTML,
)


def detect_project_type(path: str | Path) -> ProjectType:
    """Guess a directory's project type from marker files, then file extensions."""
    path = Path(path)
    if (path / "Cargo.toml").exists():
        return ProjectType.RUST
    if (path / "package.json").exists():
        if (path / "tsconfig.json").exists():
            return ProjectType.TYPESCRIPT
        return ProjectType.JAVASCRIPT
    if any((path / name).exists() for name in ("requirements.txt", "setup.py", "pyproject.toml")):
        return ProjectType.PYTHON
    if (path / "index.html").exists():
        return ProjectType.HTML

    try:
        entries = list(path.iterdir())
    except OSError:
        return ProjectType.UNKNOWN

    counts = {kind: 0 for kind in _EXTENSION_PRIORITY}
    total = 0
    for entry in entries:
        ext = _extension(entry)
        if ext is None:
            continue
        total += 1
        kind = _EXTENSION_TYPES.get(ext)
        if kind is not None:
            counts[kind] += 1

    if total > 0:
        threshold = total // 3
        for kind in _EXTENSION_PRIORITY:
            if counts[kind] >= threshold:
                return kind
        if sum(counts.values()) > 1:
            return ProjectType.MIXED
    return ProjectType.UNKNOWN


def _cargo_toml(name: str) -> str:
    crate = name.replace("-", "_")
    return (
        "[package]\n"
        f'name = "{crate}"\n'
        'version = "0.1.0"\n'
        'edition = "2021"\n'
        "\n"
        "[dependencies]\n"
    )


_RUST_MAIN = 'fn main() {\n    println!("Hello, world!");\n}'

_PYTHON_MAIN = (
    "#!/usr/bin/env python3\n\ndef main():\n    print(\"Hello, world!\")\n\n"
    "if __name__ == \"__main__\":\n    main()\n"
)


def _python_readme(name: str) -> str:
    return (
        f"# {name}\n\nA Python project.\n\n## Setup\n\n```bash\n"
        "pip install -r requirements.txt\npython main.py\n```\n"
    )


def _js_package_json(name: str) -> str:
    return (
        "{\n"
        f'  "name": "{name}",\n'
        '  "version": "1.0.0",\n'
        '  "description": "",\n'
        '  "main": "index.js",\n'
        '  "scripts": {\n'
        '    "start": "node index.js"\n'
        "  },\n"
        '  "dependencies": {}\n'
        "}\n"
    )


def _ts_package_json(name: str) -> str:
    return (
        "{\n"
        f'  "name": "{name}",\n'
        '  "version": "1.0.0",\n'
        '  "description": "",\n'
        '  "main": "dist/index.js",\n'
        '  "scripts": {\n'
        '    "build": "tsc",\n'
        '    "start": "node dist/index.js",\n'
        '    "dev": "tsc --watch"\n'
        "  },\n"
        '  "devDependencies": {\n'
        '    "typescript": "^4.0.0",\n'
        '    "@types/node": "^14.0.0"\n'
        "  }\n"
        "}\n"
    )


_TSCONFIG = (
    "{\n"
    '  "compilerOptions": {\n'
    '    "target": "es2020",\n'
    '    "module": "commonjs",\n'
    '    "outDir": "./dist",\n'
    '    "rootDir": "./src",\n'
    '    "strict": true,\n'
    '    "esModuleInterop": true\n'
    "  }\n"
    "}\n"
)


def _index_html(name: str) -> str:
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '    <meta charset="UTF-8">\n'
        '    <meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
        f"    <title>{name}</title>\n"
        '    <link rel="stylesheet" href="style.css">\n'
        "</head>\n"
        "<body>\n"
        f"    <h1>Welcome to {name}</h1>\n"
        "    <p>Your web project starts here!</p>\n"
        '    <script src="script.js"></script>\n'
        "</body>\n"
        "</html>\n"
    )


_STYLE_CSS = (
    "body {\n    font-family: Arial, sans-serif;\n    margin: 0;\n    padding: 20px;\n"
    "    background-color: #f0f0f0;\n}\nh1 { color: #333; text-align: center; }\n"
    "p { text-align: center; font-size: 18px; }\n"
)


def _scaffold_rust(path: Path, name: str) -> None:
    _write(path / "Cargo.toml", _cargo_toml(name))
    (path / "src").mkdir(parents=True, exist_ok=True)
    _write(path / "src" / "main.rs", _RUST_MAIN)


def _scaffold_python(path: Path, name: str) -> None:
    _write(path / "main.py", _PYTHON_MAIN)
    _write(path / "requirements.txt", "")
    _write(path / "README.md", _python_readme(name))


def _scaffold_javascript(path: Path, name: str) -> None:
    _write(path / "package.json", _js_package_json(name))
    _write(path / "index.js", "console.log('Hello, world!');\n")


def _scaffold_typescript(path: Path, name: str) -> None:
    _scaffold_javascript(path, name)
    _write(path / "package.json", _ts_package_json(name))
    _write(path / "tsconfig.json", _TSCONFIG)
    (path / "src").mkdir(parents=True, exist_ok=True)
    _write(path / "src" / "index.ts", "console.log('Hello, TypeScript world!');\n")
    try:
        (path / "index.js").unlink()
    except OSError:
        pass


def _scaffold_html(path: Path, name: str) -> None:
    _write(path / "index.html", _index_html(name))
    _write(path / "style.css", _STYLE_CSS)
    _write(path / "script.js", "console.log('Hello, web world!');\n")


def _scaffold_readme(path: Path, name: str) -> None:
    _write(path / "README.md", f"# {name}\n\nProject description here.")


_SCAFFOLDS = {
    ProjectType.RUST: _scaffold_rust,
    ProjectType.PYTHON: _scaffold_python,
    ProjectType.JAVASCRIPT: _scaffold_javascript,
    ProjectType.TYPESCRIPT: _scaffold_typescript,
    ProjectType.HTML: _scaffold_html,
}


class ProjectManager:
    """Keeps the current project, the recently opened ones and a cache by path."""

    def __init__(self) -> None:
        self._current: Project | None = None
        self._recent: list[Project] = []
        self._cache: dict[Path, Project] = {}

    def open_project(self, path: str | Path) -> None:
        """Open the directory ``path`` as the current project."""
        path = Path(path)
        if not path.is_dir():
            raise ProjectError("Invalid project path")
        project = Project(
            name=path.name,
            path=path,
            project_type=detect_project_type(path),
        )
        self._recent = [p for p in self._recent if p.path != path]
        self._recent.insert(0, project)
        del self._recent[_MAX_RECENT_PROJECTS:]
        self._current = project
        self._cache[path] = project

    def close_project(self) -> None:
        self._current = None

    @property
    def current_project(self) -> Project | None:
        return self._current

    @property
    def recent_projects(self) -> list[Project]:
        """Recently opened projects, most recent first."""
        return list(self._recent)

    def create_new_project(self, path: str | Path, name: str, project_type: ProjectType) -> None:
        """Create ``path/name`` with starter files for ``project_type`` and open it."""
        project_dir = Path(path) / name
        if project_dir.exists():
            raise ProjectError("Project directory already exists")
        project_dir.mkdir(parents=True)
        _SCAFFOLDS.get(project_type, _scaffold_readme)(project_dir, name)
        self.open_project(project_dir)

    def save_project_settings(self) -> None:
        """Store the current project, with its settings, in the cache."""
        if self._current is not None:
            self._cache[self._current.path] = self._current

    def load_project_settings(self, path: str | Path) -> ProjectSettings:
        """Settings for the project at ``path``; these are always the defaults."""
        return ProjectSettings()