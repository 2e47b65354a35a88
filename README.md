# jadio

The backend of a small code editor, as a plain Python library. It has no
user interface of its own. It holds the state and the logic that an editor
front end drives:

- **Projects**: `jadio.project_manager` works out what kind of project a directory holds (Rust, Python, JavaScript, TypeScript, HTML or mixed). It can also create a new project with starter files and keep a list of recent projects.
- **Files**: `jadio.file_system` lists directories with folders first and does the usual read, write, rename and delete work. `jadio.editor_files` saves a file only when its content has changed, and keeps timestamped backups.
- **Editing**: `jadio.code_editor` manages tabs. `jadio.syntax_highlighting` splits a line into styled tokens.
- **Search**: `jadio.search` finds every match of a string in every file under a directory.
- **Scripts and servers**: `jadio.script_runner` runs named commands. `jadio.server` starts, stops and watches long-running processes.
- **Assistant**: the assistant modules are `jadio.chat`, `jadio.agent`, `jadio.autoprompt`, `jadio.context`, `jadio.code_agent_system`, `jadio.agent_server`, `jadio.model_loader`, `jadio.files_changed`, `jadio.hot_swapper`, `jadio.lazy_loader`, `jadio.instructions` and `jadio.memory`. Together they cover chat sessions, prompt templates, symbol extraction, change tracking and model configuration.
- **Source tools**: the tools for Rust sources are `jadio.parse`, `jadio.document`, `jadio.docstring_audit` and `jadio.lint`.

## Installation

```bash
pip install .
```

## Examples

Highlight a line of code:

```python
from jadio.syntax_highlighting import SyntaxHighlighter

for token in SyntaxHighlighter().highlight_line('let x = "hi"; // note'):
    print(token.token_type, repr(token.text))
```

Detect the kind of project in a directory and open it:

```python
from jadio.project_manager import ProjectManager, detect_project_type

print(detect_project_type("."))
manager = ProjectManager()
manager.open_project(".")
print(manager.current_project.name)
```

Fill a prompt template:

```python
from jadio.autoprompt import AutoPromptEngine

engine = AutoPromptEngine()
prompt = engine.generate_prompt(
    "security_review", {"language": "python", "code": "eval(x)"}
)
```

List the top-level items in a Rust source file:

```python
from jadio.parse import parse_file

result = parse_file("lib.rs")
for item in result.items:
    print(item)
```

## Tests

```bash
pip install ".[test]"
pytest
```