from pathlib import Path

from jadio.context import ContextManager, Symbol, SymbolKind, extract_symbols


def test_rust_function_symbol():
    symbols = extract_symbols("fn main() {\n}\n", "rust")
    assert symbols == [Symbol("main", SymbolKind.FUNCTION, 1, 1, "global")]


def test_rust_impl_uses_type_after_for():
    symbols = extract_symbols("impl Display for Foo {\n}", "rust")
    assert [s.name for s in symbols] == ["impl Foo"]
    assert symbols[0].kind is SymbolKind.CLASS


def test_rust_pub_fn_is_not_picked_up():
    assert extract_symbols("pub fn hidden() {}", "rust") == []


def test_python_symbols_and_columns():
    content = "class Widget(Base):\n    def run(self):\n        pass\n"
    symbols = extract_symbols(content, "python")
    assert [(s.name, s.kind) for s in symbols] == [
        ("Widget", SymbolKind.CLASS),
        ("run", SymbolKind.FUNCTION),
    ]
    run_line = content.splitlines()[1]
    assert symbols[1].column == run_line.index("def") + 1
    assert symbols[1].line == symbols[0].line + 1


def test_python_class_without_parentheses():
    assert [s.name for s in extract_symbols("class Plain:\n", "python")] == ["Plain"]


def test_unknown_language_has_no_symbols():
    assert extract_symbols("fn main() {}\ndef f():", "go") == []


def test_add_file_context_indexes_and_sets_current():
    manager = ContextManager()
    manager.add_file_context("src/main.rs", "fn main() {}", "rust")
    assert manager.current_file == "src/main.rs"
    assert manager.open_files == ["src/main.rs"]
    assert manager.recent_files == ["src/main.rs"]
    context = manager.get_file_context("src/main.rs")
    assert context.path == Path("src/main.rs")
    assert [s.name for s in manager.symbols_for_file("src/main.rs")] == ["main"]


def test_update_file_content_reindexes():
    manager = ContextManager()
    manager.add_file_context("a.py", "def old():\n", "python")
    before = manager.get_file_context("a.py").last_modified
    manager.update_file_content("a.py", "def new():\n")
    context = manager.get_file_context("a.py")
    assert context.content == "def new():\n"
    assert [s.name for s in context.symbols] == ["new"]
    assert context.last_modified >= before


def test_update_unknown_file_is_ignored():
    manager = ContextManager()
    manager.update_file_content("missing.py", "def f():")
    assert manager.get_file_context("missing.py") is None
    assert manager.open_files == []


def test_remove_file_context_clears_current_file():
    manager = ContextManager()
    manager.add_file_context("a.rs", "", "rust")
    manager.remove_file_context("a.rs")
    assert manager.current_file is None
    assert manager.open_files == []
    assert manager.symbols_for_file("a.rs") == []
    assert manager.recent_files == ["a.rs"]


def test_recent_files_newest_first_without_duplicates():
    manager = ContextManager()
    for name in ("a", "b", "a", "c"):
        manager.set_current_file(name)
    assert manager.recent_files == ["c", "b", "a"]
    assert manager.current_file == "c"


def test_recent_files_are_capped():
    manager = ContextManager()
    names = [f"file{i}.rs" for i in range(manager.max_recent_files + 5)]
    for name in names:
        manager.set_current_file(name)
    recent = manager.recent_files
    assert len(recent) == manager.max_recent_files
    assert recent[0] == names[-1]
    assert names[0] not in recent


def test_current_project_setter():
    manager = ContextManager()
    assert manager.current_project is None
    manager.current_project = "/work/proj"
    assert manager.current_project == "/work/proj"


def test_search_symbols_ignores_case():
    manager = ContextManager()
    manager.add_file_context("a.py", "def LoadData():\ndef save():\n", "python")
    manager.add_file_context("b.rs", "fn load_more() {}", "rust")
    found = [(path, s.name) for path, s in manager.search_symbols("LOAD")]
    assert found == [("a.py", "LoadData"), ("b.rs", "load_more")]