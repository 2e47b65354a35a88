from pathlib import Path

import pytest

from jadio.file_system import FileSystem


def test_workspace_starts_unset():
    assert FileSystem().workspace is None


def test_set_workspace(tmp_path):
    fs = FileSystem()
    fs.workspace = tmp_path
    assert fs.workspace == tmp_path


def test_set_missing_workspace_raises(tmp_path):
    fs = FileSystem()
    with pytest.raises(FileNotFoundError, match="Directory not found"):
        fs.workspace = tmp_path / "missing"
    assert fs.workspace is None


def test_set_file_as_workspace_raises(tmp_path):
    target = tmp_path / "f.txt"
    target.write_text("x")
    with pytest.raises(FileNotFoundError):
        FileSystem().workspace = target


def test_list_directory_orders_directories_first(tmp_path):
    (tmp_path / "b.txt").write_text("bb")
    (tmp_path / "A.txt").write_text("a")
    (tmp_path / "zdir").mkdir()
    (tmp_path / "Cdir").mkdir()
    entries = FileSystem().list_directory(tmp_path)
    assert [e.name for e in entries] == ["Cdir", "zdir", "A.txt", "b.txt"]
    assert [e.is_directory for e in entries] == [True, True, False, False]
    by_name = {e.name: e for e in entries}
    assert by_name["b.txt"].size == len("bb")
    assert by_name["b.txt"].path == tmp_path / "b.txt"
    assert by_name["b.txt"].modified is not None


def test_list_missing_directory_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileSystem().list_directory(tmp_path / "missing")


def test_write_read_round_trip(tmp_path):
    fs = FileSystem()
    target = tmp_path / "doc.md"
    content = "line one\r\nline two\n"
    fs.write_file(target, content)
    assert fs.read_file(target) == content


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileSystem().read_file(tmp_path / "missing.txt")


def test_create_directory_nested(tmp_path):
    fs = FileSystem()
    nested = tmp_path / "a" / "b" / "c"
    fs.create_directory(nested)
    fs.create_directory(nested)
    assert nested.is_dir()


def test_delete_file_and_directory(tmp_path):
    fs = FileSystem()
    target = tmp_path / "f.txt"
    target.write_text("x")
    folder = tmp_path / "folder"
    (folder / "inner").mkdir(parents=True)
    (folder / "inner" / "g.txt").write_text("y")
    fs.delete_file(target)
    fs.delete_file(folder)
    assert not fs.file_exists(target)
    assert not fs.file_exists(folder)


def test_delete_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileSystem().delete_file(tmp_path / "missing")


def test_rename_file(tmp_path):
    fs = FileSystem()
    source = tmp_path / "old.txt"
    source.write_text("data")
    target = tmp_path / "new.txt"
    fs.rename_file(source, target)
    assert not source.exists()
    assert target.read_text() == "data"


@pytest.mark.parametrize(
    "name, expected",
    [("main.RS", "rs"), ("archive.tar.gz", "gz"), ("Makefile", None), (".gitignore", None)],
)
def test_file_extension(name, expected):
    assert FileSystem().file_extension(Path(name)) == expected


@pytest.mark.parametrize(
    "name, expected",
    [("lib.rs", True), ("README.MD", True), ("config.yml", True), ("photo.png", False), ("Makefile", False)],
)
def test_is_text_file(name, expected):
    assert FileSystem().is_text_file(name) is expected


def test_relative_path(tmp_path):
    fs = FileSystem()
    assert fs.relative_path(tmp_path / "x") is None
    fs.workspace = tmp_path
    assert fs.relative_path(tmp_path / "src" / "main.rs") == Path("src") / "main.rs"
    assert fs.relative_path(tmp_path.parent / "elsewhere") is None


def test_create_file_truncates(tmp_path):
    fs = FileSystem()
    target = tmp_path / "new.txt"
    fs.create_file(target)
    assert fs.read_file(target) == ""
    target.write_text("content")
    fs.create_file(target)
    assert fs.read_file(target) == ""