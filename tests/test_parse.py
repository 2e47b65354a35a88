from pathlib import Path

import pytest

from jadio.parse import EnumItem, FunctionItem, OtherItem, StructItem, parse_file

SAMPLE = """
        pub struct Foo {}
        struct Bar {}
        pub enum Baz { A, B }
        fn private_func() {}
        pub fn public_func(x: i32) -> i32 { x }
        // Not a function
        let x = 5;
    """


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "test_parse_input.rs"
    path.write_text(SAMPLE, encoding="utf-8")
    return path


def test_parse_tool_finds_struct_enum_and_function(sample_file):
    result = parse_file(sample_file)
    kinds = {type(item) for item in result.items}
    assert StructItem in kinds
    assert EnumItem in kinds
    assert FunctionItem in kinds


def test_parse_items_in_order(sample_file):
    result = parse_file(sample_file)
    assert result.file == str(sample_file)
    assert result.items == [
        StructItem("struct"),
        StructItem("Bar"),
        EnumItem("enum"),
        FunctionItem("fn private_func()"),
        FunctionItem("pub fn public_func(x: i32) -> i32"),
        OtherItem("// Not a function"),
        OtherItem("let x = 5;"),
    ]


def test_blank_file_has_no_items(tmp_path: Path):
    path = tmp_path / "blank.rs"
    path.write_text("\n   \n\n", encoding="utf-8")
    assert parse_file(path).items == []


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        parse_file(tmp_path / "absent.rs")