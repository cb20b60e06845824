from pathlib import Path

import pytest

from questbridge.data.errors import DataLoadError
from questbridge.data.snbt_loader import decode_buffer, load_snbt, parse_snbt

FTB_CHAPTER = """{
\tdefault_hide_dependency_lines: false
\tfilename: "getting_started"
\tid: "0F1A2B3C4D5E6F70"
\torder_index: 0
\tquests: [
\t\t{
\t\t\tdependencies: ["1A2B3C4D5E6F7081"]
\t\t\tid: "2B3C4D5E6F708192"
\t\t\ttasks: [{
\t\t\t\tcount: 16L
\t\t\t\tid: "3C4D5E6F708192A3"
\t\t\t\titem: { Count: 1b, id: "minecraft:oak_log" }
\t\t\t\ttype: "item"
\t\t\t}]
\t\t\tx: -1.5d
\t\t\ty: 2.0d
\t\t}
\t]
\ttitle: "Getting Started"
}
"""


def test_parse_newline_separated_compound() -> None:
    tree = parse_snbt(FTB_CHAPTER)

    assert tree["id"] == "0F1A2B3C4D5E6F70"
    assert tree["default_hide_dependency_lines"] is False
    quest = tree["quests"][0]
    assert quest["x"] == -1.5 and isinstance(quest["x"], float)
    task = quest["tasks"][0]
    assert task["count"] == 16 and isinstance(task["count"], int)
    assert task["item"] == {"Count": 1, "id": "minecraft:oak_log"}


def test_parse_comma_separated_and_typed_arrays() -> None:
    tree = parse_snbt('{a: 1, b: [I; 1, 2, 3], c: [L; 10L, 11L], d: "x", "quoted key": 2.5f}')

    assert tree == {"a": 1, "b": [1, 2, 3], "c": [10, 11], "d": "x", "quoted key": 2.5}


def test_parse_string_escapes_and_single_quotes() -> None:
    tree = parse_snbt("{a: \"say \\\"hi\\\"\\n\", b: 'it\\'s'}")

    assert tree == {"a": 'say "hi"\n', "b": "it's"}


def test_parse_unicode_escapes() -> None:
    assert parse_snbt('{a: "caf\\u00e9", b: "\\u00A7aGreen"}') == {"a": "café", "b": "§aGreen"}


@pytest.mark.parametrize("text", ['{a: "\\u00g1"}', '{a: "\\u12"}', '{a: "\\u'])
def test_parse_rejects_invalid_unicode_escape(text: str) -> None:
    with pytest.raises(DataLoadError, match="invalid unicode escape"):
        parse_snbt(text)


def test_parse_bare_words_stay_strings() -> None:
    assert parse_snbt("[circle, true, 1e3, 7s, -3]") == ["circle", True, 1000.0, 7, -3]


def test_parse_error_reports_line_and_column() -> None:
    with pytest.raises(DataLoadError, match="line 2, column 5"):
        parse_snbt("{\n\ta: }", source="broken.snbt")


def test_parse_rejects_unterminated_input() -> None:
    with pytest.raises(DataLoadError):
        parse_snbt('{a: "never closed}')
    with pytest.raises(DataLoadError):
        parse_snbt("{a: [1, 2")


def test_parse_rejects_trailing_content() -> None:
    with pytest.raises(DataLoadError, match="trailing"):
        parse_snbt("{} {}")


def test_decode_buffer_rejects_invalid_utf8() -> None:
    with pytest.raises(DataLoadError, match="not valid UTF-8"):
        decode_buffer(b"\xff\xfe{", "bad.snbt")


def test_load_snbt_missing_file(tmp_path: Path) -> None:
    with pytest.raises(DataLoadError, match="not found"):
        load_snbt(tmp_path / "missing.snbt")


def test_load_snbt_reads_file(tmp_path: Path) -> None:
    path = tmp_path / "data.snbt"
    path.write_text('{ title: "Quest Book" }\n', encoding="utf-8")

    assert load_snbt(path) == {"title": "Quest Book"}
