from __future__ import annotations

from pathlib import Path

import pytest

from questbridge.data import paths
from questbridge.data.errors import DataLoadError
from questbridge.data.quest_source import QuestSourceBundle


def _make_quests_dir(root: Path) -> Path:
    quests_dir = root / "config" / "ftbquests" / "quests"
    (quests_dir / "chapters").mkdir(parents=True)
    (quests_dir / "reward_tables").mkdir()
    (quests_dir / "data.snbt").write_text('{ title: "Book" }', encoding="utf-8")
    (quests_dir / "chapter_groups.snbt").write_text("{ chapter_groups: [] }", encoding="utf-8")
    (quests_dir / "chapters" / "b_second.snbt").write_text('{ id: "C1", quests: [] }', encoding="utf-8")
    (quests_dir / "chapters" / "a_first.snbt").write_text('{ id: "C0", quests: [] }', encoding="utf-8")
    (quests_dir / "chapters" / "notes.txt").write_text("ignored", encoding="utf-8")
    (quests_dir / "reward_tables" / "loot.snbt").write_text('{ id: "T0", rewards: [] }', encoding="utf-8")
    return quests_dir


def test_get_quests_path_accepts_instance_root(tmp_path: Path) -> None:
    quests_dir = _make_quests_dir(tmp_path)

    assert paths.get_quests_path(tmp_path) == quests_dir
    assert paths.get_quests_path(quests_dir) == quests_dir


def test_list_snbt_files_missing_directory(tmp_path: Path) -> None:
    assert paths.list_snbt_files(tmp_path / "nope") == []


def test_bundle_from_directory_reads_sorted_buffers(tmp_path: Path) -> None:
    _make_quests_dir(tmp_path)

    bundle = QuestSourceBundle.from_directory(tmp_path)

    assert bundle.file_data == b'{ title: "Book" }'
    assert bundle.chapter_names == ["a_first.snbt", "b_second.snbt"]
    assert bundle.chapters[0] == b'{ id: "C0", quests: [] }'
    assert bundle.reward_table_names == ["loot.snbt"]
    assert bundle.chapter_source(1) == "b_second.snbt"
    assert bundle.reward_table_source(4) == "reward_tables[4]"


def test_bundle_from_directory_requires_quest_file(tmp_path: Path) -> None:
    with pytest.raises(DataLoadError, match="data.snbt"):
        QuestSourceBundle.from_directory(tmp_path)
