"""Helpers for resolving FTB Quests directory locations."""
from __future__ import annotations

from pathlib import Path

QUESTS_SUBDIR = Path("config") / "ftbquests" / "quests"
QUEST_FILE_NAME = "data.snbt"
CHAPTER_GROUPS_FILE_NAME = "chapter_groups.snbt"
CHAPTERS_DIR_NAME = "chapters"
REWARD_TABLES_DIR_NAME = "reward_tables"


def get_quests_path(base_path: Path | str) -> Path:
    """Return the quests directory for either an instance root or a quests directory."""
    base = Path(base_path)
    if (base / QUEST_FILE_NAME).exists():
        return base
    nested = base / QUESTS_SUBDIR
    if (nested / QUEST_FILE_NAME).exists():
        return nested
    return base


def list_snbt_files(directory: Path) -> list[Path]:
    """Return the SNBT files of a directory sorted by file name, or nothing if it is absent."""
    if not directory.is_dir():
        return []
    return sorted(path for path in directory.iterdir() if path.suffix == ".snbt" and path.is_file())
