"""Raw byte-buffer inputs for a single conversion run."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from . import paths
from .snbt_loader import read_buffer


@dataclass(slots=True)
class QuestSourceBundle:
    """The four logical inputs of a conversion: quest file, groups, chapters, reward tables."""

    file_data: bytes
    chapter_groups: bytes
    chapters: List[bytes] = field(default_factory=list)
    reward_tables: List[bytes] = field(default_factory=list)
    chapter_names: List[str] = field(default_factory=list)
    reward_table_names: List[str] = field(default_factory=list)

    @classmethod
    def from_directory(cls, base_path: Path | str) -> "QuestSourceBundle":
        """Read every quest buffer from an FTB quests directory (or instance root)."""
        quests_dir = paths.get_quests_path(base_path)
        chapter_files = paths.list_snbt_files(quests_dir / paths.CHAPTERS_DIR_NAME)
        table_files = paths.list_snbt_files(quests_dir / paths.REWARD_TABLES_DIR_NAME)
        return cls(
            file_data=read_buffer(quests_dir / paths.QUEST_FILE_NAME),
            chapter_groups=read_buffer(quests_dir / paths.CHAPTER_GROUPS_FILE_NAME),
            chapters=[read_buffer(path) for path in chapter_files],
            reward_tables=[read_buffer(path) for path in table_files],
            chapter_names=[path.name for path in chapter_files],
            reward_table_names=[path.name for path in table_files],
        )

    def chapter_source(self, index: int) -> str:
        if index < len(self.chapter_names):
            return self.chapter_names[index]
        return f"chapters[{index}]"

    def reward_table_source(self, index: int) -> str:
        if index < len(self.reward_table_names):
            return self.reward_table_names[index]
        return f"reward_tables[{index}]"
