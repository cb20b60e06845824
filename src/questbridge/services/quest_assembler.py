"""Assembly of converted chapters into the Heracles quest mapping."""
from __future__ import annotations

import logging
from typing import Dict, Iterable, Mapping

from questbridge.core.types import TargetPayload
from questbridge.domain.defs import ChapterDef, ChapterGroupDef, QuestNodeDef
from questbridge.domain.identifiers import normalize_dependencies
from questbridge.services.reward_converter import convert_reward
from questbridge.services.reward_table_resolver import RewardTableIndex
from questbridge.services.task_converter import convert_task

logger = logging.getLogger(__name__)


class QuestAssembler:
    """Folds chapters into a mapping of quest id to Heracles quest record."""

    def __init__(self, *, groups: Mapping[str, ChapterGroupDef], reward_tables: RewardTableIndex) -> None:
        self._groups = groups
        self._reward_tables = reward_tables

    def assemble(self, chapters: Iterable[ChapterDef]) -> Dict[str, TargetPayload]:
        output: Dict[str, TargetPayload] = {}
        for chapter in chapters:
            self._lookup_group(chapter)
            logger.debug("Converting chapter '%s' (%d quests)", chapter.title, len(chapter.quests))
            for quest in chapter.quests:
                output[quest.id] = self.convert_quest(quest, chapter)
        return output

    def convert_quest(self, quest: QuestNodeDef, chapter: ChapterDef) -> TargetPayload:
        display: TargetPayload = {}
        if quest.title is not None:
            display["title"] = quest.title
        if quest.description is not None:
            display["description"] = list(quest.description)
        if quest.subtitle:
            display["subtitle"] = {"text": quest.subtitle}
        display["groups"] = {chapter.title: {"position": {"x": quest.x, "y": quest.y}}}
        return {
            "settings": {"hidden": quest.hide},
            "dependencies": normalize_dependencies(quest.dependencies),
            "tasks": {task.id: convert_task(task, quest_id=quest.id) for task in quest.tasks},
            "rewards": {reward.id: convert_reward(reward, self._reward_tables) for reward in quest.rewards},
            "display": display,
        }

    def _lookup_group(self, chapter: ChapterDef) -> ChapterGroupDef | None:
        # Heracles has no chapter-group concept yet; the group is resolved but not emitted.
        if chapter.group is None:
            return None
        group = self._groups.get(chapter.group)
        if group is None:
            logger.warning("Chapter '%s' references unknown chapter group '%s'", chapter.id, chapter.group)
        return group
