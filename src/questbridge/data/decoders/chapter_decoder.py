"""Decoders for chapter documents and the chapter groups document."""
from __future__ import annotations

from typing import Any, Dict, List

from questbridge.data.errors import DataValidationError
from questbridge.domain.defs import (
    ChapterDef,
    ChapterGroupDef,
    Dependencies,
    ImageDef,
    LegacyDependencies,
    QuestNodeDef,
    ResolvedDependencies,
)

from .base import DecoderBase
from .reward_decoder import RewardDecoder
from .task_decoder import TaskDecoder

_QUEST_SHAPES = ("circle", "square", "pentagon", "hexagon", "gear")
_DEPENDENCY_REQUIREMENTS = ("all_completed", "one_completed", "all_started", "one_started")


class ChapterDecoder(DecoderBase):
    """Decodes a chapter document together with its quests, tasks and rewards."""

    def __init__(
        self,
        *,
        task_decoder: TaskDecoder | None = None,
        reward_decoder: RewardDecoder | None = None,
    ) -> None:
        self._task_decoder = task_decoder or TaskDecoder()
        self._reward_decoder = reward_decoder or RewardDecoder()

    def decode(self, value: object, source: str) -> ChapterDef:
        mapping = self._require_mapping(value, source)
        chapter_id = self._require_str(mapping.get("id"), f"{source}.id")
        context = f"chapter '{chapter_id}'"
        quests = [
            self._decode_quest(entry, f"{context} quests[{index}]")
            for index, entry in enumerate(self._optional_list(mapping.get("quests"), f"{context}.quests"))
        ]
        images = [
            self._decode_image(entry, f"{context} images[{index}]")
            for index, entry in enumerate(self._optional_list(mapping.get("images"), f"{context}.images"))
        ]
        return ChapterDef(
            id=chapter_id,
            title=self._optional_str(mapping.get("title"), f"{context}.title") or chapter_id,
            quests=tuple(quests),
            images=tuple(images),
            group=self._optional_str(mapping.get("group"), f"{context}.group") or None,
            order_index=self._optional_int(mapping.get("order_index"), f"{context}.order_index"),
            filename=self._optional_str(mapping.get("filename"), f"{context}.filename"),
            subtitle=self._str_tuple(mapping.get("subtitle"), f"{context}.subtitle"),
            always_invisible=self._flag(mapping.get("always_invisible"), f"{context}.always_invisible"),
            default_quest_shape=self._shape(mapping.get("default_quest_shape"), f"{context}.default_quest_shape"),
        )

    def _decode_quest(self, value: object, context: str) -> QuestNodeDef:
        mapping = self._require_mapping(value, context)
        quest_id = self._require_str(mapping.get("id"), f"{context}.id")
        context = f"{context} '{quest_id}'"
        tasks = [
            self._task_decoder.decode(entry, f"{context}.tasks[{index}]")
            for index, entry in enumerate(self._optional_list(mapping.get("tasks"), f"{context}.tasks"))
        ]
        rewards = [
            self._reward_decoder.decode(entry, f"{context}.rewards[{index}]")
            for index, entry in enumerate(self._optional_list(mapping.get("rewards"), f"{context}.rewards"))
        ]
        description = mapping.get("description")
        requirement = self._optional_str(mapping.get("dependency_requirement"), f"{context}.dependency_requirement")
        if requirement is not None and requirement not in _DEPENDENCY_REQUIREMENTS:
            raise DataValidationError(
                f"{context}.dependency_requirement must be one of {', '.join(_DEPENDENCY_REQUIREMENTS)}."
            )
        size = self._optional_number(mapping.get("size"), f"{context}.size")
        return QuestNodeDef(
            id=quest_id,
            x=self._require_number(mapping.get("x"), f"{context}.x"),
            y=self._require_number(mapping.get("y"), f"{context}.y"),
            dependencies=self._decode_dependencies(mapping.get("dependencies"), f"{context}.dependencies"),
            tasks=tuple(tasks),
            rewards=tuple(rewards),
            title=self._optional_str(mapping.get("title"), f"{context}.title"),
            icon=self._optional_item(mapping.get("icon"), f"{context}.icon"),
            tags=self._str_tuple(mapping.get("tags"), f"{context}.tags"),
            shape=self._shape(mapping.get("shape"), f"{context}.shape"),
            subtitle=self._optional_str(mapping.get("subtitle"), f"{context}.subtitle"),
            description=None if description is None else self._str_tuple(description, f"{context}.description"),
            hide=self._flag(mapping.get("hide"), f"{context}.hide"),
            dependency_requirement=requirement or "all_completed",  # type: ignore[arg-type]
            min_required_dependencies=self._optional_int(
                mapping.get("min_required_dependencies"), f"{context}.min_required_dependencies"
            ),
            optional=self._flag(mapping.get("optional"), f"{context}.optional"),
            size=None if size is None else float(size),
        )

    def _decode_dependencies(self, value: object, context: str) -> Dependencies:
        entries = self._optional_list(value, context)
        if entries and all(isinstance(entry, int) and not isinstance(entry, bool) for entry in entries):
            return LegacyDependencies(ids=tuple(entries))
        if all(isinstance(entry, str) for entry in entries):
            return ResolvedDependencies(ids=tuple(entries))
        raise DataValidationError(f"{context} must hold only numeric ids or only string ids.")

    def _decode_image(self, value: object, context: str) -> ImageDef:
        mapping = self._require_mapping(value, context)
        width = self._optional_number(mapping.get("width"), f"{context}.width")
        height = self._optional_number(mapping.get("height"), f"{context}.height")
        rotation = self._optional_number(mapping.get("rotation"), f"{context}.rotation")
        return ImageDef(
            image=self._require_str(mapping.get("image"), f"{context}.image"),
            x=self._require_number(mapping.get("x"), f"{context}.x"),
            y=self._require_number(mapping.get("y"), f"{context}.y"),
            width=1.0 if width is None else width,
            height=1.0 if height is None else height,
            rotation=0.0 if rotation is None else rotation,
            dependency=self._optional_str(mapping.get("dependency"), f"{context}.dependency"),
        )

    def _shape(self, value: object, context: str) -> str | None:
        shape = self._optional_str(value, context)
        # Empty string means "inherit from the chapter or quest file".
        if not shape:
            return None
        if shape not in _QUEST_SHAPES:
            raise DataValidationError(f"{context} must be one of {', '.join(_QUEST_SHAPES)}.")
        return shape


class ChapterGroupsDecoder(DecoderBase):
    """Decodes chapter_groups.snbt into groups keyed by id."""

    def decode(self, value: object, source: str = "chapter_groups") -> Dict[str, ChapterGroupDef]:
        mapping = self._require_mapping(value, source)
        groups: Dict[str, ChapterGroupDef] = {}
        entries: List[Any] = self._optional_list(mapping.get("chapter_groups"), f"{source}.chapter_groups")
        for index, entry in enumerate(entries):
            context = f"{source}.chapter_groups[{index}]"
            group_map = self._require_mapping(entry, context)
            group_id = self._require_str(group_map.get("id"), f"{context}.id")
            groups[group_id] = ChapterGroupDef(
                id=group_id,
                title=self._optional_str(group_map.get("title"), f"{context}.title"),
            )
        return groups
