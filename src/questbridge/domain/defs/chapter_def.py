"""Chapter, chapter group and quest node definitions."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Tuple, Union

from .common_def import ItemRef, QuestShape
from .reward_def import RewardDef
from .task_def import TaskDef

DependencyRequirement = Literal["all_completed", "one_completed", "all_started", "one_started"]


@dataclass(slots=True)
class LegacyDependencies:
    """Dependencies stored as numeric quest ids by older quest books."""

    ids: Tuple[int, ...]


@dataclass(slots=True)
class ResolvedDependencies:
    """Dependencies already stored as hexadecimal id strings."""

    ids: Tuple[str, ...]


Dependencies = Union[LegacyDependencies, ResolvedDependencies]


@dataclass(slots=True)
class ChapterGroupDef:
    id: str
    title: str | None = None


@dataclass(slots=True)
class ImageDef:
    image: str
    x: float
    y: float
    width: float = 1.0
    height: float = 1.0
    rotation: float = 0.0
    dependency: str | None = None


@dataclass(slots=True)
class QuestNodeDef:
    id: str
    x: float
    y: float
    dependencies: Dependencies
    tasks: Tuple[TaskDef, ...]
    rewards: Tuple[RewardDef, ...]
    title: str | None = None
    icon: ItemRef | None = None
    tags: Tuple[str, ...] = ()
    shape: QuestShape | None = None
    subtitle: str | None = None
    description: Tuple[str, ...] | None = None
    hide: bool = False
    dependency_requirement: DependencyRequirement = "all_completed"
    min_required_dependencies: int | None = None
    optional: bool = False
    size: float | None = None


@dataclass(slots=True)
class ChapterDef:
    id: str
    title: str
    quests: Tuple[QuestNodeDef, ...]
    images: Tuple[ImageDef, ...] = ()
    group: str | None = None
    order_index: int | None = None
    filename: str | None = None
    subtitle: Tuple[str, ...] = ()
    always_invisible: bool = False
    default_quest_shape: QuestShape | None = None
