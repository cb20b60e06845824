"""Quest task definitions: one dataclass per FTB task type."""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, ClassVar, Dict, Tuple, Union

from .common_def import ItemRef


class ObserveType(IntEnum):
    BLOCK = 0
    BLOCK_TAG = 1
    BLOCK_STATE = 2
    BLOCK_ENTITY = 3
    BLOCK_ENTITY_TYPE = 4
    ENTITY_TYPE = 5
    ENTITY_TYPE_TAG = 6


@dataclass(slots=True)
class CheckmarkTask:
    TAG: ClassVar[str] = "checkmark"


@dataclass(slots=True)
class ItemTask:
    TAG: ClassVar[str] = "item"

    item: ItemRef
    count: int | None = None
    consume_items: bool | None = None
    only_from_crafting: bool | None = None
    match_nbt: bool | None = None
    weak_nbt_match: bool | None = None
    task_screen_only: bool | None = None


@dataclass(slots=True)
class AdvancementTask:
    TAG: ClassVar[str] = "advancement"

    advancement: str
    criterion: str = ""


@dataclass(slots=True)
class BiomeTask:
    TAG: ClassVar[str] = "biome"

    biome: str


@dataclass(slots=True)
class DimensionTask:
    TAG: ClassVar[str] = "dimension"

    dimension: str


@dataclass(slots=True)
class EnergyTask:
    TAG: ClassVar[str] = "energy"

    value: int | str
    max_input: int | str | None = None


@dataclass(slots=True)
class FluidTask:
    TAG: ClassVar[str] = "fluid"

    fluid: str
    amount: int | str
    nbt: Dict[str, Any] | None = None


@dataclass(slots=True)
class KillTask:
    TAG: ClassVar[str] = "kill"

    entity: str
    value: int | str


@dataclass(slots=True)
class LocationTask:
    TAG: ClassVar[str] = "location"

    dimension: str
    ignore_dimension: bool = False
    position: Tuple[int, int, int] | None = None
    size: Tuple[int, int, int] | None = None


@dataclass(slots=True)
class ObservationTask:
    TAG: ClassVar[str] = "observation"

    timer: int | str
    observe_type: ObserveType
    to_observe: str


@dataclass(slots=True)
class StageTask:
    TAG: ClassVar[str] = "stage"

    stage: str


@dataclass(slots=True)
class StatTask:
    TAG: ClassVar[str] = "stat"

    stat: str
    value: int


@dataclass(slots=True)
class StructureTask:
    TAG: ClassVar[str] = "structure"

    structure: str


@dataclass(slots=True)
class XpTask:
    TAG: ClassVar[str] = "xp"

    value: int | str
    points: bool = False


@dataclass(slots=True)
class CustomTask:
    TAG: ClassVar[str] = "custom"


TaskVariant = Union[
    CheckmarkTask,
    ItemTask,
    AdvancementTask,
    BiomeTask,
    DimensionTask,
    EnergyTask,
    FluidTask,
    KillTask,
    LocationTask,
    ObservationTask,
    StageTask,
    StatTask,
    StructureTask,
    XpTask,
    CustomTask,
]

TASK_VARIANTS: Tuple[type, ...] = TaskVariant.__args__  # type: ignore[attr-defined]


@dataclass(slots=True)
class TaskDef:
    id: str
    variant: TaskVariant
    title: str | None = None
    icon: ItemRef | None = None
    tags: Tuple[str, ...] = ()

    @property
    def tag(self) -> str:
        return self.variant.TAG
