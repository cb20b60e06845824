"""Quest reward and reward table definitions."""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Tuple, Union

from .common_def import ItemRef


@dataclass(slots=True)
class TableOrdinalRef:
    """Reference to a reward table by its order index."""

    order_index: int


@dataclass(slots=True)
class TableKeyRef:
    """Reference to a reward table by its string id."""

    table_id: str


TableRef = Union[TableOrdinalRef, TableKeyRef]


@dataclass(slots=True)
class AdvancementReward:
    TAG: ClassVar[str] = "advancement"

    advancement: str
    criterion: str = ""


@dataclass(slots=True)
class ChoiceReward:
    TAG: ClassVar[str] = "choice"


@dataclass(slots=True)
class CommandReward:
    TAG: ClassVar[str] = "command"

    command: str
    player_command: bool | None = None


@dataclass(slots=True)
class ItemReward:
    TAG: ClassVar[str] = "item"

    item: ItemRef
    count: int | None = None
    random_bonus: int | None = None
    only_one: bool = False


@dataclass(slots=True)
class LootReward:
    TAG: ClassVar[str] = "loot"

    table: TableRef
    table_data: RewardTableDef | None = None


@dataclass(slots=True)
class StageReward:
    TAG: ClassVar[str] = "stage"

    stage: str
    remove: bool = False


@dataclass(slots=True)
class ToastReward:
    TAG: ClassVar[str] = "toast"

    description: str


@dataclass(slots=True)
class XpLevelsReward:
    TAG: ClassVar[str] = "xp_levels"

    xp_levels: int | None = None


@dataclass(slots=True)
class XpReward:
    TAG: ClassVar[str] = "xp"

    xp: int | None = None


@dataclass(slots=True)
class CustomReward:
    TAG: ClassVar[str] = "custom"


RewardVariant = Union[
    AdvancementReward,
    ChoiceReward,
    CommandReward,
    ItemReward,
    LootReward,
    StageReward,
    ToastReward,
    XpLevelsReward,
    XpReward,
    CustomReward,
]

REWARD_VARIANTS: Tuple[type, ...] = RewardVariant.__args__  # type: ignore[attr-defined]


@dataclass(slots=True)
class RewardDef:
    id: str
    variant: RewardVariant
    title: str | None = None
    icon: ItemRef | None = None
    tags: Tuple[str, ...] = ()

    @property
    def tag(self) -> str:
        return self.variant.TAG


@dataclass(slots=True)
class WeightedRewardDef:
    reward: RewardDef
    weight: float = 1.0


@dataclass(slots=True)
class EntityWeightDef:
    passive: int = 0
    monster: int = 0
    boss: int = 0


@dataclass(slots=True)
class LootCrateDef:
    string_id: str
    item_name: str | None = None
    color: int = 0
    glow: bool = False
    drops: EntityWeightDef | None = None


@dataclass(slots=True)
class RewardTableDef:
    """Weighted reward table; order_index is assigned by the loader when absent."""

    id: str
    rewards: Tuple[WeightedRewardDef, ...]
    title: str | None = None
    order_index: int | None = None
    empty_weight: float = 0.0
    loot_size: int = 1
    hide_tooltip: bool = False
    use_title: bool = False
    loot_crate: LootCrateDef | None = None
    loot_table_id: str | None = None
