"""Domain definition exports."""

from .chapter_def import (
    ChapterDef,
    ChapterGroupDef,
    Dependencies,
    ImageDef,
    LegacyDependencies,
    QuestNodeDef,
    ResolvedDependencies,
)
from .common_def import ItemRef, ItemStackDef, item_id_of
from .quest_file_def import QuestFileDef
from .reward_def import (
    REWARD_VARIANTS,
    AdvancementReward,
    ChoiceReward,
    CommandReward,
    CustomReward,
    EntityWeightDef,
    ItemReward,
    LootCrateDef,
    LootReward,
    RewardDef,
    RewardTableDef,
    RewardVariant,
    StageReward,
    TableKeyRef,
    TableOrdinalRef,
    TableRef,
    ToastReward,
    WeightedRewardDef,
    XpLevelsReward,
    XpReward,
)
from .task_def import (
    TASK_VARIANTS,
    AdvancementTask,
    BiomeTask,
    CheckmarkTask,
    CustomTask,
    DimensionTask,
    EnergyTask,
    FluidTask,
    ItemTask,
    KillTask,
    LocationTask,
    ObservationTask,
    ObserveType,
    StageTask,
    StatTask,
    StructureTask,
    TaskDef,
    TaskVariant,
    XpTask,
)

__all__ = [
    "AdvancementReward",
    "AdvancementTask",
    "BiomeTask",
    "ChapterDef",
    "ChapterGroupDef",
    "CheckmarkTask",
    "ChoiceReward",
    "CommandReward",
    "CustomReward",
    "CustomTask",
    "Dependencies",
    "DimensionTask",
    "EnergyTask",
    "EntityWeightDef",
    "FluidTask",
    "ImageDef",
    "ItemRef",
    "ItemReward",
    "ItemStackDef",
    "ItemTask",
    "KillTask",
    "LegacyDependencies",
    "LocationTask",
    "LootCrateDef",
    "LootReward",
    "ObservationTask",
    "ObserveType",
    "QuestFileDef",
    "QuestNodeDef",
    "REWARD_VARIANTS",
    "ResolvedDependencies",
    "RewardDef",
    "RewardTableDef",
    "RewardVariant",
    "StageReward",
    "StageTask",
    "StatTask",
    "StructureTask",
    "TASK_VARIANTS",
    "TableKeyRef",
    "TableOrdinalRef",
    "TableRef",
    "TaskDef",
    "TaskVariant",
    "ToastReward",
    "WeightedRewardDef",
    "XpLevelsReward",
    "XpReward",
    "XpTask",
    "item_id_of",
]
