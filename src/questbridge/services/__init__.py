"""Service layer: quest conversion to the Heracles format."""

from .conversion_service import convert_ftb_quests
from .errors import (
    ConversionError,
    UnknownVariantError,
    UnresolvedRewardTableError,
    UnsupportedRewardTableError,
    UnsupportedVariantError,
)
from .quest_assembler import QuestAssembler
from .reward_converter import convert_reward
from .reward_table_resolver import RewardTableIndex
from .task_converter import convert_task

__all__ = [
    "ConversionError",
    "QuestAssembler",
    "RewardTableIndex",
    "UnknownVariantError",
    "UnresolvedRewardTableError",
    "UnsupportedRewardTableError",
    "UnsupportedVariantError",
    "convert_ftb_quests",
    "convert_reward",
    "convert_task",
]
