"""Data layer utilities for loading FTB Quests documents."""

from .errors import DataError, DataLoadError, DataValidationError, UnknownVariantError
from .paths import get_quests_path
from .quest_source import QuestSourceBundle
from .snbt_loader import load_snbt, parse_snbt

__all__ = [
    "DataError",
    "DataLoadError",
    "DataValidationError",
    "QuestSourceBundle",
    "UnknownVariantError",
    "get_quests_path",
    "load_snbt",
    "parse_snbt",
]
