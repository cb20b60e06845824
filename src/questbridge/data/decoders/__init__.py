"""Validating decoders that turn parsed SNBT trees into typed definitions."""

from .chapter_decoder import ChapterDecoder, ChapterGroupsDecoder
from .quest_file_decoder import QuestFileDecoder
from .reward_decoder import RewardDecoder
from .task_decoder import TaskDecoder

__all__ = [
    "ChapterDecoder",
    "ChapterGroupsDecoder",
    "QuestFileDecoder",
    "RewardDecoder",
    "TaskDecoder",
]
