"""Convert FTB Quests quest books into the Heracles quest format."""

from questbridge.data.quest_source import QuestSourceBundle
from questbridge.services.conversion_service import convert_ftb_quests

__all__ = ["QuestSourceBundle", "convert_ftb_quests"]
