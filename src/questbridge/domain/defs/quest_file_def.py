"""Quest file (data.snbt) definition."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Tuple

from .common_def import ItemStackDef, QuestShape

AutoclaimMode = Literal["default", "disabled", "enabled", "no_toast", "invisible"]


@dataclass(slots=True)
class QuestFileDef:
    """Global defaults of a quest book. Decoded but not propagated into quests."""

    id: str | None
    title: str | None
    default_reward_team: bool = False
    default_consume_items: bool = False
    default_autoclaim_rewards: AutoclaimMode = "default"
    default_quest_shape: QuestShape = "circle"
    default_quest_disable_jei: bool = False
    emergency_items: Tuple[ItemStackDef, ...] = ()
    emergency_items_cooldown: int = 300
    drop_loot_crates: bool = False
    disable_gui: bool | None = None
    grid_scale: float | None = None
    pause_game: bool | None = None
    lock_message: str | None = None
