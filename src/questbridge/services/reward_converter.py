"""Conversion of FTB Quests rewards into Heracles rewards."""
from __future__ import annotations

from typing import Callable, Dict

from questbridge.core.types import TargetPayload
from questbridge.domain.defs import (
    REWARD_VARIANTS,
    AdvancementReward,
    ChoiceReward,
    CommandReward,
    CustomReward,
    ItemReward,
    ItemStackDef,
    LootReward,
    RewardDef,
    StageReward,
    ToastReward,
    XpLevelsReward,
    XpReward,
)
from questbridge.services.errors import UnsupportedRewardTableError, UnsupportedVariantError
from questbridge.services.reward_table_resolver import RewardTableIndex

DEFAULT_XP_LEVELS = 5
DEFAULT_XP_POINTS = 100

_RewardConverter = Callable[[RewardDef, RewardTableIndex], TargetPayload]


def _command(reward: RewardDef, tables: RewardTableIndex) -> TargetPayload:
    assert isinstance(reward.variant, CommandReward)
    return {"type": "heracles:command", "command": reward.variant.command}


def _item(reward: RewardDef, tables: RewardTableIndex) -> TargetPayload:
    variant = reward.variant
    assert isinstance(variant, ItemReward)
    item = variant.item
    payload: TargetPayload = {"type": "heracles:item"}
    if isinstance(item, ItemStackDef):
        stack: TargetPayload = {"id": item.id}
        if item.count is not None:
            stack["count"] = item.count
        payload["item"] = stack
    else:
        payload["item"] = item
    if variant.count is not None:
        payload["count"] = variant.count
    return payload


def _loot(reward: RewardDef, tables: RewardTableIndex) -> TargetPayload:
    assert isinstance(reward.variant, LootReward)
    table = tables.resolve(reward.variant, reward.id)
    if not table.loot_table_id:
        raise UnsupportedRewardTableError(
            f"Don't know how to convert reward '{reward.id}': reward table '{table.id}' "
            "has no loot_table_id."
        )
    return {"type": "heracles:loottable", "loot_table": table.loot_table_id}


def _xp_levels(reward: RewardDef, tables: RewardTableIndex) -> TargetPayload:
    assert isinstance(reward.variant, XpLevelsReward)
    levels = reward.variant.xp_levels
    return {
        "type": "heracles:xp",
        "xptype": "level",
        "amount": DEFAULT_XP_LEVELS if levels is None else levels,
    }


def _xp(reward: RewardDef, tables: RewardTableIndex) -> TargetPayload:
    assert isinstance(reward.variant, XpReward)
    points = reward.variant.xp
    return {
        "type": "heracles:xp",
        "xptype": "points",
        "amount": DEFAULT_XP_POINTS if points is None else points,
    }


# None marks a reward type that is understood but has no Heracles equivalent yet.
REWARD_CONVERTERS: Dict[type, _RewardConverter | None] = {
    CommandReward: _command,
    ItemReward: _item,
    LootReward: _loot,
    XpLevelsReward: _xp_levels,
    XpReward: _xp,
    AdvancementReward: None,
    ChoiceReward: None,
    StageReward: None,
    ToastReward: None,
    CustomReward: None,
}

assert set(REWARD_CONVERTERS) == set(REWARD_VARIANTS), "every reward type needs a dispatch entry"


def convert_reward(reward: RewardDef, tables: RewardTableIndex) -> TargetPayload:
    """Convert one reward, resolving loot table references against ``tables``."""
    converter = REWARD_CONVERTERS.get(type(reward.variant))
    if converter is None:
        raise UnsupportedVariantError("reward", reward.tag, reward.id)
    return converter(reward, tables)
