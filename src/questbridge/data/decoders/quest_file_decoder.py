"""Decoder for the quest file (data.snbt)."""
from __future__ import annotations

from questbridge.data.errors import DataValidationError
from questbridge.domain.defs import QuestFileDef

from .base import DecoderBase

_AUTOCLAIM_MODES = ("default", "disabled", "enabled", "no_toast", "invisible")
_QUEST_SHAPES = ("circle", "square", "pentagon", "hexagon", "gear")


class QuestFileDecoder(DecoderBase):
    """Decodes the global defaults of a quest book."""

    def decode(self, value: object, source: str = "data.snbt") -> QuestFileDef:
        mapping = self._require_mapping(value, source)
        autoclaim = self._optional_str(mapping.get("default_autoclaim_rewards"), f"{source}.default_autoclaim_rewards")
        if autoclaim is not None and autoclaim not in _AUTOCLAIM_MODES:
            raise DataValidationError(
                f"{source}.default_autoclaim_rewards must be one of {', '.join(_AUTOCLAIM_MODES)}."
            )
        shape = self._optional_str(mapping.get("default_quest_shape"), f"{source}.default_quest_shape")
        if shape and shape not in _QUEST_SHAPES:
            raise DataValidationError(f"{source}.default_quest_shape must be one of {', '.join(_QUEST_SHAPES)}.")
        emergency_items = tuple(
            self._decode_item_stack(entry, f"{source}.emergency_items[{index}]")
            for index, entry in enumerate(self._optional_list(mapping.get("emergency_items"), f"{source}.emergency_items"))
        )
        cooldown = self._optional_int(mapping.get("emergency_items_cooldown"), f"{source}.emergency_items_cooldown")
        grid_scale = self._optional_number(mapping.get("grid_scale"), f"{source}.grid_scale")
        return QuestFileDef(
            id=self._optional_str(mapping.get("id"), f"{source}.id"),
            title=self._optional_str(mapping.get("title"), f"{source}.title"),
            default_reward_team=self._flag(mapping.get("default_reward_team"), f"{source}.default_reward_team"),
            default_consume_items=self._flag(mapping.get("default_consume_items"), f"{source}.default_consume_items"),
            default_autoclaim_rewards=autoclaim or "default",  # type: ignore[arg-type]
            default_quest_shape=shape or "circle",  # type: ignore[arg-type]
            default_quest_disable_jei=self._flag(
                mapping.get("default_quest_disable_jei"), f"{source}.default_quest_disable_jei"
            ),
            emergency_items=emergency_items,
            emergency_items_cooldown=300 if cooldown is None else cooldown,
            drop_loot_crates=self._flag(mapping.get("drop_loot_crates"), f"{source}.drop_loot_crates"),
            disable_gui=self._optional_bool(mapping.get("disable_gui"), f"{source}.disable_gui"),
            grid_scale=None if grid_scale is None else float(grid_scale),
            pause_game=self._optional_bool(mapping.get("pause_game"), f"{source}.pause_game"),
            lock_message=self._optional_str(mapping.get("lock_message"), f"{source}.lock_message"),
        )
