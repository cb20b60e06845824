"""Decoder for quest rewards and reward table documents."""
from __future__ import annotations

from typing import Any, Callable, Dict, Tuple

from questbridge.data.errors import DataValidationError, UnknownVariantError
from questbridge.domain.defs import (
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
from questbridge.domain.identifiers import normalize_tag

from .base import DecoderBase


class RewardDecoder(DecoderBase):
    """Turns reward compounds into RewardDefs and reward table documents into RewardTableDefs."""

    def __init__(self) -> None:
        self._variants: Dict[str, Callable[[Dict[str, Any], str], RewardVariant]] = {
            AdvancementReward.TAG: lambda mapping, ctx: AdvancementReward(
                advancement=self._require_str(mapping.get("advancement"), f"{ctx}.advancement"),
                criterion=self._optional_str(mapping.get("criterion"), f"{ctx}.criterion") or "",
            ),
            ChoiceReward.TAG: lambda mapping, ctx: ChoiceReward(),
            CommandReward.TAG: lambda mapping, ctx: CommandReward(
                command=self._require_str(mapping.get("command"), f"{ctx}.command"),
                player_command=self._optional_bool(mapping.get("player_command"), f"{ctx}.player_command"),
            ),
            ItemReward.TAG: self._item,
            LootReward.TAG: self._loot,
            StageReward.TAG: lambda mapping, ctx: StageReward(
                stage=self._require_str(mapping.get("stage"), f"{ctx}.stage"),
                remove=self._flag(mapping.get("remove"), f"{ctx}.remove"),
            ),
            ToastReward.TAG: lambda mapping, ctx: ToastReward(
                description=self._require_str(mapping.get("description"), f"{ctx}.description")
            ),
            XpLevelsReward.TAG: lambda mapping, ctx: XpLevelsReward(
                xp_levels=self._optional_int(mapping.get("xp_levels"), f"{ctx}.xp_levels")
            ),
            XpReward.TAG: lambda mapping, ctx: XpReward(
                xp=self._optional_int(mapping.get("xp"), f"{ctx}.xp")
            ),
            CustomReward.TAG: lambda mapping, ctx: CustomReward(),
        }

    @property
    def known_tags(self) -> Tuple[str, ...]:
        return tuple(self._variants)

    def decode(self, value: object, context: str, *, require_id: bool = True) -> RewardDef:
        mapping = self._require_mapping(value, context)
        raw_id = mapping.get("id")
        reward_id = self._require_str(raw_id, f"{context}.id") if require_id or raw_id is not None else ""
        raw_tag = self._require_str(mapping.get("type"), f"{context}.type")
        builder = self._variants.get(normalize_tag(raw_tag))
        if builder is None:
            raise UnknownVariantError("reward", raw_tag, context)
        return RewardDef(
            id=reward_id,
            variant=builder(mapping, context),
            title=self._optional_str(mapping.get("title"), f"{context}.title"),
            icon=self._optional_item(mapping.get("icon"), f"{context}.icon"),
            tags=self._str_tuple(mapping.get("tags"), f"{context}.tags"),
        )

    def decode_table(self, value: object, context: str, *, require_id: bool = True) -> RewardTableDef:
        mapping = self._require_mapping(value, context)
        raw_id = mapping.get("id")
        table_id = self._require_str(raw_id, f"{context}.id") if require_id or raw_id is not None else ""
        rewards = []
        for index, entry in enumerate(self._optional_list(mapping.get("rewards"), f"{context}.rewards")):
            entry_ctx = f"{context}.rewards[{index}]"
            # Table entries may omit their id; they are never keyed in the output.
            entry_map = self._require_mapping(entry, entry_ctx)
            reward = self.decode(entry_map, entry_ctx, require_id=False)
            weight = self._optional_number(entry_map.get("weight"), f"{entry_ctx}.weight")
            rewards.append(WeightedRewardDef(reward=reward, weight=1.0 if weight is None else float(weight)))
        empty_weight = self._optional_number(mapping.get("empty_weight"), f"{context}.empty_weight")
        loot_size = self._optional_int(mapping.get("loot_size"), f"{context}.loot_size")
        return RewardTableDef(
            id=table_id,
            rewards=tuple(rewards),
            title=self._optional_str(mapping.get("title"), f"{context}.title"),
            order_index=self._optional_int(mapping.get("order_index"), f"{context}.order_index"),
            empty_weight=0.0 if empty_weight is None else float(empty_weight),
            loot_size=1 if loot_size is None else loot_size,
            hide_tooltip=self._flag(mapping.get("hide_tooltip"), f"{context}.hide_tooltip"),
            use_title=self._flag(mapping.get("use_title"), f"{context}.use_title"),
            loot_crate=self._loot_crate(mapping.get("loot_crate"), f"{context}.loot_crate"),
            loot_table_id=self._optional_str(mapping.get("loot_table_id"), f"{context}.loot_table_id"),
        )

    def _item(self, mapping: Dict[str, Any], ctx: str) -> ItemReward:
        if "item" not in mapping:
            raise DataValidationError(f"{ctx}.item is required.")
        return ItemReward(
            item=self._decode_item(mapping["item"], f"{ctx}.item"),
            count=self._optional_int(mapping.get("count"), f"{ctx}.count"),
            random_bonus=self._optional_int(mapping.get("random_bonus"), f"{ctx}.random_bonus"),
            only_one=self._flag(mapping.get("only_one"), f"{ctx}.only_one"),
        )

    def _loot(self, mapping: Dict[str, Any], ctx: str) -> LootReward:
        raw_table_data = mapping.get("table_data")
        table_data = None
        if raw_table_data is not None:
            table_data = self.decode_table(raw_table_data, f"{ctx}.table_data", require_id=False)
        return LootReward(table=self._table_ref(mapping, ctx), table_data=table_data)

    def _table_ref(self, mapping: Dict[str, Any], ctx: str) -> TableRef:
        has_ordinal = "table" in mapping
        has_key = "table_id" in mapping
        if has_ordinal == has_key:
            raise DataValidationError(f"{ctx} must reference a reward table by exactly one of table or table_id.")
        if has_ordinal:
            return TableOrdinalRef(order_index=self._require_int(mapping["table"], f"{ctx}.table"))
        return TableKeyRef(table_id=self._require_str(mapping["table_id"], f"{ctx}.table_id"))

    def _loot_crate(self, value: object, context: str) -> LootCrateDef | None:
        if value is None:
            return None
        mapping = self._require_mapping(value, context)
        drops = mapping.get("drops")
        drops_def = None
        if drops is not None:
            drops_map = self._require_mapping(drops, f"{context}.drops")
            drops_def = EntityWeightDef(
                passive=self._optional_int(drops_map.get("passive"), f"{context}.drops.passive") or 0,
                monster=self._optional_int(drops_map.get("monster"), f"{context}.drops.monster") or 0,
                boss=self._optional_int(drops_map.get("boss"), f"{context}.drops.boss") or 0,
            )
        return LootCrateDef(
            string_id=self._require_str(mapping.get("string_id"), f"{context}.string_id"),
            item_name=self._optional_str(mapping.get("item_name"), f"{context}.item_name"),
            color=self._optional_int(mapping.get("color"), f"{context}.color") or 0,
            glow=self._flag(mapping.get("glow"), f"{context}.glow"),
            drops=drops_def,
        )
