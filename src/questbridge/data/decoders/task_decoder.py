"""Decoder for quest task compounds."""
from __future__ import annotations

from typing import Any, Callable, Dict, Tuple

from questbridge.data.errors import DataValidationError, UnknownVariantError
from questbridge.domain.defs import (
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
from questbridge.domain.identifiers import normalize_tag

from .base import DecoderBase


class TaskDecoder(DecoderBase):
    """Turns a task compound into a TaskDef with a typed variant."""

    def __init__(self) -> None:
        self._variants: Dict[str, Callable[[Dict[str, Any], str], TaskVariant]] = {
            CheckmarkTask.TAG: lambda mapping, ctx: CheckmarkTask(),
            ItemTask.TAG: self._item,
            AdvancementTask.TAG: self._advancement,
            BiomeTask.TAG: lambda mapping, ctx: BiomeTask(
                biome=self._require_str(mapping.get("biome"), f"{ctx}.biome")
            ),
            DimensionTask.TAG: lambda mapping, ctx: DimensionTask(
                dimension=self._require_str(mapping.get("dimension"), f"{ctx}.dimension")
            ),
            EnergyTask.TAG: self._energy,
            FluidTask.TAG: self._fluid,
            KillTask.TAG: self._kill,
            LocationTask.TAG: self._location,
            ObservationTask.TAG: self._observation,
            StageTask.TAG: lambda mapping, ctx: StageTask(
                stage=self._require_str(mapping.get("stage"), f"{ctx}.stage")
            ),
            StatTask.TAG: lambda mapping, ctx: StatTask(
                stat=self._require_str(mapping.get("stat"), f"{ctx}.stat"),
                value=self._require_int(mapping.get("value"), f"{ctx}.value"),
            ),
            StructureTask.TAG: lambda mapping, ctx: StructureTask(
                structure=self._require_str(mapping.get("structure"), f"{ctx}.structure")
            ),
            XpTask.TAG: lambda mapping, ctx: XpTask(
                value=self._require_long(mapping.get("value"), f"{ctx}.value"),
                points=self._flag(mapping.get("points"), f"{ctx}.points"),
            ),
            CustomTask.TAG: lambda mapping, ctx: CustomTask(),
        }

    @property
    def known_tags(self) -> Tuple[str, ...]:
        return tuple(self._variants)

    def decode(self, value: object, context: str) -> TaskDef:
        mapping = self._require_mapping(value, context)
        task_id = self._require_str(mapping.get("id"), f"{context}.id")
        raw_tag = self._require_str(mapping.get("type"), f"{context}.type")
        builder = self._variants.get(normalize_tag(raw_tag))
        if builder is None:
            raise UnknownVariantError("task", raw_tag, context)
        return TaskDef(
            id=task_id,
            variant=builder(mapping, context),
            title=self._optional_str(mapping.get("title"), f"{context}.title"),
            icon=self._optional_item(mapping.get("icon"), f"{context}.icon"),
            tags=self._str_tuple(mapping.get("tags"), f"{context}.tags"),
        )

    def _item(self, mapping: Dict[str, Any], ctx: str) -> ItemTask:
        if "item" not in mapping:
            raise DataValidationError(f"{ctx}.item is required.")
        return ItemTask(
            item=self._decode_item(mapping["item"], f"{ctx}.item"),
            count=self._optional_int(mapping.get("count"), f"{ctx}.count"),
            consume_items=self._optional_bool(mapping.get("consume_items"), f"{ctx}.consume_items"),
            only_from_crafting=self._optional_bool(
                mapping.get("only_from_crafting"), f"{ctx}.only_from_crafting"
            ),
            match_nbt=self._optional_bool(mapping.get("match_nbt"), f"{ctx}.match_nbt"),
            weak_nbt_match=self._optional_bool(mapping.get("weak_nbt_match"), f"{ctx}.weak_nbt_match"),
            task_screen_only=self._optional_bool(mapping.get("task_screen_only"), f"{ctx}.task_screen_only"),
        )

    def _advancement(self, mapping: Dict[str, Any], ctx: str) -> AdvancementTask:
        return AdvancementTask(
            advancement=self._require_str(mapping.get("advancement"), f"{ctx}.advancement"),
            criterion=self._optional_str(mapping.get("criterion"), f"{ctx}.criterion") or "",
        )

    def _energy(self, mapping: Dict[str, Any], ctx: str) -> EnergyTask:
        max_input = mapping.get("max_input")
        return EnergyTask(
            value=self._require_long(mapping.get("value"), f"{ctx}.value"),
            max_input=None if max_input is None else self._require_long(max_input, f"{ctx}.max_input"),
        )

    def _fluid(self, mapping: Dict[str, Any], ctx: str) -> FluidTask:
        nbt = mapping.get("nbt")
        return FluidTask(
            fluid=self._require_str(mapping.get("fluid"), f"{ctx}.fluid"),
            amount=self._require_long(mapping.get("amount"), f"{ctx}.amount"),
            nbt=None if nbt is None else self._require_mapping(nbt, f"{ctx}.nbt"),
        )

    def _kill(self, mapping: Dict[str, Any], ctx: str) -> KillTask:
        return KillTask(
            entity=self._require_str(mapping.get("entity"), f"{ctx}.entity"),
            value=self._require_long(mapping.get("value"), f"{ctx}.value"),
        )

    def _location(self, mapping: Dict[str, Any], ctx: str) -> LocationTask:
        return LocationTask(
            dimension=self._require_str(mapping.get("dimension"), f"{ctx}.dimension"),
            ignore_dimension=self._flag(mapping.get("ignore_dimension"), f"{ctx}.ignore_dimension"),
            position=self._triple(mapping.get("position"), f"{ctx}.position"),
            size=self._triple(mapping.get("size"), f"{ctx}.size"),
        )

    def _observation(self, mapping: Dict[str, Any], ctx: str) -> ObservationTask:
        raw_type = self._require_int(mapping.get("observe_type"), f"{ctx}.observe_type")
        try:
            observe_type = ObserveType(raw_type)
        except ValueError as exc:
            raise DataValidationError(f"{ctx}.observe_type {raw_type} is not a known observe type.") from exc
        return ObservationTask(
            timer=self._require_long(mapping.get("timer"), f"{ctx}.timer"),
            observe_type=observe_type,
            to_observe=self._require_str(mapping.get("to_observe"), f"{ctx}.to_observe"),
        )

    def _triple(self, value: object, context: str) -> Tuple[int, int, int] | None:
        if value is None:
            return None
        entries = self._require_list(value, context)
        if len(entries) != 3:
            raise DataValidationError(f"{context} must have exactly three entries.")
        x, y, z = (self._require_int(entry, f"{context}[{index}]") for index, entry in enumerate(entries))
        return (x, y, z)
