"""Conversion of FTB Quests tasks into Heracles tasks."""
from __future__ import annotations

import re
from typing import Callable, Dict

from questbridge.core.types import TargetPayload
from questbridge.domain.defs import (
    TASK_VARIANTS,
    AdvancementTask,
    BiomeTask,
    CheckmarkTask,
    CustomTask,
    DimensionTask,
    EnergyTask,
    FluidTask,
    ItemStackDef,
    ItemTask,
    KillTask,
    LocationTask,
    ObservationTask,
    StageTask,
    StatTask,
    StructureTask,
    TaskDef,
    XpTask,
    item_id_of,
)
from questbridge.domain.identifiers import checkmark_uuid
from questbridge.services.errors import ConversionError, UnsupportedVariantError

_TaskConverter = Callable[[TaskDef, str], TargetPayload]
_INTEGER_STRING = re.compile(r"[-+]?\d+")


def _checkmark(task: TaskDef, quest_id: str) -> TargetPayload:
    try:
        value = checkmark_uuid(quest_id)
    except ValueError as exc:
        raise ConversionError(f"Cannot derive check value for task '{task.id}': {exc}") from exc
    return {"type": "heracles:check", "value": value}


def _item(task: TaskDef, quest_id: str) -> TargetPayload:
    variant = task.variant
    assert isinstance(variant, ItemTask)
    amount = variant.count
    if amount is None and isinstance(variant.item, ItemStackDef):
        amount = variant.item.count
    return {
        "type": "heracles:item",
        "amount": 1 if amount is None else amount,
        "item": item_id_of(variant.item),
    }


def _advancement(task: TaskDef, quest_id: str) -> TargetPayload:
    assert isinstance(task.variant, AdvancementTask)
    return {"type": "heracles:advancement", "advancements": [task.variant.advancement]}


def _biome(task: TaskDef, quest_id: str) -> TargetPayload:
    assert isinstance(task.variant, BiomeTask)
    return {"type": "heracles:biome", "biomes": task.variant.biome}


def _dimension(task: TaskDef, quest_id: str) -> TargetPayload:
    assert isinstance(task.variant, DimensionTask)
    return {"type": "heracles:changed_dimension", "to": task.variant.dimension}


def _kill(task: TaskDef, quest_id: str) -> TargetPayload:
    variant = task.variant
    assert isinstance(variant, KillTask)
    if isinstance(variant.value, str) and not _INTEGER_STRING.fullmatch(variant.value):
        raise ConversionError(f"Kill task '{task.id}' has non-numeric value '{variant.value}'.")
    amount = int(variant.value)
    return {"type": "heracles:kill_entity", "amount": amount, "entity": {"type": variant.entity}}


def _structure(task: TaskDef, quest_id: str) -> TargetPayload:
    assert isinstance(task.variant, StructureTask)
    return {"type": "heracles:structure", "structures": task.variant.structure}


# None marks a task type that is understood but has no Heracles equivalent yet.
TASK_CONVERTERS: Dict[type, _TaskConverter | None] = {
    CheckmarkTask: _checkmark,
    ItemTask: _item,
    AdvancementTask: _advancement,
    BiomeTask: _biome,
    DimensionTask: _dimension,
    KillTask: _kill,
    StructureTask: _structure,
    EnergyTask: None,
    FluidTask: None,
    LocationTask: None,
    ObservationTask: None,
    StageTask: None,
    StatTask: None,
    XpTask: None,
    CustomTask: None,
}

assert set(TASK_CONVERTERS) == set(TASK_VARIANTS), "every task type needs a dispatch entry"


def convert_task(task: TaskDef, *, quest_id: str) -> TargetPayload:
    """Convert one task of the quest ``quest_id`` to its Heracles form."""
    converter = TASK_CONVERTERS.get(type(task.variant))
    if converter is None:
        raise UnsupportedVariantError("task", task.tag, task.id)
    return converter(task, quest_id)
