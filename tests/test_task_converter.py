from __future__ import annotations

import pytest

from questbridge.domain.defs import (
    TASK_VARIANTS,
    AdvancementTask,
    BiomeTask,
    CheckmarkTask,
    CustomTask,
    DimensionTask,
    EnergyTask,
    ItemStackDef,
    ItemTask,
    KillTask,
    StageTask,
    StructureTask,
    TaskDef,
    XpTask,
)
from questbridge.services.errors import ConversionError, UnsupportedVariantError
from questbridge.services.task_converter import TASK_CONVERTERS, convert_task


def _convert(variant, quest_id: str = "1A") -> dict:
    return convert_task(TaskDef(id="T1", variant=variant), quest_id=quest_id)


def test_item_task_bare_id() -> None:
    assert _convert(ItemTask(item="minecraft:stick", count=4)) == {
        "type": "heracles:item",
        "amount": 4,
        "item": "minecraft:stick",
    }


def test_item_task_stack_count_fallback() -> None:
    assert _convert(ItemTask(item=ItemStackDef(id="minecraft:stick", count=3))) == {
        "type": "heracles:item",
        "amount": 3,
        "item": "minecraft:stick",
    }
    assert _convert(ItemTask(item=ItemStackDef(id="minecraft:stick")))["amount"] == 1


def test_checkmark_uses_owning_quest_id() -> None:
    assert _convert(CheckmarkTask(), quest_id="1") == {
        "type": "heracles:check",
        "value": "01000000-0000-0000-0100-000000000000",
    }


def test_checkmark_with_invalid_quest_id_fails() -> None:
    with pytest.raises(ConversionError, match="check value"):
        _convert(CheckmarkTask(), quest_id="quest_one")


def test_advancement_biome_dimension_structure() -> None:
    assert _convert(AdvancementTask(advancement="minecraft:story/mine_stone", criterion="")) == {
        "type": "heracles:advancement",
        "advancements": ["minecraft:story/mine_stone"],
    }
    assert _convert(BiomeTask(biome="#minecraft:is_forest")) == {
        "type": "heracles:biome",
        "biomes": "#minecraft:is_forest",
    }
    assert _convert(DimensionTask(dimension="minecraft:the_nether")) == {
        "type": "heracles:changed_dimension",
        "to": "minecraft:the_nether",
    }
    assert _convert(StructureTask(structure="minecraft:village")) == {
        "type": "heracles:structure",
        "structures": "minecraft:village",
    }


def test_kill_task_parses_value() -> None:
    expected = {"type": "heracles:kill_entity", "amount": 12, "entity": {"type": "minecraft:zombie"}}

    assert _convert(KillTask(entity="minecraft:zombie", value="12")) == expected
    assert _convert(KillTask(entity="minecraft:zombie", value=12)) == expected


@pytest.mark.parametrize("value", ["lots", "1_000", " 12 ", "12.5", ""])
def test_kill_task_rejects_non_numeric_value(value: str) -> None:
    with pytest.raises(ConversionError, match="non-numeric"):
        _convert(KillTask(entity="minecraft:zombie", value=value))


@pytest.mark.parametrize(
    "variant",
    [EnergyTask(value=1000), StageTask(stage="intro"), XpTask(value=5), CustomTask()],
)
def test_unimplemented_task_types_fail(variant) -> None:
    with pytest.raises(UnsupportedVariantError) as excinfo:
        _convert(variant)

    assert excinfo.value.tag == variant.TAG
    assert variant.TAG in str(excinfo.value)


def test_dispatch_covers_every_task_type() -> None:
    assert set(TASK_CONVERTERS) == set(TASK_VARIANTS)
