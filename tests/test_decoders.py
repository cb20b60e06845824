from __future__ import annotations

import pytest

from questbridge.data.decoders import (
    ChapterDecoder,
    ChapterGroupsDecoder,
    QuestFileDecoder,
    RewardDecoder,
    TaskDecoder,
)
from questbridge.data.errors import DataValidationError, UnknownVariantError
from questbridge.domain.defs import (
    REWARD_VARIANTS,
    TASK_VARIANTS,
    ItemStackDef,
    ItemTask,
    KillTask,
    LegacyDependencies,
    LootReward,
    ObservationTask,
    ObserveType,
    ResolvedDependencies,
    TableKeyRef,
    TableOrdinalRef,
    XpReward,
)
from tests.helpers.quest_trees import make_chapter, make_quest, make_table


def test_task_decoder_accepts_both_tag_spellings() -> None:
    decoder = TaskDecoder()
    bare = decoder.decode({"id": "T1", "type": "kill", "entity": "minecraft:zombie", "value": "10"}, "task")
    namespaced = decoder.decode(
        {"id": "T2", "type": "ftbquests:kill", "entity": "minecraft:zombie", "value": 10}, "task"
    )

    assert isinstance(bare.variant, KillTask)
    assert isinstance(namespaced.variant, KillTask)
    assert bare.tag == namespaced.tag == "kill"


def test_task_decoder_item_stack() -> None:
    task = TaskDecoder().decode(
        {"id": "T1", "type": "item", "item": {"id": "minecraft:stick", "Count": 2}, "consume_items": True},
        "task",
    )

    assert isinstance(task.variant, ItemTask)
    assert task.variant.item == ItemStackDef(id="minecraft:stick", count=2)
    assert task.variant.count is None
    assert task.variant.consume_items is True


def test_task_decoder_unknown_tag_names_the_tag() -> None:
    with pytest.raises(UnknownVariantError) as excinfo:
        TaskDecoder().decode({"id": "T1", "type": "ftbquests:block"}, "quest 'Q' tasks[0]")

    assert excinfo.value.tag == "ftbquests:block"
    assert "ftbquests:block" in str(excinfo.value)


def test_task_decoder_requires_variant_fields() -> None:
    with pytest.raises(DataValidationError, match=r"tasks\[0\].dimension must be a string"):
        TaskDecoder().decode({"id": "T1", "type": "dimension"}, "tasks[0]")


def test_task_decoder_observation_type() -> None:
    task = TaskDecoder().decode(
        {"id": "T1", "type": "observation", "timer": 20, "observe_type": 5, "to_observe": "minecraft:cow"},
        "task",
    )

    assert isinstance(task.variant, ObservationTask)
    assert task.variant.observe_type is ObserveType.ENTITY_TYPE


def test_every_declared_variant_has_a_decoder() -> None:
    assert {variant.TAG for variant in TASK_VARIANTS} == set(TaskDecoder().known_tags)
    assert {variant.TAG for variant in REWARD_VARIANTS} == set(RewardDecoder().known_tags)


def test_reward_decoder_loot_references() -> None:
    decoder = RewardDecoder()
    by_ordinal = decoder.decode({"id": "R1", "type": "loot", "table": 3}, "reward")
    by_key = decoder.decode({"id": "R2", "type": "ftbquests:loot", "table_id": "5F"}, "reward")

    assert isinstance(by_ordinal.variant, LootReward)
    assert by_ordinal.variant.table == TableOrdinalRef(order_index=3)
    assert isinstance(by_key.variant, LootReward)
    assert by_key.variant.table == TableKeyRef(table_id="5F")


def test_reward_decoder_loot_requires_exactly_one_reference() -> None:
    decoder = RewardDecoder()
    with pytest.raises(DataValidationError, match="exactly one"):
        decoder.decode({"id": "R1", "type": "loot"}, "reward")
    with pytest.raises(DataValidationError, match="exactly one"):
        decoder.decode({"id": "R1", "type": "loot", "table": 1, "table_id": "A"}, "reward")


def test_reward_decoder_inline_table_data_without_id() -> None:
    reward = RewardDecoder().decode(
        {
            "id": "R1",
            "type": "loot",
            "table": 9,
            "table_data": {"loot_table_id": "minecraft:chests/simple_dungeon", "rewards": []},
        },
        "reward",
    )

    assert isinstance(reward.variant, LootReward)
    assert reward.variant.table_data is not None
    assert reward.variant.table_data.loot_table_id == "minecraft:chests/simple_dungeon"


def test_reward_decoder_xp_optional_amount() -> None:
    reward = RewardDecoder().decode({"id": "R1", "type": "xp"}, "reward")

    assert isinstance(reward.variant, XpReward)
    assert reward.variant.xp is None


def test_decode_reward_table_document() -> None:
    table = RewardDecoder().decode_table(
        make_table(
            "7C",
            title="Common Loot",
            order_index=2,
            rewards=[
                {"type": "item", "item": "minecraft:apple", "weight": 5.0},
                {"type": "xp", "xp": 20},
            ],
            loot_crate={"string_id": "common", "color": 16777215, "drops": {"monster": 10}},
        ),
        "reward_tables/common.snbt",
    )

    assert table.id == "7C"
    assert table.order_index == 2
    assert [entry.weight for entry in table.rewards] == [5.0, 1.0]
    assert table.loot_crate is not None and table.loot_crate.drops is not None
    assert table.loot_crate.drops.monster == 10
    assert table.loot_table_id is None


def test_chapter_decoder_dependencies_variants() -> None:
    chapter = ChapterDecoder().decode(
        make_chapter(
            quests=[
                make_quest("1A", dependencies=[10, 11]),
                make_quest("1B", dependencies=["0A", "0B"]),
                make_quest("1C"),
            ]
        ),
        "chapters/one.snbt",
    )

    legacy, resolved, missing = chapter.quests
    assert legacy.dependencies == LegacyDependencies(ids=(10, 11))
    assert resolved.dependencies == ResolvedDependencies(ids=("0A", "0B"))
    assert missing.dependencies == ResolvedDependencies(ids=())


def test_chapter_decoder_rejects_mixed_dependencies() -> None:
    with pytest.raises(DataValidationError, match="only numeric ids or only string ids"):
        ChapterDecoder().decode(make_chapter(quests=[make_quest(dependencies=[10, "0B"])]), "chapter")


def test_chapter_decoder_reports_wrong_shape_with_context() -> None:
    with pytest.raises(DataValidationError, match=r"chapter 'C0' quests\[0\] '1A'.tasks must be a list"):
        ChapterDecoder().decode(make_chapter(quests=[make_quest(tasks={"id": "T"})]), "chapter")


def test_chapter_decoder_keeps_quest_fields() -> None:
    chapter = ChapterDecoder().decode(
        make_chapter(
            group="5A",
            quests=[
                make_quest(
                    "1A",
                    title="Wood",
                    subtitle="Punch trees",
                    description=["line one", ""],
                    hide=True,
                    shape="",
                    x=1.5,
                    y=-2,
                )
            ],
            images=[{"image": "minecraft:textures/block/dirt.png", "x": 0.0, "y": 0.0}],
        ),
        "chapter",
    )

    quest = chapter.quests[0]
    assert chapter.group == "5A"
    assert len(chapter.images) == 1
    assert quest.title == "Wood"
    assert quest.subtitle == "Punch trees"
    assert quest.description == ("line one", "")
    assert quest.hide is True
    assert quest.shape is None
    assert (quest.x, quest.y) == (1.5, -2)


def test_chapter_decoder_title_falls_back_to_id() -> None:
    chapter = ChapterDecoder().decode({"id": "C9", "quests": []}, "chapter")

    assert chapter.title == "C9"


def test_chapter_groups_decoder_indexes_by_id() -> None:
    groups = ChapterGroupsDecoder().decode(
        {"chapter_groups": [{"id": "5A", "title": "Main"}, {"id": "5B", "title": "Side"}]}
    )

    assert list(groups) == ["5A", "5B"]
    assert groups["5B"].title == "Side"


def test_quest_file_decoder_defaults() -> None:
    quest_file = QuestFileDecoder().decode(
        {"title": "Book", "emergency_items": [{"id": "minecraft:apple", "Count": 1}], "drop_loot_crates": 1}
    )

    assert quest_file.title == "Book"
    assert quest_file.default_quest_shape == "circle"
    assert quest_file.default_autoclaim_rewards == "default"
    assert quest_file.emergency_items == (ItemStackDef(id="minecraft:apple", count=1),)
    assert quest_file.drop_loot_crates is True


def test_quest_file_decoder_rejects_unknown_autoclaim_mode() -> None:
    with pytest.raises(DataValidationError, match="default_autoclaim_rewards"):
        QuestFileDecoder().decode({"default_autoclaim_rewards": "sometimes"})
