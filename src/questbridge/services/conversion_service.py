"""End-to-end conversion of an FTB Quests source bundle."""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Dict, List

from questbridge.core.types import TargetPayload, TreeValue
from questbridge.data.decoders import ChapterDecoder, ChapterGroupsDecoder, QuestFileDecoder, RewardDecoder
from questbridge.data.quest_source import QuestSourceBundle
from questbridge.data.snbt_loader import decode_buffer, parse_snbt
from questbridge.domain.defs import ChapterDef, RewardTableDef
from questbridge.services.quest_assembler import QuestAssembler
from questbridge.services.reward_table_resolver import RewardTableIndex

logger = logging.getLogger(__name__)

TreeParser = Callable[[str, str], TreeValue]


def convert_ftb_quests(
    bundle: QuestSourceBundle,
    *,
    parse: TreeParser = parse_snbt,
) -> Dict[str, TargetPayload]:
    """Convert every quest of ``bundle`` to the Heracles format.

    The first decoding or conversion error aborts the whole run; no partial
    result is returned.
    """

    def _parse(data: bytes, source: str) -> TreeValue:
        return parse(decode_buffer(data, source), source)

    reward_decoder = RewardDecoder()
    quest_file = QuestFileDecoder().decode(_parse(bundle.file_data, "data.snbt"))
    logger.debug("Loaded quest file '%s'", quest_file.title or quest_file.id or "")
    groups = ChapterGroupsDecoder().decode(_parse(bundle.chapter_groups, "chapter_groups.snbt"))

    chapter_decoder = ChapterDecoder(reward_decoder=reward_decoder)
    chapters: List[ChapterDef] = []
    for index, data in enumerate(bundle.chapters):
        source = bundle.chapter_source(index)
        chapters.append(chapter_decoder.decode(_parse(data, source), source))

    tables: List[RewardTableDef] = []
    for index, data in enumerate(bundle.reward_tables):
        source = bundle.reward_table_source(index)
        table = reward_decoder.decode_table(_parse(data, source), source)
        if table.order_index is None:
            table = replace(table, order_index=index)
        tables.append(table)

    assembler = QuestAssembler(groups=groups, reward_tables=RewardTableIndex(tables))
    quests = assembler.assemble(chapters)
    logger.info(
        "Converted %d quests from %d chapters (%d reward tables)",
        len(quests),
        len(chapters),
        len(tables),
    )
    return quests
