"""Definitions shared by several FTB Quests documents."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

QuestShape = Literal["circle", "square", "pentagon", "hexagon", "gear"]


@dataclass(slots=True)
class ItemStackDef:
    id: str
    count: int | None = None


ItemRef = Union[str, ItemStackDef]


def item_id_of(item: ItemRef) -> str:
    """Return the registry id of a bare id or an item stack."""
    if isinstance(item, ItemStackDef):
        return item.id
    return item
