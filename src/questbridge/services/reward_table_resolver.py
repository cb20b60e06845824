"""Resolution of loot reward table references."""
from __future__ import annotations

from typing import Dict, Iterable

from questbridge.domain.defs import LootReward, RewardTableDef, TableKeyRef, TableOrdinalRef
from questbridge.services.errors import UnresolvedRewardTableError


class RewardTableIndex:
    """Read-only lookup of the reward tables loaded for one conversion run."""

    def __init__(self, tables: Iterable[RewardTableDef]) -> None:
        self._by_order_index: Dict[int, RewardTableDef] = {}
        self._by_id: Dict[str, RewardTableDef] = {}
        for table in tables:
            # First table wins, matching a linear search over the loaded documents.
            if table.order_index is not None:
                self._by_order_index.setdefault(table.order_index, table)
            self._by_id.setdefault(table.id, table)

    def find(self, reward: LootReward) -> RewardTableDef | None:
        """Return the loaded table the reward points at, without the inline fallback."""
        if isinstance(reward.table, TableOrdinalRef):
            return self._by_order_index.get(reward.table.order_index)
        if isinstance(reward.table, TableKeyRef):
            return self._by_id.get(reward.table.table_id)
        return None

    def resolve(self, reward: LootReward, reward_id: str | None = None) -> RewardTableDef:
        """Return the loaded table, else the inline table_data, else fail."""
        table = self.find(reward)
        if table is None and reward.table_data is not None:
            table = reward.table_data
        if table is None:
            raise UnresolvedRewardTableError(
                f"Invalid reward {reward_id or ''}: no reward table matches {_describe(reward)} "
                "and no table_data is present."
            )
        return table


def _describe(reward: LootReward) -> str:
    if isinstance(reward.table, TableOrdinalRef):
        return f"order index {reward.table.order_index}"
    return f"id '{reward.table.table_id}'"
