"""Service-layer exceptions raised while converting quests."""
from questbridge.core.errors import ConversionError
from questbridge.data.errors import UnknownVariantError

__all__ = [
    "ConversionError",
    "UnknownVariantError",
    "UnresolvedRewardTableError",
    "UnsupportedRewardTableError",
    "UnsupportedVariantError",
]


class UnsupportedVariantError(ConversionError):
    """Raised when a known task or reward type has no Heracles conversion."""

    def __init__(self, kind: str, tag: str, object_id: str | None = None) -> None:
        where = f" '{object_id}'" if object_id else ""
        super().__init__(f"Don't know how to convert {kind}{where} of type {tag}.")
        self.kind = kind
        self.tag = tag
        self.object_id = object_id


class UnresolvedRewardTableError(ConversionError):
    """Raised when a loot reward references no loaded table and carries no inline table."""


class UnsupportedRewardTableError(ConversionError):
    """Raised when a resolved reward table has no direct loot table id."""
