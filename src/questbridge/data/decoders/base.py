"""Shared validation helpers for decoding parsed SNBT trees."""
from __future__ import annotations

from typing import Any, Dict, List, Tuple

from questbridge.data.errors import DataValidationError
from questbridge.domain.defs import ItemRef, ItemStackDef


class DecoderBase:
    """Typed accessors that fail fast with a dotted context on the first mismatch."""

    @staticmethod
    def _require_mapping(value: object, context: str) -> Dict[str, Any]:
        if not isinstance(value, dict):
            raise DataValidationError(f"{context} must be a compound.")
        return value

    @staticmethod
    def _require_list(value: object, context: str) -> List[Any]:
        if not isinstance(value, list):
            raise DataValidationError(f"{context} must be a list.")
        return value

    @staticmethod
    def _optional_list(value: object, context: str) -> List[Any]:
        if value is None:
            return []
        if not isinstance(value, list):
            raise DataValidationError(f"{context} must be a list.")
        return value

    @staticmethod
    def _require_str(value: object, context: str) -> str:
        if not isinstance(value, str):
            raise DataValidationError(f"{context} must be a string.")
        return value

    @classmethod
    def _optional_str(cls, value: object, context: str) -> str | None:
        if value is None:
            return None
        return cls._require_str(value, context)

    @staticmethod
    def _require_int(value: object, context: str) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise DataValidationError(f"{context} must be an integer.")
        return value

    @classmethod
    def _optional_int(cls, value: object, context: str) -> int | None:
        if value is None:
            return None
        return cls._require_int(value, context)

    @staticmethod
    def _require_number(value: object, context: str) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise DataValidationError(f"{context} must be a number.")
        return value

    @classmethod
    def _optional_number(cls, value: object, context: str) -> float | None:
        if value is None:
            return None
        return cls._require_number(value, context)

    @staticmethod
    def _require_long(value: object, context: str) -> int | str:
        """Longs arrive either as integers or as decimal strings depending on the writer."""
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise DataValidationError(f"{context} must be an integer or a numeric string.")
        return value

    @staticmethod
    def _optional_bool(value: object, context: str) -> bool | None:
        if value is None:
            return None
        if isinstance(value, bool):
            return value
        # Older quest books store flags as bytes (0b / 1b).
        if isinstance(value, int) and value in (0, 1):
            return bool(value)
        raise DataValidationError(f"{context} must be a boolean.")

    @classmethod
    def _flag(cls, value: object, context: str, default: bool = False) -> bool:
        result = cls._optional_bool(value, context)
        return default if result is None else result

    @classmethod
    def _str_tuple(cls, value: object, context: str) -> Tuple[str, ...]:
        entries = cls._optional_list(value, context)
        return tuple(cls._require_str(entry, f"{context}[{index}]") for index, entry in enumerate(entries))

    @classmethod
    def _decode_item_stack(cls, value: object, context: str) -> ItemStackDef:
        mapping = cls._require_mapping(value, context)
        item_id = cls._require_str(mapping.get("id"), f"{context}.id")
        raw_count = mapping.get("Count", mapping.get("count"))
        return ItemStackDef(id=item_id, count=cls._optional_int(raw_count, f"{context}.count"))

    @classmethod
    def _decode_item(cls, value: object, context: str) -> ItemRef:
        if isinstance(value, str):
            return value
        return cls._decode_item_stack(value, context)

    @classmethod
    def _optional_item(cls, value: object, context: str) -> ItemRef | None:
        if value is None:
            return None
        return cls._decode_item(value, context)
