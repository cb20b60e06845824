"""Conversions between FTB Quests identifiers and Heracles identifiers."""
from __future__ import annotations

import re
import uuid
from typing import List

from questbridge.domain.defs import Dependencies, LegacyDependencies

FTB_NAMESPACE = "ftbquests"
_PREFIX = f"{FTB_NAMESPACE}:"
_LOW_64_MASK = (1 << 64) - 1
_HEX_ID = re.compile(r"[0-9A-Fa-f]+")


def normalize_tag(tag: str) -> str:
    """Strip the optional ``ftbquests:`` namespace so both spellings dispatch alike."""
    if tag.startswith(_PREFIX):
        return tag[len(_PREFIX):]
    return tag


def render_legacy_dependency(value: int) -> str:
    """Render a numeric legacy quest id as unpadded uppercase hexadecimal."""
    return f"{value:X}"


def normalize_dependencies(dependencies: Dependencies) -> List[str]:
    """Return dependency ids in the string form used by Heracles."""
    if isinstance(dependencies, LegacyDependencies):
        return [render_legacy_dependency(value) for value in dependencies.ids]
    return list(dependencies.ids)


def checkmark_uuid(quest_id: str) -> str:
    """Derive the Heracles check value from a hexadecimal quest id.

    The id may be wider than 64 bits; only the low 64 bits are kept. Those
    8 bytes are written little-endian into both halves of the UUID, so the
    same quest always maps to the same identifier across conversions.
    """
    if not _HEX_ID.fullmatch(quest_id):
        raise ValueError(f"Quest id '{quest_id}' is not hexadecimal.")
    value = int(quest_id, 16)
    half = (value & _LOW_64_MASK).to_bytes(8, "little")
    return str(uuid.UUID(bytes=half + half))
