"""Shared type aliases for the core and domain layers."""
from typing import Any, Dict, List, Union

TreeScalar = Union[str, int, float, bool]
TreeValue = Union[TreeScalar, Dict[str, Any], List[Any]]
TargetPayload = Dict[str, Any]

__all__ = ["TargetPayload", "TreeScalar", "TreeValue"]
