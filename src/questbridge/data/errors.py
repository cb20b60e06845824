"""Custom exceptions for data loading and validation."""
from questbridge.core.errors import ConversionError


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """Raised when quest files are missing, unreadable or not valid SNBT."""


class DataValidationError(DataError):
    """Raised when a parsed tree does not have the expected document shape."""


class UnknownVariantError(DataValidationError, ConversionError):
    """Raised when a task or reward tag matches no known FTB Quests type."""

    def __init__(self, kind: str, tag: str, context: str) -> None:
        super().__init__(f"{context} has unknown {kind} type '{tag}'.")
        self.kind = kind
        self.tag = tag
