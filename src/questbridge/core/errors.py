"""Root exception shared by the data and service layers."""


class ConversionError(Exception):
    """Base exception for quests that cannot be converted to the Heracles format."""
