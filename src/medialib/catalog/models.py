"""Value types shared by catalog entities."""

from enum import Enum


class Language(str, Enum):
    """Original language of a catalog item."""

    ENGLISH = "english"
    FRENCH = "french"
    CHINESE = "chinese"
    ANCIENT_GREEK = "ancient-greek"
    SPANISH = "spanish"
    GERMAN = "german"
    JAPANESE = "japanese"
