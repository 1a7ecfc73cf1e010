"""Enumerations for outline parameters and cover styles."""

from enum import Enum, IntEnum


class Difficulty(IntEnum):
    """Target reader level, from complete novice to domain expert."""
    NOVICE = 1
    BASIC = 2
    GENERAL = 3
    ADVANCED = 4
    EXPERT = 5


class ImageTone(str, Enum):
    LINE_ART = "line-art"
    WATERCOLOR = "watercolor"
    CREATIVE = "creative"
