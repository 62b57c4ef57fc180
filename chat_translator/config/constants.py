"""
Constants and Enums for Chat Translator
"""
from enum import Enum


class Language(str, Enum):
    """Coarse classification of input text."""
    ZH = "zh"
    OTHER = "other"


class TargetLanguage(str, Enum):
    """Languages a translation can be requested into."""
    EN = "en"
    ZH_HANT = "zh-Hant"


class DebounceState(str, Enum):
    """States of a debounced translation attempt."""
    IDLE = "idle"
    WAITING = "waiting"
    RUNNING = "running"
    CANCELLED = "cancelled"


# Display names used when prompting the model
TARGET_LANGUAGE_NAMES = {
    TargetLanguage.EN: 'English',
    TargetLanguage.ZH_HANT: 'Traditional Chinese',
}

# CJK Unified Ideographs block
CJK_RANGE_START = 0x4E00
CJK_RANGE_END = 0x9FFF

# Query command surface
AUTH_COMMAND = "auth"
TRANSLATE_PREFIX = "tr "
