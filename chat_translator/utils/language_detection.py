"""
Language Detection Utilities
=============================
Coarse Chinese/other classification used to pick a translation direction.
"""
from typing import Tuple
from chat_translator.config.constants import (
    Language,
    TargetLanguage,
    CJK_RANGE_START,
    CJK_RANGE_END
)


def is_cjk_ideograph(char: str) -> bool:
    """Check whether a character is in the CJK Unified Ideographs block."""
    return CJK_RANGE_START <= ord(char) <= CJK_RANGE_END


def count_characters(text: str) -> Tuple[int, int]:
    """
    Count ideographs against everything else.

    Returns:
        Tuple of (chinese_count, other_count)
    """
    chinese_count = sum(1 for char in text if is_cjk_ideograph(char))
    return chinese_count, len(text) - chinese_count


def classify(text: str) -> Language:
    """
    Classify text as predominantly Chinese or not.

    The text is Chinese only when ideographs strictly outnumber all other
    characters, so empty text and even splits classify as OTHER.
    """
    chinese_count, other_count = count_characters(text)
    return Language.ZH if chinese_count > other_count else Language.OTHER


def target_language_for(language: Language) -> TargetLanguage:
    """Chinese goes to English; everything else goes to Traditional Chinese."""
    if language == Language.ZH:
        return TargetLanguage.EN
    return TargetLanguage.ZH_HANT
