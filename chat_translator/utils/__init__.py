"""
Chat Translator - Utility Functions
"""
from chat_translator.utils.language_detection import (
    classify,
    count_characters,
    target_language_for
)
from chat_translator.utils.capabilities import (
    Clipboard,
    LocalFileSystem
)
from chat_translator.utils.logging import (
    LogBuffer,
    AppLogger,
    get_logger,
    debug_print
)

__all__ = [
    "classify",
    "count_characters",
    "target_language_for",
    "Clipboard",
    "LocalFileSystem",
    "LogBuffer",
    "AppLogger",
    "get_logger",
    "debug_print"
]
