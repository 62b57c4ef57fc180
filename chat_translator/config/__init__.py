"""
Chat Translator - Configuration Module
"""
from chat_translator.config.settings import Config, config
from chat_translator.config.constants import (
    Language,
    TargetLanguage,
    DebounceState
)

__all__ = [
    "Config",
    "config",
    "Language",
    "TargetLanguage",
    "DebounceState"
]
