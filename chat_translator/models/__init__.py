"""
Chat Translator - Data Models
"""
from chat_translator.models.translation import (
    TranslationRequest,
    TranslationOutcome,
    Success,
    RemoteError,
    TransportError,
    Cancelled,
    OpenAIError
)
from chat_translator.models.results import (
    ResultItem,
    SaveTokenAction,
    CopyToClipboardAction
)

__all__ = [
    "TranslationRequest",
    "TranslationOutcome",
    "Success",
    "RemoteError",
    "TransportError",
    "Cancelled",
    "OpenAIError",
    "ResultItem",
    "SaveTokenAction",
    "CopyToClipboardAction"
]
