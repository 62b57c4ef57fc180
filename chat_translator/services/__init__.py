"""
Chat Translator - Services
"""
from chat_translator.services.credential_store import CredentialStore, get_credential_store
from chat_translator.services.openai_client import OpenAIClient, get_openai_client
from chat_translator.services.debounce import DebounceController
from chat_translator.services.session import TranslationSession

__all__ = [
    "CredentialStore",
    "get_credential_store",
    "OpenAIClient",
    "get_openai_client",
    "DebounceController",
    "TranslationSession"
]
