"""
Translation Data Models
=======================
Request and outcome types for a single translation attempt.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional
from chat_translator.config.constants import TargetLanguage


UNKNOWN_REMOTE_ERROR = "The translation service returned an error without a message"


@dataclass(frozen=True)
class TranslationRequest:
    """Text to translate and the language to translate it into."""
    source_text: str
    target_language: TargetLanguage


class TranslationOutcome:
    """Base class for the result of one translation attempt."""

    @property
    def is_error(self) -> bool:
        return False


@dataclass(frozen=True)
class Success(TranslationOutcome):
    text: str


@dataclass(frozen=True)
class RemoteError(TranslationOutcome):
    """The endpoint answered with an error, or with a body we could not read."""
    message: str

    @property
    def is_error(self) -> bool:
        return True


@dataclass(frozen=True)
class TransportError(TranslationOutcome):
    """The request never got a response."""
    message: str

    @property
    def is_error(self) -> bool:
        return True


@dataclass(frozen=True)
class Cancelled(TranslationOutcome):
    """Superseded by newer input before a result was produced."""


@dataclass
class OpenAIError:
    """Error object returned by the completion endpoint."""
    message: str
    type: Optional[str] = None
    param: Optional[str] = None
    code: Optional[str] = None

    @classmethod
    def from_response(cls, data: Dict[str, Any]) -> 'OpenAIError':
        """
        Build from a ``{"error": {...}}`` body.

        Raises:
            KeyError, TypeError, AttributeError: if the body does not carry an error object
        """
        error = data['error']
        message = error.get('message')
        if not isinstance(message, str) or not message.strip():
            message = UNKNOWN_REMOTE_ERROR
        return cls(
            message=message,
            type=error.get('type'),
            param=error.get('param'),
            code=error.get('code')
        )