"""
OpenAI Chat Completion Client
=============================
Builds translation prompts, posts them to the completion endpoint and turns
whatever comes back into a TranslationOutcome.

Each request gets its own session and daemon thread. Cancelling a request
closes its session, so an abandoned call never holds up the next one.
"""
import threading
from concurrent.futures import Future
from concurrent.futures import TimeoutError as FutureTimeoutError
from pathlib import Path
from typing import Optional, Set

import requests

from chat_translator.config import config
from chat_translator.config.constants import TargetLanguage, TARGET_LANGUAGE_NAMES
from chat_translator.models.translation import (
    TranslationRequest,
    TranslationOutcome,
    Success,
    RemoteError,
    TransportError,
    Cancelled,
    OpenAIError
)
from chat_translator.utils.capabilities import LocalFileSystem
from chat_translator.utils.logging import get_logger, debug_print


INVALID_TOKEN_MESSAGE = "The saved API token contains characters that cannot be sent in an HTTP header"


class OpenAIClient:
    """Client for the chat-completion translation endpoint."""

    def __init__(
        self,
        api_url: str = None,
        model: str = None,
        response_log_path: Path = None,
        fs: LocalFileSystem = None,
        poll_interval: float = None
    ):
        self.api_url = api_url or config.openai.api_url
        self.model = model or config.openai.model
        self.response_log_path = Path(response_log_path) if response_log_path else config.paths.response_log_file
        self.fs = fs or LocalFileSystem()
        self.poll_interval = poll_interval if poll_interval is not None else config.openai.cancel_poll_interval
        self.logger = get_logger().translation_logger

        self._sessions_lock = threading.Lock()
        self._sessions: Set[requests.Session] = set()

    def _open_session(self) -> requests.Session:
        # No transport retries: a failed call is reported, the user re-types to retry
        session = requests.Session()
        adapter = requests.adapters.HTTPAdapter(max_retries=0)
        session.mount('http://', adapter)
        session.mount('https://', adapter)
        with self._sessions_lock:
            self._sessions.add(session)
        return session

    def _close_session(self, session: requests.Session) -> None:
        with self._sessions_lock:
            self._sessions.discard(session)
        session.close()

    @property
    def open_requests(self) -> int:
        """Number of requests whose session is still open."""
        with self._sessions_lock:
            return len(self._sessions)

    def build_prompt(self, request: TranslationRequest) -> str:
        """Build the system instruction for a translation."""
        language = TARGET_LANGUAGE_NAMES[request.target_language]
        return (
            f"Translate the following text to {language}. "
            f"Reply with the translation only. "
            f"Do not mention your training data or your knowledge cutoff.\n\n"
            f"{request.source_text}"
        )

    def build_payload(self, request: TranslationRequest) -> dict:
        """Build the JSON body for the completion request."""
        return {
            'model': self.model,
            'messages': [
                {'role': 'system', 'content': self.build_prompt(request)}
            ],
            'max_tokens': config.openai.max_tokens,
            'temperature': config.openai.temperature
        }

    def translate(
        self,
        text: str,
        target_language: TargetLanguage,
        token: str,
        cancel_event: threading.Event = None
    ) -> TranslationOutcome:
        """
        Translate text, giving up as soon as cancel_event is set.

        Args:
            text: Text to translate
            target_language: Language to translate into
            token: Bearer token for the endpoint
            cancel_event: Set by the caller when this attempt is superseded

        Returns:
            Success, RemoteError, TransportError or Cancelled
        """
        if not text:
            return Success("")

        cancel_event = cancel_event or threading.Event()
        if cancel_event.is_set():
            return Cancelled()

        # HTTP header values are latin-1; http.client raises before sending otherwise
        try:
            token.encode('latin-1')
        except UnicodeEncodeError:
            self.logger.warning("Refusing to send a token with non latin-1 characters")
            return TransportError(INVALID_TOKEN_MESSAGE)

        request = TranslationRequest(source_text=text, target_language=target_language)
        payload = self.build_payload(request)

        debug_print(f"[REQUEST] {len(text)} chars -> {target_language.value}", 'DEBUG', 'OPENAI')
        session = self._open_session()
        future = Future()
        worker = threading.Thread(
            target=self._post,
            args=(session, future, payload, token),
            name='openai-request',
            daemon=True
        )
        worker.start()

        try:
            response = self._wait(future, cancel_event)
        except requests.Timeout:
            self.logger.warning("Completion request timed out")
            return TransportError("Request timed out")
        except requests.RequestException as e:
            self.logger.warning(f"Completion request failed: {e}")
            return TransportError(str(e))
        except ValueError as e:
            # raised by requests/http.client for requests it refuses to build
            self.logger.warning(f"Completion request rejected before sending: {e}")
            return TransportError(str(e))
        finally:
            self._close_session(session)

        if response is None:
            self.logger.debug("Completion request abandoned after cancellation")
            return Cancelled()

        if not 200 <= response.status_code < 300:
            return self._parse_error(response)

        self._log_response(response.text)
        return self._parse_success(response)

    def _post(self, session: requests.Session, future: Future, payload: dict, token: str) -> None:
        if not future.set_running_or_notify_cancel():
            return
        try:
            response = session.post(
                self.api_url,
                json=payload,
                headers={'Authorization': f'Bearer {token}'},
                timeout=(config.openai.connect_timeout, config.openai.read_timeout)
            )
        except Exception as e:
            future.set_exception(e)
        else:
            future.set_result(response)

    def _wait(self, future: Future, cancel_event: threading.Event) -> Optional[requests.Response]:
        """Wait for the response; None means the caller cancelled first."""
        while not cancel_event.is_set():
            try:
                return future.result(timeout=self.poll_interval)
            except FutureTimeoutError:
                continue
        # the worker's late response is dropped once its session is closed
        return None

    def _parse_error(self, response: requests.Response) -> RemoteError:
        try:
            error = OpenAIError.from_response(response.json())
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            self.logger.error(f"Unreadable error body (HTTP {response.status_code}): {e}")
            return RemoteError(f"Failed to parse error response (HTTP {response.status_code})")

        self.logger.warning(
            f"Completion endpoint returned HTTP {response.status_code}: "
            f"{error.type or 'unknown'} {error.code or ''} {error.message}"
        )
        return RemoteError(error.message)

    def _parse_success(self, response: requests.Response) -> TranslationOutcome:
        try:
            content = response.json()['choices'][0]['message']['content']
            text = content.strip()
        except (ValueError, KeyError, IndexError, TypeError, AttributeError) as e:
            self.logger.error(f"Unreadable completion body: {e}")
            return RemoteError("Failed to parse completion response")
        return Success(text)

    def _log_response(self, body: str) -> None:
        """Append the raw body to the response log. Never fails the translation."""
        try:
            self.fs.append_text(self.response_log_path, body)
        except OSError as e:
            self.logger.warning(f"Could not write response log {self.response_log_path}: {e}")

    def close(self):
        """Close the sessions of any requests still in flight."""
        with self._sessions_lock:
            sessions = list(self._sessions)
            self._sessions.clear()
        for session in sessions:
            session.close()


# Global client instance
_client_instance: Optional[OpenAIClient] = None


def get_openai_client() -> OpenAIClient:
    """Get or create the global client instance."""
    global _client_instance
    if _client_instance is None:
        _client_instance = OpenAIClient()
    return _client_instance
