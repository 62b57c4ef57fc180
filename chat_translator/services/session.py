"""
Translation Session
===================
Entry point for the host: turns a search string into a list of result items.
"""
from typing import List

from chat_translator.config import config
from chat_translator.config.constants import AUTH_COMMAND, TRANSLATE_PREFIX
from chat_translator.models.results import ResultItem, SaveTokenAction, CopyToClipboardAction
from chat_translator.models.translation import (
    TranslationOutcome,
    Success,
    Cancelled
)
from chat_translator.services.credential_store import CredentialStore, get_credential_store
from chat_translator.services.debounce import DebounceController
from chat_translator.services.openai_client import OpenAIClient, get_openai_client
from chat_translator.utils.capabilities import Clipboard
from chat_translator.utils.language_detection import classify, target_language_for
from chat_translator.utils.logging import get_logger, debug_print


class TranslationSession:
    """Parses queries and drives classify -> debounce -> translate."""

    def __init__(
        self,
        credential_store: CredentialStore = None,
        client: OpenAIClient = None,
        debounce: DebounceController = None,
        clipboard: Clipboard = None
    ):
        self.credential_store = credential_store or get_credential_store()
        self.client = client or get_openai_client()
        self.debounce = debounce or DebounceController()
        self.clipboard = clipboard or Clipboard()
        self.icon_path = config.paths.icon_path
        self.logger = get_logger().app_logger

    def handle_query(self, search_text: str) -> List[ResultItem]:
        """Answer one query. Never raises for translation failures."""
        parameters = search_text.split()

        if len(parameters) > 1 and parameters[0].lower() == AUTH_COMMAND:
            return [self._auth_result(parameters[1])]

        # Character-set trim, so "track" becomes "ack"
        input_text = search_text.lstrip(TRANSLATE_PREFIX)

        token = self.credential_store.load()
        if token is None:
            return [ResultItem(
                title="Please enter [auth {token}] to save your OpenAI token",
                subtitle="OpenAI token is required for translation.",
                icon_path=self.icon_path
            )]

        if not input_text:
            return [ResultItem(
                title="Please enter text to translate.",
                icon_path=self.icon_path
            )]

        outcome = self.debounce.run(
            lambda cancel_event: self._translate(input_text, token, cancel_event)
        )
        return [self._outcome_result(outcome)]

    def _auth_result(self, token: str) -> ResultItem:
        return ResultItem(
            title="Press Enter to save OpenAI token.",
            subtitle=f"Token: {token}",
            icon_path=self.icon_path,
            action=SaveTokenAction(self.credential_store, token)
        )

    def _translate(self, text: str, token: str, cancel_event) -> TranslationOutcome:
        language = classify(text)
        target = target_language_for(language)
        debug_print(f"[TRANSLATE] detected={language.value} target={target.value}", 'DEBUG', 'SESSION')
        return self.client.translate(text, target, token, cancel_event)

    def _outcome_result(self, outcome: TranslationOutcome) -> ResultItem:
        if isinstance(outcome, Success):
            return ResultItem(
                title=outcome.text,
                subtitle="Translated text. Press Enter to copy.",
                icon_path=self.icon_path,
                action=CopyToClipboardAction(self.clipboard, outcome.text)
            )
        if outcome.is_error:
            self.logger.info(f"Translation failed: {outcome.message}")
            return ResultItem(
                title=f"Error: {outcome.message}",
                subtitle="Edit the text to try again.",
                icon_path=self.icon_path
            )
        if isinstance(outcome, Cancelled):
            return ResultItem(
                title=f"Translation superseded, see {self.client.response_log_path}",
                subtitle="A newer query replaced this one.",
                icon_path=self.icon_path
            )
        raise TypeError(f"Unknown translation outcome: {outcome!r}")
