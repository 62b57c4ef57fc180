"""
Debounce Controller
===================
Coalesces bursts of translation attempts so only the newest one reaches the
network. Each attempt gets an epoch; starting an attempt cancels the previous
epoch, waits out a quiet period, and only then runs the unit of work.
"""
import itertools
import threading
from typing import Callable, Optional

from chat_translator.config import config
from chat_translator.config.constants import DebounceState
from chat_translator.models.translation import TranslationOutcome, Cancelled
from chat_translator.utils.logging import get_logger, debug_print


Work = Callable[[threading.Event], TranslationOutcome]


class Epoch:
    """One generation of a cancellable attempt."""

    def __init__(self, number: int):
        self.number = number
        self.cancel_event = threading.Event()
        self.state = DebounceState.WAITING

    @property
    def cancelled(self) -> bool:
        return self.cancel_event.is_set()

    def cancel(self):
        self.cancel_event.set()
        self.state = DebounceState.CANCELLED


class DebounceController:
    """Owns the single live epoch shared by overlapping queries."""

    def __init__(self, quiet_period: float = None):
        self.quiet_period = quiet_period if quiet_period is not None else config.debounce.quiet_period
        self.logger = get_logger().translation_logger
        self._lock = threading.Lock()
        self._live: Optional[Epoch] = None
        self._counter = itertools.count(1)

    @property
    def state(self) -> DebounceState:
        with self._lock:
            return self._live.state if self._live else DebounceState.IDLE

    def _begin(self) -> Epoch:
        """Retire the live epoch and publish a new one in a single step."""
        with self._lock:
            previous = self._live
            if previous is not None:
                previous.cancel()
            epoch = Epoch(next(self._counter))
            self._live = epoch

        if previous is not None:
            debug_print(
                f"[DEBOUNCE] epoch {previous.number} superseded by {epoch.number}",
                'DEBUG', 'DEBOUNCE', epoch=previous.number
            )
        return epoch

    def _finish(self, epoch: Epoch):
        with self._lock:
            if self._live is epoch:
                self._live = None

    def run(self, work: Work) -> TranslationOutcome:
        """
        Run work once the quiet period passes without a newer attempt.

        Args:
            work: Called with the epoch's cancel event; must return an outcome

        Returns:
            The work's outcome, or Cancelled if this attempt was superseded
            while waiting or running
        """
        epoch = self._begin()
        try:
            outcome = self._run_epoch(epoch, work)
        finally:
            self._finish(epoch)

        name = type(outcome).__name__
        debug_print(f"[DEBOUNCE] epoch {epoch.number} -> {name}", 'DEBUG', 'DEBOUNCE', epoch=epoch.number, outcome=name)
        return outcome

    def _run_epoch(self, epoch: Epoch, work: Work) -> TranslationOutcome:
        if epoch.cancel_event.wait(self.quiet_period):
            return Cancelled()

        epoch.state = DebounceState.RUNNING
        outcome = work(epoch.cancel_event)

        # A newer attempt owns the result list now
        if epoch.cancelled:
            self.logger.debug(f"Discarding outcome of superseded epoch {epoch.number}")
            return Cancelled()
        return outcome

    def cancel(self):
        """Cancel whatever attempt is live."""
        with self._lock:
            if self._live is not None:
                self._live.cancel()
                self._live = None
