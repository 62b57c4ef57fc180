"""
Result Items
============
What a query hands back to the host, plus the deferred actions attached to it.
"""
from dataclasses import dataclass, field
from typing import Callable, Optional

import pyperclip

from chat_translator.utils.logging import get_logger


@dataclass
class SaveTokenAction:
    """Persist a bearer token when the result is activated."""
    store: object
    token: str

    def __call__(self) -> bool:
        try:
            self.store.save(self.token)
        except OSError as e:
            get_logger().app_logger.error(f"Failed to save token: {e}")
            return False
        return True


@dataclass
class CopyToClipboardAction:
    """Copy a translation to the clipboard when the result is activated."""
    clipboard: object
    text: str

    def __call__(self) -> bool:
        try:
            self.clipboard.write_text(self.text)
        except pyperclip.PyperclipException as e:
            get_logger().app_logger.error(f"Failed to write clipboard: {e}")
            return False
        return True


@dataclass
class ResultItem:
    """A single entry in the result list."""
    title: str
    subtitle: str = ""
    icon_path: str = ""
    action: Optional[Callable[[], bool]] = field(default=None, repr=False)

    @property
    def actionable(self) -> bool:
        return self.action is not None

    def activate(self) -> bool:
        """Run the attached action; items without one report failure."""
        if self.action is None:
            return False
        return self.action()

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'title': self.title,
            'subtitle': self.subtitle,
            'icon': self.icon_path,
            'actionable': self.actionable,
        }
