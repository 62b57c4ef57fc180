"""
Credential Store
================
Single bearer token persisted as plaintext in the application-data directory.
"""
from pathlib import Path
from typing import Optional

from chat_translator.config import config
from chat_translator.utils.capabilities import LocalFileSystem
from chat_translator.utils.logging import get_logger


class CredentialStore:
    """Get/set the API token. Last write wins."""

    def __init__(self, path: Path = None, fs: LocalFileSystem = None):
        self.path = Path(path) if path else config.paths.token_file
        self.fs = fs or LocalFileSystem()
        self.logger = get_logger().app_logger

    def save(self, token: str) -> None:
        """Overwrite the stored token. No validation is performed."""
        self.fs.write_text(self.path, token)
        self.logger.info(f"API token saved to {self.path}")

    def load(self) -> Optional[str]:
        """Return the stored token, or None if none has been saved yet."""
        return self.fs.read_text(self.path)

    def exists(self) -> bool:
        return self.fs.exists(self.path)


# Global store instance
_store_instance: Optional[CredentialStore] = None


def get_credential_store() -> CredentialStore:
    """Get or create the global credential store."""
    global _store_instance
    if _store_instance is None:
        _store_instance = CredentialStore()
    return _store_instance
