"""
Local Capabilities
==================
Thin clipboard and filesystem wrappers handed to the services that need them.
"""
from pathlib import Path
from typing import Optional, Union

import pyperclip

PathLike = Union[str, Path]


class Clipboard:
    """System clipboard backed by pyperclip."""

    def __init__(self, backend=None):
        self._backend = backend or pyperclip

    def write_text(self, text: str) -> None:
        self._backend.copy(text)

    def read_text(self) -> str:
        return self._backend.paste()


class LocalFileSystem:
    """Plain UTF-8 text file access."""

    encoding = 'utf-8'

    def exists(self, path: PathLike) -> bool:
        return Path(path).is_file()

    def read_text(self, path: PathLike) -> Optional[str]:
        """Read a file, returning None when it does not exist."""
        path = Path(path)
        if not path.is_file():
            return None
        return path.read_text(encoding=self.encoding)

    def write_text(self, path: PathLike, text: str) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding=self.encoding)

    def append_text(self, path: PathLike, text: str) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open('a', encoding=self.encoding) as f:
            f.write(text)
