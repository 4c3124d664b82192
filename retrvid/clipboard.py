from __future__ import annotations

from typing import Protocol

import pyperclip

from .errors import ClipboardError


class Clipboard(Protocol):
    def set_text(self, text: str) -> None:  # noqa: D401
        """Replace the clipboard contents with ``text``."""


class SystemClipboard:
    """System clipboard through pyperclip."""

    def set_text(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ClipboardError(f"unable to copy to the clipboard: {e}") from e
