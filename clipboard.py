"""System clipboard gateway based on pyperclip."""

from __future__ import annotations

import logging
from typing import Optional

try:
    import pyperclip
except Exception:  # pragma: no cover
    pyperclip = None  # type: ignore

logger = logging.getLogger(__name__)


def preview(text: str, limit: int = 50) -> str:
    """Truncate clipboard text for log lines."""
    return text if len(text) <= limit else text[:limit] + "..."


class PyperclipClipboard:
    def read(self) -> Optional[str]:
        """Return clipboard text, or None when it is empty or not text."""
        if pyperclip is None:
            raise RuntimeError("pyperclip is not installed")
        text = pyperclip.paste()
        if not isinstance(text, str) or not text:
            logger.info("Clipboard is empty")
            return None
        logger.info("Read from clipboard: %s", preview(text))
        return text

    def write(self, text: str) -> None:
        if pyperclip is None:
            raise RuntimeError("pyperclip is not installed")
        pyperclip.copy(text)
        logger.info("Wrote to clipboard: %s", preview(text))
