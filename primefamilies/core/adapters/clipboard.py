"""
Clipboard adapter - copy result text to the system clipboard via Qt.

Requires a running QApplication in the calling process. Every failure is
fatal: callers are expected to abort rather than retry.

Usage:
    from primefamilies.core.adapters.clipboard import copy_to_clipboard

    copy_to_clipboard("3, 7, 31, 127")
"""

from typing import Optional

from primefamilies.common.logging import get_logger
from primefamilies.core.config.settings import Settings, get_settings
from primefamilies.core.errors import ClipboardError, FatalError

logger = get_logger(__name__)


class ClipboardService:
    """Thin wrapper over QApplication.clipboard()."""

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()

    def _clipboard(self):
        if not self._settings.clipboard_enabled:
            raise FatalError(
                "Clipboard access is disabled",
                data={"setting": "CLIPBOARD_ENABLED"},
            )
        try:
            from PyQt5.QtWidgets import QApplication
        except ImportError as e:
            raise FatalError("Qt bindings are not available", cause=e)

        app = QApplication.instance()
        if app is None:
            raise FatalError("No QApplication instance; clipboard unavailable")
        return app.clipboard()

    def copy(self, text: str) -> None:
        """
        Put `text` on the clipboard.

        Raises:
            FatalError: Clipboard disabled or unavailable
            ClipboardError: The clipboard did not accept the text
        """
        clipboard = self._clipboard()
        clipboard.setText(text)
        if clipboard.text() != text:
            raise ClipboardError(
                "Clipboard rejected the text",
                data={"length": len(text)},
            )
        logger.debug("Copied to clipboard", data={"length": len(text)})


def copy_to_clipboard(text: str) -> None:
    """Copy text using a ClipboardService built from current settings."""
    ClipboardService().copy(text)
