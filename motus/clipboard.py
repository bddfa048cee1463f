"""Put generated passwords on the system clipboard through Qt."""

import logging
import os
import sys

from .errors import ClipboardError

logger = logging.getLogger(__name__)

DISPLAY_VARIABLES = ("DISPLAY", "WAYLAND_DISPLAY", "QT_QPA_PLATFORM")


def display_available() -> bool:
    """
    Whether Qt can start a GUI application here. Without a platform plugin
    Qt aborts the process instead of raising, so this is checked first.
    """
    if sys.platform in ("win32", "darwin"):
        return True
    return any(os.environ.get(name) for name in DISPLAY_VARIABLES)


def copy_to_clipboard(text: str) -> None:
    if not display_available():
        raise ClipboardError("no display available for the clipboard (use --no-clipboard)")

    # Qt is only loaded when a copy is requested.
    try:
        from PySide6.QtGui import QClipboard, QGuiApplication
    except ImportError as e:
        raise ClipboardError(f"Qt is not available: {e}") from e

    try:
        app = QGuiApplication.instance() or QGuiApplication([])
        clipboard: QClipboard = app.clipboard()
        clipboard.setText(text, mode=QClipboard.Mode.Clipboard)
        if clipboard.supportsSelection():
            clipboard.setText(text, mode=QClipboard.Mode.Selection)
    except Exception as e:
        raise ClipboardError(f"unable to set clipboard contents: {e}") from e
    logger.debug("copied %d characters to the clipboard", len(text))
