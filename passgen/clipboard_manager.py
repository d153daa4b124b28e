"""Clipboard management module for the Copy button.

This module defines the ClipboardWriter capability used by the main window
and its two implementations: a no-op placeholder (the default) and a
pyperclip-backed writer with proper error handling and logging.
"""

import logging
from typing import Protocol
import pyperclip

from passgen.exceptions import ClipboardError, ConfigurationError

# Module-level logger
logger = logging.getLogger(__name__)


class ClipboardWriter(Protocol):
    """Anything that can put text on a clipboard."""

    def copy_to_clipboard(self, text: str) -> bool:
        ...


class NullClipboard:
    """Placeholder clipboard that never touches the system clipboard."""

    def copy_to_clipboard(self, text: str) -> bool:
        logger.debug(f"Clipboard copy not implemented; ignored {len(text)} characters")
        return False


class ClipboardManager:
    """Manage clipboard operations for generated passwords.

    This class provides a simple interface to copy text to the system clipboard
    with proper error handling and logging. It wraps the pyperclip library to
    provide consistent behavior across the application.

    Features:
    - Copy text to clipboard with validation
    - Error handling for clipboard access issues
    - Context manager support for consistency

    Usage:
        with ClipboardManager() as clipboard:
            success = clipboard.copy_to_clipboard("a*1-e")
            if success:
                print("Password copied to clipboard")
    """

    def __init__(self):
        """Initialize the ClipboardManager."""
        logger.debug("ClipboardManager initialized")

    def require_clipboard(self):
        """Check that pyperclip found a clipboard mechanism.

        Raises:
            ClipboardError: If no copy/paste mechanism is available
        """
        try:
            pyperclip.paste()
        except pyperclip.PyperclipException as e:
            raise ClipboardError(f"No clipboard mechanism available: {e}") from e

    def copy_to_clipboard(self, text: str) -> bool:
        """Copy text to the system clipboard.

        Args:
            text: The text to copy to clipboard

        Returns:
            True if copy was successful, False otherwise
        """
        # Validate input
        if not text or not text.strip():
            logger.debug("Skipping clipboard copy: empty or whitespace-only text")
            return False

        try:
            pyperclip.copy(text)

            # Passwords are never written to the log
            logger.info(f"Copied to clipboard: {len(text)} characters")
            return True

        except pyperclip.PyperclipException as e:
            logger.error(f"Failed to copy text to clipboard: {e}")
            return False

    def close(self):
        """Clean up resources.

        This is a no-op for ClipboardManager since pyperclip doesn't require
        explicit cleanup, but provided for consistency with other components.
        """
        logger.debug("ClipboardManager cleanup completed (no-op)")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - cleanup resources."""
        self.close()
        return False  # Propagate exceptions


def create_clipboard(backend: str) -> ClipboardWriter:
    """Build the clipboard writer named by the configuration.

    Args:
        backend: "none" for the placeholder, "pyperclip" for the system clipboard

    Returns:
        A ClipboardWriter implementation

    Raises:
        ConfigurationError: If the backend name is unknown
    """
    if backend == "none":
        return NullClipboard()
    if backend == "pyperclip":
        return ClipboardManager()
    raise ConfigurationError(f"Unknown clipboard backend: {backend!r}")
