"""
GUI entry point for the password generator application.

This module provides the main entry point for the PyQt5-based desktop
application.
"""

import sys
import logging
from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from passgen.clipboard_manager import ClipboardManager, NullClipboard, create_clipboard
from passgen.config import settings
from passgen.exceptions import ClipboardError
from passgen.gui.main_window import MainWindow


def setup_logging():
    """Configure basic logging for the application."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def build_clipboard():
    """
    Create the configured clipboard writer.

    Falls back to the no-op placeholder when the system clipboard is not
    usable, so the window still opens.
    """
    logger = logging.getLogger(__name__)
    clipboard = create_clipboard(settings.clipboard_backend)

    if isinstance(clipboard, ClipboardManager):
        try:
            clipboard.require_clipboard()
        except ClipboardError as e:
            logger.error(f"{e}; Copy button disabled")
            return NullClipboard()

    return clipboard


def main():
    """Main entry point for the GUI application."""
    # Set up logging
    setup_logging()
    logger = logging.getLogger(__name__)

    logger.info("=" * 60)
    logger.info("Password Generator - GUI Mode")
    logger.info("=" * 60)
    logger.info("Configuration:")
    logger.info(f"  Default Length: {settings.default_length}")
    logger.info(f"  Window Size: {settings.window_width}x{settings.window_height}")
    logger.info(f"  Clipboard Backend: {settings.clipboard_backend}")
    logger.info(f"  Log Level: {settings.log_level}")
    logger.info("=" * 60)

    # Enable high DPI scaling (must be set before the application exists)
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    # Create Qt application
    app = QApplication(sys.argv)
    app.setApplicationName(settings.window_title)
    app.setDesktopFileName(settings.application_id)

    # Create and show main window
    window = MainWindow(clipboard=build_clipboard())
    window.show()

    logger.info("GUI application started")

    # Run application event loop
    exit_code = app.exec_()

    logger.info(f"GUI application exited with code {exit_code}")

    return exit_code


if __name__ == '__main__':
    sys.exit(main())
