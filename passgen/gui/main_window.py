"""
Main window for the GUI application.

This module provides the main application window that lays out the input,
output and button panels and wires the button clicks to the password
generator and the clipboard writer.
"""

import logging
from dataclasses import dataclass
from typing import Optional
from PyQt5.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QStatusBar

from passgen.clipboard_manager import ClipboardWriter, NullClipboard
from passgen.config import settings
from passgen.generator import PasswordGenerator, parse_length
from .panels import InputPanel, OutputPanel, ButtonsPanel
from .log_handler import QtLogHandler


logger = logging.getLogger(__name__)

# Diagnostics from these loggers are shown in the status bar
STATUS_LOGGER_NAME = "passgen"


@dataclass
class UiState:
    """Widgets the event handlers read from and write to."""

    input_panel: InputPanel
    output_panel: OutputPanel


class MainWindow(QMainWindow):
    """
    Main application window.

    Owns the panels, the password generator and the clipboard writer.
    Generation runs synchronously on the GUI thread when Generate is clicked.
    """

    def __init__(
        self,
        generator: Optional[PasswordGenerator] = None,
        clipboard: Optional[ClipboardWriter] = None
    ):
        """
        Initialize the main window.

        Args:
            generator: Password generator; a default one is created if omitted
            clipboard: Clipboard writer used by Copy; the no-op placeholder if omitted
        """
        super().__init__()

        self.generator = generator if generator is not None else PasswordGenerator()
        self.clipboard = clipboard if clipboard is not None else NullClipboard()

        self.log_handler = None

        # Set when a diagnostic was put in the status bar during a handler
        self._diagnostic_shown = False

        self._setup_ui()
        self._apply_dark_theme()
        self._setup_logging()

        logger.info("Main window initialized")

    def _setup_ui(self):
        """Set up the user interface."""
        self.setWindowTitle(settings.window_title)
        self.resize(settings.window_width, settings.window_height)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        root_layout.setSpacing(0)

        self.input_panel = InputPanel(default_length=settings.default_length)
        self.output_panel = OutputPanel()
        self.buttons_panel = ButtonsPanel()

        root_layout.addWidget(self.input_panel)
        root_layout.addWidget(self.output_panel, 1)
        root_layout.addWidget(self.buttons_panel)

        central_widget.setLayout(root_layout)

        self.state = UiState(
            input_panel=self.input_panel,
            output_panel=self.output_panel
        )

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        self.status_bar.showMessage("Ready")

        # Connect button signals
        self.buttons_panel.generate_clicked.connect(self.generate)
        self.buttons_panel.copy_clicked.connect(self.copy)

    def _setup_logging(self):
        """Route warnings from the application loggers to the status bar."""
        self.log_handler = QtLogHandler(level=logging.WARNING)
        self.log_handler.log_message.connect(self._show_diagnostic)

        status_logger = logging.getLogger(STATUS_LOGGER_NAME)
        # Warnings must reach the status bar whatever LOG_LEVEL is set to
        status_logger.setLevel(min(status_logger.getEffectiveLevel(), logging.WARNING))
        status_logger.addHandler(self.log_handler)

        logger.debug("Status bar logging handler configured")

    def _apply_dark_theme(self):
        """Apply dark theme stylesheet to the application."""
        dark_theme = """
        QMainWindow {
            background-color: #1e1e1e;
        }

        QWidget {
            background-color: #1e1e1e;
            color: #d4d4d4;
            font-family: 'Segoe UI', Arial, sans-serif;
            font-size: 11px;
        }

        QLineEdit, QTextEdit {
            background-color: #252526;
            color: #d4d4d4;
            border: 1px solid #3e3e42;
            border-radius: 3px;
            padding: 5px;
        }

        QLabel {
            background-color: transparent;
            font-weight: bold;
        }

        QPushButton {
            background-color: #0e639c;
            color: #ffffff;
            border: none;
            border-radius: 3px;
            padding: 8px 15px;
            font-weight: bold;
        }

        QPushButton:hover {
            background-color: #1177bb;
        }

        QPushButton:pressed {
            background-color: #0d5a8f;
        }

        QStatusBar {
            background-color: #007acc;
            color: #ffffff;
        }
        """

        self.setStyleSheet(dark_theme)

    def generate(self):
        """Handle generate button click."""
        self._diagnostic_shown = False
        length = parse_length(self.state.input_panel.text())
        password = self.generator.generate(length)
        self.state.output_panel.set_password(password)

        if not self._diagnostic_shown:
            self.status_bar.showMessage(f"Generated {len(password)} characters", 3000)

    def copy(self):
        """Handle copy button click."""
        password = self.state.output_panel.password()

        self._diagnostic_shown = False
        if self.clipboard.copy_to_clipboard(password):
            self.status_bar.showMessage(f"Copied {len(password)} characters to clipboard", 3000)
        elif not self._diagnostic_shown:
            self.status_bar.showMessage("Nothing copied to clipboard", 2000)

    def _show_diagnostic(self, timestamp: str, level: str, message: str):
        """
        Show a log record in the status bar.

        Args:
            timestamp: Timestamp string (HH:MM:SS)
            level: Log level name
            message: Formatted log message
        """
        self._diagnostic_shown = True
        self.status_bar.showMessage(f"[{timestamp}] {level}: {message}", 5000)

    def closeEvent(self, event):
        """
        Handle window close event.

        Args:
            event: Close event
        """
        logger.info("Application closing...")

        if self.log_handler is not None:
            logging.getLogger(STATUS_LOGGER_NAME).removeHandler(self.log_handler)
            self.log_handler = None

        event.accept()
