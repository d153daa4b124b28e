"""
Panel widgets that make up the password generator window.

The window is a vertical stack of three panels: the length input, the
read-only password output and the Generate/Copy buttons.
"""

from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QTextEdit, QPushButton, QLabel, QLineEdit
)
from PyQt5.QtCore import pyqtSignal


class InputPanel(QWidget):
    """
    Panel holding the "how many characters" label and entry field.
    """

    def __init__(self, default_length: int = 5):
        """
        Initialize the input panel.

        Args:
            default_length: Value pre-filled in the entry field
        """
        super().__init__()
        self._setup_ui(default_length)

    def _setup_ui(self, default_length: int):
        """Set up the user interface."""
        layout = QHBoxLayout()
        layout.setSpacing(10)

        label = QLabel("HOW MANY CHARACTERS?")
        layout.addWidget(label)

        self.length_entry = QLineEdit()
        self.length_entry.setText(str(default_length))
        layout.addWidget(self.length_entry)

        self.setLayout(layout)

    def text(self) -> str:
        """Return the raw text currently in the entry field."""
        return self.length_entry.text()


class OutputPanel(QWidget):
    """
    Panel displaying the generated password in a read-only text area.
    """

    def __init__(self):
        """Initialize the output panel."""
        super().__init__()
        self._setup_ui()

    def _setup_ui(self):
        """Set up the user interface."""
        layout = QVBoxLayout()
        layout.setSpacing(10)

        label = QLabel("YOUR RANDOM PASSWORD")
        layout.addWidget(label)

        self.text_display = QTextEdit()
        self.text_display.setReadOnly(True)
        self.text_display.setAcceptRichText(False)
        # Show a few rows even when the window is small
        self.text_display.setMinimumHeight(100)
        layout.addWidget(self.text_display)

        self.setLayout(layout)

    def set_password(self, password: str):
        """
        Replace the displayed text.

        Args:
            password: Text to show verbatim
        """
        self.text_display.setPlainText(password)

    def password(self) -> str:
        """Return the currently displayed text."""
        return self.text_display.toPlainText()


class ButtonsPanel(QWidget):
    """
    Panel with the Generate and Copy buttons.

    Signals:
        generate_clicked: Emitted when the Generate button is clicked
        copy_clicked: Emitted when the Copy button is clicked
    """

    generate_clicked = pyqtSignal()
    copy_clicked = pyqtSignal()

    def __init__(self):
        """Initialize the buttons panel."""
        super().__init__()
        self._setup_ui()

    def _setup_ui(self):
        """Set up the user interface."""
        layout = QHBoxLayout()
        layout.setSpacing(50)

        self.generate_button = QPushButton("GENERATE")
        self.generate_button.clicked.connect(self._on_generate)
        layout.addWidget(self.generate_button)

        self.copy_button = QPushButton("COPY")
        self.copy_button.clicked.connect(self._on_copy)
        layout.addWidget(self.copy_button)

        self.setLayout(layout)

    def _on_generate(self):
        """Handle generate button click."""
        self.generate_clicked.emit()

    def _on_copy(self):
        """Handle copy button click."""
        self.copy_clicked.emit()
