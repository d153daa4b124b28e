"""
Custom logging handler for GUI integration.

This module provides a logging handler that emits Qt signals, allowing
diagnostics from the generator and clipboard modules to be shown in the
main window's status bar.
"""

import logging
from datetime import datetime
from PyQt5.QtCore import QObject, pyqtSignal


class QtLogHandler(logging.Handler, QObject):
    """
    Custom logging handler that emits Qt signals for GUI display.

    Signals:
        log_message: Emitted when a log message is received
                    Args: timestamp (str), level (str), message (str)
    """

    # Define signal for log messages
    log_message = pyqtSignal(str, str, str)  # timestamp, level, message

    def __init__(self, level=logging.NOTSET):
        """Initialize the Qt log handler."""
        logging.Handler.__init__(self, level)
        QObject.__init__(self)

        # Status bar has room for one line only
        self.setFormatter(logging.Formatter('%(message)s'))

    def emit(self, record):
        """
        Emit a log record as a Qt signal.

        Args:
            record: LogRecord instance from Python logging
        """
        try:
            timestamp = datetime.now().strftime('%H:%M:%S')
            message = self.format(record)
            self.log_message.emit(timestamp, record.levelname, message)

        except Exception:
            # Fallback to stderr if signal emission fails
            self.handleError(record)
