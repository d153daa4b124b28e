"""Custom exception classes for the password generator application.

Most conditions in this application are reported softly (an empty password,
a False return value). These exceptions cover the few places where a caller
asks for a strict check.
"""


class PasswordGenError(Exception):
    """Base exception class for all password generator errors."""
    pass


class ClipboardError(PasswordGenError):
    """Exception raised for errors in the clipboard management component.

    Examples:
    - No clipboard mechanism available on this platform
    - Copy operation failures
    """
    pass


class ConfigurationError(PasswordGenError):
    """Exception raised when the configured components cannot be assembled.

    Examples:
    - Unknown clipboard backend name
    """
    pass
