"""
GUI module for the password generator desktop application.

This module provides the PyQt5-based window with the length input, the
password output and the Generate/Copy buttons.
"""

__version__ = "1.0.0"
