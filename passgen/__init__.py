"""Placeholder password generator desktop application."""

__version__ = "1.0.0"
