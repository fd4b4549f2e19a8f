"""Notepad: an in-memory notes REST service."""

__version__ = "1.0.0"
