"""Phonetic Bengali input method engine with a line-based console."""

__version__ = "0.1.0"
__all__ = ["__version__"]