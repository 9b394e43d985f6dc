"""Minimal keystroke engine mapping a few Roman sequences to Bengali."""

from __future__ import annotations


class InputEngine:
    """Buffers keystrokes and emits Bengali characters on a match."""

    def __init__(self) -> None:
        self._buffer = ""
        self._mappings = {
            "k": "ক",
            "kh": "খ",
            "g": "গ",
            "gh": "ঘ",
        }

    def process_char(self, c: str) -> str | None:
        """Add one character; return the Bengali text for the longest matching suffix."""
        self._buffer += c
        for length in range(len(self._buffer), 0, -1):
            suffix = self._buffer[-length:]
            bengali = self._mappings.get(suffix)
            if bengali is not None:
                self._buffer = self._buffer[:-length]
                return bengali
        return None