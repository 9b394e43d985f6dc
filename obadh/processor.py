"""Phonetic transliteration of Roman text into Bengali script."""

from __future__ import annotations

import string

from obadh.types import BengaliChar, CharKind, ProcessingContext

_MAX_KEY_LENGTH = 5
_HASANTA = "্"
_CASE_SENSITIVE = frozenset("tTdDnNsSrR")
_ASCII_PUNCTUATION = frozenset(string.punctuation)

_VOWELS = [
    ("a", "আ", "া"),
    ("i", "ই", "ি"),
    ("I", "ঈ", "ী"),
    ("u", "উ", "ু"),
    ("U", "ঊ", "ূ"),
    ("rri", "ঋ", "ৃ"),
    ("e", "এ", "ে"),
    ("OI", "ঐ", "ৈ"),
    ("O", "ও", "ো"),
    ("OU", "ঔ", "ৌ"),
]

_CONSONANTS = [
    ("k", "ক"), ("kh", "খ"), ("g", "গ"), ("gh", "ঘ"), ("Ng", "ঙ"),
    ("c", "চ"), ("ch", "ছ"), ("j", "জ"), ("jh", "ঝ"), ("NG", "ঞ"),
    ("T", "ট"), ("Th", "ঠ"), ("D", "ড"), ("Dh", "ঢ"), ("N", "ণ"),
    ("t", "ত"), ("th", "থ"), ("d", "দ"), ("dh", "ধ"), ("n", "ন"),
    ("p", "প"), ("ph", "ফ"), ("f", "ফ"), ("b", "ব"), ("bh", "ভ"),
    ("v", "ভ"), ("m", "ম"), ("z", "য"), ("r", "র"), ("l", "ল"),
    ("sh", "শ"), ("S", "শ"), ("Sh", "ষ"), ("s", "স"), ("h", "হ"),
    ("R", "ড়"), ("Rh", "ঢ়"), ("y", "য়"),
]

_SIGN_TO_VOWEL = {sign: vowel for _, vowel, sign in _VOWELS}


def _build_mappings() -> dict[str, list[BengaliChar]]:
    mappings: dict[str, list[BengaliChar]] = {
        "o": [BengaliChar(CharKind.VOWEL, "অ")],
    }
    for roman, vowel, sign in _VOWELS:
        mappings[roman] = [
            BengaliChar(CharKind.VOWEL, vowel),
            BengaliChar(CharKind.VOWEL_SIGN, sign),
        ]
    for roman, consonant in _CONSONANTS:
        mappings[roman] = [BengaliChar(CharKind.CONSONANT, consonant)]
    mappings["\\^"] = [BengaliChar(CharKind.SPECIAL, "ঁ")]
    mappings["\\`"] = [BengaliChar(CharKind.SPECIAL, _HASANTA)]
    mappings["\\\\"] = [BengaliChar(CharKind.SYMBOL, "\\")]
    mappings["\\$"] = [BengaliChar(CharKind.SPECIAL, "৳")]
    return mappings


def is_punctuation(c: str) -> bool:
    """Return True for ASCII punctuation and whitespace."""
    return c in _ASCII_PUNCTUATION or c.isspace()


class Processor:
    """Stateful transliterator from Roman keystrokes to Bengali text."""

    def __init__(self) -> None:
        self._mappings = _build_mappings()
        self._context = ProcessingContext()
        self._pending: str | None = None

    def process_input(self, text: str) -> str:
        """Transliterate a whole string and return the Bengali output."""
        out: list[str] = []
        self._pending = None
        index = 0
        while index < len(text):
            current = text[index]
            if is_punctuation(current):
                self._flush(out)
                out.append(current)
                index += 1
                self._context.previous = None
                continue

            consumed = self._consume_match(text, index, out)
            if consumed:
                index += consumed
                continue

            self._flush(out)
            out.append(current)
            index += 1
            self._context.previous = None

        self._flush(out)
        return "".join(out)

    def _consume_match(self, text: str, index: int, out: list[str]) -> int:
        """Apply the longest mapping starting at ``index``; return characters used."""
        longest = min(_MAX_KEY_LENGTH, len(text) - index)
        for length in range(longest, 0, -1):
            key = text[index:index + length]

            if key.startswith("\\"):
                self._flush(out)
                chars = self._mappings.get(key)
                if chars is None:
                    out.append("\\")
                    return 1
                out.extend(ch.to_char() for ch in chars)
                self._context.previous = None
                return length

            chars = self._lookup(key)
            if chars is None:
                continue

            if key == "o" and self._pending is not None:
                self._context.prevent_conjunct = True
            else:
                self._handle(chars, out)
            return length
        return 0

    def _lookup(self, key: str) -> list[BengaliChar] | None:
        if key in self._mappings:
            return self._mappings[key]
        lower = key.lower()
        if lower in self._mappings and key not in _CASE_SENSITIVE:
            return self._mappings[lower]
        return None

    def _flush(self, out: list[str]) -> None:
        if self._pending is not None:
            out.append(self._pending)
            self._pending = None

    def _select(self, chars: list[BengaliChar]) -> BengaliChar:
        previous = self._context.previous
        if previous is not None and previous.kind is CharKind.CONSONANT:
            for ch in chars:
                if ch.kind is CharKind.VOWEL_SIGN:
                    return ch
        for ch in chars:
            if ch.kind is CharKind.VOWEL:
                return ch
        return chars[0]

    def _handle(self, chars: list[BengaliChar], out: list[str]) -> None:
        selected = self._select(chars)

        if selected.kind is CharKind.CONSONANT:
            if self._pending is not None:
                if self._context.prevent_conjunct:
                    out.append(self._pending)
                    self._context.prevent_conjunct = False
                else:
                    out.append(self._pending + _HASANTA)
            self._pending = selected.value
            self._context.previous = selected
            return

        if selected.kind is CharKind.VOWEL_SIGN:
            if self._pending is not None:
                out.append(self._pending + selected.value)
                self._pending = None
            else:
                out.append(_SIGN_TO_VOWEL.get(selected.value, selected.value))
            self._context.previous = None
            return

        self._flush(out)
        out.append(selected.value)
        self._context.previous = None