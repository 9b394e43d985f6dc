"""Exception hierarchy for the input method engine."""

from __future__ import annotations


class ObadhError(Exception):
    """Base class for every error the engine raises."""


class InvalidInputError(ObadhError):
    """Raised when input cannot be accepted."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid input: {detail}")


class SystemFailureError(ObadhError):
    """Raised when an operating-system level operation fails."""

    def __init__(self, error: OSError) -> None:
        self.error = error
        super().__init__(f"System error: {error}")
        self.__cause__ = error