from __future__ import annotations


class WordMatchError(Exception):
    """Base class for errors raised by the word service."""


class InvalidInput(WordMatchError):
    """The analyze text is missing or is not a string."""


class PersistenceIOFailure(WordMatchError):
    """The word list file could not be read or written."""

    def __init__(self, path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
