"""Exceptions raised while building articles."""

from __future__ import annotations


class WikartError(Exception):
    """Base class for all errors raised by this package."""


class MalformedDocumentError(WikartError, ValueError):
    """A document could not be turned into an article."""


class DuplicateTitleError(MalformedDocumentError):
    """A document contains more than one title line."""

    def __init__(self, first: str, second: str) -> None:
        super().__init__(
            f"document has a second title {second!r} after {first!r}"
        )
        self.first = first
        self.second = second


class RegistryLoadError(WikartError):
    """Loading the registry was aborted because a document failed to parse.

    Attributes:
        key: Key of the source that failed.
    """

    def __init__(self, key: str, reason: Exception) -> None:
        super().__init__(f"{key}: {reason}")
        self.key = key
