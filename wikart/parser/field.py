"""Represents a named section of an article."""

from __future__ import annotations

from attrs import frozen


@frozen
class Field:
    """Represents a named section of an article.

    Attributes:
        name: Heading text of the section, without inline brackets.
        value: Raw content of the section. Every line is prefixed with a
            line break and the result is not trimmed.
        inline: Whether the heading was wrapped in square brackets.
    """

    name: str
    value: str = ""
    inline: bool = False
