"""Represents a single parsed wiki article."""

from __future__ import annotations

from attrs import field, frozen

from .types import FieldList


@frozen
class Article:
    """Represents a single parsed wiki article.

    Attributes:
        title: Text of the only level-1 heading.
        body: Trimmed text preceding the first field or footer marker.
        fields: Fields in document order.
        footer: Trimmed footer text, ``None`` when the document has none.
        author_flag: Whether the requester should be shown as the author.
    """

    title: str
    body: str = ""
    fields: FieldList = field(factory=tuple, converter=tuple, repr=False)
    footer: str | None = None
    author_flag: bool = False
