"""Common type aliases for parser structures."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .article import Article  # noqa: F401
    from .field import Field  # noqa: F401


FieldList = tuple["Field", ...]
Source = tuple[str, str]
SourceList = list[Source]
ArticleMap = dict[str, "Article"]
