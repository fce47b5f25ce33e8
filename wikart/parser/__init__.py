"""Parser package for wiki articles."""

from .article import Article
from .discover import discover_sources
from .field import Field
from .parse_markup import parse_article
from .utils import LineKind, classify_line

__all__ = [
    "Article",
    "Field",
    "LineKind",
    "classify_line",
    "discover_sources",
    "parse_article",
]
