"""In-memory registry of parsed wiki articles."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from attrs import field, frozen

from .errors import MalformedDocumentError, RegistryLoadError
from .parser import Article, discover_sources, parse_article
from .parser.types import ArticleMap, Source

logger = logging.getLogger(__name__)

# Autocomplete consumers accept at most this many choices.
MAX_SEARCH_RESULTS = 25


@frozen
class SearchChoice:
    """Autocomplete entry with a display label and a selectable value."""

    name: str
    value: str


def _freeze(articles: Mapping[str, Article]) -> Mapping[str, Article]:
    """Return a read-only copy of ``articles``."""

    return MappingProxyType(dict(articles))


@frozen
class ArticleRegistry:
    """Read-only mapping from document key to parsed article."""

    articles: Mapping[str, Article] = field(
        factory=dict, converter=_freeze, repr=False
    )

    def lookup(self, key: str) -> Article | None:
        """Return the article stored under ``key`` or ``None``."""

        return self.articles.get(key)

    def search(
        self, query: str, limit: int = MAX_SEARCH_RESULTS
    ) -> list[str]:
        """Return titles containing ``query``, ignoring case.

        Args:
            query: Substring to look for. An empty query matches every title.
            limit: Maximum number of titles, never more than
                ``MAX_SEARCH_RESULTS``.

        Returns:
            Matching titles in registry order.
        """

        limit = max(0, min(limit, MAX_SEARCH_RESULTS))
        needle = query.lower()

        titles: list[str] = []
        for article in self.articles.values():
            if len(titles) >= limit:
                break
            if needle in article.title.lower():
                titles.append(article.title)
        return titles

    def choices(
        self, query: str, limit: int = MAX_SEARCH_RESULTS
    ) -> list[SearchChoice]:
        """Return autocomplete choices for ``query``."""

        return [
            SearchChoice(name=title, value=title)
            for title in self.search(query, limit)
        ]

    def keys(self) -> list[str]:
        """Return the document keys in registry order."""

        return list(self.articles)

    def __contains__(self, key: object) -> bool:
        """Return whether an article is stored under ``key``."""

        return key in self.articles

    def __iter__(self) -> Iterator[str]:
        """Iterate over the document keys."""

        return iter(self.articles)

    def __len__(self) -> int:
        """Return the number of loaded articles."""

        return len(self.articles)


def load_registry(sources: Iterable[Source]) -> ArticleRegistry:
    """Parse every source and build the registry.

    Args:
        sources: ``(key, text)`` pairs in enumeration order. When a key
            repeats, the last source wins.

    Returns:
        The populated registry.

    Raises:
        RegistryLoadError: If any document fails to parse. Nothing is
            returned in that case.
    """

    articles: ArticleMap = {}
    for key, text in sources:
        try:
            article = parse_article(text)
        except MalformedDocumentError as exc:
            raise RegistryLoadError(key, exc) from exc

        if key in articles:
            logger.warning("Duplicate article key %r; keeping the last", key)
        logger.debug("Loaded article %r (%s)", key, article.title)
        articles[key] = article

    logger.info("Loaded %d wiki articles", len(articles))
    return ArticleRegistry(articles)


def load_directory(root: Path | str) -> ArticleRegistry:
    """Build the registry from the documents stored below ``root``."""

    return load_registry(discover_sources(root))
