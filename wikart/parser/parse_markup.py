"""Parse wiki markup into an article."""

from __future__ import annotations

from .article import Article
from .utils import ArticleBuilder, split_lines


def parse_article(content: str) -> Article:
    """Parse the markup of a single wiki document.

    Args:
        content: Raw text of the document.

    Returns:
        The parsed article.

    Raises:
        MalformedDocumentError: If the document has no title line.
        DuplicateTitleError: If the document has more than one title line.
    """

    builder = ArticleBuilder()
    for line in split_lines(content):
        builder.feed(line)
    return builder.build()
