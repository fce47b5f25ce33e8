"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from pathlib import Path

from attrs import define, field
from dotenv import load_dotenv

from .registry import MAX_SEARCH_RESULTS

DEFAULT_ARTICLES_DIR = "wiki_articles"


def _search_limit(value: int | str) -> int:
    """Clamp the search limit to the range accepted by autocomplete."""

    try:
        limit = int(value)
    except ValueError as exc:
        raise ValueError(
            f"search limit must be an integer, got {value!r}"
        ) from exc
    return max(1, min(limit, MAX_SEARCH_RESULTS))


@define(slots=True)
class Settings:
    """Settings shared by the command line and the web application.

    Attributes:
        articles_dir: Directory searched recursively for wiki documents.
        log_file: Optional file receiving log output.
        search_limit: Maximum number of search results.
    """

    articles_dir: Path = field(
        default=Path(DEFAULT_ARTICLES_DIR), converter=Path
    )
    log_file: str | None = None
    search_limit: int = field(
        default=MAX_SEARCH_RESULTS, converter=_search_limit
    )

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from ``WIKART_*`` variables and a ``.env`` file."""

        load_dotenv()
        return cls(
            articles_dir=os.environ.get(
                "WIKART_ARTICLES", DEFAULT_ARTICLES_DIR
            ),
            log_file=os.environ.get("WIKART_LOG_FILE") or None,
            search_limit=os.environ.get(
                "WIKART_SEARCH_LIMIT", MAX_SEARCH_RESULTS
            ),
        )
