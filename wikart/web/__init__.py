"""FastAPI application serving wiki article lookups."""

from __future__ import annotations

import logging

from fastapi import FastAPI  # type: ignore[import-not-found]

from wikart.config import Settings
from wikart.registry import ArticleRegistry, load_directory

from .routes import articles, autocomplete

logger = logging.getLogger(__name__)


def create_app(
    registry: ArticleRegistry | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create the web application around a loaded registry.

    Args:
        registry: Registry to serve. When omitted it is loaded from the
            configured articles directory, failing if any document is
            malformed.
        settings: Settings to use, read from the environment by default.

    Returns:
        The configured application.
    """

    settings = settings or Settings.from_env()
    if registry is None:
        registry = load_directory(settings.articles_dir)
        logger.info(
            "Serving %d articles from %s", len(registry), settings.articles_dir
        )

    app = FastAPI(title="wikart")
    app.state.registry = registry
    app.state.settings = settings

    app.include_router(articles.router)
    app.include_router(autocomplete.router)
    return app
