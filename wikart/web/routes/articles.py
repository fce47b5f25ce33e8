"""Article listing and lookup routes."""

from __future__ import annotations

from fastapi import (  # type: ignore[import-not-found]
    APIRouter,
    Depends,
    HTTPException,
)
from fastapi.responses import JSONResponse  # type: ignore[import-not-found]

from wikart.json_utils import article_to_dict
from wikart.registry import ArticleRegistry

from ..utils import get_registry

router = APIRouter()


@router.get("/articles")
async def list_articles(
    registry: ArticleRegistry = Depends(get_registry),
) -> JSONResponse:
    """Return the keys of all loaded articles."""

    return JSONResponse(registry.keys())


@router.get("/articles/{key}")
async def get_article(
    key: str,
    registry: ArticleRegistry = Depends(get_registry),
) -> JSONResponse:
    """Return the article stored under ``key``.

    Args:
        key: Exact, case-sensitive document key.
        registry: Registry of the running application.

    Returns:
        The article as JSON.
    """

    article = registry.lookup(key)
    if article is None:
        raise HTTPException(status_code=404, detail="Article not found")

    return JSONResponse(article_to_dict(article))
