"""Title autocomplete route."""

from __future__ import annotations

from attrs import asdict
from fastapi import APIRouter, Depends  # type: ignore[import-not-found]
from fastapi.responses import JSONResponse  # type: ignore[import-not-found]

from wikart.config import Settings
from wikart.registry import ArticleRegistry

from ..utils import get_registry, get_settings

router = APIRouter()


@router.get("/autocomplete")
async def autocomplete(
    query: str = "",
    registry: ArticleRegistry = Depends(get_registry),
    settings: Settings = Depends(get_settings),
) -> JSONResponse:
    """Return title choices containing ``query``, ignoring case."""

    choices = registry.choices(query, settings.search_limit)
    return JSONResponse([asdict(choice) for choice in choices])
