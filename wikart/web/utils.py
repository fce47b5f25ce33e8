"""Utility helpers for web routes."""

from __future__ import annotations

from fastapi import Request  # type: ignore[import-not-found]

from wikart.config import Settings
from wikart.registry import ArticleRegistry


def get_registry(request: Request) -> ArticleRegistry:
    """Return the registry attached to the running application."""

    return request.app.state.registry


def get_settings(request: Request) -> Settings:
    """Return the settings attached to the running application."""

    return request.app.state.settings
