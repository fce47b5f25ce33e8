"""JSON serialization helpers using optional orjson."""

from __future__ import annotations

try:
    import orjson  # type: ignore[import-not-found]
except ImportError:  # pragma: no cover - optional dependency
    orjson = None  # type: ignore[assignment]

import json
from typing import Any

from attrs import asdict

from .parser import Article
from .registry import ArticleRegistry

JSONDict = dict[str, Any]


def article_to_dict(article: Article) -> JSONDict:
    """Convert ``article`` into plain data suitable for serialization."""

    data = asdict(article)

    # Fields are always emitted as a list regardless of the attrs version.
    data["fields"] = [asdict(fld) for fld in article.fields]
    return data


def registry_to_dict(registry: ArticleRegistry) -> dict[str, JSONDict]:
    """Convert every article of ``registry`` keyed by its document key."""

    return {
        key: article_to_dict(article)
        for key, article in registry.articles.items()
    }


def json_dumps(data: object, indent: bool = False) -> str:
    """Serialize data to a JSON string.

    Args:
        data: Data structure to serialize.
        indent: Pretty-print with two space indentation.

    Returns:
        JSON representation of ``data``.
    """

    if orjson is not None:
        option = orjson.OPT_INDENT_2 if indent else None
        return orjson.dumps(data, option=option).decode()
    return json.dumps(data, ensure_ascii=False, indent=2 if indent else None)
