"""Discover wiki documents on disk."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from .types import SourceList

logger = logging.getLogger(__name__)

EXCLUDED_KEYS = frozenset({"README"})


def _walk_dir(directory: Path) -> Iterator[Path]:
    """Yield every file below ``directory`` in a stable order."""

    for entry in sorted(directory.iterdir()):
        if entry.is_dir():
            yield from _walk_dir(entry)
        else:
            yield entry


def discover_sources(root: Path | str) -> SourceList:
    """Collect the documents stored below ``root``.

    Args:
        root: Directory holding the wiki documents, searched recursively.

    Returns:
        ``(key, text)`` pairs in enumeration order. The key is the file name
        without its extension. Files named ``README`` are skipped.

    Raises:
        FileNotFoundError: If ``root`` does not exist.
    """

    root = Path(root)
    if not root.is_dir():
        raise FileNotFoundError(f"articles directory not found: {root}")

    sources: SourceList = []
    for path in _walk_dir(root):
        key = path.stem
        logger.debug("%s -> %s", path, key)
        if key in EXCLUDED_KEYS:
            continue
        # Undecodable bytes are replaced so binary files fail as documents.
        text = path.read_text(encoding="utf-8", errors="replace")
        sources.append((key, text))

    return sources
