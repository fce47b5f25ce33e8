"""Shared fixtures for the test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

HELLO_DOC = """# Hello
Some body text
## [Tip]
inline field value
## Notes
multiline
note value
<!-- footer -->
footer line
[[user author]]
"""

STYLE_DOC = """# Style guide
Prefer `snake_case`.
```py
# not a title
```
"""


@pytest.fixture
def articles_dir(tmp_path: Path) -> Path:
    """Directory tree holding a few wiki documents and a README."""

    root = tmp_path / "wiki_articles"
    (root / "nested").mkdir(parents=True)
    (root / "hello.md").write_text(HELLO_DOC, encoding="utf-8")
    (root / "nested" / "style.md").write_text(STYLE_DOC, encoding="utf-8")
    (root / "README.md").write_text("How to write articles\n", encoding="utf-8")
    return root
