"""Tests for the wiki markup parser."""

import pytest

from wikart import parser
from wikart.errors import DuplicateTitleError, MalformedDocumentError
from wikart.parser import Field, LineKind, classify_line

SAMPLE_DOC = """# Hello
Some body text
## [Tip]
inline field value
## Notes
multiline
note value
<!-- footer -->
footer line
[[user author]]"""

FENCED_FIELD_DOC = """# Fences
## Example
```
# not a title
## not a field
<!-- footer -->
[[user author]]
```"""


def test_parse_article_end_to_end() -> None:
    article = parser.parse_article(SAMPLE_DOC)
    assert article.title == "Hello"
    assert article.body == "Some body text"
    assert article.fields == (
        Field(name="Tip", value="\ninline field value", inline=True),
        Field(name="Notes", value="\nmultiline\nnote value", inline=False),
    )
    assert article.footer == "footer line"
    assert article.author_flag is True


def test_title_is_trimmed() -> None:
    article = parser.parse_article("#   Spaced title   \nbody")
    assert article.title == "Spaced title"


def test_title_without_space() -> None:
    assert parser.parse_article("#Compact").title == "Compact"


def test_missing_title_raises() -> None:
    with pytest.raises(MalformedDocumentError):
        parser.parse_article("just some text\n## Field\nvalue")


def test_empty_title_raises() -> None:
    with pytest.raises(MalformedDocumentError):
        parser.parse_article("# \nbody")


def test_empty_title_does_not_block_later_title() -> None:
    article = parser.parse_article("# \n# Real\nbody")
    assert article.title == "Real"
    assert article.body == "body"


def test_second_title_raises() -> None:
    with pytest.raises(DuplicateTitleError) as info:
        parser.parse_article("# First\nbody\n# Second")
    assert isinstance(info.value, MalformedDocumentError)
    assert info.value.first == "First"
    assert info.value.second == "Second"


def test_field_order_and_inline_flag() -> None:
    article = parser.parse_article(
        "# T\n## One\n## [ Two ]\n## Three\n## []"
    )
    assert [f.name for f in article.fields] == ["One", "Two", "Three", "[]"]
    assert [f.inline for f in article.fields] == [False, True, False, False]
    assert all(f.value == "" for f in article.fields)


def test_field_values_are_not_trimmed() -> None:
    article = parser.parse_article("# T\n## Field\n\n  indented  \n")
    assert article.fields[0].value == "\n\n  indented  \n"


def test_deeper_headings_and_indented_hashes_are_content() -> None:
    article = parser.parse_article("# T\n### Sub\n  # indented")
    assert article.body == "### Sub\n  # indented"
    assert article.fields == ()


def test_fenced_lines_are_never_reclassified() -> None:
    article = parser.parse_article(FENCED_FIELD_DOC)
    assert article.title == "Fences"
    assert len(article.fields) == 1
    assert article.fields[0].value == (
        "\n```\n# not a title\n## not a field\n<!-- footer -->\n"
        "[[user author]]\n```"
    )
    assert article.footer is None
    assert article.author_flag is False


def test_fence_with_language_tag_in_body() -> None:
    article = parser.parse_article(
        "# Style\nPrefer this:\n```py\n# comment\n```\n## After\nx"
    )
    assert article.body == "Prefer this:\n```py\n# comment\n```"
    assert article.fields[0].name == "After"


def test_footer_only_collects_after_marker() -> None:
    article = parser.parse_article(
        "# T\nbody\n## Field\nvalue\n  <!-- FOOTER -->  \nsmall print\n"
    )
    assert article.body == "body"
    assert article.fields[0].value == "\nvalue"
    assert article.footer == "small print"


def test_footer_marker_without_content() -> None:
    article = parser.parse_article("# T\nbody\n<!-- footer -->")
    assert article.footer is None


def test_author_marker_contributes_no_text() -> None:
    article = parser.parse_article(
        "# T\n  [[user author]]  \nbody\n## F\n[[user author]]\nvalue"
    )
    assert article.author_flag is True
    assert article.body == "body"
    assert article.fields[0].value == "\nvalue"


def test_author_flag_defaults_to_false() -> None:
    assert parser.parse_article("# T").author_flag is False


def test_crlf_line_endings() -> None:
    article = parser.parse_article("# T\r\nbody\r\n## F\r\nvalue\r\n")
    assert article.title == "T"
    assert article.body == "body"
    assert article.fields[0].value == "\nvalue\n"


def test_parsing_is_deterministic() -> None:
    assert parser.parse_article(SAMPLE_DOC) == parser.parse_article(SAMPLE_DOC)


@pytest.mark.parametrize(
    ("line", "in_fence", "kind"),
    [
        ("# Title", False, LineKind.TITLE),
        ("## Field", False, LineKind.FIELD_HEADING),
        ("### Deeper", False, LineKind.CONTENT),
        ("<!-- Footer -->", False, LineKind.FOOTER_MARKER),
        ("[[user author]]", False, LineKind.AUTHOR_MARKER),
        ("[[USER AUTHOR]]", False, LineKind.CONTENT),
        ("  ```cpp", False, LineKind.FENCE),
        ("```", True, LineKind.FENCE),
        ("# Title", True, LineKind.CONTENT),
        ("<!-- footer -->", True, LineKind.CONTENT),
        ("", False, LineKind.CONTENT),
    ],
)
def test_classify_line(line: str, in_fence: bool, kind: LineKind) -> None:
    assert classify_line(line, in_fence) is kind
