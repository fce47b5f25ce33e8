"""Line classification and article assembly helpers."""

from __future__ import annotations

import enum
import re

from attrs import define, field

from ..errors import DuplicateTitleError, MalformedDocumentError
from .article import Article
from .field import Field

FENCE_MARKER = "```"
FOOTER_MARKER = "<!-- footer -->"
AUTHOR_MARKER = "[[user author]]"

_TITLE_RE = re.compile(r"#(?!#).+")
_FIELD_RE = re.compile(r"##(?!#).+")
_INLINE_RE = re.compile(r"\[.+\]")


class LineKind(enum.Enum):
    """Role of a single line within a document."""

    FENCE = "fence"
    TITLE = "title"
    FIELD_HEADING = "field_heading"
    FOOTER_MARKER = "footer_marker"
    AUTHOR_MARKER = "author_marker"
    CONTENT = "content"


class Section(enum.Enum):
    """Part of the article that receives content lines."""

    BODY = "body"
    FIELD = "field"
    FOOTER = "footer"


def classify_line(line: str, in_fence: bool) -> LineKind:
    """Classify ``line`` given the current fence state.

    Args:
        line: A single line without its terminator.
        in_fence: Whether a code fence is open before this line.

    Returns:
        The kind of the line. Inside a fence only ``FENCE`` and ``CONTENT``
        are ever returned.
    """

    stripped = line.strip()
    if stripped.startswith(FENCE_MARKER):
        return LineKind.FENCE
    if in_fence:
        return LineKind.CONTENT

    # Headings are matched on the raw line so indented hashes stay content.
    if _TITLE_RE.fullmatch(line):
        return LineKind.TITLE
    if _FIELD_RE.fullmatch(line):
        return LineKind.FIELD_HEADING
    if stripped.lower() == FOOTER_MARKER:
        return LineKind.FOOTER_MARKER
    if stripped == AUTHOR_MARKER:
        return LineKind.AUTHOR_MARKER
    return LineKind.CONTENT


def parse_field_heading(line: str) -> tuple[str, bool]:
    """Return the field name and inline flag of a level-2 heading line.

    Args:
        line: A line classified as ``FIELD_HEADING``.

    Returns:
        Tuple of the field name and whether it was wrapped in brackets.
    """

    name = line[2:].strip()
    if _INLINE_RE.fullmatch(name):
        return name[1:-1].strip(), True
    return name, False


def split_lines(text: str) -> list[str]:
    """Split ``text`` into lines, accepting both LF and CRLF endings."""

    return text.replace("\r\n", "\n").split("\n")


@define(slots=True)
class _FieldDraft:
    """Mutable field used while its content is still being collected."""

    name: str
    inline: bool
    value: str = ""

    def freeze(self) -> Field:
        return Field(name=self.name, value=self.value, inline=self.inline)


@define(slots=True)
class ArticleBuilder:
    """Accumulate document lines and produce an :class:`Article`.

    Lines are fed one at a time in document order. The builder tracks the
    code fence and the active section; validation happens in :meth:`build`.
    """

    title: str | None = None
    body: str = ""
    fields: list[_FieldDraft] = field(factory=list)
    footer: str | None = None
    author_flag: bool = False
    section: Section = Section.BODY
    in_fence: bool = False

    def feed(self, line: str) -> LineKind:
        """Consume one line and return how it was classified."""

        kind = classify_line(line, self.in_fence)

        if kind is LineKind.FENCE:
            self.in_fence = not self.in_fence
            self._append(line)
        elif kind is LineKind.TITLE:
            title = line[1:].strip()
            if self.title:
                raise DuplicateTitleError(self.title, title)
            self.title = title
        elif kind is LineKind.FIELD_HEADING:
            name, inline = parse_field_heading(line)
            self.fields.append(_FieldDraft(name=name, inline=inline))
            self.section = Section.FIELD
        elif kind is LineKind.FOOTER_MARKER:
            self.section = Section.FOOTER
        elif kind is LineKind.AUTHOR_MARKER:
            self.author_flag = True
        else:
            self._append(line)

        return kind

    def _append(self, line: str) -> None:
        """Append ``line`` to the section that is currently active."""

        if self.section is Section.BODY:
            self.body += f"\n{line}"
        elif self.section is Section.FIELD:
            self.fields[-1].value += f"\n{line}"
        else:
            self.footer = f"{self.footer or ''}\n{line}"

    def build(self) -> Article:
        """Validate the collected state and return the finished article.

        Raises:
            MalformedDocumentError: If no title line was seen or the title is
                empty.
        """

        if not self.title:
            raise MalformedDocumentError("document has no title line")

        return Article(
            title=self.title,
            body=self.body.strip(),
            fields=[draft.freeze() for draft in self.fields],
            footer=self.footer.strip() if self.footer is not None else None,
            author_flag=self.author_flag,
        )
