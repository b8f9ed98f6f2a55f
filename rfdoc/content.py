"""A single interface over RFD documents in any supported format."""

from __future__ import annotations

from enum import Enum

from rfdoc.asciidoc import RfdAsciidoc, RfdAsciidocError
from rfdoc.markdown import RfdMarkdown

_PARSE_FAILURE = "Failed to parse Asciidoc content"


class ContentFormat(str, Enum):
    """The markup language an RFD is written in."""

    ASCIIDOC = "asciidoc"
    MARKDOWN = "markdown"

    def __str__(self) -> str:
        return self.value


class RfdContentError(Exception):
    """Raised when the content of an RFD cannot be processed."""


class RfdContent:
    """An RFD document in either Asciidoc or Markdown."""

    def __init__(self, document: RfdAsciidoc | RfdMarkdown) -> None:
        self.document = document

    def __repr__(self) -> str:
        return f"RfdContent({self.document!r})"

    @classmethod
    def from_format(cls, content: str, content_format: ContentFormat) -> RfdContent:
        """Parse ``content`` as a document of the given format."""
        if ContentFormat(content_format) is ContentFormat.ASCIIDOC:
            try:
                return cls(RfdAsciidoc(content))
            except RfdAsciidocError as err:
                raise RfdContentError(_PARSE_FAILURE) from err
        return cls(RfdMarkdown(content))

    def format(self) -> ContentFormat:
        """The format of the underlying document."""
        if isinstance(self.document, RfdAsciidoc):
            return ContentFormat.ASCIIDOC
        return ContentFormat.MARKDOWN

    def _apply(self, name: str, value: str) -> None:
        try:
            getattr(self.document, name)(value)
        except RfdAsciidocError as err:
            raise RfdContentError(_PARSE_FAILURE) from err

    def get_title(self) -> str | None:
        """The title of the underlying document."""
        return self.document.get_title()

    def get_state(self) -> str | None:
        """The state stored in the underlying document."""
        return self.document.get_state()

    def update_state(self, value: str) -> None:
        """Replace or add the state in the underlying document."""
        self._apply("update_state", value)

    def get_discussion(self) -> str | None:
        """The discussion link stored in the underlying document."""
        return self.document.get_discussion()

    def update_discussion(self, value: str) -> None:
        """Replace or add the discussion link in the underlying document."""
        self._apply("update_discussion", value)

    def get_authors(self) -> str | None:
        """The authors line stored in the underlying document."""
        return self.document.get_authors()

    def get_labels(self) -> str | None:
        """The labels stored in the underlying document."""
        return self.document.get_labels()

    def update_labels(self, value: str) -> None:
        """Replace or add the labels in the underlying document."""
        self._apply("update_labels", value)

    def header(self) -> str | None:
        """The header of the underlying document."""
        return self.document.header()

    def body(self) -> str | None:
        """The body of the underlying document."""
        return self.document.body()

    def update_body(self, value: str) -> None:
        """Replace the body of the underlying document."""
        self._apply("update_body", value)

    def raw(self) -> str:
        """The unparsed contents of the underlying document."""
        return self.document.raw()

    def set_raw(self, content: str) -> None:
        """Replace the unparsed contents of the underlying document."""
        self._apply("set_raw", content)