"""Reading and editing RFDs written in Asciidoc."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from rfdoc.authors import RfdAuthors

_log = logging.getLogger(__name__)

_SUPPORTED_REFERENCES = ("authors",)

# Also accepts Markdown-style titles as a fallback for malformed documents
_TITLE = re.compile(r"^[=#][ ]+(?:RFD ?)?(?:\d+:? )?(.*)\n", re.MULTILINE)
_FALLBACK_TITLE = re.compile(r"^= (.*)$", re.MULTILINE)
_INCLUDE = re.compile(r"^include::(.*)\[\]$", re.MULTILINE)


class RfdAsciidocError(Exception):
    """Raised when the content of an Asciidoc RFD cannot be processed."""

    def __init__(self, message: str, *, attribute: str | None = None) -> None:
        super().__init__(message)
        self.attribute = attribute


def _attr_pattern(attr: str) -> re.Pattern[str]:
    return re.compile(rf"^:{re.escape(attr)}:(.*)$\n", re.MULTILINE)


def _strip_prefix_repeatedly(text: str, prefix: str) -> str:
    while prefix and text.startswith(prefix):
        text = text[len(prefix):]
    return text


def _split_at_title(content: str) -> tuple[str, str | None]:
    """Split the content around its first title line."""
    found = _TITLE.search(content)
    if found is None:
        return content, None
    return content[: found.start()], content[found.end():]


def _title_line(content: str) -> str | None:
    found = _TITLE.search(content)
    return found.group(0) if found is not None else None


def _header(content: str) -> str:
    return _split_at_title(content)[0].rstrip()


def _body(content: str) -> str | None:
    return _split_at_title(content)[1]


def _author_line(content: str) -> str | None:
    """The first line after the title, if it is not empty."""
    body = _body(content)
    if body is None:
        return None
    end = body.find("\n")
    line = body if end < 0 else body[: end + 1]
    if line in ("", "\n"):
        return None
    return line


def _resolve_references(content: str) -> str:
    resolved = content
    for attribute in _SUPPORTED_REFERENCES:
        try:
            pattern = re.compile(rf"(?P<b>[^\\]?)(\{{{re.escape(attribute)}\}})")
        except re.error as err:
            raise RfdAsciidocError(
                f"Failed to resolve reference for {attribute}", attribute=attribute
            ) from err
        captures = pattern.search(resolved)
        if captures is not None:
            replacement = captures.group("b") + (RfdAsciidoc.attr(attribute, resolved) or "")
            resolved = pattern.sub(lambda _match: replacement, resolved)
    return resolved


def _apply_author_line_attributes(content: str) -> str:
    line = _author_line(content)
    if line is None:
        return content
    authors = RfdAuthors.parse(line)
    if authors is not None and len(authors) > 0:
        return RfdAsciidoc.set_attr(content, "authors", authors.to_attr())
    return content


def _resolve(content: str) -> str:
    return _apply_author_line_attributes(_resolve_references(content))


@dataclass(frozen=True)
class AsciidocInclude:
    """An ``include::file[]`` directive found in a document."""

    file: str
    replacement: str

    def name(self) -> str:
        """The name of the included file."""
        return self.file

    def perform_replacement(self, body: str, new_content: str) -> str:
        """Replace every occurrence of this directive in ``body`` with ``new_content``."""
        _log.debug("Replacing include %s", self.replacement)
        return body.replace(self.replacement, new_content)


class RfdAsciidoc:
    """The text of an Asciidoc RFD, together with its reference-resolved form."""

    def __init__(self, content: str) -> None:
        self.resolved = _resolve(content)
        self.content = content

    def __repr__(self) -> str:
        return f"RfdAsciidoc(content={self.content!r})"

    @staticmethod
    def attr(attr: str, content: str) -> str | None:
        """The value of the first ``:attr: value`` line in ``content``, if any."""
        found = _attr_pattern(attr).search(content)
        if found is None:
            return None
        return _strip_prefix_repeatedly(found.group(0), f":{attr}:").strip()

    @staticmethod
    def set_attr(content: str, attr: str, value: str) -> str:
        """Return ``content`` with the attribute replaced, or added after the header."""
        new_attr = f":{attr}: {value}\n"
        found = _attr_pattern(attr).search(content)
        if found is not None:
            return content.replace(found.group(0), new_attr, 1)
        title = _title_line(content)
        if title is None:
            return content
        return _header(content) + "\n" + new_attr + "\n\n" + title + (_body(content) or "")

    def includes(self) -> list[AsciidocInclude]:
        """Every include directive in the resolved document, in order."""
        return [
            AsciidocInclude(file=match.group(1), replacement=match.group(0))
            for match in _INCLUDE.finditer(self.resolved)
        ]

    def get_title(self) -> str | None:
        """The document title, without any RFD number prefix."""
        for pattern in (_TITLE, _FALLBACK_TITLE):
            caps = pattern.search(self.content)
            if caps is not None:
                return caps.group(1).strip()
        return None

    def get_state(self) -> str | None:
        return self.attr("state", self.resolved)

    def update_state(self, value: str) -> None:
        self.set_raw(self.set_attr(self.content, "state", value.strip()))

    def get_discussion(self) -> str | None:
        """The discussion link, only if it looks like a URL."""
        link = self.attr("discussion", self.resolved)
        if link is not None and link.startswith("http"):
            return link
        return None

    def update_discussion(self, value: str) -> None:
        self.set_raw(self.set_attr(self.content, "discussion", value.strip()))

    def get_authors(self) -> str | None:
        return self.attr("authors", self.resolved)

    def get_labels(self) -> str | None:
        return self.attr("labels", self.resolved)

    def update_labels(self, value: str) -> None:
        self.set_raw(self.set_attr(self.content, "labels", value.strip()))

    def header(self) -> str | None:
        """Everything before the title line, with trailing whitespace removed."""
        return _header(self.content)

    def body(self) -> str | None:
        """Everything after the title line, or None when there is no title."""
        return _body(self.content)

    def update_body(self, value: str) -> None:
        """Keep the header, title and author line, and replace the rest with ``value``."""
        self.set_raw(
            f"{self.header() or ''}\n\n"
            f"{_title_line(self.content) or ''}"
            f"{_author_line(self.content) or ''}\n"
            f"{value}"
        )

    def raw(self) -> str:
        """The unparsed contents."""
        return self.content

    def set_raw(self, content: str) -> None:
        """Replace the contents and resolve them again."""
        self.resolved = _resolve(content)
        self.content = content