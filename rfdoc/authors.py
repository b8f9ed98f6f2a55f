"""Parsing of Asciidoc author lines."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

_log = logging.getLogger(__name__)

_SEPARATORS = (";", ",")


def _parse_name(part: str) -> tuple[str, str | None, str | None]:
    """Split a name into (first, middle, last)."""
    name_parts = part.split(" ")
    if len(name_parts) == 2:
        first, last = name_parts
        return first, None, last
    if len(name_parts) == 3:
        first, middle, last = name_parts
        return first, middle, last
    # Anything else is assigned to the first name as a whole
    return " ".join(name_parts), None, None


def _parse_email(part: str) -> str | None:
    """Extract an address wrapped in angle brackets."""
    if part.startswith("<") and part.endswith(">"):
        return part.lstrip("<").rstrip(">")
    return None


@dataclass
class RfdAuthor:
    """A single author: a name and an optional e-mail address or URL."""

    first_name: str
    last_name: str | None = None
    middle_name: str | None = None
    email: str | None = None

    @classmethod
    def parse(cls, source: str) -> RfdAuthor | None:
        """Parse ``First [Middle] [Last] [<email>]``; None if malformed."""
        parts = source.split("<")
        if len(parts) == 1:
            first, middle, last = _parse_name(parts[0].strip())
            return cls(first_name=first, last_name=last, middle_name=middle)
        if len(parts) == 2:
            first, middle, last = _parse_name(parts[0].strip())
            email = _parse_email(f"<{parts[1].strip()}".strip())
            if email is None:
                return None
            return cls(first_name=first, last_name=last, middle_name=middle, email=email)
        _log.info("Invalid author line contained more than a single <: count=%d", len(parts))
        return None

    def is_empty(self) -> bool:
        """True when no part of the author is set."""
        return (
            not self.first_name
            and self.middle_name is None
            and self.last_name is None
            and self.email is None
        )

    def to_attr(self) -> str:
        """Render the author in Asciidoc attribute form."""
        pieces = [
            self.first_name,
            self.middle_name,
            self.last_name,
            f"<{self.email}>" if self.email is not None else None,
        ]
        return " ".join(piece for piece in pieces if piece is not None)


@dataclass
class RfdAuthors:
    """The authors named on an RFD author line."""

    authors: list[RfdAuthor] = field(default_factory=list)

    def __iter__(self) -> Iterator[RfdAuthor]:
        return iter(self.authors)

    def __len__(self) -> int:
        return len(self.authors)

    def __getitem__(self, index: int) -> RfdAuthor:
        return self.authors[index]

    @classmethod
    def parse(cls, line: str) -> RfdAuthors | None:
        """Parse an author line; None if it is not a valid author line."""
        if line.count("\n") > 1:
            return None

        separator = next((sep for sep in _SEPARATORS if sep in line), None)
        if separator is not None:
            trimmed = line.strip().rstrip(";").rstrip(",")
            parsed = (RfdAuthor.parse(part.strip()) for part in trimmed.split(separator))
            return cls([author for author in parsed if author is not None and not author.is_empty()])

        author = RfdAuthor.parse(line.strip())
        if author is None or author.is_empty():
            return None
        return cls([author])

    def to_attr(self) -> str:
        """Render all authors joined by ``; ``."""
        return "; ".join(author.to_attr() for author in self.authors)