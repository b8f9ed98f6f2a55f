"""Reading and editing RFDs written in Markdown."""

from __future__ import annotations

import re

_TITLE_SPLIT = re.compile(r"^[#].*$[\n\r]+", re.MULTILINE)
_TITLE = re.compile(r"^[=# ]+(?:RFD ?)?(?:\d+:? )?(.*)$", re.MULTILINE)
_FALLBACK_TITLE = re.compile(r"^# (.*)$", re.MULTILINE)


def _attr_pattern(attr: str) -> re.Pattern[str]:
    return re.compile(rf"^{re.escape(attr)}:(.*)$\n", re.MULTILINE)


def _strip_prefix_repeatedly(text: str, prefix: str) -> str:
    while prefix and text.startswith(prefix):
        text = text[len(prefix):]
    return text


class RfdMarkdown:
    """The text of a Markdown RFD."""

    def __init__(self, content: str) -> None:
        self.content = content

    def __repr__(self) -> str:
        return f"RfdMarkdown(content={self.content!r})"

    def attr(self, attr: str) -> str | None:
        """The value of the first ``attr: value`` line, if any."""
        found = _attr_pattern(attr).search(self.content)
        if found is None:
            return None
        return _strip_prefix_repeatedly(found.group(0), f"{attr}:").strip()

    def set_attr(self, attr: str, value: str) -> None:
        """Replace the first ``attr:`` line, or add one before the title."""
        new_attr = f"{attr}: {value}\n"
        found = _attr_pattern(attr).search(self.content)
        if found is not None:
            self.content = self.content.replace(found.group(0), new_attr, 1)
            return
        title = _TITLE_SPLIT.search(self.content)
        if title is not None:
            self.content = (
                (self.header() or "")
                + "\n"
                + new_attr
                + title.group(0)
                + (self.body() or "")
            )

    def get_title(self) -> str | None:
        """The document title, without any RFD number prefix."""
        for pattern in (_TITLE, _FALLBACK_TITLE):
            caps = pattern.search(self.content)
            if caps is not None:
                return caps.group(1).strip()
        return None

    def get_state(self) -> str | None:
        """The value of the ``state`` attribute, if any."""
        return self.attr("state")

    def update_state(self, value: str) -> None:
        """Replace or add the ``state`` attribute."""
        self.set_attr("state", value)

    def get_discussion(self) -> str | None:
        """The value of the ``discussion`` attribute, if any."""
        return self.attr("discussion")

    def update_discussion(self, value: str) -> None:
        """Replace or add the ``discussion`` attribute."""
        self.set_attr("discussion", value)

    def get_authors(self) -> str | None:
        """The value of the ``authors`` attribute, if any."""
        return self.attr("authors")

    def get_labels(self) -> str | None:
        """The value of the ``labels`` attribute, if any."""
        return self.attr("labels")

    def update_labels(self, value: str) -> None:
        """Replace or add the ``labels`` attribute."""
        self.set_attr("labels", value)

    def _split(self) -> list[str]:
        return _TITLE_SPLIT.split(self.content, maxsplit=1)

    def header(self) -> str | None:
        """Everything before the title line, with trailing whitespace removed."""
        return self._split()[0].rstrip()

    def body(self) -> str | None:
        """Everything after the title line, or None when there is no title."""
        parts = self._split()
        return parts[1] if len(parts) > 1 else None

    def update_body(self, value: str) -> None:
        """Replace the title and everything after it with ``value``."""
        self.content = self._split()[0] + value

    def raw(self) -> str:
        """The unparsed contents."""
        return self.content

    def set_raw(self, content: str) -> None:
        """Replace the unparsed contents."""
        self.content = content