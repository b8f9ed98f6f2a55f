"""RFD numbers and lifecycle states."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class RfdNumber:
    """The number identifying an RFD."""

    number: int

    def repo_path(self) -> str:
        """Path where the source of this RFD lives in the RFD repository."""
        return f"/rfd/{self.as_number_string()}"

    def as_number_string(self) -> str:
        """The number in its expanded form, padded with leading zeros to four places."""
        return str(self.number).rjust(4, "0")

    def __str__(self) -> str:
        return str(self.number)

    def __int__(self) -> int:
        return self.number


class InvalidRfdState(ValueError):
    """Raised when a string does not name a known RFD state."""

    def __init__(self, value: str) -> None:
        super().__init__(f"invalid RFD state: {value!r}")
        self.value = value


class RfdState(str, Enum):
    """The lifecycle state of an RFD."""

    ABANDONED = "abandoned"
    COMMITTED = "committed"
    DISCUSSION = "discussion"
    IDEATION = "ideation"
    PREDISCUSSION = "prediscussion"
    PUBLISHED = "published"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> RfdState:
        """Parse a state from its lower-case name."""
        for state in cls:
            if state.value == value:
                return state
        raise InvalidRfdState(value)