"""Templates for the initial content of new RFDs."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass


class TemplateError(Exception):
    """Base error for template problems."""


class MissingRequiredFields(TemplateError):
    """Raised when a template is built without all of its required values."""

    def __init__(self, template: RfdTemplate, values: list[str]) -> None:
        super().__init__("Template is missing some of the required values")
        self.template = template
        self.values = values


@dataclass
class RfdTemplate:
    """A template string together with the values that fill its placeholders."""

    template: str = ""
    values: dict[str, str] = dataclasses.field(default_factory=dict)
    required_fields: list[str] = dataclasses.field(default_factory=list)

    def field(self, field: str, value: str) -> RfdTemplate:
        """Return a copy of this template with one more value set."""
        return dataclasses.replace(self, values={**self.values, field: value})

    def build(self) -> RenderableRfdTemplate:
        """Check that every required field has a value and make the template renderable."""
        missing = [name for name in self.required_fields if name not in self.values]
        if missing:
            raise MissingRequiredFields(self, missing)
        return RenderableRfdTemplate(self)


@dataclass(frozen=True)
class RenderableRfdTemplate:
    """A template whose required fields are all set."""

    template: RfdTemplate

    def render(self) -> str:
        """Substitute every required field's placeholder with its value."""
        rendered = self.template.template
        for name in self.template.required_fields:
            rendered = rendered.replace(f"{{{name}}}", self.template.values[name])
        return rendered