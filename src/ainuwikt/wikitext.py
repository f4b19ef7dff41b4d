"""
Wikitext building blocks: templates, headings and the page buffer.

    Template("head", ["ain", "noun"]).render()  ->  {{head|ain|noun}}
    format_header(3, "Etymology", STYLE_EN)     ->  ===Etymology===

Template parameters are stored in order as plain strings; keyed parameters
are stored as "key=value", the same shape a parsed template has.
"""

from dataclasses import dataclass, field
from typing import Optional

from ainuwikt.style import Style


# =============================================================================
# Templates
# =============================================================================


@dataclass
class Template:
    """A template invocation: {{name|param1|param2|...}}"""

    name: str
    params: list[str] = field(default_factory=list)

    def add(self, value: str) -> "Template":
        """Append a positional parameter."""
        self.params.append(value)
        return self

    def add_named(self, key: str, value: Optional[str]) -> "Template":
        """Append key=value, skipping missing or empty values."""
        if value:
            self.params.append(f"{key}={value}")
        return self

    def render(self) -> str:
        if not self.params:
            return f"{{{{{self.name}}}}}"
        return f"{{{{{self.name}|{'|'.join(self.params)}}}}}"

    def __str__(self) -> str:
        return self.render()


def template(name: str, *params: str) -> str:
    """Render a template with positional parameters only."""
    return Template(name, list(params)).render()


# =============================================================================
# Headings
# =============================================================================


def format_header(level: int, title: str, style: Style) -> str:
    """
    Format one section heading.

    Args:
        level: Nesting depth (2 = language, 3 = section, 4 = subsection)
        title: Literal text or a pre-rendered template, used as-is
        style: Locale heading policy

    Returns:
        The heading, with a trailing newline if the style asks for a blank
        line after headings
    """
    eq = "=" * level
    space = " " if style.space_in_headings else ""
    heading = f"{eq}{space}{title}{space}{eq}"
    if style.empty_line_after_headings:
        heading += "\n"
    return heading


class PageBuilder:
    """
    Line buffer for one rendered entry.

    Tracks whether anything has been emitted yet, so that a style asking for
    a blank line before headings never puts one before the first heading.
    """

    def __init__(self, style: Style):
        self.style = style
        self.parts: list[str] = []

    def heading(self, level: int, title: str) -> None:
        if self.style.empty_line_before_headings and self.parts:
            self.parts.append("")
        self.parts.append(format_header(level, title, self.style))

    def line(self, text: str) -> None:
        self.parts.append(text)

    def lines(self, texts: list[str]) -> None:
        self.parts.extend(texts)

    def text(self) -> str:
        return "\n".join(self.parts)
