"""Page / Section / Table / Hyperlink intermediate representation.

A Page is built per root content type, rendered once with ``to_markdown``
and discarded.
"""

from dataclasses import dataclass, field
from typing import Protocol


class Component(Protocol):
    def to_markdown(self) -> str: ...


def in_page_link(key: str) -> str:
    """``#<lowercased key>``: a section on the same page."""
    return f"#{key.lower()}"


def page_link(key: str) -> str:
    """``<Key>.md``: another generated page."""
    return f"{key}.md"


def page_section_link(key: str) -> str:
    """``<Key>.md#<key>``: the root section of another generated page."""
    return f"{page_link(key)}{in_page_link(key)}"


@dataclass(frozen=True)
class RawText:
    text: str

    def to_markdown(self) -> str:
        return self.text


@dataclass(frozen=True)
class Hyperlink:
    url: str
    text: str
    alt_text: str = ""

    def to_markdown(self) -> str:
        if self.alt_text:
            alt = " ".join(self.alt_text.split()).replace('"', '\\"')
            return f'[{self.text}]({self.url} "{alt}")'
        return f"[{self.text}]({self.url})"


@dataclass(frozen=True)
class Paragraph:
    """Inline parts rendered next to each other, e.g. a sentence ending in a link."""

    parts: tuple[RawText | Hyperlink, ...]

    def to_markdown(self) -> str:
        return "".join(part.to_markdown() for part in self.parts)


@dataclass(frozen=True, init=False)
class Row:
    cells: tuple[str, ...]

    def __init__(self, *cells: str):
        object.__setattr__(self, "cells", tuple(cells))

    def to_markdown(self) -> str:
        return "| " + " | ".join(_escape_cell(cell) for cell in self.cells) + " |"


@dataclass
class Table:
    head_row: Row
    body_rows: list[Row] = field(default_factory=list)

    def to_markdown(self) -> str:
        separator = "| " + " | ".join("---" for _ in self.head_row.cells) + " |"
        lines = [self.head_row.to_markdown(), separator]
        lines.extend(row.to_markdown() for row in self.body_rows)
        return "\n".join(lines)


@dataclass
class Section:
    title: str
    body: list[Component] = field(default_factory=list)
    subsections: list["Section"] = field(default_factory=list)

    @property
    def anchor(self) -> str:
        return in_page_link(self.title)

    def to_markdown(self, level: int = 2) -> str:
        blocks = [f"{'#' * min(level, 6)} {self.title}"]
        blocks.extend(rendered for component in self.body if (rendered := component.to_markdown().strip()))
        blocks.extend(subsection.to_markdown(level + 1) for subsection in self.subsections)
        return "\n\n".join(blocks)


@dataclass
class Page:
    title: str
    subsections: list[Section] = field(default_factory=list)

    def to_markdown(self) -> str:
        blocks = [f"# {self.title}"]
        blocks.extend(section.to_markdown() for section in self.subsections)
        lines = [line.rstrip() for line in "\n\n".join(blocks).splitlines()]
        return "\n".join(lines) + "\n"


def _escape_cell(cell: str) -> str:
    text = cell.strip().replace("\r\n", "\n")
    text = text.replace("\n", "<br>")
    return text.replace("|", "\\|")
