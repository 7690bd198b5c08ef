"""Renderable markdown blocks."""

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

UNORDERED_ORDINAL = "*"
ORDERED_ORDINAL = "1."

MIN_HEADER_LEVEL = 1
MAX_HEADER_LEVEL = 6


@runtime_checkable
class Block(Protocol):
    """
    Protocol for anything that can be placed in a markdown document.

    Blocks render to a string. A block that renders to an empty string
    is skipped by the document that holds it.
    """

    def render(self) -> str:
        """Render the block as markdown text."""
        ...


@dataclass
class Header:
    """A section header, level 1 through 6."""

    level: int
    content: str

    def __post_init__(self) -> None:
        self.level = max(MIN_HEADER_LEVEL, min(self.level, MAX_HEADER_LEVEL))

    def render(self) -> str:
        return "#" * self.level + " " + self.content

    def __str__(self) -> str:
        return self.render()


@dataclass
class Paragraph:
    """A block of plain text."""

    content: str

    def render(self) -> str:
        return self.content

    def __str__(self) -> str:
        return self.render()


@dataclass
class List:
    """
    An ordered or unordered list.

    The ordinal is shared by every item: ordered lists repeat "1." and let
    the markdown renderer number them.
    """

    items: list[str] = field(default_factory=list)
    ordered: bool = False

    @classmethod
    def unordered(cls, items: list[str]) -> "List":
        return cls(items=list(items), ordered=False)

    @classmethod
    def numbered(cls, items: list[str]) -> "List":
        return cls(items=list(items), ordered=True)

    @property
    def ordinal(self) -> str:
        return ORDERED_ORDINAL if self.ordered else UNORDERED_ORDINAL

    def render(self) -> str:
        return "\n".join(f"{self.ordinal} {item.strip(' ')}" for item in self.items)

    def __str__(self) -> str:
        return self.render()


@dataclass
class CodeBlock:
    """Preformatted text fenced with the language of the code."""

    language: str
    code: str

    def render(self) -> str:
        return "\n".join(["```" + self.language, self.code, "```"])

    def __str__(self) -> str:
        return self.render()


@dataclass
class HorizontalRule:
    """A thematic break."""

    def render(self) -> str:
        return "---"

    def __str__(self) -> str:
        return self.render()


@dataclass
class Table:
    """
    A pipe table.

    If headers are given, a divider row follows them. Header and row widths
    are rendered as they are, without padding or truncation.
    """

    headers: list[str] = field(default_factory=list)
    rows: list[list[str]] = field(default_factory=list)

    @staticmethod
    def _row(cells: list[str]) -> str:
        return "| " + " | ".join(cells) + " |"

    def render(self) -> str:
        lines = []
        if self.headers:
            lines.append(self._row(self.headers))
            lines.append(self._row(["---"] * len(self.headers)))

        for row in self.rows:
            lines.append(self._row(row))

        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()
