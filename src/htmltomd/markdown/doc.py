"""Markdown document model."""

import re
from dataclasses import dataclass, replace
from typing import Optional, Union

from .components import Block, CodeBlock, Header, HorizontalRule, List, Paragraph, Table

DEFAULT_SEPARATOR = "\n\n"
TITLE_LEVEL = 1

_HEADER_TAG_RE = re.compile(r"^h([1-6])$", re.IGNORECASE)


@dataclass(frozen=True)
class DocConfig:
    """
    Parameters used to initialize a new Doc.

    Attributes:
        title: Document title, rendered as a level 1 header. None or an
            empty string means no title.
        reduce_headers: Shift every header down one level to keep level 1
            for the title (h6 stays h6)
        separator: String placed between rendered blocks
    """

    title: Optional[str] = None
    reduce_headers: bool = True
    separator: str = DEFAULT_SEPARATOR


def header_level(tag: Union[str, int]) -> int:
    """
    Resolve an "h1".."h6" tag name (or a bare level) to a header level.

    Raises:
        ValueError: If the tag is not a header tag
    """
    if isinstance(tag, int):
        return tag

    match = _HEADER_TAG_RE.match(tag)
    if not match:
        raise ValueError(f"Not a header tag: {tag}")
    return int(match.group(1))


class Doc:
    """
    A markdown document.

    Holds an ordered list of blocks which are rendered in insertion order.
    A Doc is itself a block, so sub-documents (the contents of a div, a
    panel) can be nested inside a parent document.

    Example:
        doc = Doc(DocConfig(title="Guide"))
        doc.add_header("h1", "Install")
        doc.add_paragraph("Run the installer.")
        doc.render()  # "# Guide\\n\\n## Install\\n\\nRun the installer."
    """

    def __init__(self, config: Optional[DocConfig] = None):
        self._config = config or DocConfig()
        self._content: list[Block] = []

    @property
    def blocks(self) -> list[Block]:
        return list(self._content)

    def get_config(self) -> DocConfig:
        """Retrieve the document config, title included."""
        return self._config

    def get_render_config(self) -> DocConfig:
        """
        Retrieve the config without content settings like the title.

        Use this when creating a child document from a parent: copying the
        whole config would render the title a second time.
        """
        return replace(self._config, title=None)

    def add_content(self, content: Block) -> None:
        """Add a block to the document."""
        self._content.append(content)

    def add_doc(self, subdoc: "Doc") -> None:
        """Add another document as a block of this document."""
        self.add_content(subdoc)

    def add_header(self, tag: Union[str, int], content: str) -> None:
        """
        Add a section header.

        Empty content is not added. If the doc reduces headers, the level is
        shifted down one, stopping at 6.
        """
        if not content:
            return

        level = header_level(tag)
        if self._config.reduce_headers:
            level += 1
        self.add_content(Header(level=level, content=content))

    def add_unordered_list(self, items: list[str]) -> None:
        self.add_content(List.unordered(items))

    def add_ordered_list(self, items: list[str]) -> None:
        self.add_content(List.numbered(items))

    def add_paragraph(self, content: str) -> None:
        """Add a block of text. Empty content is not added."""
        if content:
            self.add_content(Paragraph(content=content))

    def add_code_block(self, language: str, code: str) -> None:
        self.add_content(CodeBlock(language=language, code=code))

    def add_horizontal_rule(self) -> None:
        self.add_content(HorizontalRule())

    def add_table(self, headers: list[str], rows: list[list[str]]) -> None:
        self.add_content(Table(headers=list(headers), rows=[list(row) for row in rows]))

    def content(self) -> str:
        """Render the content of the document, without the title."""
        rendered = [block.render() for block in self._content]
        return self._config.separator.join(text for text in rendered if text)

    def title(self) -> str:
        """Render just the title of the document."""
        if not self._config.title:
            return ""
        return "#" * TITLE_LEVEL + " " + self._config.title

    def render(self) -> str:
        """Render the title followed by the content."""
        title = self.title()
        if title:
            title += self._config.separator

        return title + self.content()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Doc(title={self._config.title!r}, blocks={len(self._content)})"
