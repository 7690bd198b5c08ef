"""Markdown document model: typed blocks and the Doc that renders them."""

from .components import (
    Block,
    CodeBlock,
    Header,
    HorizontalRule,
    List,
    Paragraph,
    Table,
)
from .doc import DEFAULT_SEPARATOR, Doc, DocConfig, header_level

__all__ = [
    # Document
    "Doc",
    "DocConfig",
    "DEFAULT_SEPARATOR",
    "header_level",
    # Blocks
    "Block",
    "CodeBlock",
    "Header",
    "HorizontalRule",
    "List",
    "Paragraph",
    "Table",
]
