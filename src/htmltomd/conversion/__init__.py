"""Content conversion for htmltomd (HTML elements to markdown blocks)."""

from .base import DEFAULT_SEARCH_PATTERN, BaseSelectionConverter, SelectionConverterConfig
from .cleaner import TextCleaner, find_non_ascii
from .confluence import ConfluenceSelectionConverter, parse_highlighter_params
from .converter import DocumentConverter, convert_html
from .dialects import SELECTION_CONVERTERS, get_selection_converter
from .google import GoogleSelectionConverter
from .html import HTMLSelectionConverter
from .protocols import (
    ContentHandler,
    ContentSelector,
    RootFinder,
    SelectionConverter,
    SelectionToMarkdown,
    TitleFinder,
)
from .transformer import HUGO_FORMAT, Transformer

__all__ = [
    # Protocols
    "SelectionConverter",
    "RootFinder",
    "TitleFinder",
    "ContentSelector",
    "ContentHandler",
    "SelectionToMarkdown",
    # Implementations
    "BaseSelectionConverter",
    "SelectionConverterConfig",
    "HTMLSelectionConverter",
    "GoogleSelectionConverter",
    "ConfluenceSelectionConverter",
    "DocumentConverter",
    "Transformer",
    "TextCleaner",
    # Helpers
    "DEFAULT_SEARCH_PATTERN",
    "SELECTION_CONVERTERS",
    "HUGO_FORMAT",
    "convert_html",
    "find_non_ascii",
    "get_selection_converter",
    "parse_highlighter_params",
]
