"""
htmltomd - Convert HTML documents to markdown.

Usage:
    from bs4 import BeautifulSoup
    from htmltomd import ConverterConfig, DocumentConverter

    config = ConverterConfig(input_format="confluence", output_format="hugo")
    converter = DocumentConverter.from_config(config)

    doc = converter.document_to_markdown(BeautifulSoup(html, "html.parser"))
    print(doc.render())
"""

__version__ = "1.0.0"

from .conversion import (
    BaseSelectionConverter,
    ConfluenceSelectionConverter,
    DocumentConverter,
    GoogleSelectionConverter,
    HTMLSelectionConverter,
    SelectionConverter,
    SelectionConverterConfig,
    TextCleaner,
    Transformer,
    convert_html,
    get_selection_converter,
)
from .logging_config import setup_logging
from .markdown import Doc, DocConfig
from .models.config import ConverterConfig, InputFormat, OutputFormat

__all__ = [
    "__version__",
    # Core
    "DocumentConverter",
    "convert_html",
    # Dialects
    "SelectionConverter",
    "SelectionConverterConfig",
    "BaseSelectionConverter",
    "HTMLSelectionConverter",
    "GoogleSelectionConverter",
    "ConfluenceSelectionConverter",
    "get_selection_converter",
    # Rendering
    "Transformer",
    "TextCleaner",
    "Doc",
    "DocConfig",
    # Config
    "ConverterConfig",
    "InputFormat",
    "OutputFormat",
    "setup_logging",
]
