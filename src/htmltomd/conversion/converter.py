"""Conversion of whole HTML documents into markdown documents."""

import logging
from typing import Optional, Union

from bs4 import BeautifulSoup, Tag

from ..markdown import Doc, DocConfig
from ..models.config import ConverterConfig
from .base import SelectionConverterConfig
from .cleaner import TextCleaner
from .dialects import get_selection_converter
from .protocols import SelectionConverter
from .transformer import Transformer

logger = logging.getLogger(__name__)


class DocumentConverter:
    """
    Converts an HTML document into a markdown Doc.

    Finding the title, the content root and the content elements, and
    turning matched elements into blocks, is left to the
    SelectionConverter, since it depends on the structure of the source
    HTML. The DocumentConverter owns the recursive descent: every matched
    element is handed to the selection converter together with
    selection_to_markdown, which it calls back for nested containers.

    Example:
        converter = DocumentConverter(ConfluenceSelectionConverter())
        doc = converter.document_to_markdown(BeautifulSoup(html, "html.parser"))
        print(doc.render())
    """

    def __init__(
        self,
        selection_converter: SelectionConverter,
        text_cleaner: Optional[TextCleaner] = None,
        doc_config: Optional[DocConfig] = None,
    ):
        """
        Initialize the converter.

        Args:
            selection_converter: Dialect strategy for the source HTML
            text_cleaner: Cleaner applied to the title (default cleaner if None)
            doc_config: Render config of the top level document. Its title
                is replaced by the title found in the document.
        """
        self.selection_converter = selection_converter
        self.text_cleaner = text_cleaner or TextCleaner()
        self.doc_config = doc_config or DocConfig()

    @classmethod
    def from_config(cls, config: Optional[ConverterConfig] = None) -> "DocumentConverter":
        """
        Build a converter from plain configuration values.

        Args:
            config: Converter configuration (defaults if None)

        Returns:
            DocumentConverter for the configured input and output formats
        """
        config = config or ConverterConfig()
        text_cleaner = TextCleaner(ascii_only=config.ascii_only)
        transformer = Transformer(text_cleaner=text_cleaner, output_format=config.output_format)
        selection_converter = get_selection_converter(
            config.input_format.value,
            SelectionConverterConfig(transformer=transformer),
        )

        return cls(
            selection_converter,
            text_cleaner=text_cleaner,
            doc_config=DocConfig(reduce_headers=config.reduce_headers, separator=config.separator),
        )

    def document_to_markdown(self, document: BeautifulSoup) -> Doc:
        """
        Convert the HTML document to markdown.

        The document is modified: script elements are removed from it.

        Args:
            document: Parsed HTML document

        Returns:
            Markdown document with the title and content of the HTML
        """
        root = self.selection_converter.find_root(document)
        title = self.text_cleaner.clean(self.selection_converter.find_title(document))

        if root is None:
            logger.debug("No root element found, the document has no content")
        if not title:
            logger.debug("No title found")

        config = DocConfig(
            title=title or None,
            reduce_headers=self.doc_config.reduce_headers,
            separator=self.doc_config.separator,
        )
        return self.selection_to_markdown(root, config)

    def selection_to_markdown(self, element: Optional[Tag], config: DocConfig) -> Doc:
        """
        Convert the content below the element into a new markdown document.

        Args:
            element: Element to search for content. None yields an empty document.
            config: Config of the new document

        Returns:
            Markdown document with a block per matched element
        """
        doc = Doc(config)
        if element is None:
            return doc

        for index, matched in enumerate(self.selection_converter.find_content(element)):
            self.selection_converter.handle_matched(index, matched, doc, self.selection_to_markdown)

        return doc


def convert_html(
    html: Union[str, bytes],
    config: Optional[ConverterConfig] = None,
    parser: str = "html.parser",
) -> str:
    """
    Convert an HTML string to markdown text.

    Args:
        html: HTML content
        config: Converter configuration (defaults if None)
        parser: BeautifulSoup tree builder

    Returns:
        Rendered markdown
    """
    document = BeautifulSoup(html, parser)
    return DocumentConverter.from_config(config).document_to_markdown(document).render()
