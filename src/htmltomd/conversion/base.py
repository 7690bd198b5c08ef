"""Base selection converter shared by every HTML dialect."""

import logging
from dataclasses import dataclass
from typing import Optional

from bs4 import BeautifulSoup, Tag

from ..markdown import Doc
from .protocols import ContentHandler, ContentSelector, RootFinder, SelectionToMarkdown, TitleFinder
from .transformer import Transformer

logger = logging.getLogger(__name__)

# Elements that hold content for the markdown document
DEFAULT_SEARCH_PATTERN = "p, span, hr, h1, h2, h3, h4, h5, h6, ul, ol, div, table"

HEADER_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")


@dataclass
class SelectionConverterConfig:
    """
    Overrides for a selection converter.

    Every field left as None falls back to the dialect's default.

    Attributes:
        root_finder: Finds the element holding the content
        title_finder: Finds the title of the document
        content_selector: Finds the content elements below an element
        content_handler: Adds a matched element to a markdown document
        transformer: Renders elements into markdown text and blocks
    """

    root_finder: Optional[RootFinder] = None
    title_finder: Optional[TitleFinder] = None
    content_selector: Optional[ContentSelector] = None
    content_handler: Optional[ContentHandler] = None
    transformer: Optional[Transformer] = None


class BaseSelectionConverter:
    """
    Base class for dialect selection converters.

    Defaults look for content in the children of "body" and the title in
    "head > title". A matched element becomes a paragraph (p, span), a
    horizontal rule (hr), a header (h1-h6), a list (ul, ol) or a table;
    a div is converted recursively into a sub-document.

    Subclasses change the defaults by overriding the default_* methods or
    the handle_* hooks. Callers change them by passing a
    SelectionConverterConfig.
    """

    name = "html"
    search_pattern = DEFAULT_SEARCH_PATTERN

    def __init__(self, config: Optional[SelectionConverterConfig] = None):
        """
        Initialize the converter.

        Args:
            config: Overrides for the dialect defaults
        """
        config = config or SelectionConverterConfig()

        self.transformer = config.transformer or Transformer()
        self.root_finder: RootFinder = config.root_finder or self.default_root_finder
        self.title_finder: TitleFinder = config.title_finder or self.default_title_finder
        self.content_selector: ContentSelector = config.content_selector or self.default_content_selector
        self.content_handler: ContentHandler = config.content_handler or self.default_content_handler
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def find_root(self, document: BeautifulSoup) -> Optional[Tag]:
        return self.root_finder(document)

    def find_title(self, document: BeautifulSoup) -> str:
        return self.title_finder(document)

    def find_content(self, element: Tag) -> list[Tag]:
        return self.content_selector(element)

    def handle_matched(
        self,
        index: int,
        element: Tag,
        doc: Doc,
        to_markdown: SelectionToMarkdown,
    ) -> None:
        self.content_handler(index, element, doc, to_markdown)

    def default_root_finder(self, document: BeautifulSoup) -> Optional[Tag]:
        """
        Find the first "body".

        html.parser does not insert a missing "body", so documents without
        one fall back to "html", and fragments to the document itself.
        """
        for name in ("body", "html"):
            root = document.find(name)
            if root is not None:
                return root

        self.logger.debug("No body or html element, using the whole document")
        return document

    def default_title_finder(self, document: BeautifulSoup) -> str:
        head = document.find("head")
        if head is None:
            return ""

        title = head.find("title", recursive=False)
        if title is None:
            return ""
        return self.transformer.clean_text(title.get_text())

    def default_content_selector(self, element: Tag) -> list[Tag]:
        return list(element.css.filter(self.search_pattern))

    def default_content_handler(
        self,
        index: int,
        element: Tag,
        doc: Doc,
        to_markdown: SelectionToMarkdown,
    ) -> None:
        """Add the matched element to the document according to its tag."""
        self.transformer.remove_scripts(element)

        tag = element.name
        if tag in ("p", "span"):
            self.handle_paragraph(element, doc)
        elif tag == "hr":
            self.handle_rule(element, doc)
        elif tag in HEADER_TAGS:
            self.handle_header(element, doc)
        elif tag in ("ul", "ol"):
            self.handle_list(element, doc)
        elif tag == "table":
            self.handle_table(element, doc)
        elif tag == "div":
            self.handle_div(element, doc, to_markdown)
        else:
            self.logger.debug(f"No handler for <{tag}> at index {index}, skipping")

    def handle_paragraph(self, element: Tag, doc: Doc) -> None:
        doc.add_paragraph(self.transformer.text(element))

    def handle_rule(self, element: Tag, doc: Doc) -> None:
        doc.add_horizontal_rule()

    def handle_header(self, element: Tag, doc: Doc) -> None:
        doc.add_header(element.name, self.transformer.text(element))

    def handle_list(self, element: Tag, doc: Doc) -> None:
        doc.add_content(self.transformer.to_list(element))

    def handle_table(self, element: Tag, doc: Doc) -> None:
        doc.add_content(self.transformer.to_table(element))

    def handle_div(self, element: Tag, doc: Doc, to_markdown: SelectionToMarkdown) -> None:
        """Convert the div into a sub-document with the same render config."""
        doc.add_doc(to_markdown(element, doc.get_render_config()))
