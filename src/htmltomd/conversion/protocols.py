"""Protocol definitions for dialect-specific selection conversion."""

from typing import Callable, Optional, Protocol, runtime_checkable

from bs4 import BeautifulSoup, Tag

from ..markdown import Doc, DocConfig

# Finds the element holding the content of the document
RootFinder = Callable[[BeautifulSoup], Optional[Tag]]

# Finds the title of the document
TitleFinder = Callable[[BeautifulSoup], str]

# Finds the elements below an element that hold content
ContentSelector = Callable[[Tag], list[Tag]]

# Converts an element into a new markdown document
SelectionToMarkdown = Callable[[Optional[Tag], DocConfig], Doc]

# Adds the content of a matched element to a markdown document, converting
# nested containers with the given SelectionToMarkdown
ContentHandler = Callable[[int, Tag, Doc, SelectionToMarkdown], None]


@runtime_checkable
class SelectionConverter(Protocol):
    """
    Protocol for converting one dialect of HTML document to markdown.

    Implementations know where a dialect keeps its title and content and
    how its elements map to markdown blocks. The DocumentConverter drives
    the traversal and hands every matched element to handle_matched.
    """

    def find_root(self, document: BeautifulSoup) -> Optional[Tag]:
        """
        Find the element holding the content.

        Returns:
            The root element, or None if the document has none
        """
        ...

    def find_title(self, document: BeautifulSoup) -> str:
        """
        Find the title of the document.

        Returns:
            The cleaned title, or an empty string
        """
        ...

    def find_content(self, element: Tag) -> list[Tag]:
        """
        Find the elements below the element to convert, in document order.
        """
        ...

    def handle_matched(
        self,
        index: int,
        element: Tag,
        doc: Doc,
        to_markdown: SelectionToMarkdown,
    ) -> None:
        """
        Add the content of a matched element to the document.

        Args:
            index: Position of the element among the matched elements
            element: The matched element
            doc: Markdown document to add blocks to
            to_markdown: Converts a nested container into a sub-document
        """
        ...
