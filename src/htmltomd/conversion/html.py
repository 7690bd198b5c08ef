"""Selection converter for generic HTML pages."""

from .base import BaseSelectionConverter


class HTMLSelectionConverter(BaseSelectionConverter):
    """
    Converts generic HTML pages to markdown.

    The content is the first "body", falling back to "html" and then the
    whole document for pages and fragments without one. The title is the
    first "head > title".
    Every default of BaseSelectionConverter applies unchanged.

    Example:
        converter = DocumentConverter(HTMLSelectionConverter())
        markdown = converter.document_to_markdown(soup).render()
    """

    name = "html"
