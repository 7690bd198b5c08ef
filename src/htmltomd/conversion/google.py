"""Selection converter for HTML exported from Google Docs."""

from bs4 import Tag

from ..markdown import Doc
from .base import BaseSelectionConverter


class GoogleSelectionConverter(BaseSelectionConverter):
    """
    Converts the HTML export of a Google Doc to markdown.

    Finds the root and title like generic HTML, body-less exports included. Horizontal rules that the
    export uses as page breaks are dropped.
    """

    name = "google"

    def handle_rule(self, element: Tag, doc: Doc) -> None:
        if self.is_page_break(element):
            self.logger.debug("Skipping page break rule")
            return
        doc.add_horizontal_rule()

    @staticmethod
    def is_page_break(element: Tag) -> bool:
        return "page-break" in element.get("style", "")
