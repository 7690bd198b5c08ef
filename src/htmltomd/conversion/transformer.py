"""Rendering of HTML elements into markdown text and blocks."""

import logging
from typing import Optional, Union

from bs4 import Tag
from bs4.element import CData, NavigableString, PageElement, PreformattedString

from ..markdown import List, Table
from ..models.config import OutputFormat
from .cleaner import TextCleaner

logger = logging.getLogger(__name__)

HUGO_FORMAT = OutputFormat.HUGO.value

# Elements that never contribute text
SCRIPT_TAGS = ["style", "script", "link"]

# Inline rewrites in the order they apply. An outer rewrite reads the text
# of its element after every earlier rewrite has run, so rewrites ranked
# lower than it survive inside it and the rest collapse to plain text.
BOLD = 0
ITALIC = 1
ANCHOR = 2
INLINE_CODE = 3
IMAGE = 4

ALL_REWRITES = frozenset({BOLD, ITALIC, ANCHOR, INLINE_CODE, IMAGE})
NO_REWRITES: frozenset = frozenset()


def _is_text(node: PageElement) -> bool:
    """Check for a text node, excluding comments, doctypes and the like."""
    if not isinstance(node, NavigableString):
        return False
    return not isinstance(node, PreformattedString) or isinstance(node, CData)


class Transformer:
    """
    Converts HTML elements into markdown text and blocks.

    Inline elements are rewritten while the text of an element is
    collected: strong becomes **bold**, em becomes _italic_, a[href]
    becomes [text](href), code becomes `code` and img[src] becomes
    ![alt](src), or a Hugo figure shortcode when rendering for Hugo.
    Anchors without href and images without src are left as they are.

    Example:
        transformer = Transformer(output_format="hugo")
        transformer.text(soup.p)  # 'See {{< figure src="./a.png" alt="A" >}}'
    """

    def __init__(
        self,
        text_cleaner: Optional[TextCleaner] = None,
        output_format: Union[OutputFormat, str] = OutputFormat.MD,
    ):
        """
        Initialize the transformer.

        Args:
            text_cleaner: Cleaner applied to extracted text (default cleaner if None)
            output_format: "md" for plain markdown, "hugo" for Hugo shortcodes
        """
        self.text_cleaner = text_cleaner or TextCleaner()
        self.output_format = OutputFormat(output_format)

    @property
    def is_hugo(self) -> bool:
        return self.output_format == OutputFormat.HUGO

    def clean_text(self, text: str) -> str:
        return self.text_cleaner.clean(text)

    def remove_scripts(self, element: Tag) -> None:
        """Remove any style, script, or link elements below the element."""
        scripts = element.find_all(SCRIPT_TAGS)
        for script in scripts:
            if not script.decomposed:
                script.decompose()
        if scripts:
            logger.debug(f"Removed {len(scripts)} script elements from <{element.name}>")

    def inline(self, element: Tag) -> str:
        """
        Collect the text of the element with every inline rewrite applied.

        The element itself is not modified.
        """
        return self._render_children(element, ALL_REWRITES)

    def text(self, element: Tag) -> str:
        """Collect the cleaned text of the element with inline rewrites applied."""
        return self.clean_text(self.inline(element))

    def plain_text(self, element: Tag) -> str:
        """Collect the text of the element without any rewrites."""
        return self._render_children(element, NO_REWRITES)

    def to_list(self, element: Tag) -> List:
        """Transform a "ul" or "ol" element into a markdown List."""
        items = [self.text(li) for li in element.find_all("li", recursive=False)]

        if element.name == "ol":
            return List.numbered(items)
        return List.unordered(items)

    def to_table(self, element: Tag) -> Table:
        """
        Transform a "table" element into a markdown Table.

        Only the first header row is kept, since markdown tables support a
        single one. Rows without any "td" cells are dropped.
        """
        headers = [self.text(cell) for cell in self._table_headers(element)]

        rows = []
        for tr in self._table_rows(element):
            cells = [self.text(td) for td in tr.find_all("td")]
            if cells:
                rows.append(cells)

        return Table(headers=headers, rows=rows)

    def _table_headers(self, table: Tag) -> list[Tag]:
        thead = table.find("thead")
        if thead is None:
            return table.find_all("th")

        first_row = thead.find("tr")
        header_root = first_row if first_row is not None else thead

        cells = header_root.find_all("th")
        if not cells:
            cells = header_root.find_all("td")
        return cells

    def _table_rows(self, table: Tag) -> list[Tag]:
        if table.find("tbody") is not None:
            return table.select("tbody tr")

        # Parsers that do not insert an implicit tbody leave header rows
        # next to the body rows.
        return [tr for tr in table.find_all("tr") if tr.find_parent("thead") is None]

    def _rewrite_of(self, element: Tag) -> Optional[int]:
        name = element.name
        if name == "strong":
            return BOLD
        if name == "em":
            return ITALIC
        if name == "a" and element.has_attr("href"):
            return ANCHOR
        if name == "code":
            return INLINE_CODE
        if name == "img" and element.has_attr("src"):
            return IMAGE
        return None

    def _render_children(self, element: Tag, allowed: frozenset) -> str:
        return "".join(self._render(child, allowed) for child in element.children)

    def _render(self, node: PageElement, allowed: frozenset) -> str:
        if not isinstance(node, Tag):
            return str(node) if _is_text(node) else ""

        if node.name in SCRIPT_TAGS:
            return ""

        rewrite = self._rewrite_of(node)
        if rewrite is None:
            return self._render_children(node, allowed)
        if rewrite not in allowed:
            return self._render_children(node, NO_REWRITES)

        if rewrite == INLINE_CODE:
            # Inline code re-reads its raw markup, so every other rewrite
            # still applies inside it.
            inner = self._render_children(node, allowed - {INLINE_CODE})
            return f"`{self.clean_text(inner)}`"

        if rewrite == IMAGE:
            return self._image(node)

        earlier = frozenset(r for r in allowed if r < rewrite)
        inner = self.clean_text(self._render_children(node, earlier))

        if rewrite == BOLD:
            return f"**{inner}**"
        if rewrite == ITALIC:
            return f"_{inner}_"
        return f"[{inner}]({node['href']})"

    def _image(self, element: Tag) -> str:
        src = element["src"]
        alt = element.get("alt", "")
        if self.is_hugo:
            return f'{{{{< figure src="./{src}" alt="{alt}" >}}}}'
        return f"![{alt}]({src})"
