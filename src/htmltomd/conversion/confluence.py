"""Selection converter for HTML pages exported from Confluence."""

from typing import Optional

from bs4 import BeautifulSoup, Tag

from ..markdown import CodeBlock, Doc, DocConfig
from .base import BaseSelectionConverter
from .protocols import SelectionToMarkdown

ROOT_ID = "main-content"
TITLE_ID = "title-text"

CODE_BLOCK_CLASS = "code"
HIGHLIGHTER_PARAMS_ATTR = "data-syntaxhighlighter-params"
DEFAULT_CODE_LANGUAGE = "txt"
# Confluence marks unlabelled code blocks as PHP, so PHP can't be trusted
UNRELIABLE_CODE_LANGUAGES = {"php"}

# "Note" panels only carry the bare "panel" class, other panels carry the
# macro class plus one class for their type.
PANEL_NOTE_CLASS = "panel"
PANEL_MACRO_CLASS = "confluence-information-macro"
PANEL_CONTENT_CLASS = "confluence-information-macro-body"
PANEL_TYPES = [
    ("confluence-information-macro-information", "info"),
    ("confluence-information-macro-note", "warning"),
    ("confluence-information-macro-tip", "tip"),
    ("confluence-information-macro-warning", "error"),
]
DEFAULT_PANEL_TYPE = "note"


def parse_highlighter_params(params: str) -> dict[str, str]:
    """
    Parse syntax highlighter params into a dict.

    Example:
        >>> parse_highlighter_params("brush: php; gutter: false")
        {'brush': 'php', 'gutter': 'false'}
    """
    parsed = {}
    for param in params.split(";"):
        key, _, value = param.partition(":")
        if key.strip():
            parsed[key.strip()] = value.strip()
    return parsed


class ConfluenceSelectionConverter(BaseSelectionConverter):
    """
    Converts an HTML page exported from Confluence to markdown.

    The content is the element with id "main-content" and the title the
    element with id "title-text". Besides the defaults, divs holding code
    blocks become fenced code blocks, and info/note/warning/tip panels are
    converted recursively. Panels are wrapped in a Hugo "notice" shortcode
    when rendering for Hugo, otherwise only their content is kept.
    """

    name = "confluence"

    def default_root_finder(self, document: BeautifulSoup) -> Optional[Tag]:
        return document.find(id=ROOT_ID)

    def default_title_finder(self, document: BeautifulSoup) -> str:
        title = document.find(id=TITLE_ID)
        if title is None:
            return ""
        return self.transformer.clean_text(title.get_text())

    def handle_div(self, element: Tag, doc: Doc, to_markdown: SelectionToMarkdown) -> None:
        if self.is_panel(element):
            doc.add_doc(self.to_panel(element, doc.get_render_config(), to_markdown))
        elif self.is_code_block(element):
            doc.add_content(self.to_code_block(element))
        else:
            super().handle_div(element, doc, to_markdown)

    def is_panel(self, element: Tag) -> bool:
        # The bare "panel" class must be the only class: code blocks carry
        # it too, next to "code".
        if element.get("class") == [PANEL_NOTE_CLASS]:
            return True
        return PANEL_MACRO_CLASS in element.get("class", [])

    def is_code_block(self, element: Tag) -> bool:
        return CODE_BLOCK_CLASS in element.get("class", [])

    def panel_type(self, element: Tag) -> str:
        classes = element.get("class", [])
        if PANEL_NOTE_CLASS in classes:
            return DEFAULT_PANEL_TYPE

        for css_class, notice_type in PANEL_TYPES:
            if css_class in classes:
                return notice_type
        return DEFAULT_PANEL_TYPE

    def to_panel(self, element: Tag, config: DocConfig, to_markdown: SelectionToMarkdown) -> Doc:
        """
        Convert the body of a panel.

        The body may hold lists, code blocks and other panels, which the
        root conversion never reaches since they are not its children.
        """
        doc = to_markdown(element.find(class_=PANEL_CONTENT_CLASS), config)

        if not self.transformer.is_hugo:
            return doc

        notice_type = self.panel_type(element)
        self.logger.debug(f"Wrapping panel in a {notice_type} notice")

        # A newline separator places the shortcode right before and after the content
        wrapper = Doc(DocConfig(separator="\n"))
        wrapper.add_paragraph(f"{{{{% notice {notice_type} %}}}}")
        wrapper.add_doc(doc)
        wrapper.add_paragraph("{{% /notice %}}")
        return wrapper

    def to_code_block(self, element: Tag) -> CodeBlock:
        pre = element.find("pre")
        if pre is None:
            self.logger.debug("Code block without a pre element")
            return CodeBlock(language=DEFAULT_CODE_LANGUAGE, code="")

        return CodeBlock(language=self.code_language(pre), code=self.transformer.plain_text(pre))

    def code_language(self, pre: Tag) -> str:
        """Resolve the language of a code block from its highlighter params."""
        params = pre.get(HIGHLIGHTER_PARAMS_ATTR)
        if params is None:
            return DEFAULT_CODE_LANGUAGE

        language = parse_highlighter_params(params).get("brush") or DEFAULT_CODE_LANGUAGE
        if language in UNRELIABLE_CODE_LANGUAGES:
            self.logger.debug(f"Ignoring code language {language}")
            return DEFAULT_CODE_LANGUAGE
        return language
