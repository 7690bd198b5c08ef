"""Normalization of text extracted from HTML elements."""

import logging
import re

logger = logging.getLogger(__name__)

NON_ASCII_RE = re.compile(r"[^\x00-\x7f]")

# Unicode characters with a plain equivalent. The pilcrow is the permalink
# glyph Confluence appends to headers.
UNICODE_REPLACEMENTS = str.maketrans(
    {
        "\u00a0": " ",
        "\u201c": '"',
        "\u201d": '"',
        "\u2018": "'",
        "\u2019": "'",
        "\u00b6": None,
    }
)


def find_non_ascii(text: str) -> list[str]:
    """
    List the code points of non-ASCII characters in the text.

    Useful when looking for characters that should be added to
    UNICODE_REPLACEMENTS.

    Example:
        >>> find_non_ascii("café")
        ['U+00E9']
    """
    return [f"U+{ord(char):04X}" for char in NON_ASCII_RE.findall(text)]


class TextCleaner:
    """
    Collapses extracted text onto a single line.

    Each line has common unicode characters replaced with ASCII
    equivalents, is optionally stripped of any remaining non-ASCII
    characters, and is trimmed. Lines are joined with a single space.

    Example:
        cleaner = TextCleaner(ascii_only=False)
        cleaner.clean("  Hello\\n  World ")  # 'Hello World'
    """

    def __init__(self, ascii_only: bool = True):
        """
        Initialize the cleaner.

        Args:
            ascii_only: Remove every non-ASCII character left after the
                unicode replacements
        """
        self.ascii_only = ascii_only

    def clean(self, text: str) -> str:
        """
        Clean the text.

        Args:
            text: Raw text content of an element

        Returns:
            Cleaned text, possibly empty
        """
        if not text:
            return ""

        lines = []
        for line in text.split("\n"):
            line = line.translate(UNICODE_REPLACEMENTS)
            if self.ascii_only:
                if logger.isEnabledFor(logging.DEBUG):
                    dropped = find_non_ascii(line)
                    if dropped:
                        logger.debug(f"Dropping non-ASCII characters: {', '.join(dropped)}")
                line = NON_ASCII_RE.sub("", line)
            lines.append(line.strip())

        return " ".join(lines).strip()

    def __call__(self, text: str) -> str:
        return self.clean(text)

    def __repr__(self) -> str:
        return f"TextCleaner(ascii_only={self.ascii_only})"
