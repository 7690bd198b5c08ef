"""Pydantic configuration models for htmltomd."""

from enum import Enum

from pydantic import BaseModel, Field

from ..markdown.doc import DEFAULT_SEPARATOR


class InputFormat(str, Enum):
    """HTML dialects the converter understands."""

    HTML = "html"
    CONFLUENCE = "confluence"
    GOOGLE = "google"


class OutputFormat(str, Enum):
    """Markdown output styles."""

    MD = "md"
    HUGO = "hugo"


class ConverterConfig(BaseModel):
    """
    Configuration for converting one HTML document to markdown.

    Example:
        config = ConverterConfig(input_format="confluence", output_format="hugo")
        converter = DocumentConverter.from_config(config)
    """

    input_format: InputFormat = Field(
        InputFormat.HTML,
        description="Source of the HTML: 'html', 'confluence', or 'google'",
    )
    output_format: OutputFormat = Field(
        OutputFormat.MD,
        description="Style of markdown output: 'md' or 'hugo' (images and panels as shortcodes)",
    )
    ascii_only: bool = Field(True, description="Remove non-ASCII characters from extracted text")
    reduce_headers: bool = Field(
        True,
        description="Shift headers down one level to keep level 1 for the title",
    )
    separator: str = Field(DEFAULT_SEPARATOR, min_length=1, description="String placed between blocks")

    model_config = {"extra": "forbid"}
