"""Lookup of selection converters by input format."""

from typing import Optional

from .base import BaseSelectionConverter, SelectionConverterConfig
from .confluence import ConfluenceSelectionConverter
from .google import GoogleSelectionConverter
from .html import HTMLSelectionConverter

SELECTION_CONVERTERS: dict[str, type[BaseSelectionConverter]] = {
    converter_class.name: converter_class
    for converter_class in (HTMLSelectionConverter, ConfluenceSelectionConverter, GoogleSelectionConverter)
}


def get_selection_converter(
    input_format: str,
    config: Optional[SelectionConverterConfig] = None,
) -> BaseSelectionConverter:
    """Get selection converter instance by input format.

    Args:
        input_format: Dialect of the source HTML ('html', 'confluence', 'google')
        config: Overrides for the dialect defaults

    Returns:
        Selection converter instance

    Raises:
        ValueError: If the input format is unknown
    """
    converter_class = SELECTION_CONVERTERS.get(input_format.lower())
    if not converter_class:
        raise ValueError(
            f"Unknown input format: {input_format}. " f"Available formats: {', '.join(SELECTION_CONVERTERS.keys())}"
        )

    return converter_class(config)
