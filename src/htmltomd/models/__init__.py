"""htmltomd configuration models."""

from .config import ConverterConfig, InputFormat, OutputFormat

__all__ = [
    "ConverterConfig",
    "InputFormat",
    "OutputFormat",
]
