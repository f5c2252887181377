"""Formatters module."""

from .formatters import (
    FormatContext,
    Formatter,
    describe,
    display_value,
    format_timestamp,
)
from .registry import FORMATTERS, REPLY_FORMATTERS, FormatterRegistry

__all__ = [
    "FORMATTERS",
    "REPLY_FORMATTERS",
    "FormatContext",
    "Formatter",
    "FormatterRegistry",
    "describe",
    "display_value",
    "format_timestamp",
]
