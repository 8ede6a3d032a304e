"""Formatters package for reference-list output."""

from refstyle.formatters.ieee import IeeeFormatter, format_reference
from refstyle.formatters.rich_text import Formatting, RichText, TextRun


__all__ = [
    "Formatting",
    "IeeeFormatter",
    "RichText",
    "TextRun",
    "format_reference",
]
