"""
Parsing utilities for extracting conference records from markdown.

This package contains modules for:
- Flattening inline markdown to text and finding links
- Normalizing hybrid, location and date cells
- Locating year sections and mapping their table rows
"""

from java_conferences.parsing.conferences import MarkdownParsingService, parse

__all__ = [
    "MarkdownParsingService",
    "parse",
]
