"""
Year section and table location.

The conferences document lists each year under an H3 heading whose text is
the four-digit year, immediately followed by that year's table:

    ### 2025

    | Conference | Location | Hybrid | Date | CFP |
    |------------|----------|--------|------|-----|
    | ...        | ...      | ...    | ...  | ... |

Headings that are not years, and year headings without an adjacent table,
contribute nothing.
"""

import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass

from markdown_it.tree import SyntaxTreeNode

from java_conferences.constants import YEAR_HEADING_PATTERN, YEAR_HEADING_TAG
from java_conferences.parsing.text_extraction import extract_text

logger = logging.getLogger(__name__)

_YEAR_RE = re.compile(YEAR_HEADING_PATTERN, re.ASCII)


@dataclass(frozen=True)
class YearSection:
    """A year heading paired with the table that follows it."""

    year: str
    table: SyntaxTreeNode


def is_year_heading_text(text: str) -> bool:
    """Check if heading text is exactly four ASCII digits."""
    return _YEAR_RE.fullmatch(text) is not None


def find_year_sections(document: SyntaxTreeNode) -> Iterator[YearSection]:
    """
    Find (year, table) pairs among the top-level blocks of a document.

    Args:
        document: Root node of the parsed markdown

    Yields:
        YearSection for every H3 year heading immediately followed by a table
    """
    for block in document.children:
        if block.type != "heading" or block.tag != YEAR_HEADING_TAG:
            continue

        heading_text = extract_text(block).strip()
        logger.debug(f"Found H3 heading: '{heading_text}'")
        if not is_year_heading_text(heading_text):
            logger.debug(f"Skipping H3 heading '{heading_text}' as it doesn't look like a year.")
            continue

        table = block.next_sibling
        if table is None or table.type != "table":
            logger.warning(f"No table found immediately after H3 heading for year {heading_text}")
            continue

        logger.debug(f"Found table immediately after H3 heading for year {heading_text}")
        yield YearSection(heading_text, table)


def find_table_body(table: SyntaxTreeNode) -> SyntaxTreeNode | None:
    """Return the tbody child of a table (skipping thead), or None."""
    for child in table.children:
        if child.type == "tbody":
            return child
    return None


def iter_body_rows(table_body: SyntaxTreeNode) -> Iterator[SyntaxTreeNode]:
    """Yield the rows of a table body in order."""
    for child in table_body.children:
        if child.type == "tr":
            yield child
