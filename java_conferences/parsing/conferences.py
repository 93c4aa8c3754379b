"""
Conference document parsing.

Drives the full walk over the conferences markdown: locate year sections,
map every body row, and collect the records in document order. Parsing is
best-effort; a failure anywhere in the walk yields an empty list rather
than an exception.
"""

import logging

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from java_conferences.domain.models import ConferenceInfo
from java_conferences.parsing.rows import map_row_to_conference
from java_conferences.parsing.sections import (
    YearSection,
    find_table_body,
    find_year_sections,
    iter_body_rows,
)

logger = logging.getLogger(__name__)


def create_markdown_parser() -> MarkdownIt:
    """Create a CommonMark parser with GFM tables enabled."""
    return MarkdownIt("commonmark").enable("table")


def process_year_section(section: YearSection) -> list[ConferenceInfo]:
    """
    Map all body rows of one year section.

    Args:
        section: Year heading and its table

    Returns:
        Records for every row that mapped successfully
    """
    logger.info(f"Processing section for year: {section.year}")
    table_body = find_table_body(section.table)
    if table_body is None:
        logger.warning(f"Could not find table body within table for year {section.year}")
        return []

    conferences = []
    for row in iter_body_rows(table_body):
        conference = map_row_to_conference(row, section.year)
        if conference is not None:
            conferences.append(conference)
    return conferences


class MarkdownParsingService:
    """
    Parses the conferences markdown document into ConferenceInfo records.

    Holds one configured MarkdownIt instance; each parse() call builds its
    own syntax tree, so an instance can be shared between threads.
    """

    def __init__(self, md: MarkdownIt | None = None):
        self.md = md or create_markdown_parser()

    def parse(self, markdown_content: str | None) -> list[ConferenceInfo]:
        """
        Parse every year section of the document.

        Args:
            markdown_content: Raw markdown text

        Returns:
            Records from all year sections in document order ([] on failure)
        """
        if not markdown_content or not markdown_content.strip():
            logger.warning("Markdown content is empty or None. Skipping parsing.")
            return []

        try:
            document = SyntaxTreeNode(self.md.parse(markdown_content))
            all_conferences: list[ConferenceInfo] = []
            for section in find_year_sections(document):
                all_conferences.extend(process_year_section(section))
        except Exception:
            logger.exception("Failed to parse markdown content due to an unexpected error")
            return []

        logger.info(f"Parsed {len(all_conferences)} conferences in total from Markdown.")
        return all_conferences


_default_service = MarkdownParsingService()


def parse(markdown_content: str | None) -> list[ConferenceInfo]:
    """Parse conferences markdown with the module-level parsing service."""
    return _default_service.parse(markdown_content)
