"""
Conference tool operation.

get_java_conferences composes fetch -> parse -> year filter. It is the
function a tool transport exposes; it never raises and reports every
failure as an empty list.
"""

import logging
from datetime import date

import requests

from java_conferences.domain.models import ConferenceInfo
from java_conferences.parsing.conferences import parse
from java_conferences.sources.github import fetch_markdown_content

logger = logging.getLogger(__name__)

TOOL_NAME = "getJavaConferences"
TOOL_DESCRIPTION = (
    "Get information about Java conferences for a specific year (if specified and found "
    "in the source) or the current year by default. Parses data for all years found "
    "under H3 headings."
)


def determine_target_year(year: str | None, today: date | None = None) -> int:
    """
    Resolve the requested year, falling back to the current year.

    Args:
        year: Requested year as text (None, blank or non-numeric -> current year)
        today: Reference date (defaults to date.today())

    Returns:
        Target year
    """
    current_year = (today or date.today()).year

    if year is None or not year.strip():
        logger.info(f"Tool called: {TOOL_NAME} using current year: {current_year} (no year specified)")
        return current_year

    try:
        target_year = int(year.strip())
    except ValueError:
        logger.warning(f"Invalid year format '{year}' requested, falling back to current year {current_year}.")
        return current_year

    logger.info(f"Tool called: {TOOL_NAME} attempting requested year: {target_year}")
    return target_year


def filter_by_year(conferences: list[ConferenceInfo], target_year: int) -> list[ConferenceInfo]:
    """Keep only conferences whose year equals target_year."""
    return [conf for conf in conferences if conf.year == target_year]


def get_java_conferences(
    year: str | None = None,
    session: requests.Session | None = None,
    url: str | None = None,
) -> list[ConferenceInfo]:
    """
    Get Java conferences for a year (current year by default).

    Args:
        year: Optional year filter as text
        session: Optional HTTP session for the fetch
        url: Optional document URL override

    Returns:
        Conferences for the target year ([] on any failure)
    """
    target_year = determine_target_year(year)

    try:
        markdown_content = fetch_markdown_content(session=session, url=url)
        if not markdown_content or not markdown_content.strip():
            logger.warning("Markdown content was None or empty after fetch, returning empty list.")
            return []

        all_conferences = parse(markdown_content)
        logger.debug(f"Parser returned {len(all_conferences)} conferences in total (before filtering).")

        filtered = filter_by_year(all_conferences, target_year)
        logger.info(f"Returning {len(filtered)} conferences for year {target_year}")
        return filtered
    except Exception:
        logger.exception(f"Error processing conference info request for year {target_year}")
        return []
