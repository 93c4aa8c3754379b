"""
Field normalizers for conference table cells.

Pure functions that turn loosely formatted cell text into typed values.
None of them raise: unparseable input degrades to a default or is passed
through unchanged.
"""

import logging
import re
from datetime import date

from markdown_it.tree import SyntaxTreeNode

from java_conferences.constants import DATE_NOT_AVAILABLE, DATE_TBD
from java_conferences.parsing.text_extraction import extract_text

logger = logging.getLogger(__name__)

HYBRID_VALUES = {"yes", "hybrid"}

LOCATION_SEPARATOR = ","

# e.g. "January 10-12" or "Feb 5"; only the start day is captured
DATE_PATTERN = re.compile(r"(\w+)\s+(\d{1,2})(-\d{1,2})?")

_MONTH_NAMES = [
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
]

# Full names and 3-letter abbreviations -> month number
MONTHS = {name: i for i, name in enumerate(_MONTH_NAMES, start=1)}
MONTHS.update({name[:3]: i for i, name in enumerate(_MONTH_NAMES, start=1)})
MONTHS["sept"] = 9


def parse_hybrid(text: str | None) -> bool:
    """
    Parse the hybrid column ("yes" or "hybrid", case-insensitive).

    Args:
        text: The text from the table cell

    Returns:
        True if the text indicates hybrid, False otherwise
    """
    if text is None:
        return False
    return text.strip().casefold() in HYBRID_VALUES


def extract_country_from_location(location: str | None) -> str | None:
    """
    Extract the country name from a location string ("City, Country" format).

    Args:
        location: The location string

    Returns:
        Text after the last comma, or None if there is no comma
    """
    if not location or LOCATION_SEPARATOR not in location:
        return None
    country = location.rsplit(LOCATION_SEPARATOR, 1)[1].strip()
    return country or None


def month_from_name(name: str) -> int | None:
    """Month number for an English month name or abbreviation, else None."""
    return MONTHS.get(name.casefold())


def parse_conference_date(date_string: str, year: int) -> str:
    """
    Parse a conference date cell into ISO format (YYYY-MM-DD).

    Handles "Month DD" and "Month DD-DD"; for ranges only the start day is
    used. "TBD" is kept as-is. Anything else that cannot be turned into a
    real calendar date is returned unchanged.

    Args:
        date_string: Free-text date from the table
        year: Year of the enclosing section

    Returns:
        ISO date string, "TBD", or the original input
    """
    text = date_string.strip()
    match = DATE_PATTERN.search(text)
    if match:
        month = month_from_name(match.group(1))
        if month is None:
            logger.warning(f"Could not parse date string: '{date_string}' for year {year}: unknown month")
            return date_string
        try:
            return date(year, month, int(match.group(2))).isoformat()
        except ValueError as e:
            logger.warning(f"Could not parse date string: '{date_string}' for year {year}: {e}")
            return date_string

    if text.casefold() == DATE_TBD.casefold():
        return DATE_TBD

    logger.warning(f"Date string '{date_string}' did not match expected pattern for year {year}")
    return date_string


def extract_conference_date(cell: SyntaxTreeNode | None, year: int) -> str:
    """
    Extract and normalize the date from a table cell.

    Args:
        cell: Table cell node (None or empty cells yield "N/A")
        year: Year of the enclosing section

    Returns:
        Result of parse_conference_date on the cell's text
    """
    text = extract_text(cell).strip()
    return parse_conference_date(text or DATE_NOT_AVAILABLE, year)
