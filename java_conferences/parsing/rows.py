"""
Table row mapping.

Converts one body row of a year table into a ConferenceInfo. Malformed rows
are skipped with a warning so a single bad line never costs the rest of the
document.
"""

import logging

from markdown_it.tree import SyntaxTreeNode

from java_conferences.constants import (
    CFP_LINK_INDEX,
    CFP_PLACEHOLDER,
    CONF_NAME_INDEX,
    EXPECTED_COLUMNS,
    HYBRID_INDEX,
    LOCATION_INDEX,
)
from java_conferences.domain.models import ConferenceInfo
from java_conferences.parsing.normalizers import extract_country_from_location, parse_hybrid
from java_conferences.parsing.text_extraction import extract_first_link_url, extract_text

logger = logging.getLogger(__name__)

CELL_NODE_TYPES = {"td", "th"}


def row_cells(row: SyntaxTreeNode) -> list[SyntaxTreeNode]:
    """Return the cell nodes of a table row in column order."""
    return [child for child in row.children if child.type in CELL_NODE_TYPES]


def map_row_to_conference(row: SyntaxTreeNode, year: str) -> ConferenceInfo | None:
    """
    Map a single table row to a ConferenceInfo.

    Column 3 is not read; it only counts towards EXPECTED_COLUMNS.

    Args:
        row: Table row node
        year: Year string from the enclosing section heading

    Returns:
        ConferenceInfo, or None if the row was skipped
    """
    try:
        cell_nodes = row_cells(row)
        cell_texts = [extract_text(cell).strip() for cell in cell_nodes]
    except Exception as e:
        logger.warning(f"Skipping row in year {year}: could not read cells: {e}")
        return None
    logger.debug(f"Processing row for year {year} with {len(cell_texts)} cells: {cell_texts}")

    if len(cell_texts) < EXPECTED_COLUMNS:
        logger.warning(
            f"Skipping row in year {year}: Insufficient cells "
            f"(expected >= {EXPECTED_COLUMNS}, found {len(cell_texts)}). Cell texts: {cell_texts}"
        )
        return None

    try:
        year_value = int(year)
    except (TypeError, ValueError):
        logger.warning(f"Skipping row in year {year}: Could not parse year '{year}' as integer.")
        return None

    try:
        name = cell_texts[CONF_NAME_INDEX]
        location = cell_texts[LOCATION_INDEX]
        cfp_text = cell_texts[CFP_LINK_INDEX]

        conference = ConferenceInfo(
            year=year_value,
            name=name,
            location=location,
            is_hybrid=parse_hybrid(cell_texts[HYBRID_INDEX]),
            cfp_status=None if cfp_text == CFP_PLACEHOLDER else cfp_text,
            cfp_link=extract_first_link_url(cell_nodes[CFP_LINK_INDEX]),
            link=extract_first_link_url(cell_nodes[CONF_NAME_INDEX]),
            country=extract_country_from_location(location),
        )
    except Exception as e:
        logger.warning(
            f"Skipping row in year {year} due to parsing error: {e}. Row cell texts: {cell_texts}",
            exc_info=True,
        )
        return None

    logger.debug(f"Mapped conference: {name} from year {year}")
    return conference
