"""
Constants for java_conferences package.

Centralizes the table schema and network defaults.
"""

# Source document
DEFAULT_MARKDOWN_URL = (
    "https://raw.githubusercontent.com/javaconferences/javaconferences.github.io/main/README.md"
)
DEFAULT_HTTP_TIMEOUT = 10.0  # seconds
DEFAULT_USER_AGENT = "java_conferences (+https://github.com/javaconferences)"

# Year sections are H3 headings whose text is exactly four digits
YEAR_HEADING_TAG = "h3"
YEAR_HEADING_PATTERN = r"^[0-9]{4}$"

# Conference table schema: Name | Location | Hybrid | (unused) | CFP
CONF_NAME_INDEX = 0
LOCATION_INDEX = 1
HYBRID_INDEX = 2
CFP_LINK_INDEX = 4
EXPECTED_COLUMNS = 5

# Placeholder used in the CFP column when there is no call for papers
CFP_PLACEHOLDER = "-"

# Date cell values
DATE_TBD = "TBD"
DATE_NOT_AVAILABLE = "N/A"
