"""
Data models for parsed conference listings.

ConferenceInfo represents one row of a year table in the conferences
markdown document.
"""

from dataclasses import asdict, dataclass

# Attribute name -> key used in tool output
_WIRE_NAMES = {
    "year": "year",
    "name": "name",
    "location": "location",
    "is_hybrid": "isHybrid",
    "cfp_status": "cfpStatus",
    "cfp_link": "cfpLink",
    "link": "link",
    "country": "country",
}


@dataclass(frozen=True)
class ConferenceInfo:
    """A single conference entry from a year section."""

    year: int
    name: str
    location: str
    is_hybrid: bool = False
    cfp_status: str | None = None  # None when the CFP cell is a "-" placeholder
    cfp_link: str | None = None
    link: str | None = None  # Primary conference link (from the name cell)
    country: str | None = None  # Derived from "City, Country" locations

    def to_dict(self) -> dict:
        """Return a JSON-ready mapping keyed by tool output names."""
        return {_WIRE_NAMES[key]: value for key, value in asdict(self).items()}
