"""
Domain models for conference listings.
"""

from java_conferences.domain.models import ConferenceInfo

__all__ = [
    "ConferenceInfo",
]
