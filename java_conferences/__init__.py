"""
Java Conferences - structured conference listings from the javaconferences README.

This package provides utilities for:
- Fetching the conferences markdown document from GitHub
- Parsing year sections and their tables into ConferenceInfo records
- Filtering records by year for tool callers and the CLI
"""

import logging

# Set up NullHandler to prevent "No handler found" warnings
# when used as a library. Applications should configure their own handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

# Re-export commonly used items
from java_conferences.domain.models import ConferenceInfo
from java_conferences.parsing.conferences import parse
from java_conferences.service import get_java_conferences

__all__ = [
    "__version__",
    "ConferenceInfo",
    "parse",
    "get_java_conferences",
]
