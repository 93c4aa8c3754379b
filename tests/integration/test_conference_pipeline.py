"""
Integration tests for the fetch -> parse -> filter pipeline.

The HTTP layer is mocked; everything else runs for real.
"""

from unittest.mock import MagicMock

import pytest

from java_conferences import get_java_conferences

pytestmark = pytest.mark.integration


@pytest.fixture
def session(sample_readme):
    """HTTP session returning the sample README."""
    mock_session = MagicMock()
    mock_session.get.return_value = MagicMock(status_code=200, text=sample_readme)
    return mock_session


class TestConferencePipeline:
    """End-to-end behaviour of get_java_conferences."""

    def test_year_2025(self, session):
        """Test the 2025 section of the README."""
        conferences = get_java_conferences("2025", session=session)

        assert [c.to_dict() for c in conferences] == [
            {
                "year": 2025,
                "name": "JavaOne",
                "location": "Redwood Shores, CA, USA",
                "isHybrid": True,
                "cfpStatus": "Open",
                "cfpLink": "https://cfp.example.test/javaone",
                "link": "https://www.oracle.com/javaone/",
                "country": "USA",
            },
            {
                "year": 2025,
                "name": "jChampions Conference",
                "location": "Remote",
                "isHybrid": True,
                "cfpStatus": None,
                "cfpLink": None,
                "link": None,
                "country": None,
            },
            {
                "year": 2025,
                "name": "Devoxx UK",
                "location": "London, UK",
                "isHybrid": False,
                "cfpStatus": "TBD",
                "cfpLink": None,
                "link": "https://www.devoxx.co.uk/",
                "country": "UK",
            },
        ]

    def test_year_without_table(self, session):
        """Test a year whose heading has no table."""
        assert get_java_conferences("2026", session=session) == []

    def test_http_failure(self):
        """Test that an HTTP error degrades to no conferences."""
        failing = MagicMock()
        failing.get.return_value = MagicMock(status_code=503, text="")

        assert get_java_conferences("2025", session=failing) == []
