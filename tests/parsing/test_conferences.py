"""
Tests for parsing whole conference documents.
"""

import logging
from unittest.mock import patch

import pytest

from java_conferences.parsing.conferences import MarkdownParsingService, parse
from java_conferences.service import filter_by_year

ROW = "| Conference | Location | Hybrid | Date | CFP |\n|---|---|---|---|---|\n| {name} | {location} | No | May 1 | - |\n"


def section(year: str, name: str, location: str = "Berlin, Germany") -> str:
    """Build one year heading with a single-row table."""
    return f"### {year}\n\n" + ROW.format(name=name, location=location) + "\n"


class TestParse:
    """Tests for the parse function."""

    @pytest.mark.parametrize("content", [None, "", "   \n\t"])
    def test_empty_input(self, content):
        """Test that empty input yields no conferences."""
        assert parse(content) == []

    def test_two_sections(self):
        """Test two year sections with one row each."""
        conferences = parse(section("2024", "JConf A") + section("2025", "JConf B"))

        assert [c.year for c in conferences] == [2024, 2025]
        assert [c.name for c in conferences] == ["JConf A", "JConf B"]
        assert len(filter_by_year(conferences, 2025)) == 1

    def test_no_year_sections(self):
        """Test a document without any year headings."""
        assert parse("# Title\n\nSome text.\n\n### About\n\nMore text.\n") == []

    def test_bad_section_does_not_affect_others(self):
        """Test that a section without a table is skipped while others parse."""
        markdown = "### 2023\n\nNo table yet.\n\n" + section("2024", "JConf")
        conferences = parse(markdown)

        assert [(c.year, c.name) for c in conferences] == [(2024, "JConf")]

    def test_idempotent(self, sample_readme):
        """Test that parsing the same input twice gives equal results."""
        assert parse(sample_readme) == parse(sample_readme)

    def test_total_failure_returns_empty(self, caplog):
        """Test that an unexpected error during the walk is contained."""
        with patch(
            "java_conferences.parsing.conferences.find_year_sections",
            side_effect=RuntimeError("tree walk failed"),
        ):
            with caplog.at_level(logging.ERROR, logger="java_conferences"):
                assert parse(section("2025", "JConf")) == []
        assert "Failed to parse markdown content" in caplog.text


class TestSampleReadme:
    """Tests against a realistic README excerpt."""

    @pytest.fixture
    def conferences(self, sample_readme):
        return parse(sample_readme)

    def test_record_count_and_order(self, conferences):
        """Test that only valid rows of valid sections are returned, in order."""
        assert [c.name for c in conferences] == [
            "Jfokus",
            "Devoxx Belgium",
            "JavaOne",
            "jChampions Conference",
            "Devoxx UK",
        ]

    def test_years_match_sections(self, conferences):
        """Test that each record carries its section's year."""
        assert [c.year for c in conferences] == [2024, 2024, 2025, 2025, 2025]

    def test_jfokus(self, conferences):
        """Test a fully populated row."""
        jfokus = conferences[0]
        assert jfokus.link == "https://www.jfokus.se/"
        assert jfokus.location == "Stockholm, Sweden"
        assert jfokus.country == "Sweden"
        assert jfokus.is_hybrid is False
        assert jfokus.cfp_status == "Closed"
        assert jfokus.cfp_link == "https://www.jfokus.se/cfp"

    def test_devoxx_belgium(self, conferences):
        """Test bold link name, hybrid flag and placeholder CFP."""
        devoxx = conferences[1]
        assert devoxx.link == "https://devoxx.be/"
        assert devoxx.is_hybrid is True
        assert devoxx.cfp_status is None
        assert devoxx.cfp_link is None

    def test_remote_conference(self, conferences):
        """Test a row without links or a country."""
        jchampions = conferences[3]
        assert jchampions.link is None
        assert jchampions.location == "Remote"
        assert jchampions.country is None
        assert jchampions.is_hybrid is True

    def test_short_and_empty_tables_skipped(self, conferences):
        """Test that the 3-column 2027 table and header-only 2028 table add nothing."""
        assert {c.year for c in conferences} == {2024, 2025}


class TestMarkdownParsingService:
    """Tests for the MarkdownParsingService class."""

    def test_service_matches_module_parse(self, sample_readme):
        """Test that a dedicated service instance parses like parse()."""
        assert MarkdownParsingService().parse(sample_readme) == parse(sample_readme)

    def test_instances_are_independent(self):
        """Test that separate calls share no results."""
        service = MarkdownParsingService()
        first = service.parse(section("2024", "A"))
        second = service.parse(section("2025", "B"))

        assert [c.name for c in first] == ["A"]
        assert [c.name for c in second] == ["B"]
