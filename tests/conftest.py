"""
Pytest configuration and shared fixtures for java_conferences tests.
"""

import os
from pathlib import Path

import pytest
from markdown_it.tree import SyntaxTreeNode

from java_conferences.config import get_settings
from java_conferences.parsing.conferences import create_markdown_parser

# Keep tests off the network even if a .env points somewhere real
if not os.getenv("GITHUB_MARKDOWN_URL"):
    os.environ["GITHUB_MARKDOWN_URL"] = "https://example.test/javaconferences/README.md"

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset cached settings so each test sees its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_readme() -> str:
    """Excerpt of the javaconferences README with two year sections."""
    return (FIXTURES_DIR / "javaconferences_readme.md").read_text(encoding="utf-8")


@pytest.fixture
def to_tree():
    """Parse markdown text into a SyntaxTreeNode document."""
    md = create_markdown_parser()

    def _to_tree(markdown: str) -> SyntaxTreeNode:
        return SyntaxTreeNode(md.parse(markdown))

    return _to_tree


@pytest.fixture
def first_body_row(to_tree):
    """Return the first body row of the first table in a markdown snippet."""

    def _first_body_row(markdown: str) -> SyntaxTreeNode:
        document = to_tree(markdown)
        table = next(block for block in document.children if block.type == "table")
        tbody = next(child for child in table.children if child.type == "tbody")
        return tbody.children[0]

    return _first_body_row
