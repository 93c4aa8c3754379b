"""
Document sources.

- github: raw conferences README from GitHub
"""

from java_conferences.sources.github import fetch_markdown_content

__all__ = [
    "fetch_markdown_content",
]
