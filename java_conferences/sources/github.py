"""
GitHub markdown source.

Fetches the raw conferences README. Network failures are logged and
reported as None so callers can degrade to an empty result.
"""

import logging

import requests

from java_conferences.config import (
    get_github_markdown_url,
    get_http_timeout,
    get_http_user_agent,
)

logger = logging.getLogger(__name__)


def fetch_markdown_content(
    session: requests.Session | None = None,
    url: str | None = None,
    timeout: float | None = None,
) -> str | None:
    """
    Fetch the conferences markdown document.

    Args:
        session: Optional HTTP session (module-level requests is used if None)
        url: Document URL (defaults to GITHUB_MARKDOWN_URL setting)
        timeout: Request timeout in seconds (defaults to HTTP_TIMEOUT setting)

    Returns:
        Document text, or None if the request failed
    """
    url = url or get_github_markdown_url()
    timeout = timeout if timeout is not None else get_http_timeout()
    headers = {"User-Agent": get_http_user_agent()}
    http = session if session is not None else requests

    logger.info(f"Fetching Java Conference Markdown from: {url}")
    try:
        response = http.get(url, headers=headers, timeout=timeout)
    except requests.RequestException as e:
        logger.error(f"Error fetching Markdown content from {url}: {e}")
        return None

    if response.status_code != 200:
        logger.error(f"Failed to fetch Markdown content. Status code: {response.status_code}")
        return None

    content = response.text
    logger.info(f"Successfully fetched Markdown content ({len(content) if content else 0} chars)")
    return content
