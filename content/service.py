"""
Remote markdown content service for the docs site.

Pages render markdown fetched from the VintLang repository rather than from
the local docs directory. Fetch failures never propagate to the page: they
are turned into a readable placeholder text.

Usage:
    from content import fetch_markdown, fetch_learn_item

    markdown = fetch_markdown("README.md")
    arrays = fetch_learn_item("arrays")
"""

from __future__ import annotations

import logging
import time
from typing import Optional

import requests

from registry.config import CONTENT_BASE_URL, FETCH_BACKOFF, FETCH_RETRIES, FETCH_TIMEOUT
from registry.models import doc_filename

logger = logging.getLogger(__name__)

ERROR_PLACEHOLDER = "Error fetching content. Please try again later."
LEARN_DOCS_PREFIX = "docs/"


# ============================================================================
# Exceptions
# ============================================================================


class ContentFetchError(RuntimeError):
    """Raised when markdown content cannot be fetched."""
    pass


# ============================================================================
# Fetch functions
# ============================================================================


def content_url(path: str, base_url: Optional[str] = None) -> str:
    """Construct the raw-content URL for a repository path."""
    return (base_url or CONTENT_BASE_URL).rstrip("/") + "/" + path.lstrip("/")


def get_markdown_content(
    path: str,
    base_url: Optional[str] = None,
    timeout: float = FETCH_TIMEOUT,
    retries: int = FETCH_RETRIES,
    session: Optional[requests.Session] = None,
) -> str:
    """
    Fetch raw markdown for a repository path.

    Args:
        path: Path inside the repository (e.g. "docs/arrays.md")
        base_url: Raw-content base URL (default: VINT_DOCS_CONTENT_BASE_URL)
        timeout: Per-request timeout in seconds
        retries: Attempts for connection-level failures
        session: Optional requests session

    Returns:
        Markdown text

    Raises:
        ContentFetchError: On HTTP errors or after exhausting retries
    """
    url = content_url(path, base_url)
    http = session or requests
    attempts = max(1, retries)

    for attempt in range(1, attempts + 1):
        try:
            response = http.get(url, timeout=timeout)
        except requests.RequestException as exc:
            logger.warning(f"Fetch attempt {attempt} for {url} failed: {exc}")
            if attempt == attempts:
                raise ContentFetchError(
                    f"Failed to fetch Markdown after {attempts} attempts: {exc}"
                ) from exc
            time.sleep(FETCH_BACKOFF * attempt)
            continue

        if not response.ok:
            raise ContentFetchError(
                f"Failed to fetch Markdown: {response.status_code} {response.reason}"
            )

        logger.debug(f"Fetched {url} ({len(response.text)} chars, attempt {attempt})")
        return response.text

    raise ContentFetchError("Unexpected error in get_markdown_content")


def fetch_markdown(path: str, **kwargs) -> str:
    """Fetch markdown, returning a placeholder message instead of raising.

    Args:
        path: Path inside the repository
        **kwargs: Passed to get_markdown_content()

    Returns:
        Markdown text, or the error placeholder with failure details
    """
    try:
        return get_markdown_content(path, **kwargs)
    except ContentFetchError as exc:
        logger.error(f"Failed to fetch markdown {path}: {exc}")
        return f"{ERROR_PLACEHOLDER}\nDetails: {exc}"


def fetch_learn_item(filename: str, **kwargs) -> str:
    """Fetch the markdown source of a learn page (`arrays` -> `docs/arrays.md`)."""
    return fetch_markdown(f"{LEARN_DOCS_PREFIX}{doc_filename(filename)}.md", **kwargs)
