"""
Content service module for the docs site.

Fetches raw markdown from the VintLang repository for page rendering.
"""

from .service import (
    ContentFetchError,
    ERROR_PLACEHOLDER,
    content_url,
    fetch_learn_item,
    fetch_markdown,
    get_markdown_content,
)

__all__ = [
    "ContentFetchError",
    "ERROR_PLACEHOLDER",
    "content_url",
    "fetch_learn_item",
    "fetch_markdown",
    "get_markdown_content",
]
