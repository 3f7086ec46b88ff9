"""
Markdown source discovery.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from .config import MARKDOWN_EXTENSION
from .errors import MissingDirectoryError

logger = logging.getLogger(__name__)


def scan_markdown_files(docs_dir: Path) -> List[Path]:
    """List markdown files directly inside a docs directory.

    The scan is not recursive: subdirectories and files with any other
    extension are ignored.

    Args:
        docs_dir: Directory holding the markdown sources

    Returns:
        Markdown file paths sorted by file name

    Raises:
        MissingDirectoryError: If docs_dir does not exist or is not a directory
    """
    docs_dir = Path(docs_dir)
    if not docs_dir.is_dir():
        raise MissingDirectoryError(docs_dir)

    md_files = sorted(
        (p for p in docs_dir.iterdir() if p.name.endswith(MARKDOWN_EXTENSION) and p.is_file()),
        key=lambda p: p.name,
    )
    logger.debug(f"Found {len(md_files)} markdown files in {docs_dir}")
    return md_files
