"""
Configuration for the VintLang docs registry.

Values come from environment variables so the build script, the runtime
loader and the API server can be pointed at different trees without code
changes. Entry points load a `.env` file (python-dotenv) before importing
this module.

Variables:
    VINT_DOCS_DIR               - Directory holding the markdown sources
    VINT_DOCS_REGISTRY_PATH     - Location of the generated registry artifact
    VINT_DOCS_CONTENT_BASE_URL  - Base URL for fetching raw markdown remotely
    VINT_DOCS_FETCH_TIMEOUT     - Per-request timeout in seconds
    VINT_DOCS_FETCH_RETRIES     - Attempts per remote fetch
    VINT_DOCS_FETCH_BACKOFF     - Backoff multiplier between attempts
"""

from __future__ import annotations

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[1]

# ============================================================================
# Build-time paths
# ============================================================================

DOCS_DIR = Path(os.environ.get("VINT_DOCS_DIR", str(BASE_DIR / "docs")))
REGISTRY_PATH = Path(
    os.environ.get("VINT_DOCS_REGISTRY_PATH", str(BASE_DIR / "output" / "docs-generated.json"))
)

MARKDOWN_EXTENSION = ".md"

# Part of the data contract: href == HREF_PREFIX + filename
HREF_PREFIX = "/docs/learn/"

# ============================================================================
# Remote content
# ============================================================================

CONTENT_BASE_URL = os.environ.get(
    "VINT_DOCS_CONTENT_BASE_URL",
    "https://raw.githubusercontent.com/vintlang/vintlang/main",
)
FETCH_TIMEOUT = float(os.environ.get("VINT_DOCS_FETCH_TIMEOUT", "15"))
FETCH_RETRIES = int(os.environ.get("VINT_DOCS_FETCH_RETRIES", "2"))
FETCH_BACKOFF = float(os.environ.get("VINT_DOCS_FETCH_BACKOFF", "1.0"))
