"""
Shared fixtures for the docs registry tests.
"""
from pathlib import Path

import pytest

from registry.builder import RegistryBuilder

FIXED_TIMESTAMP = "2025-09-26T14:06:40.619Z"

SAMPLE_DOCS = {
    "arrays.md": (
        "# Arrays in VintLang\n"
        "\n"
        "Arrays let you store ordered collections of values for later use.\n"
    ),
    "http_requests.md": "# HTTP Requests\n\nShort intro.\n",
    "if_statements.md": (
        "# If Statements\n"
        "\n"
        "Conditional execution lets a program choose between branches.\n"
    ),
    "sqlite.md": "# SQLite in Vint\n\nUse the sqlite module to work with embedded databases.\n",
    "time.md": "# Time\n\n```js\nlet t = time.now()\n```\n\nThe time module reads and formats dates.\n",
    "variables.md": "# Variables\n\nVariables bind names to values with the let keyword.\n",
}


@pytest.fixture
def docs_dir(tmp_path):
    """An empty docs directory."""
    path = tmp_path / "docs"
    path.mkdir()
    return path


@pytest.fixture
def write_doc(docs_dir):
    """Write a markdown file into the docs directory."""
    def _write(name: str, content: str) -> Path:
        path = docs_dir / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def sample_docs(docs_dir, write_doc):
    """Docs directory populated with SAMPLE_DOCS."""
    for name, content in SAMPLE_DOCS.items():
        write_doc(name, content)
    return docs_dir


@pytest.fixture
def artifact_path(tmp_path):
    return tmp_path / "out" / "docs-generated.json"


@pytest.fixture
def builder(docs_dir, artifact_path):
    return RegistryBuilder(docs_dir, artifact_path, clock=lambda: FIXED_TIMESTAMP)
