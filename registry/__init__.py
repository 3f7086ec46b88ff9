"""
Docs registry module for the VintLang documentation site.

This module provides functionality for:
- Scanning a flat directory of markdown sources
- Extracting titles and descriptions from raw markdown
- Normalizing display titles and categorizing topics
- Building and persisting the registry artifact

Artifact layout:
    {
      "_warning": "AUTO-GENERATED FILE - DO NOT EDIT MANUALLY",
      "_note": "...",
      "_instruction": "...",
      "_generatedAt": "2025-09-26T14:06:40.619Z",
      "items": [{"title", "href", "description", "filename"}, ...],
      "categorized": {"Data Types": [...], ...},
      "generatedAt": "2025-09-26T14:06:40.619Z"
    }

Usage:
    from registry import RegistryBuilder

    builder = RegistryBuilder(Path("docs"), Path("output/docs-generated.json"))
    result = builder.build_and_write()
    print(result.registry.categories)
"""

from .builder import BuildResult, RegistryBuilder
from .categorizer import CATEGORY_RULES, CategoryRule, categorize, categorize_doc_items
from .errors import (
    ArtifactLoadError,
    FileReadError,
    MissingDirectoryError,
    RegistryBuildError,
    RegistryError,
)
from .extractor import ExtractionStrategy, HeuristicExtractor, extract_doc_info
from .models import CategorizedDocs, DocItem, Registry
from .scanner import scan_markdown_files
from .title_formatter import format_title

__all__ = [
    "BuildResult",
    "RegistryBuilder",
    "CATEGORY_RULES",
    "CategoryRule",
    "categorize",
    "categorize_doc_items",
    "ArtifactLoadError",
    "FileReadError",
    "MissingDirectoryError",
    "RegistryBuildError",
    "RegistryError",
    "ExtractionStrategy",
    "HeuristicExtractor",
    "extract_doc_info",
    "CategorizedDocs",
    "DocItem",
    "Registry",
    "scan_markdown_files",
    "format_title",
]

__version__ = "1.0.0"
