"""
Runtime package for reading the generated docs registry.

Components:
- loader: process-wide, lazily loaded registry with fallback
- fallback: built-in registry used when the artifact is unavailable
"""

from .fallback import FALLBACK_REGISTRY
from .loader import (
    RegistryLoader,
    default_loader,
    get_all_doc_items,
    get_categorized_docs,
    get_item,
    get_items,
    read_registry_artifact,
)

__all__ = [
    "FALLBACK_REGISTRY",
    "RegistryLoader",
    "default_loader",
    "get_all_doc_items",
    "get_categorized_docs",
    "get_item",
    "get_items",
    "read_registry_artifact",
]
