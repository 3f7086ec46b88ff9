"""
Built-in registry used when the generated artifact cannot be loaded.
"""

from __future__ import annotations

from registry.categorizer import DATA_TYPES
from registry.models import DocItem, Registry

# Kept in title order like a generated registry
FALLBACK_ITEMS = (
    DocItem.create(
        title="Numbers",
        description="Understand number types and operations in VintLang.",
        filename="numbers",
    ),
    DocItem.create(
        title="Strings",
        description="Learn about string manipulation and functions in VintLang.",
        filename="strings",
    ),
)

FALLBACK_REGISTRY = Registry(
    items=FALLBACK_ITEMS,
    categorized={DATA_TYPES: FALLBACK_ITEMS},
    generated_at="1970-01-01T00:00:00.000Z",
)
