"""
Data model for the docs registry.

A DocItem is one documentation topic. A Registry bundles the sorted item
list, the category map and the generation timestamp. Both are frozen: a new
build produces a new Registry instead of mutating an existing one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Tuple

from .config import HREF_PREFIX, MARKDOWN_EXTENSION


def doc_filename(name: str) -> str:
    """Return the registry key for a markdown file name (`arrays.md` -> `arrays`)."""
    if name.endswith(MARKDOWN_EXTENSION):
        return name[: -len(MARKDOWN_EXTENSION)]
    return name


def doc_href(filename: str) -> str:
    return f"{HREF_PREFIX}{filename}"


@dataclass(frozen=True)
class DocItem:
    """Represents a single documentation topic."""
    title: str
    href: str
    description: str
    filename: str

    @classmethod
    def create(cls, title: str, description: str, filename: str) -> "DocItem":
        """Create an item whose href is derived from its filename."""
        filename = doc_filename(filename)
        return cls(
            title=title,
            href=doc_href(filename),
            description=description,
            filename=filename,
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "title": self.title,
            "href": self.href,
            "description": self.description,
            "filename": self.filename,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, str]) -> "DocItem":
        return cls(
            title=data["title"],
            href=data["href"],
            description=data["description"],
            filename=data["filename"],
        )


CategorizedDocs = Mapping[str, Tuple[DocItem, ...]]


def _freeze_categories(categorized: Mapping[str, Iterable[DocItem]]) -> CategorizedDocs:
    return MappingProxyType({name: tuple(items) for name, items in categorized.items()})


@dataclass(frozen=True)
class Registry:
    """Sorted items, their category map and the build timestamp."""
    items: Tuple[DocItem, ...]
    categorized: CategorizedDocs
    generated_at: str
    _index: Mapping[str, DocItem] = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        # Normalize containers so callers can pass plain lists and dicts
        object.__setattr__(self, "items", tuple(self.items))
        object.__setattr__(self, "categorized", _freeze_categories(self.categorized))
        object.__setattr__(
            self, "_index", MappingProxyType({item.filename: item for item in self.items})
        )

    def get(self, filename: str):
        """Look up an item by filename, returning None when absent."""
        return self._index.get(doc_filename(filename))

    @property
    def categories(self) -> List[str]:
        return list(self.categorized.keys())

    def to_dict(self) -> Dict:
        return {
            "items": [item.to_dict() for item in self.items],
            "categorized": {
                name: [item.to_dict() for item in items]
                for name, items in self.categorized.items()
            },
            "generatedAt": self.generated_at,
        }

    @classmethod
    def from_dict(cls, data: Mapping) -> "Registry":
        return cls(
            items=[DocItem.from_dict(item) for item in data["items"]],
            categorized={
                name: [DocItem.from_dict(item) for item in items]
                for name, items in data["categorized"].items()
            },
            generated_at=data["generatedAt"],
        )
