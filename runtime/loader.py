"""
Runtime access to the generated docs registry.

The artifact is read once per process. The first caller loads it under a
lock; callers arriving while that load is in flight wait for it and share
the result. When the artifact is missing or malformed the built-in fallback
registry is cached instead, so readers never see an exception.

Usage:
    from runtime import get_items, get_categorized_docs

    for item in get_items():
        print(item.title, item.href)
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Optional, Tuple

from pydantic import ValidationError

from registry.config import REGISTRY_PATH
from registry.errors import ArtifactLoadError
from registry.models import CategorizedDocs, DocItem, Registry
from registry.schema import RegistryArtifact

from .fallback import FALLBACK_REGISTRY

logger = logging.getLogger(__name__)


def read_registry_artifact(path: Path) -> Registry:
    """Read and validate a registry artifact.

    Args:
        path: Location of the generated JSON artifact

    Returns:
        Registry parsed from the artifact

    Raises:
        ArtifactLoadError: If the file is missing, unreadable or malformed
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ArtifactLoadError(f"Cannot read registry artifact {path}: {exc}") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ArtifactLoadError(f"Registry artifact {path} is not valid JSON: {exc}") from exc

    try:
        return RegistryArtifact.model_validate(data).to_registry()
    except ValidationError as exc:
        raise ArtifactLoadError(f"Registry artifact {path} is malformed: {exc}") from exc


class RegistryLoader:
    """Lazily loads and caches the docs registry for the life of the process."""

    def __init__(self, artifact_path: Path = REGISTRY_PATH, fallback: Registry = FALLBACK_REGISTRY):
        """Initialize loader.

        Args:
            artifact_path: Location of the generated registry artifact
            fallback: Registry used when the artifact cannot be loaded
        """
        self.artifact_path = Path(artifact_path)
        self.fallback = fallback
        self._registry: Optional[Registry] = None
        self._lock = threading.Lock()
        self.used_fallback = False

    @property
    def loaded(self) -> bool:
        return self._registry is not None

    def load(self) -> Registry:
        """Return the cached registry, loading it on first use."""
        registry = self._registry
        if registry is not None:
            return registry

        with self._lock:
            if self._registry is None:
                self._registry = self._load()
            return self._registry

    def _load(self) -> Registry:
        try:
            registry = read_registry_artifact(self.artifact_path)
        except ArtifactLoadError as exc:
            logger.warning(f"Failed to load generated docs registry, using fallback: {exc}")
            self.used_fallback = True
            return self.fallback

        logger.info(
            f"Loaded docs registry with {len(registry.items)} items "
            f"(generated at {registry.generated_at})"
        )
        self.used_fallback = False
        return registry

    def reset(self) -> None:
        """Drop the cached registry so the next access reloads it."""
        with self._lock:
            self._registry = None
            self.used_fallback = False

    def get_items(self) -> Tuple[DocItem, ...]:
        return self.load().items

    def get_categorized_docs(self) -> CategorizedDocs:
        return self.load().categorized

    def get_all_doc_items(self) -> Tuple[DocItem, ...]:
        """Alias of get_items() kept for older callers."""
        return self.get_items()

    def get_item(self, filename: str) -> Optional[DocItem]:
        return self.load().get(filename)


default_loader = RegistryLoader()


def get_items() -> Tuple[DocItem, ...]:
    """Get all documentation items in title order."""
    return default_loader.get_items()


def get_categorized_docs() -> CategorizedDocs:
    """Get documentation items grouped by category."""
    return default_loader.get_categorized_docs()


def get_all_doc_items() -> Tuple[DocItem, ...]:
    """For backwards compatibility, same as get_items()."""
    return default_loader.get_all_doc_items()


def get_item(filename: str) -> Optional[DocItem]:
    return default_loader.get_item(filename)
