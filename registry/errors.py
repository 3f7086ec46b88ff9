"""
Exceptions raised while building or loading the docs registry.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


class RegistryError(RuntimeError):
    """Base exception for docs registry errors."""
    pass


class MissingDirectoryError(RegistryError):
    """Raised when the markdown source directory does not exist."""

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f"Docs directory not found: {self.path}")


class RegistryBuildError(RegistryError):
    """Raised when a build cannot produce or persist a registry."""
    pass


class ArtifactLoadError(RegistryError):
    """Raised when the persisted registry artifact is missing or malformed."""
    pass


@dataclass(frozen=True)
class FileReadError:
    """A markdown file that could not be read during a build."""
    path: Path
    reason: str

    def __str__(self) -> str:
        return f"{self.path.name}: {self.reason}"
