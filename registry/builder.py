"""
Registry builder for the VintLang docs site.

Builds the docs registry from a flat directory of markdown files:
- Scans the docs directory for .md files
- Extracts a title and description from each file
- Sorts items by title and groups them into categories
- Writes the registry artifact (JSON) with an auto-generated warning block
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Dict, List, Optional

from pydantic import ValidationError

from .categorizer import categorize_doc_items
from .config import MARKDOWN_EXTENSION
from .errors import FileReadError, RegistryBuildError
from .extractor import ExtractionStrategy, HeuristicExtractor, extract_doc_info
from .models import DocItem, Registry, doc_filename
from .scanner import scan_markdown_files
from .schema import RegistryArtifact, artifact_json_schema

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def sort_doc_items(items: List[DocItem]) -> List[DocItem]:
    """Sort items by title, case-insensitively, with filename as tie-breaker."""
    return sorted(items, key=lambda item: (item.title.casefold(), item.title, item.filename))


@dataclass
class BuildResult:
    """Outcome of one registry build."""
    registry: Registry
    files_found: int
    errors: List[FileReadError] = field(default_factory=list)
    output_path: Optional[Path] = None

    @property
    def items_count(self) -> int:
        return len(self.registry.items)

    def stats(self) -> Dict:
        return {
            "items_count": self.items_count,
            "files_found": self.files_found,
            "files_failed": len(self.errors),
            "categories": self.registry.categories,
            "by_category": {
                name: len(items) for name, items in self.registry.categorized.items()
            },
            "generated_at": self.registry.generated_at,
            "output_path": str(self.output_path) if self.output_path else None,
        }


class RegistryBuilder:
    """Builds and persists the docs registry."""

    def __init__(
        self,
        docs_dir: Path,
        output_path: Path,
        extractor: Optional[ExtractionStrategy] = None,
        clock: Callable[[], str] = utc_timestamp,
    ):
        """Initialize registry builder.

        Args:
            docs_dir: Directory holding the markdown sources
            output_path: Where the registry artifact is written
            extractor: Title/description strategy (default: HeuristicExtractor)
            clock: Returns the generation timestamp
        """
        self.docs_dir = Path(docs_dir)
        self.output_path = Path(output_path)
        self.extractor = extractor or HeuristicExtractor()
        self.clock = clock

    def build(self, on_item: Optional[Callable[[Path, DocItem], None]] = None) -> BuildResult:
        """Build a registry from the docs directory without writing it.

        Files that cannot be read, or whose names give no usable key
        (`.md`, `notes.md.md`), are collected in the result instead of
        aborting the batch. The build fails only when markdown files exist
        and none of them could be read.

        Args:
            on_item: Optional callback invoked after each processed file

        Returns:
            BuildResult with the new registry

        Raises:
            MissingDirectoryError: If the docs directory does not exist
            RegistryBuildError: If no markdown file could be read

        Example:
            >>> builder = RegistryBuilder(Path("docs"), Path("output/docs-generated.json"))
            >>> result = builder.build()
            >>> print(f"Built {result.items_count} items")
        """
        md_files = scan_markdown_files(self.docs_dir)

        items: List[DocItem] = []
        errors: List[FileReadError] = []

        for md_file in md_files:
            key = doc_filename(md_file.name)
            if not key or key.endswith(MARKDOWN_EXTENSION):
                logger.warning(f"Skipping {md_file}: no usable registry key")
                errors.append(FileReadError(md_file, f"Unusable file name for registry key: {key!r}"))
                continue

            try:
                content = md_file.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning(f"Could not read {md_file}: {exc}")
                errors.append(FileReadError(md_file, str(exc)))
                continue

            item = extract_doc_info(content, md_file.name, self.extractor)
            items.append(item)
            if on_item:
                on_item(md_file, item)

        if md_files and not items:
            raise RegistryBuildError(
                f"None of the {len(md_files)} markdown files in {self.docs_dir} could be read"
            )

        items = sort_doc_items(items)
        registry = Registry(
            items=items,
            categorized=categorize_doc_items(items),
            generated_at=self.clock(),
        )

        logger.info(
            f"Built registry with {len(items)} items in {len(registry.categorized)} categories"
        )
        return BuildResult(registry=registry, files_found=len(md_files), errors=errors)

    def write(self, registry: Registry) -> Path:
        """Write the registry artifact.

        The file is written to a temporary sibling first and moved into
        place, so a failed write leaves any previous artifact untouched.

        Args:
            registry: Registry to persist

        Returns:
            Path of the written artifact

        Raises:
            RegistryBuildError: If the registry fails validation or the
                artifact cannot be written
        """
        try:
            document = RegistryArtifact.from_registry(registry).to_document()
        except ValidationError as exc:
            raise RegistryBuildError(f"Registry failed artifact validation: {exc}") from exc
        self._write_json(self.output_path, document)
        logger.info(f"Registry saved: {self.output_path}")
        return self.output_path

    def write_schema(self, schema_path: Path) -> Path:
        """Write the JSON Schema describing the artifact."""
        schema_path = Path(schema_path)
        self._write_json(schema_path, artifact_json_schema())
        return schema_path

    def build_and_write(
        self, on_item: Optional[Callable[[Path, DocItem], None]] = None
    ) -> BuildResult:
        """Build the registry and persist it; see build() and write()."""
        result = self.build(on_item=on_item)
        result.output_path = self.write(result.registry)
        return result

    def _write_json(self, path: Path, data: Dict) -> None:
        tmp_path = path.with_name(f".{path.name}.{os.getpid()}.tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(
                json.dumps(data, indent=2, ensure_ascii=False) + "\n",
                encoding="utf-8",
            )
            tmp_path.replace(path)
        except OSError as exc:
            if tmp_path.exists():
                tmp_path.unlink()
            raise RegistryBuildError(f"Failed to write {path}: {exc}") from exc
