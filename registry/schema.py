"""
Pydantic schema of the persisted registry artifact.

Used to validate artifacts at load time, to describe API responses and to
export a JSON Schema alongside the generated artifact.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .config import HREF_PREFIX, MARKDOWN_EXTENSION
from .models import Registry

ARTIFACT_WARNING = "AUTO-GENERATED FILE - DO NOT EDIT MANUALLY"
ARTIFACT_NOTE = "This file is automatically generated at build time by Ingress/build_registry.py"
ARTIFACT_INSTRUCTION = "To modify docs data, edit the markdown files in the docs directory instead"


class DocItemModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    href: str
    description: str
    filename: str = Field(..., min_length=1)

    @field_validator("filename")
    @classmethod
    def check_filename(cls, value: str) -> str:
        if value.endswith(MARKDOWN_EXTENSION):
            raise ValueError(f"filename must not include the {MARKDOWN_EXTENSION} extension")
        return value

    @model_validator(mode="after")
    def check_href(self) -> "DocItemModel":
        expected = f"{HREF_PREFIX}{self.filename}"
        if self.href != expected:
            raise ValueError(f"href '{self.href}' does not match filename (expected '{expected}')")
        return self


class RegistryModel(BaseModel):
    items: List[DocItemModel]
    categorized: Dict[str, List[DocItemModel]]
    generatedAt: str

    @model_validator(mode="after")
    def check_partition(self) -> "RegistryModel":
        """Every item must sit in exactly one category."""
        listed = sorted(item.filename for item in self.items)
        categorized = sorted(
            item.filename for members in self.categorized.values() for item in members
        )
        if listed != categorized:
            raise ValueError("categorized docs do not partition the item list")
        return self

    def to_registry(self) -> Registry:
        return Registry.from_dict(self.model_dump())


class RegistryArtifact(RegistryModel):
    """The on-disk document: warning block followed by the registry."""
    model_config = ConfigDict(populate_by_name=True)

    warning: Optional[str] = Field(None, alias="_warning")
    note: Optional[str] = Field(None, alias="_note")
    instruction: Optional[str] = Field(None, alias="_instruction")
    generated_at_header: Optional[str] = Field(None, alias="_generatedAt")

    @classmethod
    def from_registry(cls, registry: Registry) -> "RegistryArtifact":
        return cls.model_validate(
            {
                "_warning": ARTIFACT_WARNING,
                "_note": ARTIFACT_NOTE,
                "_instruction": ARTIFACT_INSTRUCTION,
                "_generatedAt": registry.generated_at,
                **registry.to_dict(),
            }
        )

    def to_document(self) -> Dict:
        """Serialize with the warning block first, as written to disk."""
        return {
            "_warning": self.warning,
            "_note": self.note,
            "_instruction": self.instruction,
            "_generatedAt": self.generated_at_header,
            **self.model_dump(include={"items", "categorized", "generatedAt"}),
        }


def artifact_json_schema() -> Dict:
    schema = RegistryArtifact.model_json_schema(by_alias=True)
    schema["$schema"] = "https://json-schema.org/draft/2020-12/schema"
    schema["title"] = "VintLang Docs Registry"
    schema["description"] = "Generated registry of documentation topics for the docs site"
    return schema
