"""
Title and description extraction from raw markdown.

Extraction is a line scan, not a markdown parse:
1. The provisional title comes from the filename, or from the first
   `# ` heading when one exists
2. The description is the first prose line longer than 20 characters
3. Files without such a line get a keyword-based fallback description

Strategies share one interface, `extract(raw_text, filename)`, so a
front-matter or AST based extractor can replace the heuristic one without
touching the builder.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .models import DocItem, doc_filename
from .title_formatter import format_title, strip_language_suffix

logger = logging.getLogger(__name__)

H1_PATTERN = re.compile(r"^# (.+)$")
CODE_FENCE_MARKER = "```"
COMMENT_MARKER = "<!--"

MIN_DESCRIPTION_LENGTH = 20
MAX_DESCRIPTION_LENGTH = 150
ELLIPSIS = "..."

# (keyword, template) pairs checked in order against the provisional title
FALLBACK_DESCRIPTIONS: List[Tuple[str, str]] = [
    ("http", "Learn about {title} functionality in VintLang."),
    ("function", "Learn about functions and function handling in VintLang."),
    ("array", "Learn about arrays and array manipulation in VintLang."),
    ("string", "Learn about string manipulation and functions in VintLang."),
]
DEFAULT_DESCRIPTION = "Learn about {title} in VintLang."


def title_from_filename(filename: str) -> str:
    """Derive a provisional title from a file name (`http_requests.md` -> `http requests`)."""
    return doc_filename(filename).replace("_", " ")


def truncate_description(text: str, limit: int = MAX_DESCRIPTION_LENGTH) -> str:
    if len(text) > limit:
        return text[:limit] + ELLIPSIS
    return text


def fallback_description(title: str) -> str:
    """Build a description for a file without a usable prose line.

    Args:
        title: Provisional (unformatted) title

    Returns:
        Sentence chosen by the first keyword found in the title
    """
    lowered = title.lower()
    for keyword, template in FALLBACK_DESCRIPTIONS:
        if keyword in lowered:
            return template.format(title=lowered)
    return DEFAULT_DESCRIPTION.format(title=lowered)


def _is_description_line(line: str) -> bool:
    return (
        bool(line)
        and not line.startswith("#")
        and not line.startswith(CODE_FENCE_MARKER)
        and not line.startswith(COMMENT_MARKER)
        and len(line) > MIN_DESCRIPTION_LENGTH
    )


class ExtractionStrategy:
    """Interface for turning raw markdown into a (title, description) pair."""

    def extract(self, raw_text: str, filename: str) -> Tuple[str, str]:
        raise NotImplementedError


class HeuristicExtractor(ExtractionStrategy):
    """Line-scanning extractor used for the VintLang docs."""

    def __init__(self, prefer_heading: bool = True):
        """Initialize extractor.

        Args:
            prefer_heading: Promote the first `# ` heading over the
                filename-derived title. With False the filename always wins,
                matching the registries generated by the old website script.
        """
        self.prefer_heading = prefer_heading

    def extract(self, raw_text: str, filename: str) -> Tuple[str, str]:
        """Extract a provisional title and a description.

        Args:
            raw_text: Full markdown file content
            filename: File name, with or without the .md extension

        Returns:
            Tuple of (provisional title, description). The title is not
            formatted yet; see format_title().

        Example:
            >>> HeuristicExtractor().extract("# Arrays in VintLang\\n\\nArrays hold ordered values.", "arrays.md")
            ('Arrays in VintLang', 'Arrays hold ordered values.')
        """
        heading: Optional[str] = None
        description = ""

        for raw_line in raw_text.splitlines():
            line = raw_line.strip()

            match = H1_PATTERN.match(line)
            if match:
                if heading is None:
                    heading = match.group(1).strip()
            elif not description and _is_description_line(line):
                description = truncate_description(line)

            if description and (heading is not None or not self.prefer_heading):
                break

        title = title_from_filename(filename)
        if self.prefer_heading and heading:
            title = heading

        if not description:
            # Headings usually end in "in VintLang"; the template adds it back
            description = fallback_description(strip_language_suffix(title))
            logger.debug(f"No description line in {filename}, using fallback")

        return title, description


_default_extractor = HeuristicExtractor()


def extract_doc_info(
    raw_text: str,
    filename: Union[str, Path],
    extractor: Optional[ExtractionStrategy] = None,
) -> DocItem:
    """Build a DocItem from one markdown file's content.

    Args:
        raw_text: Markdown content
        filename: File name or path of the markdown file
        extractor: Extraction strategy (default: HeuristicExtractor)

    Returns:
        DocItem with a formatted title and derived href
    """
    name = Path(filename).name
    title, description = (extractor or _default_extractor).extract(raw_text, name)
    return DocItem.create(
        title=format_title(title),
        description=description,
        filename=name,
    )
