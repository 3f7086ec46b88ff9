"""
Rule-based topic categorization.

Each doc item lands in exactly one category. Rules are checked in order and
the first rule with a keyword found in the lower-cased title or filename
wins; items matching nothing fall into the default category.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from .models import DocItem

LANGUAGE_BASICS = "Language Basics"
DATA_TYPES = "Data Types"
CONTROL_FLOW = "Control Flow"
FUNCTIONS_MODULES = "Functions & Modules"
BUILTIN_MODULES = "Built-in Modules"
DATABASE = "Database"
WEB_HTTP = "Web & HTTP"
DEV_TOOLS = "Development Tools"
ADVANCED = "Advanced Features"

DEFAULT_CATEGORY = LANGUAGE_BASICS

# Key order of the categorized map handed to navigation
CATEGORY_ORDER: Tuple[str, ...] = (
    LANGUAGE_BASICS,
    DATA_TYPES,
    CONTROL_FLOW,
    FUNCTIONS_MODULES,
    BUILTIN_MODULES,
    DATABASE,
    WEB_HTTP,
    DEV_TOOLS,
    ADVANCED,
)


@dataclass(frozen=True)
class CategoryRule:
    """A category and the keywords that select it."""
    category: str
    keywords: Tuple[str, ...]

    def matches(self, title: str, filename: str) -> bool:
        """Check whether any keyword occurs in the title or the filename.

        Both arguments are expected lower-cased.
        """
        return any(keyword in title or keyword in filename for keyword in self.keywords)


CATEGORY_RULES: Tuple[CategoryRule, ...] = (
    CategoryRule(DATA_TYPES, ("strings", "numbers", "bool", "arrays", "dictionaries", "null")),
    CategoryRule(CONTROL_FLOW, ("if", "for", "while", "switch", "defer")),
    CategoryRule(FUNCTIONS_MODULES, ("function", "modules", "packages", "include")),
    CategoryRule(DATABASE, ("mysql", "postgres", "sqlite")),
    CategoryRule(WEB_HTTP, ("http", "net", "url", "email")),
    CategoryRule(DEV_TOOLS, ("bundler", "cli", "debug", "editor", "tooling")),
    CategoryRule(ADVANCED, ("async", "pointers", "reflect", "llm", "filewatcher")),
    CategoryRule(
        BUILTIN_MODULES,
        (
            "os", "files", "path", "shell", "term", "dotenv", "sysinfo",
            "time", "datetime", "math", "crypto", "hash", "random", "uuid",
            "regex", "json", "xml", "csv", "encoding", "logger", "schedule",
        ),
    ),
)


def categorize(
    title: str,
    filename: str,
    rules: Iterable[CategoryRule] = CATEGORY_RULES,
    default: str = DEFAULT_CATEGORY,
) -> str:
    """Return the category for a (title, filename) pair.

    Args:
        title: Formatted display title
        filename: Source file name without extension
        rules: Ordered rule table (default: CATEGORY_RULES)
        default: Category used when no rule matches

    Returns:
        Category name

    Example:
        >>> categorize("Arrays", "arrays")
        'Data Types'
    """
    title = title.lower()
    filename = filename.lower()
    for rule in rules:
        if rule.matches(title, filename):
            return rule.category
    return default


def categorize_doc_items(
    items: Iterable[DocItem],
    rules: Iterable[CategoryRule] = CATEGORY_RULES,
    default: str = DEFAULT_CATEGORY,
) -> Dict[str, List[DocItem]]:
    """Group doc items by category.

    Args:
        items: Doc items, already in display order
        rules: Ordered rule table (default: CATEGORY_RULES)
        default: Category used when no rule matches

    Returns:
        Category name -> items, keyed in CATEGORY_ORDER with empty
        categories removed. Items keep their input order.
    """
    rules = tuple(rules)
    order: List[str] = list(CATEGORY_ORDER)
    for name in [rule.category for rule in rules] + [default]:
        if name not in order:
            order.append(name)

    categories: Dict[str, List[DocItem]] = {name: [] for name in order}
    for item in items:
        categories[categorize(item.title, item.filename, rules, default)].append(item)

    return {name: members for name, members in categories.items() if members}
