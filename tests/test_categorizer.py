"""
Unit tests for rule-based categorization.
"""
import pytest

from registry.categorizer import (
    CATEGORY_ORDER,
    CATEGORY_RULES,
    CategoryRule,
    DEFAULT_CATEGORY,
    categorize,
    categorize_doc_items,
)
from registry.models import DocItem


def make_item(title: str, filename: str) -> DocItem:
    return DocItem.create(title=title, description="", filename=filename)


class TestCategorize:
    """Test single (title, filename) classification."""

    @pytest.mark.parametrize(
        "title,filename,expected",
        [
            ("Arrays", "arrays", "Data Types"),
            ("If Statements", "if_statements", "Control Flow"),
            ("Functions", "functions", "Functions & Modules"),
            ("Sqlite", "sqlite", "Database"),
            ("HTTP Requests", "http_requests", "Web & HTTP"),
            ("Bundler", "bundler", "Development Tools"),
            ("Async", "async", "Advanced Features"),
            ("Time", "time", "Built-in Modules"),
            ("JSON", "json", "Built-in Modules"),
            ("Variables", "variables", "Language Basics"),
        ],
    )
    def test_rules(self, title, filename, expected):
        assert categorize(title, filename) == expected

    def test_first_matching_rule_wins(self):
        # "formatting" contains "for" (Control Flow) but Data Types is checked first
        assert categorize("Strings Formatting", "strings_formatting") == "Data Types"

    def test_filename_match(self):
        assert categorize("Working With Processes", "os") == "Built-in Modules"

    def test_case_insensitive(self):
        assert categorize("NETWORKING", "NETWORKING") == "Web & HTTP"

    def test_pure_function(self):
        results = {categorize("Dictionaries", "dictionaries") for _ in range(10)}
        assert results == {"Data Types"}

    def test_custom_rules_and_default(self):
        rules = [CategoryRule("Custom", ("widget",))]
        assert categorize("Widget Guide", "guide", rules=rules, default="Other") == "Custom"
        assert categorize("Arrays", "arrays", rules=rules, default="Other") == "Other"

    def test_rule_table_shape(self):
        names = [rule.category for rule in CATEGORY_RULES]
        assert names == [
            "Data Types",
            "Control Flow",
            "Functions & Modules",
            "Database",
            "Web & HTTP",
            "Development Tools",
            "Advanced Features",
            "Built-in Modules",
        ]
        assert DEFAULT_CATEGORY == "Language Basics"
        assert DEFAULT_CATEGORY not in names


class TestCategorizeDocItems:
    """Test grouping of item lists."""

    def test_partition_and_order(self):
        items = [
            make_item("Arrays", "arrays"),
            make_item("Async", "async"),
            make_item("Numbers", "numbers"),
            make_item("Variables", "variables"),
        ]
        categorized = categorize_doc_items(items)

        assert list(categorized) == ["Language Basics", "Data Types", "Advanced Features"]
        assert [i.filename for i in categorized["Data Types"]] == ["arrays", "numbers"]

        flattened = [item for members in categorized.values() for item in members]
        assert sorted(i.filename for i in flattened) == sorted(i.filename for i in items)
        assert len(flattened) == len(items)

    def test_empty_categories_removed(self):
        assert categorize_doc_items([]) == {}
        categorized = categorize_doc_items([make_item("Arrays", "arrays")])
        assert list(categorized) == ["Data Types"]

    def test_keys_follow_category_order(self):
        items = [make_item(name, name.lower()) for name in ("Async", "Bundler", "Http", "Time", "If", "Arrays")]
        keys = list(categorize_doc_items(items))
        assert keys == [name for name in CATEGORY_ORDER if name in keys]

    def test_custom_categories_appended(self):
        rules = [CategoryRule("Widgets", ("widget",))]
        categorized = categorize_doc_items(
            [make_item("Widget", "widget"), make_item("Other", "other")],
            rules=rules,
            default="Misc",
        )
        assert list(categorized) == ["Widgets", "Misc"]
