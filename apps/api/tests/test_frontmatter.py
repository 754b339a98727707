"""Frontmatter parsing and schema validation tests."""

from __future__ import annotations

import unittest
from datetime import date

from portfolio.content.frontmatter import (
    FrontmatterValidationError,
    split_frontmatter,
    validate_frontmatter,
)
from portfolio.schemas.content import ContentType


class SplitFrontmatterTests(unittest.TestCase):
    def test_splits_yaml_block_from_body(self) -> None:
        metadata, body = split_frontmatter("---\ntitle: Hello\ntags: [a, b]\n---\n# Heading\n\nText\n")

        self.assertEqual(metadata, {"title": "Hello", "tags": ["a", "b"]})
        self.assertEqual(body, "# Heading\n\nText\n")

    def test_file_without_block_yields_empty_mapping_and_full_body(self) -> None:
        metadata, body = split_frontmatter("Just text\n")

        self.assertEqual(metadata, {})
        self.assertEqual(body, "Just text\n")

    def test_empty_block_yields_empty_mapping(self) -> None:
        metadata, body = split_frontmatter("---\n---\nBody")

        self.assertEqual(metadata, {})
        self.assertEqual(body, "Body")

    def test_unterminated_block_is_rejected(self) -> None:
        with self.assertRaises(FrontmatterValidationError) as context:
            split_frontmatter("---\ntitle: Hello\n")
        self.assertEqual(context.exception.issues[0].field, "frontmatter")

    def test_invalid_yaml_is_rejected(self) -> None:
        with self.assertRaises(FrontmatterValidationError):
            split_frontmatter("---\ntitle: [unclosed\n---\nBody")

    def test_non_mapping_block_is_rejected(self) -> None:
        with self.assertRaises(FrontmatterValidationError) as context:
            split_frontmatter("---\n- one\n- two\n---\nBody")
        self.assertIn("mapping", context.exception.issues[0].message)


class ValidateFrontmatterTests(unittest.TestCase):
    def test_valid_mapping_applies_defaults(self) -> None:
        frontmatter = validate_frontmatter({"title": "Post", "date": "2024-03-01", "tags": ["python"]})

        self.assertEqual(frontmatter.title, "Post")
        self.assertEqual(frontmatter.category, "Uncategorized")
        self.assertEqual(frontmatter.type, ContentType.BLOG)
        self.assertIsNone(frontmatter.image)

    def test_yaml_date_objects_are_normalized(self) -> None:
        frontmatter = validate_frontmatter({"title": "Post", "date": date(2024, 3, 1), "tags": []})

        self.assertEqual(frontmatter.date, "2024-03-01")

    def test_iso_date_and_datetime_strings_are_normalized(self) -> None:
        cases = {
            "2024-03-01": "2024-03-01",
            "2024-01-15T10:00:00Z": "2024-01-15",
            "2024-01-15T10:00:00+02:00": "2024-01-15",
            " 2024-01-15 10:00 ": "2024-01-15",
        }
        for raw, expected in cases.items():
            with self.subTest(raw=raw):
                frontmatter = validate_frontmatter({"title": "Post", "date": raw, "tags": []})
                self.assertEqual(frontmatter.date, expected)

    def test_yaml_datetime_objects_are_normalized(self) -> None:
        metadata, _ = split_frontmatter("---\ntitle: Post\ndate: 2024-01-15T10:00:00Z\ntags: []\n---\n")

        self.assertEqual(validate_frontmatter(metadata).date, "2024-01-15")

    def test_non_iso_date_strings_are_rejected(self) -> None:
        for raw in ("March 1st", "2024/03/01", ""):
            with self.subTest(raw=raw):
                with self.assertRaises(FrontmatterValidationError) as context:
                    validate_frontmatter({"title": "Post", "date": raw, "tags": []})
                self.assertEqual([issue.field for issue in context.exception.issues], ["date"])

    def test_every_violation_is_reported(self) -> None:
        with self.assertRaises(FrontmatterValidationError) as context:
            validate_frontmatter({"date": "March 1st", "type": "podcast", "tags": "python"})

        fields = {issue.field for issue in context.exception.issues}
        self.assertEqual(fields, {"title", "date", "type", "tags"})

    def test_missing_tags_is_a_violation(self) -> None:
        with self.assertRaises(FrontmatterValidationError) as context:
            validate_frontmatter({"title": "Post", "date": "2024-03-01"})

        self.assertEqual([issue.field for issue in context.exception.issues], ["tags"])

    def test_non_string_tags_are_rejected(self) -> None:
        with self.assertRaises(FrontmatterValidationError) as context:
            validate_frontmatter({"title": "Post", "date": "2024-03-01", "tags": ["ok", 3]})

        self.assertEqual(context.exception.issues[0].field, "tags.1")

    def test_empty_title_is_rejected(self) -> None:
        with self.assertRaises(FrontmatterValidationError):
            validate_frontmatter({"title": "", "date": "2024-03-01", "tags": []})


if __name__ == "__main__":
    unittest.main()
