"""Unit tests for core/utils/slug.py"""

import pytest

from mdrender.core.utils.slug import doc_slug, slugify


@pytest.mark.parametrize("text,expected", [
    ("My Document", "my-document"),
    ("release_notes v2!", "release-notes-v2"),
    ("  -- spaced -- out --  ", "spaced-out"),
])
def test_slugify(text, expected):
    assert slugify(text) == expected


def test_doc_slug_prefers_frontmatter():
    """A frontmatter slug is used as-is, not re-slugified."""
    assert doc_slug({"slug": "Custom_Slug"}, "ignored stem") == "Custom_Slug"


def test_doc_slug_falls_back_to_stem():
    assert doc_slug({}, "My Document") == "my-document"
    assert doc_slug({"slug": ""}, "Notes") == "notes"
