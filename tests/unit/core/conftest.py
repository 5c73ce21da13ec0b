"""Shared fixtures for core unit tests"""

import pytest
from markdown_it import MarkdownIt

from mdrender.core.models import RenderOptions
from mdrender.core.rules import NodeRenderer
from mdrender.core.styles import DEFAULT_STYLES


SAMPLE_MD = """\
# Heading 1

A paragraph with **bold** text and a [link](http://example.com).

- item one
- item two

> quoted

---
"""


@pytest.fixture(name="parser")
def parser_fixture():
    return MarkdownIt("gfm-like", options_update={"linkify": False})


@pytest.fixture(name="sample_tokens")
def sample_tokens_fixture(parser):
    return parser.parse(SAMPLE_MD)


@pytest.fixture(name="styles")
def styles_fixture():
    """Every known style name mapped to a descriptor that remembers its name."""
    return {name: {"name": name} for name in DEFAULT_STYLES}


@pytest.fixture(name="renderer")
def renderer_fixture(styles):
    return NodeRenderer(styles, RenderOptions())


@pytest.fixture(name="make_renderer")
def make_renderer_fixture(styles):
    """Factory for a renderer with the given RenderOptions keyword arguments."""
    def _make(**options):
        return NodeRenderer(styles, RenderOptions(**options))
    return _make
