"""Integration tests for core/pipeline.py (parse -> render -> export)"""

import json

import pytest

from mdrender.config import Settings
from mdrender.core.elements import Container, ImageElement, Overlay, TextRun
from mdrender.core.models import RenderOptions
from mdrender.core.pipeline import render_markdown, run_render
from mdrender.core.styles import DEFAULT_STYLES


DOC = """\
# Title

Hello **world**, see [the site](http://example.com).

**Centered**

1. one
2. two

![pic](http://x/img.png)

| A | B |
|---|---|
| 1 | 2 |
| 3 | 4 |
"""


def test_render_markdown_end_to_end():
    """Every top-level block renders to the expected element kind."""
    links = []
    elements = render_markdown(DOC, DEFAULT_STYLES, RenderOptions(on_link=links.append, image_param="?w=10"))
    heading, para, centered, lst, pic, table = elements

    assert heading.style == [DEFAULT_STYLES["heading"], DEFAULT_STYLES["heading1"]]
    assert isinstance(para, TextRun)
    link = next(c for c in para.content if c.pressable)
    link.press()
    assert links == ["http://example.com"]

    assert centered.style == [DEFAULT_STYLES["paragraphCenter"]]
    assert [row.children[0].content for row in lst.children] == ["1. ", "2. "]

    assert isinstance(pic, Container)
    assert pic.children[0].source == {"uri": "http://x/img.png?w=10"}

    assert len(table.children) == 3
    assert table.children[-1].style[-1] == DEFAULT_STYLES["tableRowLast"]


def test_render_markdown_lightbox():
    elements = render_markdown("![pic](a.png)\n", DEFAULT_STYLES, RenderOptions(enable_lightbox=True))
    overlay = elements[0].children[0]
    assert isinstance(overlay, Overlay)
    assert isinstance(overlay.child, ImageElement)


def test_run_render_writes_json(tmp_path):
    src = tmp_path / "docs"
    src.mkdir()
    (src / "hello.md").write_text("---\ntitle: Hi\n---\n# Hello\n\nWorld\n")
    (src / "other.mdx").write_text("Text\n")
    out = tmp_path / "dist"

    results = run_render(str(src), Settings(), DEFAULT_STYLES, out)

    assert [p.name for _, p in results] == ["hello.json", "other.json"]
    payload = json.loads((out / "hello.json").read_text())
    assert payload["slug"] == "hello"
    assert payload["frontmatter"] == {"title": "Hi"}
    assert [e["kind"] for e in payload["elements"]] == ["text", "text"]
    assert payload["elements"][0]["content"][0]["content"] == "Hello"


def test_run_render_wraps_failures(tmp_path):
    bad = tmp_path / "bad.md"
    bad.write_text("---\n- not\n- a mapping\n---\nBody\n")
    with pytest.raises(RuntimeError, match="Failed to render"):
        run_render(str(bad), Settings(), DEFAULT_STYLES, tmp_path / "dist")


def test_render_markdown_bold_only_paragraph_centered():
    """A bold-only paragraph from real parser output gets the centered style."""
    para = render_markdown("**Bold**\n", DEFAULT_STYLES)[0]
    assert [c.style for c in para.content] == [[DEFAULT_STYLES["strong"]]]
    assert para.style == [DEFAULT_STYLES["paragraphCenter"]]


def test_render_markdown_bold_in_list_no_margin():
    lst = render_markdown("- **Bold**\n\n- other\n", DEFAULT_STYLES)[0]
    body = lst.children[0].children[1]
    assert body.content[0].style == [DEFAULT_STYLES["paragraphCenter"], DEFAULT_STYLES["noMargin"]]
