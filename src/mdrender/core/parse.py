"""File discovery, frontmatter extraction, and markdown-it parsing into DocNodes"""

import logging
import re
from pathlib import Path
from typing import Any

import yaml
from markdown_it import MarkdownIt

from mdrender.core.extract.blocks import tree_to_nodes
from mdrender.core.models import DocNode, ParsedDoc
from mdrender.core.utils.hashing import sha256
from mdrender.core.utils.slug import doc_slug


logger = logging.getLogger(__name__)

FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---\s*\n', re.DOTALL)
MD_EXTENSIONS = {'.md', '.mdx'}


def _make_parser(preset: str, linkify: bool = False) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": linkify})


def _strip_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with YAML header removed."""
    m = FRONTMATTER_RE.match(text)
    if m:
        try:
            fm = yaml.safe_load(m.group(1)) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML frontmatter: {e}") from e
        if not isinstance(fm, dict):
            raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
        return fm, text[m.end():]
    return {}, text


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.suffix in MD_EXTENSIONS)


def parse_markdown(text: str, parser_config: str = 'gfm-like', linkify: bool = False) -> list[DocNode]:
    """Parse a markdown body (no frontmatter) into top-level DocNodes."""
    tokens = _make_parser(parser_config, linkify).parse(text)
    return tree_to_nodes(tokens)


def parse_file(path: Path, parser_config: str = 'gfm-like', linkify: bool = False) -> ParsedDoc:
    """Parse a single markdown file into a ParsedDoc with its node tree."""
    raw = path.read_text(encoding='utf-8')
    frontmatter, body = _strip_frontmatter(raw)
    nodes = parse_markdown(body, parser_config, linkify)
    logger.debug("Parsed %s into %d top-level node(s)", path, len(nodes))
    slug = doc_slug(frontmatter, path.stem)
    return ParsedDoc(
        path=path,
        slug=slug,
        raw_markdown=raw,
        markdown=body,
        hash=sha256(raw),
        frontmatter=frontmatter,
        nodes=nodes,
    )
