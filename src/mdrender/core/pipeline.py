"""Pipeline step functions: parse -> render -> export orchestration"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

from mdrender.config import Settings
from mdrender.core.elements import Element
from mdrender.core.export import write_doc
from mdrender.core.models import RenderOptions
from mdrender.core.parse import discover_files, parse_file, parse_markdown
from mdrender.core.rules import NodeRenderer


logger = logging.getLogger(__name__)


def render_markdown(
    text: str,
    styles: Mapping[str, Any],
    options: Optional[RenderOptions] = None,
    parser_config: str = 'gfm-like',
    linkify: bool = False,
    ) -> list[Element]:
    """Parse a markdown body and render it to UI elements in one call."""
    nodes = parse_markdown(text, parser_config, linkify)
    return NodeRenderer(styles, options).render(nodes)


def run_render(
    path: str,
    settings: Settings,
    styles: Mapping[str, Any],
    output_dir: Path,
    ) -> list[tuple[Path, Path]]:
    """Render every markdown file under path to element JSON. Returns (source_path, json_path) pairs."""
    renderer = NodeRenderer(styles, settings.render_options())
    results = []
    for p in discover_files(Path(path)):
        try:
            parsed = parse_file(p, settings.parser_config, settings.linkify)
            elements = renderer.render(parsed.nodes)
            out_file = write_doc(parsed, elements, output_dir)
            results.append((p, out_file))
        except Exception as e:
            raise RuntimeError(f"Failed to render {p}: {e}") from e
        logger.debug("Rendered %s -> %s", p, out_file)
    logger.info("Rendered %d document(s) to %s", len(results), output_dir)
    return results
