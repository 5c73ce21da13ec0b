"""Export: build the rendered-document JSON payload and write it to disk"""

import json
from pathlib import Path

from mdrender.core.elements import Element, dump_elements
from mdrender.core.models import ParsedDoc


def build_payload(doc: ParsedDoc, elements: list[Element]) -> dict:
    """Return the JSON dict for a rendered document: slug, path, hash, frontmatter, elements."""
    return {
        "slug": doc.slug,
        "path": str(doc.path),
        "hash": doc.hash,
        "frontmatter": doc.frontmatter,
        "elements": dump_elements(elements),
    }


def write_doc(doc: ParsedDoc, elements: list[Element], output_dir: Path) -> Path:
    """Write <output_dir>/<slug>.json for a single rendered document. Returns its path."""
    output_dir.mkdir(parents=True, exist_ok=True)
    json_path = output_dir / f"{doc.slug}.json"
    json_path.write_text(
        json.dumps(build_payload(doc, elements), indent=2, ensure_ascii=False, default=str),
        encoding='utf-8',
    )
    return json_path
