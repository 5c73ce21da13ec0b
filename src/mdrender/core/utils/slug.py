"""Output slugs: rendered JSON lands at <output_dir>/<slug>.json"""

import re
from typing import Any, Mapping


_NON_WORD = re.compile(r'[^\w\s-]')
_SEPARATORS = re.compile(r'[\s_-]+')


def slugify(text: str) -> str:
    """Lowercase text, drop punctuation, and join words with single hyphens."""
    words = _NON_WORD.sub('', text.lower())
    return _SEPARATORS.sub('-', words).strip('-')


def doc_slug(frontmatter: Mapping[str, Any], stem: str) -> str:
    """An explicit frontmatter `slug` wins verbatim; otherwise the file stem is slugified."""
    return str(frontmatter.get('slug') or slugify(stem))
