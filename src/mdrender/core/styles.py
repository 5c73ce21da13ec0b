"""Style table loading and lookup"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml


DEFAULT_STYLES: dict[str, dict[str, Any]] = {
    "text":              {"color": "#222222", "fontSize": 15},
    "paragraph":         {"marginTop": 8, "marginBottom": 8, "flexWrap": "wrap", "flexDirection": "row"},
    "paragraphCenter":   {"marginTop": 8, "marginBottom": 8, "textAlign": "center"},
    "paragraphWithImage": {"flexWrap": "wrap", "flexDirection": "row", "alignItems": "flex-start"},
    "noMargin":          {"marginTop": 0, "marginBottom": 0},
    "heading":           {"fontWeight": "bold"},
    "heading1":          {"fontSize": 28},
    "heading2":          {"fontSize": 24},
    "heading3":          {"fontSize": 20},
    "heading4":          {"fontSize": 18},
    "heading5":          {"fontSize": 16},
    "heading6":          {"fontSize": 14},
    "strong":            {"fontWeight": "bold"},
    "em":                {"fontStyle": "italic"},
    "del":               {"textDecorationLine": "line-through"},
    "inlineCode":        {"fontFamily": "Courier", "backgroundColor": "#eeeeee"},
    "codeBlock":         {"fontFamily": "Courier"},
    "autolink":          {"color": "#0066cc", "textDecorationLine": "underline"},
    "mailto":            {"color": "#0066cc"},
    "image":             {"width": 200, "height": 200},
    "imageBox":          {"style": {"flex": 1, "resizeMode": "contain"}},
    "list":              {"marginVertical": 4},
    "listRow":           {"flexDirection": "row"},
    "listItem":          {"flex": 1},
    "listItemText":      {"flex": 1},
    "listItemBullet":    {"fontSize": 15, "marginRight": 4},
    "listItemNumber":    {"fontWeight": "bold", "marginRight": 4},
    "table":             {"borderWidth": 1, "borderColor": "#cccccc"},
    "tableHeader":       {"flexDirection": "row", "backgroundColor": "#f4f4f4"},
    "tableHeaderCell":   {"flex": 1, "fontWeight": "bold", "padding": 4},
    "tableRow":          {"flexDirection": "row", "borderBottomWidth": 1, "borderColor": "#cccccc"},
    "tableRowLast":      {"borderBottomWidth": 0},
    "tableRowCell":      {"flex": 1, "padding": 4},
    "blockQuote":        {"paddingLeft": 8, "fontStyle": "italic"},
    "bgImage":           {"position": "absolute", "top": 0, "left": 0, "right": 0, "bottom": 0},
    "bgImageView":       {"flex": 1},
    "hr":                {"height": 1, "backgroundColor": "#cccccc"},
    "br":                {},
    "newline":           {},
}


def pick(styles: Mapping[str, Any], *names: str) -> list[Any]:
    """Resolve style names to descriptors in order; unknown names are skipped."""
    return [styles[n] for n in names if styles.get(n) is not None]


def load_styles(path: Path | None = None) -> dict[str, Any]:
    """Return DEFAULT_STYLES overlaid with the YAML style table at path, if any."""
    styles: dict[str, Any] = dict(DEFAULT_STYLES)
    if path is None:
        return styles
    try:
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid style file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid style file {path}: expected a mapping, got {type(data).__name__}")
    styles.update(data)
    return styles


def dump_styles(styles: Mapping[str, Any]) -> str:
    return yaml.safe_dump(dict(styles), default_flow_style=False, sort_keys=False)
