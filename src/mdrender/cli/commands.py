"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdrender.config import Settings, configure_logging, load_config
from mdrender.core.elements import dump_elements
from mdrender.core.parse import parse_file
from mdrender.core.pipeline import run_render
from mdrender.core.rules import NodeRenderer
from mdrender.core.styles import DEFAULT_STYLES, dump_styles, load_styles


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    configure_logging(settings.log_level)
    return settings


def _styles(settings: Settings) -> dict:
    try:
        return load_styles(Path(settings.styles_file) if settings.styles_file else None)
    except (OSError, ValueError) as e:
        _fail("Could not load styles", e)


def render_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to render")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    styles: Annotated[Optional[str], typer.Option("--styles", help="YAML style table")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    image_param: Annotated[Optional[str], typer.Option("--image-param", help="Suffix appended to image URIs")] = None,
    lightbox: Annotated[Optional[bool], typer.Option("--lightbox/--no-lightbox", help="Wrap images in an overlay")] = None,
    linkify: Annotated[Optional[bool], typer.Option("--linkify/--no-linkify", help="Turn bare URLs into links")] = None,
    ):
    """Render markdown files to UI element JSON."""
    settings = _settings(overrides={
        "output_dir": out, "styles_file": styles, "parser_config": parser,
        "image_param": image_param, "enable_lightbox": lightbox, "linkify": linkify,
    })
    output_dir = Path(settings.output_dir)
    try:
        results = run_render(path, settings, _styles(settings), output_dir)
    except RuntimeError as e:
        _fail(str(e))
    if not results:
        typer.echo(f"No markdown files found at: {path}")
        raise typer.Exit(1)
    for src, out_file in results:
        typer.echo(f"  {src} -> {out_file}")
    typer.echo(f"Rendered {len(results)} document(s) to {output_dir}/")


def inspect_cmd(
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, help="Markdown file to inspect")],
    nodes: Annotated[bool, typer.Option("--nodes", help="Print the parsed node tree instead of elements")] = False,
    styles: Annotated[Optional[str], typer.Option("--styles", help="YAML style table")] = None,
    linkify: Annotated[Optional[bool], typer.Option("--linkify/--no-linkify", help="Turn bare URLs into links")] = None,
    ):
    """Print the node tree or rendered elements of one file as JSON."""
    settings = _settings(overrides={"styles_file": styles, "linkify": linkify})
    try:
        parsed = parse_file(path, settings.parser_config, settings.linkify)
    except ValueError as e:
        _fail(f"Could not parse {path}", e)
    if nodes:
        data = [n.model_dump(mode="json", exclude_defaults=True) for n in parsed.nodes]
    else:
        renderer = NodeRenderer(_styles(settings), settings.render_options())
        data = dump_elements(renderer.render(parsed.nodes))
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def styles_cmd():
    """Print the built-in style table as YAML (a starting point for --styles)."""
    typer.echo(dump_styles(DEFAULT_STYLES), nl=False)
