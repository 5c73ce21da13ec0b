"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdrender.cli.commands import inspect_cmd, render_cmd, styles_cmd


app = typer.Typer(name="mdrender", no_args_is_help=True, help="Markdown to mobile UI element renderer")

app.command(name="render")(render_cmd)
app.command(name="inspect")(inspect_cmd)
app.command(name="styles")(styles_cmd)
