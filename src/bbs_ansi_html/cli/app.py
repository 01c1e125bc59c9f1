"""Typer CLI application."""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from bbs_ansi_html.core.options import ConversionOptions
from bbs_ansi_html.errors import ConversionError
from bbs_ansi_html.logging import configure_logging, get_logger

log = get_logger(__name__)

ENV_PREFIX = "BBS_ANSI_HTML_"

STANDALONE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
<link rel="stylesheet" href="/style.css">
<script type="module" src="/ansi-display.js"></script>
</head>
<body>
{body}
</body>
</html>
"""


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="bbs-ansi-html",
        help="Convert BBS-era ANSI artwork to HTML.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    @app.callback()
    def main(
        log_level: Annotated[str, typer.Option(
            "--log-level",
            envvar=f"{ENV_PREFIX}LOG_LEVEL",
            help="Log level for diagnostics on stderr",
        )] = "WARNING",
    ) -> None:
        """Convert BBS-era ANSI artwork to HTML."""
        configure_logging(log_level)

    @app.command()
    def convert(
        source: Annotated[Path, typer.Argument(help="Source ANSI file")],
        dest: Annotated[Optional[Path], typer.Argument(help="Destination HTML file (stdout if omitted)")] = None,
        utf8: Annotated[bool, typer.Option(
            "--utf8", "-u", envvar=f"{ENV_PREFIX}UTF8", help="Treat input as UTF-8 instead of CP437",
        )] = False,
        synchronet: Annotated[bool, typer.Option(
            "--synchronet", "-s", envvar=f"{ENV_PREFIX}SYNCHRONET", help="Enable Synchronet Ctrl-A color codes",
        )] = False,
        renegade: Annotated[bool, typer.Option(
            "--renegade", "-r", envvar=f"{ENV_PREFIX}RENEGADE", help="Enable Renegade pipe color codes",
        )] = False,
        standalone: Annotated[bool, typer.Option(
            "--standalone", help="Wrap the fragment in a full HTML page",
        )] = False,
    ) -> None:
        """Convert ANSI art to an HTML fragment."""
        from bbs_ansi_html.io.reader import convert_file

        options = ConversionOptions(
            utf8_input=utf8,
            synchronet_ctrl_a=synchronet,
            renegade_pipe=renegade,
        )
        try:
            html = convert_file(source, options)
        except (ConversionError, OSError) as e:
            err_console.print(f"[red]Cannot convert {escape(str(source))}: {escape(str(e))}[/]")
            raise typer.Exit(1)

        if standalone:
            html = STANDALONE_TEMPLATE.format(title=source.name, body=html)

        if dest is None:
            typer.echo(html)
            return

        dest.write_text(html, encoding="utf-8")
        log.info("converted", source=str(source), dest=str(dest))
        err_console.print(f"[green]Converted {escape(str(source))} → {escape(str(dest))}[/]")

    @app.command()
    def info(
        path: Annotated[Path, typer.Argument(help="ANSI file to inspect")],
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show SAUCE metadata for an ANSI file."""
        from bbs_ansi_html.io.reader import load_bytes
        from bbs_ansi_html.sauce.reader import parse_sauce_bytes

        try:
            sauce = parse_sauce_bytes(load_bytes(path))
        except OSError as e:
            err_console.print(f"[red]Cannot read {escape(str(path))}: {escape(str(e))}[/]")
            raise typer.Exit(1)

        if sauce is None:
            err_console.print(f"[yellow]No SAUCE metadata found in {escape(str(path))}[/]")
            raise typer.Exit(1)

        if json_output:
            data = {
                "title": sauce.title,
                "author": sauce.author,
                "group": sauce.group,
                "date": sauce.iso_date or None,
                "width": sauce.width,
                "height": sauce.height,
                "font": sauce.font,
                "comments": list(sauce.comments),
            }
            typer.echo(json.dumps(data, indent=2))
        else:
            console.print(f"[bold cyan]SAUCE Metadata for {escape(path.name)}[/]")
            console.print(f"  [bold]Title:[/]  {escape(sauce.title) or '(none)'}")
            console.print(f"  [bold]Author:[/] {escape(sauce.author) or '(none)'}")
            console.print(f"  [bold]Group:[/]  {escape(sauce.group) or '(none)'}")
            if sauce.date:
                console.print(f"  [bold]Date:[/]   {sauce.iso_date}")
            console.print(f"  [bold]Size:[/]   {sauce.width}x{sauce.height}")
            if sauce.font:
                console.print(f"  [bold]Font:[/]   {escape(sauce.font)}")
            if sauce.comments:
                console.print("  [bold]Comments:[/]")
                for comment in sauce.comments:
                    console.print(f"    {escape(comment)}")

    return app
