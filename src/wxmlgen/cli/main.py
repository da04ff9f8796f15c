"""Main CLI entry point."""

import logging
from pathlib import Path
from typing import Optional

import rich_click as click
from rich.console import Console
from rich.logging import RichHandler

from wxmlgen import __version__

console = Console()
# Logs go to stderr so `render` output stays pipeable
err_console = Console(stderr=True)

DEFAULT_OUT_DIR = Path(".wxmlgen") / "build"

click.rich_click.USE_RICH_MARKUP = True
click.rich_click.STYLE_HELPTEXT_FIRST = True
click.rich_click.STYLE_COMMANDS_TABLE_SHOW_LINES = False
click.rich_click.STYLE_COMMANDS_TABLE_PAD_EDGE = False
click.rich_click.STYLE_COMMANDS_TABLE_BOX = None
click.rich_click.STYLE_OPTIONS_TABLE_BOX = None
click.rich_click.STYLE_COMMANDS_PANEL_BOX = None
click.rich_click.STYLE_OPTIONS_PANEL_BOX = None
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.STYLE_ERRORS_SUGGESTION = "magenta italic"
click.rich_click.ERRORS_SUGGESTION = "Try running 'wxmlgen --help' for more information."

click.rich_click.STYLE_HEADER_TEXT = "bold cyan"
click.rich_click.STYLE_OPTION = "cyan"
click.rich_click.STYLE_SWITCH = "cyan"
click.rich_click.STYLE_METAVAR = "dim white"
click.rich_click.STYLE_USAGE_COMMAND = "cyan"
click.rich_click.STYLE_USAGE = "dim"

click.rich_click.COMMAND_GROUPS = {
    "wxmlgen": [
        {
            "name": "Commands",
            "commands": ["render", "build"],
        }
    ]
}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False, markup=False)],
        force=True,
    )


@click.group(
    help=f"""
[bold white on cyan] wxmlgen [/] [bold cyan]v{__version__}[/] Mini-program template generator.

Run [bold cyan]wxmlgen render FILE[/] to print one compiled template.
Run [bold cyan]wxmlgen build SRC_DIR[/] to compile a directory of templates.

[dim]Input files are JSON documents holding the template options
(name, imports, slots) and the annotated AST under 'ast'.[/dim]
"""
)
@click.version_option(__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    _configure_logging(verbose)


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--name", default=None, help="Override the template name")
def render(file: Path, name: Optional[str]) -> None:
    """Print the compiled template for FILE."""
    from wxmlgen.compiler.codegen.template import TemplateGenerator
    from wxmlgen.compiler.exceptions import AstLoadError
    from wxmlgen.compiler.loader import load_document

    try:
        ast, options = load_document(file)
    except (AstLoadError, OSError) as e:
        raise click.ClickException(str(e))

    if name:
        options.name = name

    generator = TemplateGenerator(ast, options)
    click.echo(generator.generate())
    if generator.failed:
        raise SystemExit(1)


@cli.command()
@click.argument(
    "src_dir", type=click.Path(exists=True, file_okay=False, path_type=Path)
)
@click.option(
    "--out-dir",
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help="Output directory for compiled templates (default: .wxmlgen/build).",
)
@click.option(
    "--no-clean",
    is_flag=True,
    help="Keep existing files in the output directory.",
)
def build(src_dir: Path, out_dir: Optional[Path], no_clean: bool) -> None:
    """Compile every template document under SRC_DIR."""
    from wxmlgen.compiler.build_artifacts import build_artifacts

    if out_dir is None:
        out_dir = DEFAULT_OUT_DIR

    console.print(f"🔨 Building [cyan]{src_dir}[/]...")

    try:
        summary = build_artifacts(
            src_dir=src_dir, out_dir=out_dir, clean=not no_clean
        )
    except ValueError as e:
        raise click.UsageError(str(e))

    for failed in summary.failed:
        console.print(f"  [red]✗[/] {failed}")

    if summary.failures:
        status = "⚠️  Build finished with errors"
    else:
        status = "✅ Build complete"
    console.print(
        f"{status} "
        f"(templates={summary.templates}, failures={summary.failures}, "
        f"out={summary.out_dir})",
        soft_wrap=True,
    )
    if summary.failures:
        raise SystemExit(1)


if __name__ == "__main__":
    cli()
