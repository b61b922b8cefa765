"""Command-line entry point for fit."""

from __future__ import annotations

import sys
from collections.abc import Sequence

import typer
from rich.console import Console
from rich.text import Text

from fit.commands import CommandContext
from fit.config import Settings, get_settings
from fit.errors import FitError
from fit.formatter import format_output
from fit.runner import run_git
from fit.styles import StyleSheet

BANNER_F = ("█████", "██   ", "████ ", "██   ", "██   ")
BANNER_IT = ("██ ██████", "     ██  ", "██   ██  ", "██   ██  ", "██   ██  ")

app = typer.Typer(name="fit", help="Colorized output for git.", add_completion=False)


def render_banner() -> Text:
    banner = Text()
    for left, right in zip(BANNER_F, BANNER_IT, strict=True):
        banner.append(left, style="bright_blue")
        banner.append(" ")
        banner.append(right, style="yellow")
        banner.append("\n")
    return banner


def _console(settings: Settings, *, stderr: bool = False) -> Console:
    return Console(stderr=stderr, no_color=settings.no_color or None, highlight=False, markup=False, emoji=False)


@app.command(
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        "help_option_names": [],
    }
)
def main(ctx: typer.Context) -> None:
    """Run git with the given arguments and print its output formatted."""

    settings = get_settings()
    # click consumes "--"; the raw argv from run() keeps it
    args = list(ctx.obj) if ctx.obj is not None else list(ctx.args)
    console = _console(settings)

    if settings.show_banner:
        console.print(render_banner(), soft_wrap=True)
    if settings.echo_command:
        console.print(Text(f"Running command: git [{' '.join(args)}]", style="dim"), soft_wrap=True)

    try:
        result = run_git(args, settings)
    except FitError as exc:
        _console(settings, stderr=True).print(Text(f"Error: {exc}", style="bold red"), soft_wrap=True)
        raise typer.Exit(127) from exc

    context = CommandContext.from_args(args, program_name=settings.program_name)
    styles = StyleSheet.for_terminal(no_color=console.no_color or not console.is_terminal, width=console.width)
    document = format_output(
        context.name,
        result.output,
        styles,
        exit_code=result.exit_code,
        program_name=context.program_name,
    )
    typer.echo(document.text)
    raise typer.Exit(document.exit_code)


def run(argv: Sequence[str] | None = None) -> None:
    """Console entry point; forwards argv to git verbatim."""

    args = list(sys.argv[1:] if argv is None else argv)
    app(args=args, obj=args, prog_name="fit")
