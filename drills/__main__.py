"""CLI for the drills exercises.

Usage:
    python -m drills list          # Show available exercises
    python -m drills calculator    # Run the calculator
    python -m drills gravity       # Run the gravity table
    python -m drills dec2bin       # Run the binary printer
    python -m drills run <name>    # Run an exercise by name
    python -m drills -v gravity    # Status lines on stderr
"""

from __future__ import annotations

import sys

import typer
from rich.console import Console
from rich.table import Table

from drills.config import Settings
from drills.console_io import TokenReader, make_output_console
from drills.exercises import list_exercises
from drills.runner import run_exercise

app = typer.Typer(
    name="drills",
    help="Introductory console exercises: calculator, gravity, dec2bin",
    no_args_is_help=True,
)


def _status_console(settings: Settings) -> Console:
    return Console(stderr=True, no_color=settings.no_color)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print status lines on stderr"),
) -> None:
    """Introductory console exercises."""
    settings = Settings.from_env()
    if verbose:
        settings = Settings(verbose=True, no_color=settings.no_color)
    ctx.obj = settings


def _run(ctx: typer.Context, name: str) -> None:
    settings: Settings = ctx.obj or Settings.from_env()
    reader = TokenReader(sys.stdin, make_output_console())
    run = run_exercise(name, reader, _status_console(settings), verbose=settings.verbose)
    if run.exit_code:
        raise typer.Exit(run.exit_code)


@app.command("list")
def cmd_list(ctx: typer.Context) -> None:
    """Show available exercises."""
    console = _status_console(ctx.obj or Settings.from_env())
    exercises = list_exercises()
    if not exercises:
        console.print("[yellow]No exercises found.[/yellow]")
        raise typer.Exit(1)

    table = Table(title="Available Exercises", show_header=True, header_style="bold")
    table.add_column("Name", style="green", min_width=12)
    table.add_column("Chapter", justify="right")
    table.add_column("Description", min_width=30)

    for ex in exercises:
        table.add_row(ex.name, ex.chapter, ex.description)

    console.print()
    console.print(table)
    console.print()


@app.command("run")
def cmd_run(
    ctx: typer.Context,
    exercise: str = typer.Argument(help="Exercise name (e.g., 'gravity')"),
) -> None:
    """Run an exercise by name."""
    _run(ctx, exercise)


@app.command("calculator")
def cmd_calculator(ctx: typer.Context) -> None:
    """Apply +, -, * or / to two numbers."""
    _run(ctx, "calculator")


@app.command("gravity")
def cmd_gravity(ctx: typer.Context) -> None:
    """Height of a ball dropped from a tower, t = 0..5 s."""
    _run(ctx, "gravity")


@app.command("dec2bin")
def cmd_dec2bin(ctx: typer.Context) -> None:
    """Print a number 0..255 as two binary nibbles."""
    _run(ctx, "dec2bin")


if __name__ == "__main__":
    app()
