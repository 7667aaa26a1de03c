"""Drills runner — resolves an exercise and runs its single pass.

Data flow per run:
1. Look up the exercise module by name
2. Run main(reader, console): prompts and results go to the output console
3. Report malformed input on the status console
4. Return an ExerciseRun with outcome and wall clock time
"""

from __future__ import annotations

import time

from rich.console import Console
from rich.markup import escape

from drills.console_io import InputError, TokenReader
from drills.exercises import load_exercise
from drills.models import ExerciseRun, Outcome


def run_exercise(
    name: str,
    reader: TokenReader,
    status: Console,
    verbose: bool = False,
) -> ExerciseRun:
    """Execute one exercise.

    Args:
        name: Exercise name (e.g., 'calculator').
        reader: Token reader over the input stream; its console receives output.
        status: Console for diagnostics (stderr in the CLI).
        verbose: Print dim status lines before and after the run.

    Returns:
        ExerciseRun describing how the run ended.
    """
    exercise = load_exercise(name)
    if not exercise:
        status.print(f"[red]Error:[/red] Unknown exercise: {escape(name)}")
        return ExerciseRun(name=name, outcome=Outcome.UNKNOWN_EXERCISE, error="unknown exercise")

    if verbose:
        status.print(f"[dim]Running: {exercise.name} (chapter {exercise.chapter})[/dim]")

    start = time.monotonic()
    try:
        exercise.main(reader, reader.console)
    except InputError as e:
        elapsed = time.monotonic() - start
        # The prompt left the cursor mid-line
        reader.console.out("", highlight=False)
        status.print(f"[red]Error:[/red] {escape(str(e))}")
        return ExerciseRun(
            name=exercise.name,
            outcome=Outcome.INPUT_ERROR,
            wall_clock_s=round(elapsed, 3),
            error=str(e),
        )
    elapsed = time.monotonic() - start

    if verbose:
        status.print(f"[dim]Done: {exercise.name} ({elapsed:.3f}s)[/dim]")
    return ExerciseRun(name=exercise.name, wall_clock_s=round(elapsed, 3))
