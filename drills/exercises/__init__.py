"""Exercise discovery and loading for drills.

Each exercise is a module in drills/exercises/ defining:
    NAME, DESCRIPTION, CHAPTER  — metadata shown by `drills list`
    main(reader, console)       — the prompt → compute → print pass
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import Callable, Optional


@dataclass
class ExerciseInfo:
    """Metadata about a discovered exercise."""

    name: str
    description: str
    chapter: str
    module: ModuleType

    @property
    def main(self) -> Callable:
        return self.module.main


def _exercises_root() -> Path:
    """Absolute path to the exercises/ directory."""
    return Path(__file__).parent


def list_exercises() -> list[ExerciseInfo]:
    """Discover all available exercises, sorted by module name.

    Skips private modules and modules without a main() function.
    """
    exercises = []
    for child in sorted(_exercises_root().glob("*.py")):
        if child.stem.startswith("_"):
            continue
        info = load_exercise(child.stem)
        if info:
            exercises.append(info)
    return exercises


def load_exercise(name: str) -> Optional[ExerciseInfo]:
    """Load a single exercise by name.

    Args:
        name: Module name under drills/exercises/ (e.g., 'gravity').

    Returns:
        ExerciseInfo if the exercise exists and is valid, None otherwise.
    """
    if not name.isidentifier() or name.startswith("_"):
        return None
    if not (_exercises_root() / f"{name}.py").exists():
        return None

    mod = importlib.import_module(f"drills.exercises.{name}")
    if not callable(getattr(mod, "main", None)):
        return None

    return ExerciseInfo(
        name=getattr(mod, "NAME", name),
        description=getattr(mod, "DESCRIPTION", ""),
        chapter=getattr(mod, "CHAPTER", ""),
        module=mod,
    )
