"""Value types for the drills exercises.

Operator, Calculation, HeightSample, BinaryDigits — the small typed results
each exercise computes before printing.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from drills.console_io import format_number


class Operator(str, Enum):
    """Calculator operators."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @classmethod
    def parse(cls, symbol: str) -> Optional[Operator]:
        """Return the operator for ``symbol``, or None if unsupported."""
        try:
            return cls(symbol)
        except ValueError:
            return None


@dataclass(frozen=True)
class Calculation:
    """One calculator attempt. ``result`` is None when the input was invalid."""

    left: float
    op: str
    right: float
    result: Optional[float] = None

    @property
    def valid(self) -> bool:
        return self.result is not None

    def render(self) -> str:
        if self.result is None:
            return "Invalid input, please try again"
        return (
            f"{format_number(self.left)} {self.op} {format_number(self.right)}"
            f" is {format_number(self.result)}"
        )


@dataclass(frozen=True)
class HeightSample:
    """Height of the ball ``seconds`` after release."""

    seconds: int
    height: float

    @property
    def landed(self) -> bool:
        return self.height <= 0.0

    def render(self) -> str:
        t = format_number(self.seconds)
        if self.landed:
            return f"At {t} seconds, the ball is on the ground."
        return f"At {t} seconds, the ball is at height: {format_number(self.height)} meters"


@dataclass(frozen=True)
class BinaryDigits:
    """Eight binary digits for a value in [0, 255], most significant first."""

    value: int
    bits: str

    @property
    def nibbles(self) -> tuple[str, str]:
        return self.bits[:4], self.bits[4:]

    def render(self) -> str:
        high, low = self.nibbles
        return f"{high} {low}"


class Outcome(str, Enum):
    """How an exercise run ended."""

    OK = "ok"
    INPUT_ERROR = "input-error"
    UNKNOWN_EXERCISE = "unknown-exercise"


@dataclass
class ExerciseRun:
    """Result of a single exercise run."""

    name: str
    outcome: Outcome = Outcome.OK
    wall_clock_s: float = 0.0
    error: str = ""

    @property
    def exit_code(self) -> int:
        return 0 if self.outcome is Outcome.OK else 1
