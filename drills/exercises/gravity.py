"""Gravity exercise — a ball dropped from a tower, sampled once a second.

height(t) = tower_height - g * t^2 / 2 for t = 0..MAX_SECONDS. Every second
is printed, including those after the ball has landed.
"""

from __future__ import annotations

from typing import Iterator

from rich.console import Console

from drills.console_io import TokenReader
from drills.models import HeightSample

NAME = "gravity"
DESCRIPTION = "Height of a ball dropped from a tower, t = 0..5 s"
CHAPTER = "4"

GRAVITY = 9.8  # m/s^2
MAX_SECONDS = 5

HEIGHT_PROMPT = "Enter the height of the tower in meters: "


def get_height(reader: TokenReader) -> float:
    return reader.read_double(HEIGHT_PROMPT)


def calculate_exponent(base: float, exponent: int) -> float:
    """Raise ``base`` to a non-negative integer power by repeated multiplication."""
    result = 1.0
    while exponent > 0:
        result *= base
        exponent -= 1
    return result


def calculate_height(tower_height: float, seconds: float) -> float:
    return tower_height - GRAVITY * calculate_exponent(seconds, 2) / 2


def sample_heights(tower_height: float) -> Iterator[HeightSample]:
    """Yield one HeightSample per second, in increasing order of time."""
    for t in range(MAX_SECONDS + 1):
        yield HeightSample(seconds=t, height=calculate_height(tower_height, t))


def calculate_print_height(tower_height: float, seconds: int, console: Console) -> HeightSample:
    sample = HeightSample(seconds=seconds, height=calculate_height(tower_height, seconds))
    console.out(sample.render(), highlight=False)
    return sample


def main(reader: TokenReader, console: Console) -> list[HeightSample]:
    tower_height = get_height(reader)
    samples = []
    for t in range(MAX_SECONDS + 1):
        samples.append(calculate_print_height(tower_height, t, console))
    return samples
