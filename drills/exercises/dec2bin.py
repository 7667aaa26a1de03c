"""Dec2Bin exercise — print 0..255 as an 8-bit binary number "#### ####".

No bitwise operators and no built-in formatting: each digit comes from
comparing the remaining value against a power of two and subtracting it.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console

from drills.console_io import TokenReader
from drills.models import BinaryDigits

NAME = "dec2bin"
DESCRIPTION = "Print a number 0..255 as two binary nibbles"
CHAPTER = "O"

POWERS_OF_TWO = (128, 64, 32, 16, 8, 4, 2, 1)
MIN_VALUE = 0
MAX_VALUE = 255

NUMBER_PROMPT = "Enter a number between 0 and 255: "
RANGE_ERROR = "Error! Please enter a valid number!"


def decrement_bit(num: int, power_of_two: int) -> tuple[str, int]:
    """Return the digit for ``power_of_two`` and the value left over."""
    if num >= power_of_two:
        return "1", num - power_of_two
    return "0", num


def to_binary(num: int) -> BinaryDigits:
    """Convert ``num`` to eight binary digits.

    Raises:
        ValueError: if ``num`` is outside [0, 255].
    """
    if not (MIN_VALUE <= num <= MAX_VALUE):
        raise ValueError(f"{num} is outside {MIN_VALUE}..{MAX_VALUE}")
    digits = []
    remaining = num
    for power in POWERS_OF_TWO:
        digit, remaining = decrement_bit(remaining, power)
        digits.append(digit)
    return BinaryDigits(value=num, bits="".join(digits))


def print_binary(num: int, console: Console) -> Optional[BinaryDigits]:
    try:
        binary = to_binary(num)
    except ValueError:
        console.out(RANGE_ERROR, highlight=False)
        return None
    console.out(binary.render(), highlight=False)
    return binary


def main(reader: TokenReader, console: Console) -> Optional[BinaryDigits]:
    num = reader.read_int(NUMBER_PROMPT)
    return print_binary(num, console)
