"""Console input and number formatting shared by the exercises.

Input is consumed as whitespace-delimited tokens, the way a C++ stream
extracts values: several answers may be typed on one line, and a value only
eats the leading part of a token it can parse (``"2.5x"`` reads 2.5 and
leaves ``"x"`` for the next prompt).
"""

from __future__ import annotations

import re
from collections import deque
from typing import TextIO

from rich.console import Console

# Longest leading decimal literal: "12", "-3.", ".5", "6.02e23"
_DOUBLE_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_RE = re.compile(r"[+-]?\d+")


class InputError(ValueError):
    """Raised when console input cannot be read as the requested value."""


def format_number(value: float) -> str:
    """Format a number like default iostream output (six significant digits).

    7.0 → '7', 95.1 → '95.1', 1234567.0 → '1.23457e+06'
    """
    return f"{value:g}"


def make_output_console() -> Console:
    """Console for exercise output: no markup, no highlighting, no wrapping."""
    return Console(highlight=False, markup=False, emoji=False, soft_wrap=True)


class TokenReader:
    """Prompted, token-at-a-time reader over a text stream.

    Prompts go to ``console`` without a trailing newline. A new line is read
    from ``stream`` only when no buffered tokens remain.
    """

    def __init__(self, stream: TextIO, console: Console):
        self._stream = stream
        self._console = console
        self._buffer: deque[str] = deque()

    @property
    def console(self) -> Console:
        return self._console

    def _prompt(self, prompt: str) -> None:
        self._console.out(prompt, end="", highlight=False)

    def _next_token(self) -> str:
        while not self._buffer:
            line = self._stream.readline()
            if not line:
                raise InputError("unexpected end of input")
            self._buffer.extend(line.split())
        return self._buffer.popleft()

    def _take(self, pattern: re.Pattern[str], what: str) -> str:
        token = self._next_token()
        match = pattern.match(token)
        if not match:
            raise InputError(f"expected {what}, got {token!r}")
        rest = token[match.end():]
        if rest:
            self._buffer.appendleft(rest)
        return match.group(0)

    def read_double(self, prompt: str) -> float:
        """Prompt, then read one floating-point value."""
        self._prompt(prompt)
        return float(self._take(_DOUBLE_RE, "a number"))

    def read_int(self, prompt: str) -> int:
        """Prompt, then read one integer (a fractional part stays buffered)."""
        self._prompt(prompt)
        return int(self._take(_INT_RE, "a whole number"))

    def read_char(self, prompt: str) -> str:
        """Prompt, then read one non-whitespace character."""
        self._prompt(prompt)
        token = self._next_token()
        if len(token) > 1:
            self._buffer.appendleft(token[1:])
        return token[0]
