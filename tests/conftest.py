"""Shared fixtures: an in-memory output console and token readers over strings."""

import io

import pytest
from rich.console import Console

from drills.console_io import TokenReader


@pytest.fixture
def output():
    """Plain console writing to a StringIO; read it back with output.file.getvalue()."""
    return Console(
        file=io.StringIO(),
        highlight=False,
        markup=False,
        emoji=False,
        soft_wrap=True,
        color_system=None,
        width=200,
    )


@pytest.fixture
def make_reader(output):
    """Build a TokenReader that reads ``text`` and prompts on ``output``."""

    def _make(text: str) -> TokenReader:
        return TokenReader(io.StringIO(text), output)

    return _make
