"""Tests for exercise discovery, the runner and settings."""

import io

from rich.console import Console

from drills.config import Settings
from drills.exercises import list_exercises, load_exercise
from drills.models import Outcome
from drills.runner import run_exercise


def _status():
    return Console(file=io.StringIO(), color_system=None, width=200)


# --- Discovery ---

def test_list_exercises_sorted():
    names = [ex.name for ex in list_exercises()]
    assert names == ["calculator", "dec2bin", "gravity"]


def test_load_exercise_metadata():
    info = load_exercise("gravity")
    assert info is not None
    assert info.chapter == "4"
    assert info.description
    assert callable(info.main)


def test_load_unknown_exercise():
    assert load_exercise("nope") is None
    assert load_exercise("../models") is None
    assert load_exercise("__init__") is None


# --- Runner ---

def test_run_ok(make_reader, output):
    status = _status()
    run = run_exercise("dec2bin", make_reader("5\n"), status)
    assert run.outcome is Outcome.OK
    assert run.exit_code == 0
    assert output.file.getvalue().endswith("0000 0101\n")
    assert status.file.getvalue() == ""


def test_run_input_error(make_reader, output):
    status = _status()
    run = run_exercise("calculator", make_reader("5\n[x]\n"), status)
    assert run.outcome is Outcome.INPUT_ERROR
    assert run.exit_code == 1
    assert "[x]" in status.file.getvalue()
    # Prompt line is terminated before the error is reported
    assert output.file.getvalue().endswith("Enter a double value: \n")


def test_run_unknown(make_reader):
    status = _status()
    run = run_exercise("nope", make_reader(""), status)
    assert run.outcome is Outcome.UNKNOWN_EXERCISE
    assert "Unknown exercise: nope" in status.file.getvalue()


def test_run_verbose(make_reader):
    status = _status()
    run_exercise("gravity", make_reader("1\n"), status, verbose=True)
    text = status.file.getvalue()
    assert "Running: gravity (chapter 4)" in text
    assert "Done: gravity" in text


# --- Settings ---

def test_settings_defaults():
    assert Settings.from_env({}) == Settings(verbose=False, no_color=False)


def test_settings_from_env():
    settings = Settings.from_env({"DRILLS_VERBOSE": "yes", "DRILLS_NO_COLOR": "1"})
    assert settings.verbose
    assert settings.no_color


def test_settings_honours_no_color():
    assert Settings.from_env({"NO_COLOR": ""}).no_color
