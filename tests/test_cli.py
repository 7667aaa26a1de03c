"""End-to-end tests for the drills CLI."""

from typer.testing import CliRunner

from drills.__main__ import app

runner = CliRunner()


def test_list_shows_all_exercises():
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    for name in ("calculator", "gravity", "dec2bin"):
        assert name in result.output


def test_calculator_command():
    result = runner.invoke(app, ["calculator"], input="5\n2\n+\n")
    assert result.exit_code == 0
    assert result.stdout.endswith("5 + 2 is 7\n")


def test_calculator_invalid_still_succeeds():
    result = runner.invoke(app, ["calculator"], input="5\n0\n/\n")
    assert result.exit_code == 0
    assert result.stdout.endswith("Invalid input, please try again\n")


def test_gravity_command():
    result = runner.invoke(app, ["gravity"], input="100\n")
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[0] == "Enter the height of the tower in meters: At 0 seconds, the ball is at height: 100 meters"
    assert lines[-1] == "At 5 seconds, the ball is on the ground."
    assert len(lines) == 6


def test_dec2bin_command():
    result = runner.invoke(app, ["dec2bin"], input="5\n")
    assert result.exit_code == 0
    assert result.stdout == "Enter a number between 0 and 255: 0000 0101\n"


def test_dec2bin_out_of_range():
    result = runner.invoke(app, ["dec2bin"], input="256\n")
    assert result.exit_code == 0
    assert result.stdout.endswith("Error! Please enter a valid number!\n")


def test_run_by_name():
    result = runner.invoke(app, ["run", "dec2bin"], input="255\n")
    assert result.exit_code == 0
    assert "1111 1111" in result.stdout


def test_run_unknown_exercise():
    result = runner.invoke(app, ["run", "nope"])
    assert result.exit_code == 1
    assert "Unknown exercise" in result.output


def test_malformed_number_exits_nonzero():
    result = runner.invoke(app, ["calculator"], input="abc\n")
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "abc" in result.output


def test_missing_input_exits_nonzero():
    result = runner.invoke(app, ["gravity"], input="")
    assert result.exit_code == 1
    assert "end of input" in result.output


def test_verbose_status_lines():
    result = runner.invoke(app, ["-v", "gravity"], input="10\n")
    assert result.exit_code == 0
    assert "Running: gravity" in result.output
    assert "Done: gravity" in result.output
