"""Tests for the typer CLI harness."""

import pytest
from typer.testing import CliRunner

from connect_four.cli.main import app, board_to_ascii, parse_moves
from connect_four.core.types import Player
from connect_four.game.engine import GameEngine


runner = CliRunner()

TIE_SEQUENCE = [str(c) for c in [0, 2, 1, 3, 4, 6, 5] * 6]


class TestParseMoves:
    def test_mixed_separators(self):
        assert parse_moves(["0,6", "1", " 2 3\n4 "]) == [0, 6, 1, 2, 3, 4]

    def test_negative_numbers_are_parsed(self):
        assert parse_moves(["-1"]) == [-1]

    def test_empty_input(self):
        assert parse_moves(["", "  \n"]) == []

    def test_malformed_token(self):
        with pytest.raises(ValueError, match="Malformed move 'x'"):
            parse_moves(["0", "x"])


class TestRun:
    def test_vertical_win(self):
        result = runner.invoke(app, ["run", "0", "6", "0", "6", "0", "6", "0"])
        assert result.exit_code == 0
        assert "Move 1: red played column 0 (row 5); gold to move" in result.output
        assert "Move 7: The red player won!" in result.output

    def test_tie(self):
        result = runner.invoke(app, ["run", *TIE_SEQUENCE])
        assert result.exit_code == 0
        assert "Move 42: Tie!" in result.output

    def test_input_after_game_end_is_ignored(self):
        result = runner.invoke(app, ["run", "0", "6", "0", "6", "0", "6", "0", "1", "1"])
        assert result.exit_code == 0
        assert "Move 8" not in result.output

    def test_exhausted_input(self):
        result = runner.invoke(app, ["run", "3", "3"])
        assert result.exit_code == 0
        assert "Move 2:" in result.output

    def test_reads_stdin_when_no_arguments(self):
        result = runner.invoke(app, ["run"], input="0,6,0,6\n0 6 0\n")
        assert result.exit_code == 0
        assert "The red player won!" in result.output

    def test_board_size_options(self):
        result = runner.invoke(
            app,
            ["run", "--height", "4", "--width", "4", "0", "1", "1", "2", "3", "2", "2", "3", "3", "0", "3"],
        )
        assert result.exit_code == 0
        assert "Move 11: The red player won!" in result.output

    def test_settings_from_environment(self, monkeypatch):
        monkeypatch.setenv("GAME_PLAYER1_COLOR", "blue")
        result = runner.invoke(app, ["run", "0", "6", "0", "6", "0", "6", "0"])
        assert result.exit_code == 0
        assert "The blue player won!" in result.output

    def test_non_integer_input(self):
        result = runner.invoke(app, ["run", "0", "left"])
        assert result.exit_code == 1
        assert "Malformed move 'left'" in result.output

    def test_column_out_of_range(self):
        result = runner.invoke(app, ["run", "0", "7"])
        assert result.exit_code == 1
        assert "Invalid column 7" in result.output

    def test_negative_column(self):
        result = runner.invoke(app, ["run", "--", "-1"])
        assert result.exit_code == 1
        assert "Invalid column -1" in result.output

    def test_full_column(self):
        result = runner.invoke(app, ["run", *["0"] * 7])
        assert result.exit_code == 1
        assert "Column 0 is full" in result.output

    def test_board_too_small(self):
        result = runner.invoke(app, ["run", "--height", "3", "0"])
        assert result.exit_code == 1
        assert "at least 4x4" in result.output


class TestPlay:
    def test_interactive_win(self):
        result = runner.invoke(app, ["play"], input="0\n6\n0\n6\n0\n6\n0\n")
        assert result.exit_code == 0
        assert "The red player won!" in result.output

    def test_quit(self):
        result = runner.invoke(app, ["play"], input="q\n")
        assert result.exit_code == 0
        assert "Game quit." in result.output

    def test_invalid_input_reprompts(self):
        result = runner.invoke(app, ["play"], input="9\nabc\nq\n")
        assert result.exit_code == 0
        assert "Invalid! Invalid column 9" in result.output
        assert "Invalid! Enter a number 0-6" in result.output

    def test_end_of_input_quits(self):
        result = runner.invoke(app, ["play"], input="0\n")
        assert result.exit_code == 0
        assert "Game quit." in result.output


def test_board_to_ascii():
    red, gold = Player("red"), Player("gold")
    engine = GameEngine(red, gold, height=4, width=4)
    engine.submit_move(1)
    engine.submit_move(1)

    text = board_to_ascii(engine.state)
    lines = text.strip("\n").splitlines()

    assert lines[-1] == "X = red, O = gold"
    assert lines[-3] == "|   | X |   |   |"
    assert lines[-5] == "|   | O |   |   |"


def test_log_level_option():
    result = runner.invoke(app, ["run", "--log-level", "info", "0"])
    assert result.exit_code == 0
    assert "Starting 6x7 game with 1 moves" in result.output


def test_unknown_log_level():
    result = runner.invoke(app, ["run", "--log-level", "loud", "0"])
    assert result.exit_code == 2


@pytest.mark.parametrize("args", [["run", "0"], ["play"]])
def test_invalid_configuration(monkeypatch, args):
    monkeypatch.setenv("GAME_HEIGHT", "3")
    result = runner.invoke(app, args)
    assert result.exit_code == 1
    assert "Error: invalid configuration" in result.output
    assert "height" in result.output
