"""Tests for the command-line interface."""

import pytest

from align_text import main
from align_text._terminal import TerminalWidthError


def run(argv):
    """Run the CLI and return its exit code."""
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    return excinfo.value.code


class TestMain:
    """End-to-end tests for main function."""

    def test_center(self, stdin, capsys):
        stdin("Hello           \n            World!\n   This should justify center     \n")
        code = run(["-a", "center", "-c", "30", "-t", "-k", "-b", "right"])
        out = capsys.readouterr().out
        assert code == 0
        assert out.splitlines() == [
            "             Hello            ",
            "            World!            ",
            "  This should justify center  ",
        ]

    def test_default_left_strips_trailing(self, stdin, capsys):
        stdin("a   \nbcd\n")
        assert run(["-c", "10"]) == 0
        assert capsys.readouterr().out == "a\nbcd\n"

    def test_outer_right_inner_left(self, stdin, capsys):
        stdin("a\nabc\n")
        assert run(["-o", "R", "-i", "l", "-c", "6"]) == 0
        assert capsys.readouterr().out == "   a\n   abc\n"

    def test_zero_columns_uses_text_width(self, stdin, capsys):
        stdin("a\nabc\n")
        assert run(["--outer", "right", "--inner", "right", "--columns", "0"]) == 0
        assert capsys.readouterr().out == "  a\nabc\n"

    def test_terminal_width(self, stdin, capsys, monkeypatch):
        monkeypatch.setenv("COLUMNS", "8")
        stdin("ab\n")
        assert run(["-a", "r", "-k"]) == 0
        assert capsys.readouterr().out == "      ab\n"

    def test_terminal_width_unavailable(self, stdin, capsys, monkeypatch):
        def fail():
            raise TerminalWidthError("couldn't get terminal width")

        monkeypatch.setattr("align_text._cli.get_terminal_width", fail)
        stdin("ab\n")
        assert run([]) == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "couldn't get terminal width" in captured.err

    def test_not_enough_columns(self, stdin, capsys):
        stdin("0123456789\n")
        assert run(["-a", "c", "-c", "3", "-t"]) == 3
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "not enough columns" in captured.err

    def test_wrap(self, stdin, capsys):
        stdin("0123456789\n")
        assert run(["-c", "3", "-w"]) == 0
        assert capsys.readouterr().out == "012\n345\n678\n9\n"

    def test_empty_input(self, stdin, capsys):
        stdin("")
        assert run(["-a", "center", "-c", "10"]) == 0
        assert capsys.readouterr().out == ""

    def test_env_defaults(self, stdin, capsys, monkeypatch):
        monkeypatch.setenv("ALIGN_TEXT_ALIGN", "right")
        monkeypatch.setenv("ALIGN_TEXT_COLUMNS", "5")
        stdin("ab\n")
        assert run([]) == 0
        assert capsys.readouterr().out == "   ab\n"

    def test_flags_override_env(self, stdin, capsys, monkeypatch):
        monkeypatch.setenv("ALIGN_TEXT_ALIGN", "right")
        monkeypatch.setenv("ALIGN_TEXT_BIAS", "right")
        stdin("ab\n")
        assert run(["-a", "center", "-b", "left", "-c", "5", "-k"]) == 0
        assert capsys.readouterr().out == " ab  \n"

    def test_debug(self, stdin, capsys):
        stdin("ab\n")
        assert run(["--debug", "-a", "c", "-c", "0"]) == 0
        err = capsys.readouterr().err
        assert "==== Settings ====" in err
        assert "outer: center" in err
        assert "columns: (text width)" in err


class TestArgumentErrors:
    """Tests for rejected arguments."""

    def test_align_conflicts_with_outer(self, stdin, capsys):
        stdin("ab\n")
        assert run(["-a", "c", "-o", "l", "-c", "5"]) == 2
        assert "'--align' cannot be used together" in capsys.readouterr().err

    def test_align_conflicts_with_inner(self, stdin, capsys):
        stdin("ab\n")
        assert run(["-a", "c", "-i", "l", "-c", "5"]) == 2

    def test_negative_columns(self, stdin, capsys):
        stdin("ab\n")
        assert run(["-c", "-1"]) == 2
        assert "must not be negative" in capsys.readouterr().err

    def test_invalid_alignment(self, capsys):
        assert run(["-a", "middle"]) == 2
        assert "invalid alignment: 'middle'" in capsys.readouterr().err

    def test_invalid_bias(self, capsys):
        assert run(["-b", "up"]) == 2
        assert "invalid bias" in capsys.readouterr().err
