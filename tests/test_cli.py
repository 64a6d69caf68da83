"""Tests for the termstring command line."""

from __future__ import annotations

from click.testing import CliRunner

from termstring.cli import main

COLORED = "\x1b[31mabc\x1b[0m"


def _run(args: list[str], input: str, env: dict[str, str] | None = None):
    runner = CliRunner()
    # color=True keeps click.echo from stripping the escape sequences under test
    return runner.invoke(main, args, input=input, env=env, color=True)


class TestWidth:
    def test_prints_width_per_line(self) -> None:
        result = _run(["width"], f"{COLORED}\nxy\n")
        assert result.exit_code == 0
        assert result.output == "3\n2\n"

    def test_strict_failure_names_line(self) -> None:
        result = _run(["width", "--strict"], "ok\n\x1b[1 2m\n")
        assert result.exit_code == 1
        assert "line 2" in result.output

    def test_lenient_by_default(self) -> None:
        result = _run(["width"], "\x1b[\n")
        assert result.exit_code == 0
        assert result.output == "1\n"

    def test_strict_from_environment(self) -> None:
        result = _run(["width"], "\x1b[\n", env={"TERMSTRING_STRICT": "1"})
        assert result.exit_code == 1

    def test_lenient_flag_overrides_environment(self) -> None:
        result = _run(["width", "--lenient"], "\x1b[\n", env={"TERMSTRING_STRICT": "1"})
        assert result.exit_code == 0


class TestTruncate:
    def test_keeps_styles(self) -> None:
        result = _run(["truncate", "2"], f"{COLORED}\nxyz\n")
        assert result.exit_code == 0
        assert result.output == "\x1b[31mab\nxy\n"

    def test_rejects_negative_width(self) -> None:
        result = _run(["truncate", "--", "-1"], "abc\n")
        assert result.exit_code != 0


class TestPad:
    def test_pads_with_char(self) -> None:
        result = _run(["pad", "5", "--char", "."], "ab\n")
        assert result.exit_code == 0
        assert result.output == "...ab\n"

    def test_pad_char_from_environment(self) -> None:
        result = _run(["pad", "3"], "a\n", env={"TERMSTRING_PAD_CHAR": "0"})
        assert result.output == "00a\n"

    def test_rejects_long_pad_char(self) -> None:
        result = _run(["pad", "5", "--char", "ab"], "ab\n")
        assert result.exit_code == 2


class TestColumns:
    def test_aligns_tab_separated_rows(self) -> None:
        result = _run(["columns", "--right", "2"], "a\tbb\nccc\td\n")
        assert result.exit_code == 0
        assert result.output == "a    bb\nccc   d\n"

    def test_custom_separator(self) -> None:
        result = _run(["columns", "--separator", "|"], "a\tb\n")
        assert result.output == "a|b\n"


class TestGroup:
    def test_no_subcommand_prints_help(self) -> None:
        result = _run([], "")
        assert result.exit_code == 0
        assert "width" in result.output
        assert "truncate" in result.output
