"""CLI entry point for termstring. Uses Click for argument parsing."""

from __future__ import annotations

import logging

import click

from termstring.errors import MalformedEscapeSequence
from termstring.layout import align_columns
from termstring.settings import load_settings
from termstring.term_string import TermString


def _lines(stream):
    """Yield lines from *stream* without their trailing newline."""
    for line in stream:
        yield line.rstrip("\r\n")


def _parse_line(line: str, lineno: int, strict: bool) -> TermString:
    try:
        return TermString.from_text(line, strict=strict)
    except MalformedEscapeSequence as e:
        raise click.ClickException(f"line {lineno}: {e}") from e


def _strict_option(f):
    return click.option(
        "--strict/--lenient",
        default=lambda: load_settings().strict,
        help="Fail on malformed control sequences instead of keeping them as text.",
    )(f)


@click.group(invoke_without_command=True)
@click.option("-v", "--verbose", is_flag=True, help="Log parser decisions to stderr.")
@click.pass_context
def main(ctx, verbose):
    """Measure, truncate and pad text containing ANSI escape sequences."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command()
@_strict_option
def width(strict):
    """Print the visible width of each line read from stdin."""
    for lineno, line in enumerate(_lines(click.get_text_stream("stdin")), start=1):
        click.echo(_parse_line(line, lineno, strict).visible_width())


@main.command()
@click.argument("columns", type=click.IntRange(min=0))
@_strict_option
def truncate(columns, strict):
    """Truncate each stdin line to COLUMNS visible characters."""
    for lineno, line in enumerate(_lines(click.get_text_stream("stdin")), start=1):
        click.echo(_parse_line(line, lineno, strict).truncated(columns))


@main.command()
@click.argument("columns", type=click.IntRange(min=0))
@click.option("--char", "pad_char", default=lambda: load_settings().pad_char, help="Padding character.")
@_strict_option
def pad(columns, pad_char, strict):
    """Left-pad and truncate each stdin line to COLUMNS visible characters."""
    if len(pad_char) != 1:
        raise click.BadParameter("must be a single character", param_hint="--char")
    for lineno, line in enumerate(_lines(click.get_text_stream("stdin")), start=1):
        click.echo(_parse_line(line, lineno, strict).pad_left_and_truncate(columns, pad_char))


@main.command()
@click.option("--separator", default="  ", show_default=True, help="Text between columns.")
@click.option(
    "--right",
    "right_columns",
    type=click.IntRange(min=1),
    multiple=True,
    help="1-based column number to right-align. May be repeated.",
)
def columns(separator, right_columns):
    """Align tab-separated rows read from stdin."""
    rows = [line.split("\t") for line in _lines(click.get_text_stream("stdin"))]
    n_cols = max((len(row) for row in rows), default=0)
    align = ["right" if i + 1 in right_columns else "left" for i in range(n_cols)]
    pad_char = load_settings().pad_char
    for line in align_columns(rows, align=align, pad_char=pad_char, separator=separator):
        click.echo(line)


if __name__ == "__main__":
    main()
