"""Exceptions raised by termstring."""

from __future__ import annotations


class TermStringError(Exception):
    """Base class for termstring errors."""


class MalformedEscapeSequence(TermStringError, ValueError):
    """An ``ESC [`` introducer was not followed by a valid CSI sequence.

    ``graphemes`` holds the raw graphemes consumed while trying to read the
    sequence, introducer included.
    """

    def __init__(self, graphemes: list[str]) -> None:
        self.graphemes = list(graphemes)
        super().__init__(f"invalid control sequence: {''.join(self.graphemes)!r}")
