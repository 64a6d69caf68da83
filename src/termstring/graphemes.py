"""Forward-only cursor over the extended grapheme clusters of a string."""

from __future__ import annotations

from typing import Iterator

import grapheme


class GraphemeCursor:
    """Pull graphemes one at a time from ``grapheme.graphemes``.

    Holds at most one pushed-back grapheme, which the next call to
    :meth:`next` returns before resuming the underlying iterator.
    """

    def __init__(self, text: str) -> None:
        self._iter: Iterator[str] = iter(grapheme.graphemes(text))
        self._pending: str | None = None

    def next(self) -> str | None:
        """Return the next grapheme, or ``None`` once the text is exhausted."""
        if self._pending is not None:
            g, self._pending = self._pending, None
            return g
        return next(self._iter, None)

    def push_back(self, g: str) -> None:
        if self._pending is not None:
            raise RuntimeError("only one grapheme can be pushed back")
        self._pending = g

    def __iter__(self) -> Iterator[str]:
        while True:
            g = self.next()
            if g is None:
                return
            yield g
