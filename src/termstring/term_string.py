"""Parsed terminal strings: visible width, truncation and padding.

A :class:`TermString` is built once from text that may contain ANSI escape
sequences. Style (SGR) sequences survive truncation, other control
sequences and control bytes are dropped from the rendered output, and only
visible graphemes count towards the width.
"""

from __future__ import annotations

import logging

from termstring.chars import Csi, TermChar, Visible, classify
from termstring.csi import ESC, take_csi
from termstring.errors import MalformedEscapeSequence
from termstring.graphemes import GraphemeCursor

logger = logging.getLogger(__name__)


def _scan(text: str, strict: bool) -> list[TermChar]:
    characters: list[TermChar] = []
    cursor = GraphemeCursor(text)

    while True:
        g = cursor.next()
        if g is None:
            break

        if g != ESC:
            characters.append(classify(g))
            continue

        peeked = cursor.next()
        if peeked != "[":
            # Lone ESC is dropped; whatever followed it is scanned normally.
            logger.debug("Dropping ESC not followed by '['")
            if peeked is not None:
                cursor.push_back(peeked)
            continue

        result = take_csi(cursor)
        if isinstance(result, Csi):
            characters.append(result)
            continue

        if strict:
            raise MalformedEscapeSequence(result)
        logger.debug("Keeping malformed control sequence as text: %r", "".join(result))
        characters.extend(classify(raw) for raw in result)

    return characters


class TermString:
    """An immutable, classified view of a string containing ANSI escapes."""

    __slots__ = ("_characters", "_visible_chars_count")

    def __init__(self, characters: list[TermChar]) -> None:
        self._characters: tuple[TermChar, ...] = tuple(characters)
        count = 0
        for c in self._characters:
            if isinstance(c, Visible):
                count += 1
        self._visible_chars_count = count

    @classmethod
    def from_text(cls, text: str, strict: bool = True) -> TermString:
        """Parse *text*, raising :class:`MalformedEscapeSequence` in strict mode.

        In lenient mode a malformed sequence is kept as its literal
        characters, so this never raises.
        """
        return cls(_scan(text, strict))

    @property
    def characters(self) -> tuple[TermChar, ...]:
        return self._characters

    def visible_width(self) -> int:
        """Number of graphemes that occupy a column."""
        return self._visible_chars_count

    def truncated(self, width: int) -> str:
        """Render at most *width* visible graphemes.

        SGR sequences are always emitted; other control sequences and
        invisible bytes are dropped. Rendering stops right after the
        *width*-th visible grapheme, so style sequences that come later are
        not included.
        """
        parts: list[str] = []
        count = 0

        for c in self._characters:
            if isinstance(c, Visible):
                # Only reachable for width <= 0
                if count >= width:
                    break
                parts.append(c.text)
                count += 1
                if count == width:
                    break
            elif isinstance(c, Csi) and c.is_sgr:
                parts.append(c.text)

        return "".join(parts)

    def pad_left_and_truncate(self, width: int, pad_char: str = " ") -> str:
        """Left-pad with *pad_char* up to *width* visible columns, truncating if longer."""
        return _padding(self, width, pad_char) + self.truncated(width)

    def pad_right_and_truncate(self, width: int, pad_char: str = " ") -> str:
        """Like :meth:`pad_left_and_truncate` with the padding after the text."""
        return self.truncated(width) + _padding(self, width, pad_char)

    def rendered(self) -> str:
        """Visible text and SGR sequences, trailing ones included."""
        return "".join(
            c.text
            for c in self._characters
            if isinstance(c, Visible) or (isinstance(c, Csi) and c.is_sgr)
        )

    def plain(self) -> str:
        """Return only the visible text, without any escapes or control bytes."""
        return "".join(c.text for c in self._characters if isinstance(c, Visible))

    def __str__(self) -> str:
        return "".join(c.text for c in self._characters)

    def __repr__(self) -> str:
        return f"TermString({str(self)!r}, visible_width={self._visible_chars_count})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TermString):
            return NotImplemented
        return self._characters == other._characters

    def __hash__(self) -> int:
        return hash(self._characters)


def _padding(term: TermString, width: int, pad_char: str) -> str:
    if len(pad_char) != 1:
        raise ValueError(f"pad_char must be a single character, got {pad_char!r}")
    return pad_char * max(0, width - term.visible_width())


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def parse(text: str, strict: bool = False) -> TermString | None:
    """Parse *text* into a :class:`TermString`.

    Returns ``None`` only when *strict* is set and *text* contains an
    invalid control sequence.
    """
    try:
        return TermString.from_text(text, strict=strict)
    except MalformedEscapeSequence as e:
        logger.debug("Rejecting input in strict mode: %s", e)
        return None


def visible_width(text: str) -> int:
    """Visible width of *text*, parsed leniently."""
    return TermString.from_text(text, strict=False).visible_width()


def truncate(text: str, width: int) -> str:
    """Truncate *text* to *width* visible graphemes, keeping style sequences."""
    return TermString.from_text(text, strict=False).truncated(width)


def pad_left(text: str, width: int, pad_char: str = " ") -> str:
    """Left-pad and truncate *text* to exactly *width* visible graphemes."""
    return TermString.from_text(text, strict=False).pad_left_and_truncate(width, pad_char)
