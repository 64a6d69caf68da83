"""Classified units of a terminal string.

Every grapheme of a parsed string ends up in exactly one of three units:

* :class:`Csi` -- a complete control sequence (``ESC [`` ... final byte),
  either a style (SGR) sequence or any other CSI such as cursor movement.
* :class:`Invisible` -- a single control byte that renders nothing.
* :class:`Visible` -- a grapheme occupying one column.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

CsiKind = Literal["sgr", "other"]

TAB = "\t"
LF = "\n"
CR = "\r"


@dataclass(frozen=True)
class Csi:
    """A recognized control sequence, introducer and final byte included."""

    kind: CsiKind
    tokens: tuple[str, ...]

    @classmethod
    def from_valid_graphemes(cls, graphemes: list[str]) -> Csi:
        kind: CsiKind = "sgr" if graphemes[-1] == "m" else "other"
        return cls(kind, tuple(graphemes))

    @property
    def is_sgr(self) -> bool:
        return self.kind == "sgr"

    @property
    def text(self) -> str:
        return "".join(self.tokens)


@dataclass(frozen=True)
class Invisible:
    text: str


@dataclass(frozen=True)
class Visible:
    text: str


TermChar = Union[Csi, Invisible, Visible]


def is_single_byte(g: str) -> bool:
    """Return ``True`` if *g* encodes to exactly one UTF-8 byte."""
    return len(g) == 1 and ord(g) < 0x80


def classify(g: str) -> Invisible | Visible:
    """Classify one grapheme that is not part of an escape sequence.

    Graphemes longer than one byte are treated as a single column. Single
    bytes are visible when printable ASCII (0x20-0x7e) or TAB/LF/CR, and
    invisible otherwise.
    """
    if not is_single_byte(g):
        return Visible(g)
    if g in (TAB, LF, CR) or 0x20 <= ord(g) <= 0x7E:
        return Visible(g)
    return Invisible(g)
