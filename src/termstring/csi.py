"""CSI tokenizer following the ECMA-48 byte classes.

A control sequence is ``ESC [``, then any number of parameter bytes
(0x30-0x3f), then any number of intermediate bytes (0x20-0x2f), then a
single final byte (0x40-0x7e).
"""

from __future__ import annotations

from termstring.chars import Csi, is_single_byte
from termstring.graphemes import GraphemeCursor

ESC = "\x1b"
CSI_INTRODUCER = (ESC, "[")


def _byte_class(b: int) -> str:
    if 0x40 <= b <= 0x7E:
        return "final"
    if 0x20 <= b <= 0x2F:
        return "intermediate"
    if 0x30 <= b <= 0x3F:
        return "parameter"
    return "invalid"


def take_csi(cursor: GraphemeCursor) -> Csi | list[str]:
    """Read one control sequence from *cursor*.

    The cursor must be positioned right after the ``ESC [`` introducer.
    Returns the :class:`Csi` when a final byte completes the sequence, or
    the list of graphemes consumed so far (introducer included) when the
    sequence is malformed or the text ends first. The grapheme that broke
    the sequence is part of that list and is never pushed back.
    """
    buffer = list(CSI_INTRODUCER)
    have_intermediate_bytes = False

    while True:
        g = cursor.next()
        if g is None:
            break
        buffer.append(g)
        if not is_single_byte(g):
            break

        kind = _byte_class(ord(g))
        if kind == "final":
            return Csi.from_valid_graphemes(buffer)
        if kind == "intermediate":
            have_intermediate_bytes = True
            continue
        if kind == "parameter" and not have_intermediate_bytes:
            continue
        # Parameter byte after an intermediate byte, or a byte outside the grammar
        break

    return buffer
