"""Column alignment for tables whose cells may carry ANSI styling."""

from __future__ import annotations

from typing import Literal, Sequence

from termstring.term_string import TermString

Align = Literal["left", "right"]


def _render(cell: TermString, width: int, align: Align, pad_char: str) -> str:
    if cell.visible_width() > width:
        return cell.truncated(width)
    # Cell fits: keep its trailing reset so styling does not leak into the padding
    padding = pad_char * (width - cell.visible_width())
    if align == "right":
        return padding + cell.rendered()
    return cell.rendered() + padding


def fit_column(text: str, width: int, align: Align = "left", pad_char: str = " ") -> str:
    """Pad or truncate a single cell to exactly *width* visible columns."""
    if len(pad_char) != 1:
        raise ValueError(f"pad_char must be a single character, got {pad_char!r}")
    return _render(TermString.from_text(text, strict=False), max(0, width), align, pad_char)


def align_columns(
    rows: Sequence[Sequence[str]],
    align: Sequence[Align] | None = None,
    pad_char: str = " ",
    separator: str = "  ",
) -> list[str]:
    """Render *rows* as aligned lines.

    Each column is as wide as its widest cell. Columns default to left
    alignment; *align* may list a per-column alignment, missing entries
    fall back to ``"left"``. Short rows are filled with empty cells.
    """
    if len(pad_char) != 1:
        raise ValueError(f"pad_char must be a single character, got {pad_char!r}")

    parsed = [[TermString.from_text(cell, strict=False) for cell in row] for row in rows]
    n_cols = max((len(row) for row in parsed), default=0)
    empty = TermString([])

    widths = [0] * n_cols
    for row in parsed:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], cell.visible_width())

    aligns: list[Align] = list(align or [])[:n_cols]
    aligns.extend(["left"] * (n_cols - len(aligns)))

    lines: list[str] = []
    for row in parsed:
        cells = list(row) + [empty] * (n_cols - len(row))
        rendered = [
            _render(cell, widths[i], aligns[i], pad_char)
            for i, cell in enumerate(cells)
        ]
        lines.append(separator.join(rendered))
    return lines
