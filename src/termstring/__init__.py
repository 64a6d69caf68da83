"""termstring: width-aware handling of text containing ANSI escape sequences."""

# Classified units
from termstring.chars import Csi, CsiKind, Invisible, TermChar, Visible, classify

# CSI tokenizer
from termstring.csi import take_csi

# Errors
from termstring.errors import MalformedEscapeSequence, TermStringError

# Grapheme source
from termstring.graphemes import GraphemeCursor

# Layout helpers
from termstring.layout import Align, align_columns, fit_column

# Settings
from termstring.settings import Settings, load_settings

# Parsing and width operations
from termstring.term_string import TermString, pad_left, parse, truncate, visible_width

__all__ = [
    # Units
    "Csi",
    "CsiKind",
    "Invisible",
    "TermChar",
    "Visible",
    "classify",
    # Tokenizer
    "take_csi",
    # Errors
    "MalformedEscapeSequence",
    "TermStringError",
    # Grapheme source
    "GraphemeCursor",
    # Layout
    "Align",
    "align_columns",
    "fit_column",
    # Settings
    "Settings",
    "load_settings",
    # TermString
    "TermString",
    "pad_left",
    "parse",
    "truncate",
    "visible_width",
]
