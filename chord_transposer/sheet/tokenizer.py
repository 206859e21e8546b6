"""Column-aware tokenizer for chord sheets.

Chord lines are monospace layouts: the column where a chord starts tells
the singer which syllable it belongs to, so tokens keep their spans.
Bar lines are split off as tokens of their own, so a compact chart such
as ``|G |D/F# |Em |`` yields the chords without their bar marks.
"""

import re

from chord_transposer.sheet.models import Token

# Bar line with optional repeat colons, other non-space run, or a lone colon
TOKEN_RE = re.compile(r":?\|+:?|[^\s|:]+|:")


def tokenize_line(line: str) -> list[Token]:
    """Tokenize a line preserving column spans.

    Parameters
    ----------
    line : str
        The line to tokenize, without its line ending.

    Returns
    -------
    list[Token]
        Tokens with kind "other" (classification happens later).

    Examples
    --------
    >>> [(t.text, t.start, t.end) for t in tokenize_line("Gm     C")]
    [('Gm', 0, 2), ('C', 7, 8)]
    >>> [t.text for t in tokenize_line("|:G|D:|")]
    ['|:', 'G', '|', 'D', ':|']
    """
    return [
        Token(text=m.group(), start=m.start(), end=m.end(), kind="other")
        for m in TOKEN_RE.finditer(line)
    ]
