"""Chord-sheet aware transposition.

Chord sheets place chords on their own line above the lyric they belong
to. Only chord lines are transposed here, so lyric words that happen to
look like chords ("A", "Am", "Be") are left alone.
"""

from __future__ import annotations

import logging

from chord_transposer.sheet.chord_detector import classify_line, classify_tokens
from chord_transposer.sheet.tokenizer import tokenize_line
from chord_transposer.transposer import transpose_chord

logger = logging.getLogger(__name__)


def split_line_ending(line: str) -> tuple[str, str]:
    """Split a line into its body and its line ending.

    Examples
    --------
    >>> split_line_ending("G  D\\r\\n")
    ('G  D', '\\r\\n')
    """
    body = line.rstrip("\r\n")
    return body, line[len(body) :]


def transpose_line(line: str, semitones: int, keep_columns: bool = True) -> str:
    """Transpose every chord token of a chord line.

    Non-chord tokens such as bar lines or "x2" are kept verbatim, and
    tokens glued together (``|G|``) stay glued.

    Parameters
    ----------
    line : str
        A chord line, without its line ending.
    semitones : int
        Number of semitones to shift (positive = up).
    keep_columns : bool
        Keep each token at its original start column. A token that no
        longer fits is placed one space after the previous one. When
        False, the original gaps are copied as they are.

    Returns
    -------
    str
        The transposed line.

    Examples
    --------
    >>> transpose_line("C    G/B  Am", 1)
    'C#   G#/C A#m'
    >>> transpose_line("C    G/B  Am", 1, keep_columns=False)
    'C#    G#/C  A#m'
    >>> transpose_line("|G|D/F#|", 2)
    '|A|E/G#|'
    """
    tokens = classify_tokens(tokenize_line(line))
    out = ""
    last = 0

    for token in tokens:
        text = transpose_chord(token.text, semitones) if token.kind == "chord" else token.text
        if not keep_columns:
            out += line[last : token.start]
        elif len(out) < token.start:
            # Pad over the shrunken previous chord, then copy the original gap
            gap_start = max(len(out), last)
            out = out.ljust(gap_start) + line[gap_start : token.start]
        elif token.start > last:
            out += " "
        out += text
        last = token.end

    return out + line[last:]


def transpose_sheet(text: str, semitones: int, keep_columns: bool = True) -> str:
    """Transpose the chord lines of a chord sheet.

    Lyric, comment, section header and empty lines are copied verbatim,
    and line endings are preserved.

    Parameters
    ----------
    text : str
        The chord sheet.
    semitones : int
        Number of semitones to shift (positive = up).
    keep_columns : bool
        See ``transpose_line``.

    Returns
    -------
    str
        The transposed sheet.

    Examples
    --------
    >>> transpose_sheet("[Verse]\\nG       C\\nA song for you\\n", 2)
    '[Verse]\\nA       D\\nA song for you\\n'
    """
    lines: list[str] = []
    chord_lines = 0

    for raw in text.splitlines(keepends=True):
        body, ending = split_line_ending(raw)
        if classify_line(body) == "chord":
            body = transpose_line(body, semitones, keep_columns=keep_columns)
            chord_lines += 1
        lines.append(body + ending)

    logger.debug("Transposed %d chord line(s) by %d semitone(s)", chord_lines, semitones)
    return "".join(lines)
