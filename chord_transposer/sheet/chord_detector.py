"""Chord detection and line classification for chord sheets.

Detection uses a case-sensitive regex pre-filter followed by pychord
validation, so that only lines made of real chords get transposed in
sheet mode.
"""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import replace

from chord_transposer.parser import parse_chord_token
from chord_transposer.sheet.models import LineType, Token, TokenKind
from chord_transposer.sheet.tokenizer import tokenize_line

MAX_CHORD_LENGTH = 15
CHORD_LINE_THRESHOLD = 0.6

# Matches: root (A-G), optional accidental (b/#), optional quality, optional slash bass
CHORD_RE = re.compile(
    r"^[A-G][b#]?"  # Root note with optional accidental
    r"(?:"
    r"m7-5|m7b5|"  # half-diminished
    r"mM7|mmaj7|"  # minor-major seventh
    r"m(?:aj)?(?:7|9|11|13)?|"  # minor variants: m, maj, maj7, m7, m9, etc.
    r"M(?:aj)?(?:7|9|11|13)?|"  # major variants: M, Maj, Maj7, M7, etc.
    r"dim7?|"  # diminished
    r"aug7?|"  # augmented
    r"sus[24]?7?|"  # suspended
    r"add[29]|"  # added tones
    r"11|13|"  # upper extensions
    r"[5679]"  # extensions and power chord
    r")*"
    r"(?:/[A-G][b#]?)?$"  # Optional slash bass
)

SECTION_HEADER_RE = re.compile(r"^\s*\[.+?\]\s*$")
COMMENT_RE = re.compile(r"^\s*\(.+?\)\s*$")

# Repeat counts (x2, 2x, (x3), ×4), no-chord marks and the one-bar repeat sign
MARKER_RE = re.compile(r"^(?:\(?(?:[xX×]\d+|\d+[xX×])\)?|N\.?C\.?|%)$")

# Layout tokens that do not count toward the chord ratio of a line
UNSCORED_KINDS = frozenset({"punct", "marker"})


def validate_chord(text: str) -> bool:
    """Check that pychord accepts ``text`` as a chord."""
    from pychord import Chord as PyChord

    try:
        PyChord(text)
    except ValueError:
        return False
    return True


def is_chord(text: str) -> bool:
    """Check if text is a chord.

    Lowercase words never match because the pre-filter is case-sensitive.

    Parameters
    ----------
    text : str
        The text to check.

    Returns
    -------
    bool
        True if the text is a valid chord, False otherwise.

    Examples
    --------
    >>> is_chord("Gm7")
    True
    >>> is_chord("am")
    False
    >>> is_chord("C/E")
    True
    """
    if not text or len(text) > MAX_CHORD_LENGTH:
        return False

    if not CHORD_RE.match(text):
        return False

    return validate_chord(text)


def token_kind(text: str) -> TokenKind:
    """Decide what a chord-sheet token is.

    Markers and punctuation are layout, not content: they never make a
    line a lyric line.

    Examples
    --------
    >>> [token_kind(t) for t in ["D/F#", "x2", "N.C.", "|", "Lord", "4"]]
    ['chord', 'marker', 'marker', 'punct', 'word', 'other']
    """
    if is_chord(text):
        return "chord"
    if MARKER_RE.match(text):
        return "marker"
    if not any(c.isalnum() for c in text):
        return "punct"
    if any(c.isalpha() for c in text):
        return "word"
    return "other"


def classify_token(token: Token) -> Token:
    """Return a copy of ``token`` with its kind set, and its chord if it is one."""
    kind = token_kind(token.text)
    chord = parse_chord_token(token.text) if kind == "chord" else None
    return replace(token, kind=kind, chord=chord)


def classify_tokens(tokens: list[Token]) -> list[Token]:
    return [classify_token(t) for t in tokens]


def chord_ratio(tokens: list[Token]) -> float:
    """Share of chords among the tokens that carry content.

    Punctuation and markers are left out, so bar lines and repeat counts
    do not dilute a chord chart. Returns 0.0 when nothing is scored.
    """
    kinds = Counter(t.kind for t in tokens)
    scored = sum(n for kind, n in kinds.items() if kind not in UNSCORED_KINDS)
    if scored == 0:
        return 0.0
    return kinds["chord"] / scored


def classify_line(line: str, tokens: list[Token] | None = None) -> LineType:
    """Classify a chord-sheet line.

    Parameters
    ----------
    line : str
        The line to classify, without its line ending.
    tokens : list[Token] | None
        Pre-classified tokens, or None to classify internally.

    Returns
    -------
    LineType
        The line classification.

    Examples
    --------
    >>> classify_line("[Chorus]")
    'section_header'
    >>> classify_line("| G | D/F# | Em | x2")
    'chord'
    >>> classify_line("A song for you")
    'lyric'
    """
    if not line.strip():
        return "empty"
    if SECTION_HEADER_RE.match(line):
        return "section_header"
    if COMMENT_RE.match(line):
        return "comment"

    if tokens is None:
        tokens = classify_tokens(tokenize_line(line))

    # A single lyric word makes the whole line a lyric line
    if any(t.kind == "word" for t in tokens):
        return "lyric"
    if chord_ratio(tokens) >= CHORD_LINE_THRESHOLD:
        return "chord"
    return "lyric"
