"""Chord sheet transposition.

This module transposes plain-text chord sheets line by line: chord lines
are detected and rewritten with their chords kept in column, while lyric
lines stay untouched.
"""

from chord_transposer.sheet.chord_detector import (
    classify_line,
    classify_token,
    classify_tokens,
    is_chord,
    token_kind,
)
from chord_transposer.sheet.models import LineType, Token, TokenKind
from chord_transposer.sheet.tokenizer import tokenize_line
from chord_transposer.sheet.transpose import transpose_line, transpose_sheet

__all__ = [
    "LineType",
    "Token",
    "TokenKind",
    "classify_line",
    "classify_token",
    "classify_tokens",
    "is_chord",
    "token_kind",
    "tokenize_line",
    "transpose_line",
    "transpose_sheet",
]
