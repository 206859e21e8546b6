"""Chord transposer for chord sheets and song keys.

This library shifts the chords inside free text by a number of semitones,
keeping everything else verbatim. Output always uses sharp spelling.

Examples
--------
>>> from chord_transposer import transpose_chord, transpose_text, transpose_key

>>> transpose_text("Am G F C", 2)
'Bm A G D'
>>> transpose_chord("D/F#", 5)
'G/B'
>>> transpose_key("Bb", 0)
'A#'

>>> # Chord sheets: only chord lines are touched
>>> from chord_transposer.sheet import transpose_sheet
>>> transpose_sheet("G     C\\nA love so true\\n", 2)
'A     D\\nA love so true\\n'
"""

from chord_transposer.config import TransposerConfig
from chord_transposer.models import (
    ChordMatch,
    ChordToken,
    Song,
    TransposeRequest,
    TransposeResult,
)
from chord_transposer.parser import find_chords, parse_chord_token
from chord_transposer.session import TransposeSession
from chord_transposer.transposer import (
    transpose,
    transpose_chord,
    transpose_key,
    transpose_song,
    transpose_text,
)

__all__ = [
    "ChordMatch",
    "ChordToken",
    "Song",
    "TransposeRequest",
    "TransposeResult",
    "TransposeSession",
    "TransposerConfig",
    "find_chords",
    "parse_chord_token",
    "transpose",
    "transpose_chord",
    "transpose_key",
    "transpose_song",
    "transpose_text",
]
