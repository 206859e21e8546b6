"""Pitch class operations for chord transposition.

This module provides the 12-tone sharp-spelled scale and conversions
between note names and pitch classes (0-11, where C=0). All arithmetic
on pitch classes is modulo 12.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# Pitch class to sharp note name (output always uses sharps)
SHARP_SCALE: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)

# Flat spellings accepted on input, mapped to their sharp equivalent
FLAT_TO_SHARP: Mapping[str, str] = MappingProxyType(
    {
        "Db": "C#",
        "Eb": "D#",
        "Gb": "F#",
        "Ab": "G#",
        "Bb": "A#",
    }
)

NOTE_LETTERS = "ABCDEFG"
ACCIDENTALS = "#b"

NOTE_TO_PC: Mapping[str, int] = MappingProxyType(
    {note: pc for pc, note in enumerate(SHARP_SCALE)}
    | {flat: SHARP_SCALE.index(sharp) for flat, sharp in FLAT_TO_SHARP.items()}
)


def normalize_note(note: str) -> str:
    """Map a flat spelling to its sharp equivalent.

    Other spellings are returned unchanged, whether or not they are
    recognized.

    Examples
    --------
    >>> normalize_note("Bb")
    'A#'
    >>> normalize_note("E")
    'E'
    """
    return FLAT_TO_SHARP.get(note, note)


def note_to_pc(note: str) -> int:
    """Convert a note name to pitch class (0-11).

    Parameters
    ----------
    note : str
        Note name (e.g., "C", "F#", "Bb").

    Returns
    -------
    int
        Pitch class (0-11, where C=0).

    Raises
    ------
    ValueError
        If the note name is not recognized. Only the twelve sharp names and
        the five flats Db, Eb, Gb, Ab, Bb are; Cb, Fb, E# and B# are not.

    Examples
    --------
    >>> note_to_pc("C")
    0
    >>> note_to_pc("F#")
    6
    >>> note_to_pc("Bb")
    10
    """
    if note in NOTE_TO_PC:
        return NOTE_TO_PC[note]
    msg = f"Unknown note: {note}"
    raise ValueError(msg)


def pc_to_note(pc: int) -> str:
    """Convert a pitch class to its sharp-spelled note name.

    Any integer is accepted and reduced modulo 12.

    Examples
    --------
    >>> pc_to_note(10)
    'A#'
    >>> pc_to_note(-1)
    'B'
    """
    return SHARP_SCALE[pc % 12]


def transpose_note(note: str, semitones: int) -> str:
    """Shift a note name by a number of semitones.

    Parameters
    ----------
    note : str
        Note name (e.g., "C", "Eb").
    semitones : int
        Number of semitones to shift (positive = up). Not range-restricted.

    Returns
    -------
    str
        The sharp-spelled note name of the shifted pitch class.

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> transpose_note("C", -1)
    'B'
    >>> transpose_note("Bb", 0)
    'A#'
    >>> transpose_note("B", 25)
    'C'
    """
    # Python's % is always non-negative for a positive modulus
    return pc_to_note(note_to_pc(note) + semitones)
