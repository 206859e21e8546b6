"""Chord transposition engine.

Every function here is a pure function of its arguments: callers pass the
absolute semitone offset on every call instead of re-transposing earlier
output. Unrecognized tokens are passed through unchanged; there is no
error channel.

Output always uses sharp spelling, so flat chords are canonicalized even
at a shift of zero:

>>> transpose_text("Bb F Gm Eb", 0)
'A# F Gm D#'
"""

from __future__ import annotations

import logging
from dataclasses import replace

from chord_transposer.models import ChordMatch, Song, TransposeRequest, TransposeResult
from chord_transposer.parser import iter_chords, parse_chord_token
from chord_transposer.pitch_class import transpose_note

logger = logging.getLogger(__name__)


def transpose_chord(token: str, semitones: int) -> str:
    """Transpose a single chord token by a number of semitones.

    The root and, independently, the slash bass are shifted. Quality,
    extension and any other suffix characters are kept verbatim.

    Parameters
    ----------
    token : str
        A candidate chord token (e.g., "Gmaj7", "D/F#").
    semitones : int
        Number of semitones to shift (positive = up). Any integer.

    Returns
    -------
    str
        The transposed token, or ``token`` unchanged if its root is not
        recognized.

    Examples
    --------
    >>> transpose_chord("Gmaj7", 2)
    'Amaj7'
    >>> transpose_chord("D/F#", 5)
    'G/B'
    >>> transpose_chord("Hello", 3)
    'Hello'
    """
    chord = parse_chord_token(token)
    if chord is None:
        return token

    try:
        root = transpose_note(chord.root, semitones)
    except ValueError:
        logger.debug("Leaving %r unchanged: unrecognized root %r", token, chord.root)
        return token

    bass = chord.bass
    if bass is not None:
        try:
            bass = transpose_note(bass, semitones)
        except ValueError:
            logger.debug("Keeping unrecognized bass %r in %r", bass, token)

    return str(replace(chord, root=root, bass=bass))


def transpose_text(text: str, semitones: int) -> str:
    """Transpose every word-bounded chord token inside free text.

    All other characters, including line breaks, punctuation and
    whitespace, are copied verbatim.

    Parameters
    ----------
    text : str
        Chord sheet or lyrics with chords.
    semitones : int
        Number of semitones to shift (positive = up). Any integer.

    Returns
    -------
    str
        The transposed text.

    Examples
    --------
    >>> transpose_text("Am G F C", 2)
    'Bm A G D'
    """
    return transpose(TransposeRequest(text=text, semitones=semitones)).text


def transpose(request: TransposeRequest) -> TransposeResult:
    """Transpose a request and report the chords that were recognized.

    Parameters
    ----------
    request : TransposeRequest
        The text and the absolute offset to apply.

    Returns
    -------
    TransposeResult
        The transposed text along with the chord matches found in the
        original text.
    """
    text = request.text
    parts: list[str] = []
    matches: list[ChordMatch] = []
    last = 0

    for match in iter_chords(text):
        parts.append(text[last : match.start])
        parts.append(transpose_chord(match.text, request.semitones))
        matches.append(match)
        last = match.end
    parts.append(text[last:])

    logger.debug("Transposed %d chord(s) by %d semitone(s)", len(matches), request.semitones)
    return TransposeResult(
        text="".join(parts),
        semitones=request.semitones,
        chords=tuple(matches),
    )


def transpose_key(key: str | None, semitones: int) -> str | None:
    """Compute the displayed key for a transposed song.

    Parameters
    ----------
    key : str | None
        The original key label (e.g., "G", "Bm", "D/F#"). Free-form.
    semitones : int
        The current absolute offset.

    Returns
    -------
    str | None
        The transposed key label, or None if the song has no key.

    Examples
    --------
    >>> transpose_key("Bm", 3)
    'Dm'
    >>> transpose_key(None, 3) is None
    True
    """
    if not key:
        return None
    return transpose_chord(key, semitones)


def transpose_song(song: Song, semitones: int) -> Song:
    """Return a copy of ``song`` with key, chords and lyrics transposed."""

    def _body(value: str | None) -> str | None:
        return transpose_text(value, semitones) if value else value

    return replace(
        song,
        musical_key=transpose_key(song.musical_key, semitones) or song.musical_key,
        chords=_body(song.chords),
        lyrics=_body(song.lyrics),
    )
