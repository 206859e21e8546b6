"""Value types for chord transposition.

All types are frozen dataclasses. Transposition constructs and discards
them; nothing is shared between calls.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ChordToken:
    """A chord token decomposed into its parts.

    Parameters
    ----------
    root : str
        The root note as spelled in the input (e.g., "C", "F#", "Bb").
    quality : str
        The quality keyword ("", "m", "maj", "dim", "aug", "sus" or "add").
    extension : str
        A single extension digit, or "".
    rest : str
        Unclassified characters between the extension and the slash bass.
    bass : str | None
        The slash-bass root, if the token has one.
    tail : str
        Characters after the slash bass.

    Examples
    --------
    >>> token = ChordToken(root="G", quality="maj", extension="7")
    >>> str(token)
    'Gmaj7'
    >>> ChordToken(root="A", quality="m", bass="G").suffix
    '/G'
    """

    root: str
    quality: str = ""
    extension: str = ""
    rest: str = ""
    bass: str | None = None
    tail: str = ""

    @property
    def suffix(self) -> str:
        """Everything after the extension, including the slash bass."""
        if self.bass is None:
            return self.rest
        return f"{self.rest}/{self.bass}{self.tail}"

    def __str__(self) -> str:
        """Reassemble the token text."""
        return f"{self.root}{self.quality}{self.extension}{self.suffix}"


@dataclass(frozen=True)
class ChordMatch:
    """A chord token found inside free text.

    Parameters
    ----------
    text : str
        The matched substring.
    start : int
        Inclusive start offset in the scanned text.
    end : int
        Exclusive end offset in the scanned text.
    chord : ChordToken
        The decomposed token.
    """

    text: str
    start: int
    end: int
    chord: ChordToken


@dataclass(frozen=True)
class TransposeRequest:
    """Text to transpose and the absolute semitone offset.

    The offset is not range-restricted; any integer is valid.
    """

    text: str
    semitones: int = 0


@dataclass(frozen=True)
class TransposeResult:
    """Outcome of a transposition.

    Parameters
    ----------
    text : str
        The transposed text.
    semitones : int
        The offset that was applied.
    chords : tuple[ChordMatch, ...]
        Chord tokens recognized in the input, in order of appearance.
    """

    text: str
    semitones: int
    chords: tuple[ChordMatch, ...] = ()


@dataclass(frozen=True)
class Song:
    """A song record as shown to the team.

    Only the fields relevant to playing the song are kept; where the record
    comes from is up to the caller.
    """

    title: str
    artist: str = ""
    musical_key: str | None = None
    bpm: int | None = None
    category: str = ""
    chords: str | None = None
    lyrics: str | None = None
