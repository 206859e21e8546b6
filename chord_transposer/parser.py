"""Explicit chord grammar for transposition.

Chords are recognized with small character-class checks instead of one
large regular expression:

    <Root> <Quality?> <Digit?> [ "/" <Root> ]

where ``Root`` is a letter ``A``-``G`` with an optional ``#`` or ``b``
and ``Quality`` is one of the keywords in ``QUALITIES``. Every step is
bounded, so scanning is linear in the length of the text.
"""

from __future__ import annotations

from collections.abc import Iterator

from chord_transposer.models import ChordMatch, ChordToken
from chord_transposer.pitch_class import ACCIDENTALS, NOTE_LETTERS

# Longest keyword first so "maj" wins over "m"
QUALITIES: tuple[str, ...] = ("maj", "dim", "aug", "sus", "add", "m")

# Characters that glue a letter to its neighbours ("F#", "D'you")
JOINERS = "#'’"


def read_root(text: str, pos: int) -> int:
    """Read a root note starting at ``pos``.

    Parameters
    ----------
    text : str
        The text to read from.
    pos : int
        Offset of the candidate root letter.

    Returns
    -------
    int
        Offset just past the root (and its accidental), or -1 if there is
        no root at ``pos``.

    Examples
    --------
    >>> read_root("Bbm", 0)
    2
    >>> read_root("Hm", 0)
    -1
    """
    if pos >= len(text) or text[pos] not in NOTE_LETTERS:
        return -1
    end = pos + 1
    if end < len(text) and text[end] in ACCIDENTALS:
        end += 1
    return end


def read_qualities(text: str, pos: int) -> list[str]:
    """Return the quality keywords present at ``pos``, longest first."""
    return [q for q in QUALITIES if text.startswith(q, pos)]


def find_bass(rest: str) -> tuple[str, str | None, str]:
    """Split a chord suffix around its first slash bass.

    Returns
    -------
    tuple[str, str | None, str]
        The text before the slash, the bass root (or None) and the text
        after the bass.

    Examples
    --------
    >>> find_bass("b5/G")
    ('b5', 'G', '')
    >>> find_bass("sus4")
    ('sus4', None, '')
    """
    slash = rest.find("/")
    while slash != -1:
        end = read_root(rest, slash + 1)
        if end != -1:
            return rest[:slash], rest[slash + 1 : end], rest[end:]
        slash = rest.find("/", slash + 1)
    return rest, None, ""


def parse_chord_token(token: str) -> ChordToken | None:
    """Decompose a single token into root, quality, extension and suffix.

    Anything after the optional extension digit is accepted as suffix, so
    this never rejects a token that starts with a root note.

    Parameters
    ----------
    token : str
        The candidate chord token (e.g., "Gmaj7", "D/F#", "Am7b5/G").

    Returns
    -------
    ChordToken | None
        The decomposed token, or None if it does not start with a root.

    Examples
    --------
    >>> parse_chord_token("Gmaj7")
    ChordToken(root='G', quality='maj', extension='7', rest='', bass=None, tail='')
    >>> parse_chord_token("Hello") is None
    True
    """
    pos = read_root(token, 0)
    if pos == -1:
        return None
    root = token[:pos]

    qualities = read_qualities(token, pos)
    quality = qualities[0] if qualities else ""
    pos += len(quality)

    extension = ""
    if pos < len(token) and token[pos].isdigit():
        extension = token[pos]
        pos += 1

    rest, bass, tail = find_bass(token[pos:])
    return ChordToken(
        root=root,
        quality=quality,
        extension=extension,
        rest=rest,
        bass=bass,
        tail=tail,
    )


def is_word_char(ch: str) -> bool:
    """Check if a character continues a word (Unicode letters and digits)."""
    return ch.isalnum() or ch == "_"


def _is_joined(ch: str) -> bool:
    return is_word_char(ch) or ch in JOINERS


def _bounded_before(text: str, pos: int) -> bool:
    return pos == 0 or not _is_joined(text[pos - 1])


def _bounded_after(text: str, pos: int) -> bool:
    return pos == len(text) or not _is_joined(text[pos])


def _readings(text: str, pos: int) -> Iterator[tuple[str, str, str | None, int]]:
    """Yield (quality, extension, bass, end) readings after a root, longest first."""
    for quality in [*read_qualities(text, pos), ""]:
        after_quality = pos + len(quality)
        digit_ends = [after_quality]
        if after_quality < len(text) and text[after_quality].isdigit():
            digit_ends.insert(0, after_quality + 1)
        for digit_end in digit_ends:
            extension = text[after_quality:digit_end]
            if digit_end < len(text) and text[digit_end] == "/":
                bass_end = read_root(text, digit_end + 1)
                if bass_end != -1:
                    yield quality, extension, text[digit_end + 1 : bass_end], bass_end
            yield quality, extension, None, digit_end


def match_chord_at(text: str, pos: int) -> ChordMatch | None:
    """Match a word-bounded chord token starting at ``pos``.

    The longest reading whose end is a word boundary wins.

    Parameters
    ----------
    text : str
        The text being scanned.
    pos : int
        Offset of the candidate root letter.

    Returns
    -------
    ChordMatch | None
        The match, or None if no bounded reading exists.

    Examples
    --------
    >>> match_chord_at("Am G", 0).text
    'Am'
    >>> match_chord_at("Do it", 0) is None
    True
    """
    if not _bounded_before(text, pos):
        return None
    root_end = read_root(text, pos)
    if root_end == -1:
        return None

    for quality, extension, bass, end in _readings(text, root_end):
        if _bounded_after(text, end):
            chord = ChordToken(
                root=text[pos:root_end],
                quality=quality,
                extension=extension,
                bass=bass,
            )
            return ChordMatch(text=text[pos:end], start=pos, end=end, chord=chord)
    return None


def iter_chords(text: str) -> Iterator[ChordMatch]:
    """Scan free text for word-bounded chord tokens.

    Parameters
    ----------
    text : str
        Arbitrary text such as a chord sheet or lyrics with chords.

    Yields
    ------
    ChordMatch
        Non-overlapping matches in order of appearance.

    Examples
    --------
    >>> [m.text for m in iter_chords("Am G F C")]
    ['Am', 'G', 'F', 'C']
    >>> [m.text for m in iter_chords("Do you feel it? D/F#")]
    ['D/F#']
    """
    i = 0
    n = len(text)
    while i < n:
        if text[i] in NOTE_LETTERS:
            match = match_chord_at(text, i)
            if match is not None:
                yield match
                i = match.end
                continue
        i += 1


def find_chords(text: str) -> list[ChordMatch]:
    """Return all word-bounded chord tokens in ``text``."""
    return list(iter_chords(text))
