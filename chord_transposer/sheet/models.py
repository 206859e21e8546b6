"""Data models for chord sheet transposition."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from chord_transposer.models import ChordToken


TokenKind = Literal["chord", "word", "punct", "marker", "other"]

LineType = Literal["chord", "lyric", "empty", "comment", "section_header"]


@dataclass(frozen=True)
class Token:
    """A token with column span information.

    Parameters
    ----------
    text : str
        The token text content.
    start : int
        Inclusive start column (0-indexed).
    end : int
        Exclusive end column.
    kind : TokenKind
        The token classification.
    chord : ChordToken | None
        Decomposed chord if kind is "chord", None otherwise.

    Examples
    --------
    >>> token = Token(text="Gm7", start=0, end=3, kind="chord")
    >>> token.start, token.end
    (0, 3)
    """

    text: str
    start: int
    end: int
    kind: TokenKind
    chord: ChordToken | None = None
