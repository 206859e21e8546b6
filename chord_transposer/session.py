"""Semitone offset state for an interactive transposer control.

The engine in ``chord_transposer.transposer`` is stateless. A control that
lets a musician step the key up and down keeps a single integer offset and
hands the *absolute* offset to the engine on every change, always
starting again from the original text.

Examples
--------
>>> session = TransposeSession(original_key="G", chords="G D Em C")
>>> session.up()
>>> session.up()
>>> session.current_key, session.offset_label
('A', '+2')
>>> session.transposed_chords
'A E F#m D'
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from chord_transposer.config import TransposerConfig
from chord_transposer.transposer import transpose_key, transpose_text

logger = logging.getLogger(__name__)

TransposeCallback = Callable[[str, int], None]


class TransposeSession:
    """Running semitone offset for one song on screen.

    Parameters
    ----------
    original_key : str | None
        The song's key label as stored (e.g., "G", "Bm").
    chords : str | None
        The chord or lyric body to transpose.
    on_transpose : TransposeCallback | None
        Called with ``(text, semitones)`` whenever the offset changes and
        the session has a body.
    config : TransposerConfig | None
        Settings; ``max_offset`` bounds the offset.
    """

    def __init__(
        self,
        original_key: str | None = None,
        chords: str | None = None,
        on_transpose: TransposeCallback | None = None,
        config: TransposerConfig | None = None,
    ) -> None:
        self.original_key = original_key
        self.chords = chords
        self.on_transpose = on_transpose
        self.config = config or TransposerConfig()
        self._semitones = 0

    @property
    def semitones(self) -> int:
        """The absolute offset from the original key."""
        return self._semitones

    @property
    def current_key(self) -> str | None:
        """The key label at the current offset, or None without a key."""
        return transpose_key(self.original_key, self._semitones)

    @property
    def transposed_chords(self) -> str | None:
        """The body at the current offset, or None without a body."""
        if not self.chords:
            return None
        return transpose_text(self.chords, self._semitones)

    @property
    def offset_label(self) -> str:
        """The offset as shown on the control ("+2", "0", "-1")."""
        if self._semitones > 0:
            return f"+{self._semitones}"
        return str(self._semitones)

    @property
    def can_reset(self) -> bool:
        """Whether the offset differs from the original key."""
        return self._semitones != 0

    def step(self, direction: int) -> None:
        """Move the offset by ``direction`` semitones and notify."""
        semitones = self.config.clamp(self._semitones + direction)
        logger.debug("Offset %d -> %d", self._semitones, semitones)
        self._semitones = semitones

        if self.chords and self.on_transpose is not None:
            self.on_transpose(transpose_text(self.chords, semitones), semitones)

    def up(self) -> None:
        """Raise the key by one semitone."""
        self.step(1)

    def down(self) -> None:
        """Lower the key by one semitone."""
        self.step(-1)

    def reset(self) -> None:
        """Return to the original key.

        The callback receives the original body untouched, not a
        sharp-canonicalized copy.
        """
        logger.debug("Offset %d -> 0 (reset)", self._semitones)
        self._semitones = 0
        if self.chords and self.on_transpose is not None:
            self.on_transpose(self.chords, 0)
