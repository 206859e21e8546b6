"""Configuration for the transposer session and command line.

Settings live in a small JSON file. Loading rejects unknown keys so typos
do not silently fall back to defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransposerConfig:
    """Transposer settings.

    Parameters
    ----------
    max_offset : int | None
        Bound applied by ``TransposeSession`` to the semitone offset, in
        both directions. None leaves the offset unbounded. The engine
        itself never clamps.
    sheet_mode : bool
        Transpose chord lines only (see ``chord_transposer.sheet``).
    keep_columns : bool
        In sheet mode, keep each chord at its original column.
    """

    max_offset: int | None = None
    sheet_mode: bool = False
    keep_columns: bool = True

    def __post_init__(self) -> None:
        if self.max_offset is not None:
            if isinstance(self.max_offset, bool) or not isinstance(self.max_offset, int):
                msg = f"max_offset must be an integer or None, got {self.max_offset!r}"
                raise ValueError(msg)
            if self.max_offset < 0:
                msg = f"max_offset must not be negative, got {self.max_offset}"
                raise ValueError(msg)

    def clamp(self, semitones: int) -> int:
        """Bound an offset to ``[-max_offset, max_offset]``.

        Examples
        --------
        >>> TransposerConfig(max_offset=12).clamp(-15)
        -12
        >>> TransposerConfig().clamp(40)
        40
        """
        if self.max_offset is None:
            return semitones
        return max(-self.max_offset, min(self.max_offset, semitones))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TransposerConfig:
        """Build a config from a mapping, rejecting unknown keys.

        Raises
        ------
        ValueError
            If ``data`` has unknown keys or invalid values.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            msg = f"Unknown config key(s): {', '.join(unknown)}"
            raise ValueError(msg)
        return cls(**data)

    @classmethod
    def load(cls, path: str | Path) -> TransposerConfig:
        """Load a config from a JSON file.

        Raises
        ------
        OSError
            If the file cannot be read.
        ValueError
            If the file is not a JSON object or holds invalid settings.
        """
        path = Path(path)
        with open(path, encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                msg = f"Invalid config file {path}: {e}"
                raise ValueError(msg) from e

        if not isinstance(data, dict):
            msg = f"Invalid config file {path}: expected a JSON object"
            raise ValueError(msg)

        logger.debug("Loaded config from %s", path)
        return cls.from_dict(data)

    def save(self, path: str | Path) -> None:
        """Save the config to a JSON file."""
        with open(path, "w", encoding="utf-8") as f:
            json.dump(asdict(self), f, indent=2)
