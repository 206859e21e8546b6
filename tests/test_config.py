"""Tests for transposer configuration."""

import json
from pathlib import Path

import pytest

from chord_transposer.config import TransposerConfig


class TestDefaults:
    def test_defaults(self) -> None:
        config = TransposerConfig()
        assert config.max_offset is None
        assert config.sheet_mode is False
        assert config.keep_columns is True


class TestValidation:
    """Test value validation."""

    def test_negative_max_offset(self) -> None:
        with pytest.raises(ValueError, match="must not be negative"):
            TransposerConfig(max_offset=-1)

    @pytest.mark.parametrize("value", ["12", 1.5, True])
    def test_non_integer_max_offset(self, value: object) -> None:
        with pytest.raises(ValueError, match="must be an integer"):
            TransposerConfig(max_offset=value)  # type: ignore[arg-type]

    def test_unknown_key(self) -> None:
        with pytest.raises(ValueError, match="Unknown config key"):
            TransposerConfig.from_dict({"max_ofset": 3})


class TestClamp:
    @pytest.mark.parametrize(
        ("semitones", "expected"),
        [(-20, -12), (-12, -12), (0, 0), (7, 7), (13, 12)],
    )
    def test_clamp(self, semitones: int, expected: int) -> None:
        assert TransposerConfig(max_offset=12).clamp(semitones) == expected

    def test_zero_bound(self) -> None:
        assert TransposerConfig(max_offset=0).clamp(5) == 0


class TestLoadSave:
    """Test JSON persistence of settings."""

    def test_round_trip(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        config = TransposerConfig(max_offset=6, sheet_mode=True, keep_columns=False)
        config.save(path)
        assert TransposerConfig.load(path) == config

    def test_partial_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"sheet_mode": True}))
        config = TransposerConfig.load(path)
        assert config.sheet_mode is True
        assert config.max_offset is None

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with pytest.raises(ValueError, match="Invalid config file"):
            TransposerConfig.load(path)

    def test_not_an_object(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")
        with pytest.raises(ValueError, match="expected a JSON object"):
            TransposerConfig.load(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            TransposerConfig.load(tmp_path / "missing.json")
