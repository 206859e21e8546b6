"""Tests for chord sheet chord detection and line classification."""

import pytest

from chord_transposer.sheet.chord_detector import (
    classify_line,
    classify_token,
    classify_tokens,
    is_chord,
    token_kind,
)
from chord_transposer.sheet.models import Token


class TestIsChord:
    """Test chord detection."""

    @pytest.mark.parametrize(
        "text",
        [
            "C",
            "G",
            "Am",
            "Em",
            "Bb",
            "F#",
            "Gm7",
            "Cmaj7",
            "Bdim",
            "Faug",
            "Dsus4",
            "Asus2",
            "C/E",
            "G/B",
            "D/F#",
            "F#m",
            "Bbm7",
        ],
    )
    def test_valid_chords(self, text: str) -> None:
        assert is_chord(text) is True

    @pytest.mark.parametrize(
        "text",
        ["Hello", "Do", "Every", "the", "a", "am", "be", "I", "x2", "|", "(repeat)"],
    )
    def test_non_chords(self, text: str) -> None:
        assert is_chord(text) is False

    def test_empty_string(self) -> None:
        assert is_chord("") is False

    def test_long_string(self) -> None:
        """Test that very long strings are rejected quickly."""
        assert is_chord("A" * 20) is False


class TestClassifyToken:
    """Test single token classification."""

    def test_chord_token(self) -> None:
        token = classify_token(Token(text="Gm7", start=0, end=3, kind="other"))
        assert token.kind == "chord"
        assert token.chord is not None
        assert token.chord.root == "G"
        assert token.chord.quality == "m"
        assert token.chord.extension == "7"

    def test_word_token(self) -> None:
        token = classify_token(Token(text="Hello", start=0, end=5, kind="other"))
        assert token.kind == "word"
        assert token.chord is None

    def test_punct_token(self) -> None:
        token = classify_token(Token(text="|", start=0, end=1, kind="other"))
        assert token.kind == "punct"

    def test_other_token(self) -> None:
        token = classify_token(Token(text="2", start=0, end=1, kind="other"))
        assert token.kind == "other"

    def test_classify_tokens_keeps_order(self) -> None:
        tokens = [
            Token(text="Gm", start=0, end=2, kind="other"),
            Token(text="Hello", start=3, end=8, kind="other"),
        ]
        assert [t.kind for t in classify_tokens(tokens)] == ["chord", "word"]


class TestClassifyLine:
    """Test line classification."""

    def test_empty_line(self) -> None:
        assert classify_line("") == "empty"
        assert classify_line("   ") == "empty"

    def test_section_header(self) -> None:
        assert classify_line("[Verse 1]") == "section_header"
        assert classify_line("  [Chorus]  ") == "section_header"

    def test_comment_line(self) -> None:
        assert classify_line("(repeat 2x)") == "comment"

    @pytest.mark.parametrize(
        "line",
        ["Gm C F Gm", "Am  G  F  C", "G   D/F#   Em", "| G  D | Em  C |"],
    )
    def test_chord_line(self, line: str) -> None:
        assert classify_line(line) == "chord"

    @pytest.mark.parametrize(
        "line",
        ["Hello world", "A song for you", "Am I the one", "Be still my soul"],
    )
    def test_lyric_line(self, line: str) -> None:
        assert classify_line(line) == "lyric"

    def test_below_chord_ratio_is_lyric(self) -> None:
        """Test that a line below the chord ratio threshold is not a chord line."""
        assert classify_line("G 1 2 3") == "lyric"

    @pytest.mark.parametrize(
        "line",
        [
            "| G | D | C |",
            "|G|D|Em|C|",
            "|: G  D :|",
            "G  C  D  x2",
            "G  C  D  (x2)",
            "Em  D  ×3",
            "G  N.C.  D",
            "| G | % | C |",
            "G - - -",
        ],
    )
    def test_bars_and_markers_do_not_dilute_chords(self, line: str) -> None:
        assert classify_line(line) == "chord"

    def test_word_makes_lyric(self) -> None:
        assert classify_line("G  C  D  again") == "lyric"

    def test_only_layout_tokens_is_lyric(self) -> None:
        assert classify_line("| x2 |") == "lyric"


class TestTokenKind:
    """Test kinds of chord-sheet tokens."""

    @pytest.mark.parametrize("text", ["x2", "X4", "2x", "(x3)", "×2", "N.C.", "NC", "%"])
    def test_markers(self, text: str) -> None:
        assert token_kind(text) == "marker"

    @pytest.mark.parametrize("text", ["|", "||", "|:", ":|", "-", "/"])
    def test_punct(self, text: str) -> None:
        assert token_kind(text) == "punct"

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("D/F#", "chord"), ("Hello", "word"), ("x", "word"), ("2", "other")],
    )
    def test_other_kinds(self, text: str, expected: str) -> None:
        assert token_kind(text) == expected
