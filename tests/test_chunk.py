"""Tests for the alphabet table and chunk classification."""

from __future__ import annotations

from b64codec.codec.alphabet import INDEX, PADDING, SYMBOLS, sextet_of
from b64codec.codec.chunk import DATA_SHAPES, SymbolKind, classify, split


def test_alphabet_tables_mirror() -> None:
    """Test that the symbol string and index table are inverses."""
    assert len(SYMBOLS) == 64
    assert len(set(SYMBOLS)) == 64
    assert PADDING not in SYMBOLS

    for index, character in enumerate(SYMBOLS):
        assert INDEX[ord(character)] == index
        assert sextet_of(character) == index

    assert sum(1 for entry in INDEX if entry is not None) == 64


def test_non_members_have_no_sextet() -> None:
    """Test lookups for characters outside the alphabet."""
    for character in ["=", "-", "_", " ", "\n", "\x00", "\x7f", "é", "🌈"]:
        assert sextet_of(character) is None


def test_classify() -> None:
    """Test classification of sextets, padding and invalid characters."""
    assert classify("A").kind is SymbolKind.SEXTET
    assert classify("/").index == 63
    assert classify("=").kind is SymbolKind.PADDING

    symbol = classify("!")
    assert symbol.kind is SymbolKind.INVALID
    assert symbol.character == "!"


def test_split_offsets_and_shapes() -> None:
    """Test splitting into chunks keeps offsets and exposes the shape."""
    chunks = split("SGVsbG8=")

    assert [chunk.offset for chunk in chunks] == [0, 4]
    assert chunks[0].shape == (SymbolKind.SEXTET,) * 4
    assert chunks[1].is_padded
    assert DATA_SHAPES[chunks[1].shape] == 2


def test_split_keeps_truncated_tail() -> None:
    """Test that a short final chunk is returned as is."""
    chunks = split("SGVsbG8")

    assert len(chunks) == 2
    assert len(chunks[1].symbols) == 3
    assert split("") == []
