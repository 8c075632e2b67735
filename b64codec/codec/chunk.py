"""Chunk classification for the decoder.

Every input character is classified as a sextet, padding, or invalid. Four
consecutive symbols form a chunk, and only three chunk shapes carry data:
four sextets, three sextets and padding, or two sextets and two paddings.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .alphabet import PADDING, sextet_of

CHUNK_SIZE = 4


class SymbolKind(Enum):
    """Classification of a single Base64 character."""

    SEXTET = "sextet"
    PADDING = "padding"
    INVALID = "invalid"


@dataclass(frozen=True)
class Symbol:
    """A classified character.

    Attributes:
        kind: The classification.
        character: The original character.
        index: The 0-63 value, meaningful only for sextets.
    """

    kind: SymbolKind
    character: str
    index: int = 0


@dataclass(frozen=True)
class Chunk:
    """Four classified symbols and the offset of the first one in the input."""

    symbols: tuple[Symbol, ...]
    offset: int

    @property
    def shape(self) -> tuple[SymbolKind, ...]:
        return tuple(symbol.kind for symbol in self.symbols)

    @property
    def is_padded(self) -> bool:
        return self.symbols[-1].kind is SymbolKind.PADDING


_S = SymbolKind.SEXTET
_P = SymbolKind.PADDING

# chunk shape -> number of bytes it decodes to
DATA_SHAPES: dict[tuple[SymbolKind, ...], int] = {
    (_S, _S, _S, _S): 3,
    (_S, _S, _S, _P): 2,
    (_S, _S, _P, _P): 1,
}


def classify(character: str) -> Symbol:
    """Classify one input character."""
    if character == PADDING:
        return Symbol(SymbolKind.PADDING, character)

    index = sextet_of(character)
    if index is None:
        return Symbol(SymbolKind.INVALID, character)

    return Symbol(SymbolKind.SEXTET, character, index)


def split(s: str) -> list[Chunk]:
    """Split input into classified chunks.

    The final chunk holds fewer than four symbols when the input length is not
    a multiple of four; callers decide how to report that.
    """
    return [
        Chunk(tuple(classify(character) for character in s[offset : offset + CHUNK_SIZE]), offset)
        for offset in range(0, len(s), CHUNK_SIZE)
    ]
