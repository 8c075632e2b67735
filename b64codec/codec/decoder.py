"""Base64 decoder.

This module validates and decodes standard Base64 strings. Decoding happens in
two phases: the input is split into classified chunks, then every chunk is
matched against the shapes that carry data and turned into one to three bytes.
"""

from __future__ import annotations

import logging

from b64codec.config import TextConfig
from b64codec.exceptions import (
    DecodeError,
    IncorrectPaddingError,
    InvalidCharacterError,
    InvalidLengthError,
    TextConversionError,
)
from b64codec.interfaces.encoding import IDecoder

from .chunk import CHUNK_SIZE, DATA_SHAPES, Chunk, SymbolKind, split

logger = logging.getLogger(__name__)


class Base64Decoder(IDecoder):
    """Strict decoder for standard alphabet, padded Base64.

    Input must consist of whole four-character chunks drawn from the
    standard alphabet. Padding may only fill the last one or two positions of
    the final chunk. Anything else raises a ``DecodeError`` subclass and no
    partial output is returned.

    Attributes:
        config: Text configuration used by ``decode_string``.
    """

    def __init__(self, config: TextConfig | None = None) -> None:
        """Initialize the decoder.

        Args:
            config: Text configuration. Defaults to UTF-8, strict.
        """
        self.config = config or TextConfig()

    def decode_bytes(self, s: str) -> bytes:
        """Decode a Base64 string into bytes.

        Args:
            s: The Base64 string to decode.

        Returns:
            The decoded bytes. Empty input yields empty bytes.

        Raises:
            InvalidCharacterError: If a character is outside the alphabet.
            InvalidLengthError: If the input ends in the middle of a chunk.
            IncorrectPaddingError: If padding is misplaced.
            TypeError: If s is not a str.

        Example:
            >>> Base64Decoder().decode_bytes("SGVsbG8=")
            b'Hello'
        """
        if not isinstance(s, str):
            raise TypeError(f"decode_bytes() expects str, not {type(s).__name__}")

        try:
            return self._decode(s)
        except DecodeError as e:
            logger.debug("rejected base64 input of length %d: %s", len(s), e)
            raise

    def decode_string(self, s: str) -> str:
        """Decode a Base64 string into text using the configured charset.

        Args:
            s: The Base64 string to decode.

        Returns:
            The decoded text.

        Raises:
            DecodeError: If the input is malformed.
            TextConversionError: If the decoded bytes are not valid text.

        Example:
            >>> Base64Decoder().decode_string("8J+MiA==")
            '🌈'
        """
        data = self.decode_bytes(s)
        try:
            return data.decode(self.config.charset, self.config.errors)
        except UnicodeDecodeError as e:
            logger.debug("decoded bytes are not valid %s: %s", self.config.charset, e)
            raise TextConversionError(
                f"decoded bytes are not valid {self.config.charset}: {e.reason} at byte {e.start}"
            ) from e

    def is_valid(self, s: str) -> bool:
        """Check whether a string would decode without error."""
        if not isinstance(s, str):
            return False
        try:
            self._decode(s)
        except DecodeError:
            return False
        return True

    def _decode(self, s: str) -> bytes:
        chunks = split(s)
        output = bytearray()
        last = len(chunks) - 1

        for position, chunk in enumerate(chunks):
            _check_symbols(chunk)
            if len(chunk.symbols) < CHUNK_SIZE:
                raise InvalidLengthError(len(s))
            _check_shape(chunk)
            if chunk.is_padded and position != last:
                raise IncorrectPaddingError(
                    chunk.offset + CHUNK_SIZE - 1, "padding before end of input"
                )
            output += _decode_chunk(chunk)

        return bytes(output)


def _check_symbols(chunk: Chunk) -> None:
    for i, symbol in enumerate(chunk.symbols):
        if symbol.kind is SymbolKind.INVALID:
            raise InvalidCharacterError(symbol.character, chunk.offset + i)
        if symbol.kind is SymbolKind.PADDING and i < 2:
            raise IncorrectPaddingError(chunk.offset + i)


def _check_shape(chunk: Chunk) -> None:
    if chunk.shape in DATA_SHAPES:
        return

    # positions 1 and 2 hold sextets, so padding in 3 is followed by a sextet in 4
    raise IncorrectPaddingError(chunk.offset + 3, "data after padding")


def _decode_chunk(chunk: Chunk) -> bytes:
    count = DATA_SHAPES[chunk.shape]
    a, b, c, d = (symbol.index for symbol in chunk.symbols)

    group = [
        (a << 2) | (b >> 4),
        ((b & 0xF) << 4) | (c >> 2),
        ((c & 0x3) << 6) | d,
    ]
    return bytes(group[:count])
