"""Base64 encoder.

This module maps byte sequences (and text) to standard Base64 strings.
"""

from __future__ import annotations

from b64codec.config import TextConfig
from b64codec.interfaces.encoding import IEncoder
from b64codec.interfaces.io import IByteSource

from .alphabet import PADDING, SYMBOLS


class Base64Encoder(IEncoder):
    """Standard alphabet, padded Base64 encoder.

    Input is consumed in groups of three bytes. Each full group becomes four
    symbols; a trailing group of two bytes becomes three symbols and one
    ``=``, and a trailing single byte becomes two symbols and ``==``.

    Attributes:
        config: Text configuration used by ``encode_string``.
    """

    def __init__(self, config: TextConfig | None = None) -> None:
        """Initialize the encoder.

        Args:
            config: Text configuration. Defaults to UTF-8, strict.
        """
        self.config = config or TextConfig()

    def encode_bytes(self, data: bytes) -> str:
        """Encode a byte sequence.

        Args:
            data: The bytes to encode. Any bytes-like object is accepted.

        Returns:
            The Base64 string, whose length is a multiple of four.

        Raises:
            TypeError: If data is a str or not bytes-like.

        Example:
            >>> Base64Encoder().encode_bytes(b"Hello")
            'SGVsbG8='
        """
        if isinstance(data, str):
            raise TypeError("encode_bytes() expects bytes, not str; use encode_string()")
        data = memoryview(data).cast("B")

        symbols: list[str] = []
        full = len(data) - len(data) % 3

        for i in range(0, full, 3):
            b1, b2, b3 = data[i], data[i + 1], data[i + 2]
            symbols.append(SYMBOLS[b1 >> 2])
            symbols.append(SYMBOLS[((b1 & 0x3) << 4) | (b2 >> 4)])
            symbols.append(SYMBOLS[((b2 & 0xF) << 2) | (b3 >> 6)])
            symbols.append(SYMBOLS[b3 & 0x3F])

        remainder = len(data) - full
        if remainder == 2:
            b1, b2 = data[full], data[full + 1]
            symbols.append(SYMBOLS[b1 >> 2])
            symbols.append(SYMBOLS[((b1 & 0x3) << 4) | (b2 >> 4)])
            symbols.append(SYMBOLS[(b2 & 0xF) << 2])
            symbols.append(PADDING)
        elif remainder == 1:
            b1 = data[full]
            symbols.append(SYMBOLS[b1 >> 2])
            symbols.append(SYMBOLS[(b1 & 0x3) << 4])
            symbols.append(PADDING * 2)

        return "".join(symbols)

    def encode_string(self, text: str) -> str:
        """Encode text after converting it to bytes with the configured charset.

        Args:
            text: The text to encode.

        Returns:
            The Base64 string.

        Raises:
            TypeError: If text is not a str.

        Example:
            >>> Base64Encoder().encode_string("🌈")
            '8J+MiA=='
        """
        if not isinstance(text, str):
            raise TypeError(f"encode_string() expects str, not {type(text).__name__}")
        return self.encode_bytes(text.encode(self.config.charset, self.config.errors))

    def encode_source(self, source: IByteSource) -> str:
        """Encode the full contents of a byte source.

        Args:
            source: The source to read from.

        Returns:
            The Base64 string.
        """
        return self.encode_bytes(source.read())
