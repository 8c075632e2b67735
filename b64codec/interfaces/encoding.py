"""Encoding interfaces for b64codec.

This module defines protocols for Base64 encoders and decoders.
"""

from __future__ import annotations

from typing import Protocol

from .io import IByteSource


class IEncoder(Protocol):
    """Interface for Base64 encoding operations."""

    def encode_bytes(self, data: bytes) -> str:
        """Encode a byte sequence.

        Args:
            data: The bytes to encode.

        Returns:
            The Base64 string.
        """
        ...

    def encode_string(self, text: str) -> str:
        """Encode text after converting it to bytes.

        Args:
            text: The text to encode.

        Returns:
            The Base64 string.
        """
        ...

    def encode_source(self, source: IByteSource) -> str:
        """Encode everything a byte source yields.

        Args:
            source: The source to read from.

        Returns:
            The Base64 string.
        """
        ...


class IDecoder(Protocol):
    """Interface for Base64 decoding operations."""

    def decode_bytes(self, s: str) -> bytes:
        """Decode a Base64 string into bytes.

        Args:
            s: The Base64 string to decode.

        Returns:
            The decoded bytes.

        Raises:
            DecodeError: When the input is malformed.
        """
        ...

    def decode_string(self, s: str) -> str:
        """Decode a Base64 string into text.

        Args:
            s: The Base64 string to decode.

        Returns:
            The decoded text.

        Raises:
            DecodeError: When the input is malformed or is not valid text.
        """
        ...

    def is_valid(self, s: str) -> bool:
        """Check whether a string would decode into bytes without error.

        Args:
            s: The Base64 string to check.

        Returns:
            True if decoding would succeed.
        """
        ...
