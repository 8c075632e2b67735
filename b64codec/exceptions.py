"""Exception classes for b64codec.

This module defines the error taxonomy raised when Base64 input is rejected.
"""

from __future__ import annotations


class B64CodecError(Exception):
    """Base exception class for all b64codec errors."""

    pass


class DecodeError(B64CodecError, ValueError):
    """Exception raised when a Base64 string cannot be decoded."""

    pass


class InvalidCharacterError(DecodeError):
    """Exception raised when a character outside the Base64 alphabet is found.

    Attributes:
        character: The offending character.
        position: Offset of the character in the input string.
    """

    def __init__(self, character: str, position: int) -> None:
        super().__init__(f"invalid character {character!r} at offset {position}")
        self.character = character
        self.position = position


class IncorrectPaddingError(DecodeError):
    """Exception raised when a padding character appears where it may not.

    Attributes:
        position: Offset of the misplaced character in the input string.
    """

    def __init__(self, position: int, reason: str = "incorrect padding") -> None:
        super().__init__(f"{reason} at offset {position}")
        self.position = position


class InvalidLengthError(DecodeError):
    """Exception raised when the input cannot be split into whole chunks.

    Attributes:
        length: Length of the rejected input.
    """

    def __init__(self, length: int) -> None:
        super().__init__(f"invalid length {length}: not a multiple of 4")
        self.length = length


class TextConversionError(DecodeError):
    """Exception raised when decoded bytes are not valid text."""

    pass
