"""The standard Base64 alphabet (RFC 4648 section 4).

``SYMBOLS`` maps a sextet (0-63) to its character; ``INDEX`` is its mirror,
indexed by code point, holding ``None`` for characters outside the alphabet.
"""

from __future__ import annotations

from typing import Optional

SYMBOLS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
PADDING = "="

INDEX: tuple[Optional[int], ...] = tuple(
    SYMBOLS.find(chr(code)) if chr(code) in SYMBOLS else None for code in range(128)
)


def sextet_of(character: str) -> Optional[int]:
    """Look up the sextet carried by a character.

    Args:
        character: A single character.

    Returns:
        The 0-63 index, or None if the character is not an alphabet symbol.
    """
    code = ord(character)
    if code >= len(INDEX):
        return None
    return INDEX[code]
