"""I/O interfaces for b64codec.

This module defines protocols for the byte sources callers hand to the encoder.
"""

from __future__ import annotations

from typing import Protocol


class IByteSource(Protocol):
    """Interface for a source of raw bytes, such as file contents."""

    def read(self) -> bytes:
        """Read the full contents of the source.

        Returns:
            The raw bytes.
        """
        ...
