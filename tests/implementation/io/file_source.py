"""File-backed byte source.

This module provides a reference implementation of IByteSource that reads a
file from disk.
"""

from __future__ import annotations

from pathlib import Path

from b64codec.interfaces.io import IByteSource


class FileByteSource(IByteSource):
    """Byte source yielding the contents of a file.

    Attributes:
        path: The file to read.
        reads: How many times the file has been read.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.reads = 0

    def read(self) -> bytes:
        """Read the whole file.

        Returns:
            The file contents.
        """
        self.reads += 1
        return self.path.read_bytes()
