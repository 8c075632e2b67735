"""I/O implementations for b64codec testing."""

from .file_source import FileByteSource

__all__ = [
    "FileByteSource",
]
