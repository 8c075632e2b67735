"""b64codec interfaces package.

This package provides protocol definitions for encoders, decoders and byte
sources.
"""

from .encoding import IDecoder, IEncoder
from .io import IByteSource

__all__ = [
    # encoding
    "IDecoder",
    "IEncoder",
    # io
    "IByteSource",
]
