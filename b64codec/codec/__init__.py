"""Base64 codec package.

This package provides the alphabet table, the encoder, and the decoder with
its chunk classification.
"""

from .decoder import Base64Decoder
from .encoder import Base64Encoder

__all__ = [
    "Base64Decoder",
    "Base64Encoder",
]
