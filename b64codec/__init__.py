"""b64codec: a strict RFC 4648 Base64 codec.

This package converts binary data and text to and from standard Base64
(alphabet ``A-Za-z0-9+/``, ``=`` padding, no line wrapping). Decoding validates
untrusted input and rejects anything that is not canonically structured.

Main Components:
    - encode_bytes / encode_string: Encoding entry points
    - decode_bytes / decode_string: Decoding entry points
    - Base64Encoder / Base64Decoder: The classes behind them
    - Exceptions: The decode error taxonomy

Example:
    >>> from b64codec import decode_bytes, encode_bytes
    >>> encode_bytes(b"Hello")
    'SGVsbG8='
    >>> decode_bytes("SGVsbG8=")
    b'Hello'
"""

from b64codec.codec import Base64Decoder, Base64Encoder
from b64codec.config import TextConfig
from b64codec.exceptions import (
    B64CodecError,
    DecodeError,
    IncorrectPaddingError,
    InvalidCharacterError,
    InvalidLengthError,
    TextConversionError,
)
from b64codec.interfaces import IByteSource

__version__ = "0.1.0"

_encoder = Base64Encoder()
_decoder = Base64Decoder()

encode_bytes = _encoder.encode_bytes
encode_string = _encoder.encode_string
encode_source = _encoder.encode_source
decode_bytes = _decoder.decode_bytes
decode_string = _decoder.decode_string
is_valid = _decoder.is_valid

__all__ = [
    # Operations
    "encode_bytes",
    "encode_string",
    "encode_source",
    "decode_bytes",
    "decode_string",
    "is_valid",
    # Codec classes
    "Base64Encoder",
    "Base64Decoder",
    "IByteSource",
    # Configuration
    "TextConfig",
    # Exceptions
    "B64CodecError",
    "DecodeError",
    "InvalidCharacterError",
    "IncorrectPaddingError",
    "InvalidLengthError",
    "TextConversionError",
]
