"""Blob helpers for b64codec testing.

This package provides reproducible binary payloads for round-trip tests.
"""

from .payload import make_payload

__all__ = [
    "make_payload",
]
