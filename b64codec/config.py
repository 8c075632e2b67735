"""Configuration types for b64codec."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TextConfig:
    """Configuration for the string-oriented entry points.

    Attributes:
        charset: Codec used to turn text into bytes and back.
        errors: Codec error handler passed to ``str.encode``/``bytes.decode``.
    """

    charset: str = "utf-8"
    errors: str = "strict"
