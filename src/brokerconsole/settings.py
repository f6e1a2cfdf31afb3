"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Map transform settings and explicit env loading.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .errors import SettingsError
from .messaging.types import BODY_PREFIX, CUSTOM_PREFIX, HEADER_PREFIX

# Largest value a signed 32-bit length can hold.
INT32_MAX = 2**31 - 1

BYTES_RENDERINGS = ("text", "base64", "length")


@dataclass(frozen=True, slots=True)
class FilterSettings:
    """
    Explicit settings used by the map transform filter.

    Attributes:
        header_prefix: Prefix for standard header keys.
        custom_prefix: Prefix for application property keys.
        body_prefix: Prefix for payload keys.
        bytes_chunk_size: Maximum bytes covered by one ``JMSBytes:<n>`` entry.
        bytes_rendering: How chunk content is rendered: ``text``, ``base64``
            or ``length``.
    """

    header_prefix: str = HEADER_PREFIX
    custom_prefix: str = CUSTOM_PREFIX
    body_prefix: str = BODY_PREFIX
    bytes_chunk_size: int = INT32_MAX
    bytes_rendering: str = "text"

    def __post_init__(self) -> None:
        if self.bytes_chunk_size < 1:
            raise SettingsError(
                f"bytes_chunk_size must be >= 1, got {self.bytes_chunk_size}"
            )
        if self.bytes_rendering not in BYTES_RENDERINGS:
            raise SettingsError(
                f"Unknown bytes_rendering '{self.bytes_rendering}', "
                f"expected one of {', '.join(BYTES_RENDERINGS)}"
            )

    @staticmethod
    def from_env() -> "FilterSettings":
        """Load settings from ``BROKERCONSOLE_*`` environment variables."""
        raw_chunk = os.getenv("BROKERCONSOLE_BYTES_CHUNK_SIZE", str(INT32_MAX))
        try:
            chunk_size = int(raw_chunk)
        except ValueError as exc:
            raise SettingsError(
                f"BROKERCONSOLE_BYTES_CHUNK_SIZE must be an integer, got {raw_chunk!r}"
            ) from exc

        return FilterSettings(
            header_prefix=os.getenv("BROKERCONSOLE_HEADER_PREFIX", HEADER_PREFIX),
            custom_prefix=os.getenv("BROKERCONSOLE_CUSTOM_PREFIX", CUSTOM_PREFIX),
            body_prefix=os.getenv("BROKERCONSOLE_BODY_PREFIX", BODY_PREFIX),
            bytes_chunk_size=chunk_size,
            bytes_rendering=os.getenv("BROKERCONSOLE_BYTES_RENDERING", "text")
            .strip()
            .lower(),
        )
