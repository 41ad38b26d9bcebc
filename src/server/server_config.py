"""Server configuration."""

from __future__ import annotations

from json2sections.config import JSON2SECTIONS_MAX_PAYLOAD_BYTES

MAX_PAYLOAD_BYTES = JSON2SECTIONS_MAX_PAYLOAD_BYTES
MAX_DISPLAY_SIZE = 300_000
