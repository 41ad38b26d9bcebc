"""Local configuration for json2sections."""

from __future__ import annotations

import os


DEFAULT_MAX_NESTING_LEVEL = 5
DEFAULT_TOKEN_CACHE_SIZE = 256
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_MAX_PAYLOAD_BYTES = 1_000_000
DEFAULT_CLASS_PREFIX = "decoded"

JSON2SECTIONS_MAX_NESTING_LEVEL = int(
    os.getenv("JSON2SECTIONS_MAX_NESTING_LEVEL", str(DEFAULT_MAX_NESTING_LEVEL))
)
# Upper bound on cached token streams; the key embeds the whole cleaned text.
JSON2SECTIONS_TOKEN_CACHE_SIZE = int(
    os.getenv("JSON2SECTIONS_TOKEN_CACHE_SIZE", str(DEFAULT_TOKEN_CACHE_SIZE))
)
JSON2SECTIONS_LOG_LEVEL = os.getenv("JSON2SECTIONS_LOG_LEVEL", DEFAULT_LOG_LEVEL)
JSON2SECTIONS_MAX_PAYLOAD_BYTES = int(
    os.getenv("JSON2SECTIONS_MAX_PAYLOAD_BYTES", str(DEFAULT_MAX_PAYLOAD_BYTES))
)
