"""Detect and recover JSON documents serialized inside string values."""

from __future__ import annotations

import json
import re
from typing import Any

from json2sections.exceptions import EmbeddedJSONError

_ESCAPED_KEY_RE = re.compile(r'\\"[^"\\]+\\"\s*:\s*[\[{]')


def looks_like_nested_json(text: str) -> bool:
    """Check if a string value is probably a serialized JSON document."""
    trimmed = text.strip()
    if not trimmed:
        return False
    wrapped = (trimmed[0] == "{" and trimmed[-1] == "}") or (
        trimmed[0] == "[" and trimmed[-1] == "]"
    )
    return (
        wrapped
        or '\\"' in trimmed
        or '{"' in trimmed
        or '["' in trimmed
        or bool(_ESCAPED_KEY_RE.search(trimmed))
    )


def parse_embedded_json(text: str) -> Any:
    """Parse a string holding serialized JSON, tolerating one level of escaping.

    Args:
        text: Candidate string, usually flagged by ``looks_like_nested_json``.

    Returns:
        The decoded JSON value.

    Raises:
        EmbeddedJSONError: If neither the raw nor the unescaped text parses.
    """
    trimmed = text.strip()
    try:
        return json.loads(trimmed)
    except (ValueError, RecursionError):
        pass

    unescaped = trimmed.replace('\\"', '"').replace("\\'", "'").replace("\\\\", "\\")
    try:
        return json.loads(unescaped)
    except (ValueError, RecursionError) as exc:
        raise EmbeddedJSONError(f"Not a JSON document: {exc}") from exc
