"""Process a decode request by validating the payload and formatting sections."""

from __future__ import annotations

import json
from typing import Any

from json2sections.decoder import JSONDecoder
from json2sections.exceptions import PayloadError
from json2sections.output_formatter import format_sections
from json2sections.utils.logging_config import get_logger
from server.models import DecodeErrorResponse, DecodeOptionsModel, DecodeResponse, DecodeSuccessResponse
from server.server_config import MAX_DISPLAY_SIZE, MAX_PAYLOAD_BYTES

# Initialize logger for this module
logger = get_logger(__name__)


def check_payload_size(payload: Any, limit: int | None = None) -> int:
    """Return the serialized payload size, rejecting payloads over ``limit``.

    Raises
    ------
    PayloadError
        If the payload cannot be serialized or is larger than ``limit`` bytes.

    """
    try:
        size = len(json.dumps(payload, ensure_ascii=False).encode("utf-8"))
    except (TypeError, ValueError) as exc:
        raise PayloadError(f"Payload is not JSON serializable: {exc}") from exc
    limit = MAX_PAYLOAD_BYTES if limit is None else limit
    if size > limit:
        raise PayloadError(f"Payload of {size} bytes exceeds the {limit} byte limit")
    return size


def process_decode(payload: Any, options: DecodeOptionsModel | None = None) -> DecodeResponse:
    """Decode a payload and return sections with a plain-text digest."""
    options = options or DecodeOptionsModel()
    try:
        size = check_payload_size(payload)
    except PayloadError as exc:
        logger.warning("Rejected payload", extra={"error": str(exc)})
        return DecodeErrorResponse(error=str(exc))

    decoding_options = options.to_options()
    decoding_options.logger = logger
    sections = JSONDecoder(decoding_options).decode(payload)
    result = format_sections(sections)

    content = result.content
    if len(content) > MAX_DISPLAY_SIZE:
        content = (
            f"(Content cropped to {int(MAX_DISPLAY_SIZE / 1_000)}k characters)\n" + content[:MAX_DISPLAY_SIZE]
        )

    logger.info(
        "Decoded payload",
        extra={
            "payload_bytes": size,
            "sections": len(sections),
            "max_nesting_level": decoding_options.max_nesting_level,
        },
    )
    return DecodeSuccessResponse(
        sections=sections,
        summary=result.summary,
        outline=result.outline,
        content=content,
    )
