"""Decode endpoints for the API."""

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from json2sections.output_formatter import format_count
from server.decode_processor import process_decode
from server.models import DecodeErrorResponse, DecodeRequest, DecodeSuccessResponse

router = APIRouter()

COMMON_DECODE_RESPONSES: dict[int | str, dict] = {
    status.HTTP_200_OK: {"model": DecodeSuccessResponse, "description": "Successful decode"},
    status.HTTP_413_REQUEST_ENTITY_TOO_LARGE: {"model": DecodeErrorResponse, "description": "Payload rejected"},
}


@router.post("/api/decode", responses=COMMON_DECODE_RESPONSES)
async def api_decode(decode_request: DecodeRequest) -> JSONResponse:
    """Decode a JSON payload into formatted sections.

    **Parameters**

    - **decode_request** (`DecodeRequest`): payload plus decoding options (snake_case or camelCase)

    **Returns**

    - **JSONResponse**: sections with summary, outline and plain-text content, or an
      error response with status 413 when the payload is rejected
    """
    response = process_decode(decode_request.payload, decode_request.options)
    if isinstance(response, DecodeErrorResponse):
        return JSONResponse(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            content=response.model_dump(),
        )
    return JSONResponse(status_code=status.HTTP_200_OK, content=response.model_dump(mode="json"))


@router.get("/api/format-count")
async def api_format_count(n: float | None = Query(default=None)) -> dict[str, str]:
    """Format a count the way dashboards display it (``1.2K``, ``3.4M``, ``N/A``)."""
    return {"formatted": format_count(n)}
