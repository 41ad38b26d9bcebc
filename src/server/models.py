"""Pydantic models for the decode API."""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from json2sections.config import DEFAULT_CLASS_PREFIX, JSON2SECTIONS_MAX_NESTING_LEVEL
from json2sections.options import DecodingOptions
from json2sections.schemas import Section


class DecodeOptionsModel(BaseModel):
    """Decoding options accepted over HTTP.

    Field names are accepted in snake_case or camelCase
    (``maxNestingLevel``, ``skipDecodingForElements``).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    enable_bold_formatting: bool = True
    enable_italic_formatting: bool = True
    enable_highlighting: bool = True
    enable_quotes: bool = True
    enable_emphasis: bool = True
    max_nesting_level: int = Field(default=JSON2SECTIONS_MAX_NESTING_LEVEL, ge=0, le=64)
    skip_decoding_for_elements: list[str] = Field(default_factory=list)
    custom_class_prefix: str | None = DEFAULT_CLASS_PREFIX
    enable_debug_logging: bool = False
    preserve_line_breaks: bool = True

    @field_validator("skip_decoding_for_elements", mode="before")
    @classmethod
    def normalize_skip_list(cls, v: str | list[str] | None) -> list[str]:
        """Normalize skip lists from comma-separated strings or lists."""
        if not v:
            return []
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        return [str(item).strip() for item in v if str(item).strip()]

    def to_options(self) -> DecodingOptions:
        return DecodingOptions(**self.model_dump())


class DecodeRequest(BaseModel):
    """Request model for the /api/decode endpoint.

    Attributes
    ----------
    payload : Any
        The already-parsed JSON value to decode.
    options : DecodeOptionsModel
        Decoding options.

    """

    payload: Any = Field(..., description="JSON value to decode")
    options: DecodeOptionsModel = Field(default_factory=DecodeOptionsModel)


class DecodeSuccessResponse(BaseModel):
    """Success response model for the /api/decode endpoint.

    Attributes
    ----------
    sections : list[Section]
        Decoded sections in pre-order.
    summary : str
        Section and fragment counts, with a token estimate when available.
    outline : str
        Headings indented by level.
    content : str
        Plain-text rendering of the sections.

    """

    sections: list[Section] = Field(..., description="Decoded sections")
    summary: str = Field(..., description="Decode summary")
    outline: str = Field(..., description="Section outline")
    content: str = Field(..., description="Plain-text content")


class DecodeErrorResponse(BaseModel):
    """Error response model for the /api/decode endpoint.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.

    """

    error: str = Field(..., description="Error message")


DecodeResponse = Union[DecodeSuccessResponse, DecodeErrorResponse]
