"""Digest output model."""

from __future__ import annotations

from pydantic import BaseModel


class DecodeResult(BaseModel):
    """Plain-text digest of a decoded payload."""

    summary: str
    outline: str
    content: str
