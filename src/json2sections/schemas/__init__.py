"""Shared schemas for json2sections."""

from json2sections.schemas.digest import DecodeResult
from json2sections.schemas.sections import (
    Fragment,
    FragmentRole,
    FragmentStyle,
    Section,
    SectionType,
)

__all__ = [
    "DecodeResult",
    "Fragment",
    "FragmentRole",
    "FragmentStyle",
    "Section",
    "SectionType",
]
