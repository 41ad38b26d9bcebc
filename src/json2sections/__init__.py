"""json2sections: decode semi-structured JSON payloads into formatted sections."""

from json2sections.cache_utils import TokenCache
from json2sections.cleaning import clean_text
from json2sections.decoder import JSONDecoder, decode, decode_raw_content
from json2sections.exceptions import (
    EmbeddedJSONError,
    Json2SectionsError,
    ParseError,
    PayloadError,
)
from json2sections.options import DecodingOptions
from json2sections.output_formatter import format_count, format_sections
from json2sections.schemas import (
    DecodeResult,
    Fragment,
    FragmentRole,
    FragmentStyle,
    Section,
    SectionType,
)

__all__ = [
    "DecodeResult",
    "DecodingOptions",
    "EmbeddedJSONError",
    "Fragment",
    "FragmentRole",
    "FragmentStyle",
    "JSONDecoder",
    "Json2SectionsError",
    "ParseError",
    "PayloadError",
    "Section",
    "SectionType",
    "TokenCache",
    "clean_text",
    "decode",
    "decode_raw_content",
    "format_count",
    "format_sections",
]
