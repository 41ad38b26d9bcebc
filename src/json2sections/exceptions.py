"""Custom exceptions for json2sections."""


class Json2SectionsError(Exception):
    """Base exception for json2sections operations."""


class ParseError(Json2SectionsError):
    """Error during content parsing."""


class EmbeddedJSONError(ParseError):
    """String value looked like serialized JSON but could not be parsed."""


class PayloadError(Json2SectionsError):
    """Payload rejected before decoding (too large or not JSON)."""
