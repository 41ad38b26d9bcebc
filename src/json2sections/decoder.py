"""Walk arbitrary decoded JSON values and flatten them into sections."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Set
from typing import Any, Sequence

from json2sections.assembler import assemble_sections
from json2sections.cache_utils import TokenCache
from json2sections.cleaning import clean_text
from json2sections.embedded_json import looks_like_nested_json, parse_embedded_json
from json2sections.exceptions import EmbeddedJSONError
from json2sections.heuristics import classify_text, format_key, section_type_for
from json2sections.options import DecodingOptions
from json2sections.schemas import Fragment, FragmentStyle, Section
from json2sections.tokenizer import tokenize

logger = logging.getLogger(__name__)

DEEP_NESTED_HEADING = "Deep Nested Content"
EMPTY_ARRAY_HEADING = "Empty Array"
EMPTY_OBJECT_HEADING = "Empty Object"
NO_DATA_TEXT = "No data available"
UNDECODABLE_HEADING = "Undecodable Content"
VALUE_HEADING = "Value"


class JSONDecoder:
    """Recursive decoder from JSON-like values to a flat, pre-ordered section list.

    One instance may be reused across calls; the only state it keeps is the
    token cache, which is lock-protected.
    """

    def __init__(self, options: DecodingOptions | None = None, *, cache: TokenCache | None = None) -> None:
        self.options = options or DecodingOptions()
        self.cache = cache if cache is not None else TokenCache()
        self._logger = self.options.logger or logger

    def decode(self, value: Any, level: int = 0) -> list[Section]:
        """Decode ``value`` without ever raising.

        Args:
            value: Any JSON-like value; unknown types are stringified.
            level: Nesting level of the outermost sections.

        Returns:
            Sections in pre-order. An unexpected internal failure yields a
            single ``"Undecodable Content"`` section holding a raw dump.
        """
        try:
            return self._decode(value, level)
        except Exception as exc:
            self._logger.warning("Decoding failed, returning raw dump: %s", exc, exc_info=True)
            return [self._raw_section(UNDECODABLE_HEADING, value, level)]

    def _decode(self, value: Any, level: int) -> list[Section]:
        if level > self.options.max_nesting_level:
            self._trace("Nesting level %d exceeds limit %d", level, self.options.max_nesting_level)
            return [self._raw_section(DEEP_NESTED_HEADING, value, level)]

        if value is None or isinstance(value, (bool, int, float)):
            return [self._section(VALUE_HEADING, [self._scalar_fragment(value)], level)]
        if isinstance(value, str):
            return self._decode_string(value, level)
        if isinstance(value, Mapping):
            return self._decode_object(value, level)
        if isinstance(value, (list, tuple, Set)):
            return self._decode_array(list(value), level)
        return [self._section(VALUE_HEADING, [self._scalar_fragment(value)], level)]

    def _decode_string(self, text: str, level: int, heading: str | None = None) -> list[Section]:
        if looks_like_nested_json(text):
            try:
                parsed = parse_embedded_json(text)
            except EmbeddedJSONError:
                self._trace("String at level %d looked like JSON but did not parse", level)
            else:
                self._trace("Re-entering embedded JSON at level %d", level + 1)
                nested = self._decode(parsed, level + 1)
                if heading is None:
                    return nested
                return [self._section(heading, [], level), *nested]

        return self._decode_text(text, level, heading)

    def _decode_text(self, text: str, level: int, heading: str | None) -> list[Section]:
        options = self.options
        cleaned = clean_text(text, preserve_line_breaks=options.preserve_line_breaks)
        key = (cleaned, level, options.fingerprint())
        tokens = self.cache.get(key)
        if tokens is None:
            tokens = tuple(tokenize(cleaned))
            self.cache.put(key, tokens)
        self._trace("Tokenized %d characters into %d tokens at level %d", len(cleaned), len(tokens), level)
        return assemble_sections(
            tokens, level=level, options=options, heading=heading, split_headings=heading is None
        )

    def _decode_array(self, items: Sequence[Any], level: int) -> list[Section]:
        if not items:
            return [self._section(EMPTY_ARRAY_HEADING, [], level)]

        sections: list[Section] = []
        for index, item in enumerate(items):
            if len(items) > 1 or isinstance(item, Mapping):
                sections.append(self._section(f"Item {index + 1}", [], level))
            sections.extend(self._decode(item, level + 1))
        return sections

    def _decode_object(self, data: Mapping[Any, Any], level: int) -> list[Section]:
        if not data:
            return [self._section(EMPTY_OBJECT_HEADING, [], level)]

        sections: list[Section] = []
        for key, value in data.items():
            heading = format_key(key)
            if self.options.should_skip(str(key), heading):
                self._trace("Skipping decoding for key %r", key)
                sections.append(self._raw_section(heading, value, level))
            elif value is None or isinstance(value, (bool, int, float)):
                sections.append(self._section(heading, [self._scalar_fragment(value)], level))
            elif isinstance(value, str):
                sections.extend(self._decode_string(value, level, heading))
            elif isinstance(value, (Mapping, list, tuple, Set)):
                nested = self._decode(value, level + 1)
                if nested:
                    sections.append(self._section(heading, [], level))
                    sections.extend(nested)
                else:
                    sections.append(self._section(heading, [Fragment(text=NO_DATA_TEXT)], level))
            else:
                sections.append(self._section(heading, [self._scalar_fragment(value)], level))
        return sections

    def _section(self, heading: str, content: list[Fragment], level: int) -> Section:
        return Section(
            heading=heading,
            content=content,
            level=level,
            type=section_type_for(level, content),
            class_prefix=self.options.custom_class_prefix,
        )

    def _raw_section(self, heading: str, value: Any, level: int) -> Section:
        return self._section(heading, [Fragment(text=raw_dump(value), style=FragmentStyle.RAW)], level)

    def _scalar_fragment(self, value: Any) -> Fragment:
        text = stringify(value)
        return Fragment(text=text, role=classify_text(text))

    def _trace(self, message: str, *args: Any) -> None:
        if self.options.enable_debug_logging:
            self._logger.debug(message, *args)


def stringify(value: Any) -> str:
    """Render a scalar the way it reads in JSON."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    try:
        return str(value)
    except Exception:
        return repr(value)


def raw_dump(value: Any) -> str:
    """Render a value as an inert, pretty-printed literal."""
    if isinstance(value, str):
        return value
    try:
        return json.dumps(value, indent=2, ensure_ascii=False, default=str)
    except (TypeError, ValueError, RecursionError):
        pass
    try:
        return repr(value)
    except RecursionError:
        return f"<{type(value).__name__}>"


def decode(value: Any, options: DecodingOptions | None = None, *, cache: TokenCache | None = None) -> list[Section]:
    """Decode an arbitrary JSON value into a flat list of sections.

    Args:
        value: Payload already parsed from wire JSON.
        options: Decoding options; defaults to ``DecodingOptions()``.
        cache: Token cache to share between calls. A fresh cache scoped to
            this call is used when omitted.

    Returns:
        Sections in pre-order; rebuild nesting from ``Section.level``.
    """
    return JSONDecoder(options, cache=cache).decode(value)


def decode_raw_content(value: Any, options: DecodingOptions | None = None) -> list[dict[str, Any]]:
    """Decode ``value`` and keep only each section's heading and content."""
    return [
        {"heading": section.heading, "content": section.content}
        for section in decode(value, options)
    ]
