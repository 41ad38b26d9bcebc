"""Decoding options."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from json2sections.config import DEFAULT_CLASS_PREFIX, JSON2SECTIONS_MAX_NESTING_LEVEL


@dataclass
class DecodingOptions:
    """Options for payload decoding.

    Attributes:
        enable_bold_formatting: Emit ``bold`` fragments for ``**x**``/``__x__``.
        enable_italic_formatting: Emit ``italic`` fragments for ``*x*``/``_x_``.
        enable_highlighting: Emit ``highlight`` fragments for ``[x]``, ``{x}``
            and ``(IMPORTANT: x)``.
        enable_quotes: Emit ``quote`` fragments for quoted spans.
        enable_emphasis: Emit ``emphasis`` fragments for ``***x***``.
        max_nesting_level: Deepest level decoded before the raw-dump guard.
        skip_decoding_for_elements: Keys (raw or formatted) rendered verbatim.
        custom_class_prefix: Opaque tag copied onto every section.
        enable_debug_logging: Trace decoding steps to ``logger``.
        preserve_line_breaks: Keep single newlines while cleaning text.
        logger: Trace sink; defaults to the decoder module logger.
    """

    enable_bold_formatting: bool = True
    enable_italic_formatting: bool = True
    enable_highlighting: bool = True
    enable_quotes: bool = True
    enable_emphasis: bool = True
    max_nesting_level: int = JSON2SECTIONS_MAX_NESTING_LEVEL
    skip_decoding_for_elements: list[str] = field(default_factory=list)
    custom_class_prefix: str | None = DEFAULT_CLASS_PREFIX
    enable_debug_logging: bool = False
    preserve_line_breaks: bool = True
    logger: logging.Logger | None = field(default=None, repr=False, compare=False)

    def fingerprint(self) -> tuple:
        """Return the option values that influence decoded output."""
        return (
            self.enable_bold_formatting,
            self.enable_italic_formatting,
            self.enable_highlighting,
            self.enable_quotes,
            self.enable_emphasis,
            self.max_nesting_level,
            self.preserve_line_breaks,
        )

    def should_skip(self, key: str, heading: str) -> bool:
        """Check if a key is configured to bypass decoding."""
        skipped = self.skip_decoding_for_elements
        return bool(skipped) and (key in skipped or heading in skipped)
