"""Normalize raw payload strings into readable text."""

from __future__ import annotations

import re

from json2sections.heuristics import is_meaningful_quote

_ESCAPE_RE = re.compile(r"\\([\"'\\/ntr])")
_ESCAPES = {'"': '"', "'": "'", "\\": "\\", "/": "/", "n": "\n", "t": "\t", "r": ""}

_QUOTED_RE = re.compile(r'"([^"]+)"')


def clean_text(text: str, *, preserve_line_breaks: bool = True) -> str:
    """Turn a string with JSON escape artifacts into human-readable text.

    The cleaning pass is repeated until the text stops changing, so the result
    is a fixed point and cleaning it again returns it unchanged. Passes only
    ever remove escapes, quotation marks and redundant whitespace, which keeps
    the number of rounds small.

    Args:
        text: Raw string, possibly double-escaped.
        preserve_line_breaks: If True, single newlines survive. If False they
            are folded into spaces. Paragraph breaks (``\\n\\n``) are kept
            either way.

    Returns:
        The cleaned text.
    """
    if not text:
        return ""
    current = str(text)
    for _ in range(len(current) + 1):
        cleaned = _clean_once(current, preserve_line_breaks=preserve_line_breaks)
        if cleaned == current:
            break
        current = cleaned
    return current


def unescape(text: str) -> str:
    """Replace backslash escape sequences with the characters they encode."""
    return _ESCAPE_RE.sub(lambda match: _ESCAPES[match.group(1)], text)


def collapse_whitespace(text: str, *, preserve_line_breaks: bool = True) -> str:
    """Collapse whitespace runs while keeping paragraph breaks."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = re.sub(r"[^\S\n]+", " ", text)
    text = re.sub(r" *\n *", "\n", text)
    if preserve_line_breaks:
        text = re.sub(r"\n{3,}", "\n\n", text)
    else:
        text = re.sub(r"\n{2,}", "\n\n", text)
        text = re.sub(r"(?<!\n)\n(?!\n)", " ", text)
    return text.strip()


def strip_noise_quotes(text: str) -> str:
    """Drop quotation marks around spans that do not look intentional."""

    def _replace(match: re.Match[str]) -> str:
        content = match.group(1)
        if is_meaningful_quote(content):
            return match.group(0)
        return content.strip()

    return _QUOTED_RE.sub(_replace, text)


def normalize_punctuation(text: str) -> str:
    """Normalize spacing around JSON punctuation."""
    text = re.sub(r" +([,:])", r"\1", text)
    text = re.sub(r",(?=[^\s\d])", ", ", text)
    return re.sub(r":(?=[\"'\[{])", ": ", text)


def _clean_once(text: str, *, preserve_line_breaks: bool) -> str:
    text = unescape(text)
    text = collapse_whitespace(text, preserve_line_breaks=preserve_line_breaks)
    text = strip_noise_quotes(text)
    text = normalize_punctuation(text)
    return collapse_whitespace(text, preserve_line_breaks=preserve_line_breaks)
