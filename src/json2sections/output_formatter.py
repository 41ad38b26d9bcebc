"""Format decoded sections into summary, outline, and plain-text content."""

from __future__ import annotations

import math
from typing import Iterable

try:
    import tiktoken
except ImportError:  # pragma: no cover - optional dependency
    tiktoken = None

from json2sections.schemas import DecodeResult, Fragment, FragmentStyle, Section


def format_count(count: float | None) -> str:
    """Format a count compactly (``1.2M``, ``3.4K``); ``None``, NaN and infinities become ``N/A``."""
    if count is None or not math.isfinite(count):
        return "N/A"
    if count >= 1_000_000:
        return f"{count / 1_000_000:.1f}M"
    if count >= 1_000:
        return f"{count / 1_000:.1f}K"
    return str(int(count))


def format_sections(sections: list[Section]) -> DecodeResult:
    """Create summary, outline, and content for a decode result."""
    outline = "Sections:\n" + render_outline(sections)
    content = render_content(sections)

    summary_lines = [
        f"Sections: {format_count(len(sections))}",
        f"Fragments: {format_count(count_fragments(sections))}",
    ]
    if sections:
        summary_lines.append(f"Deepest level: {max(section.level for section in sections)}")

    token_estimate = _format_token_count(outline + "\n" + content)
    if token_estimate:
        summary_lines.append(f"Estimated tokens: {token_estimate}")

    return DecodeResult(summary="\n".join(summary_lines), outline=outline, content=content)


def count_fragments(sections: Iterable[Section]) -> int:
    """Count content fragments across sections."""
    return sum(len(section.content) for section in sections)


def render_outline(sections: list[Section]) -> str:
    return "\n".join(" " * (section.level * 4) + section.heading for section in sections)


def render_content(sections: list[Section]) -> str:
    blocks: list[str] = []
    for section in sections:
        blocks.append(section.heading)
        text = render_fragments(section.content)
        if text:
            blocks.append(text)
    return "\n\n".join(block for block in blocks if block).strip()


def render_fragments(fragments: Iterable[Fragment]) -> str:
    """Join fragment text, restoring the marks a plain-text reader expects."""
    parts: list[str] = []
    for fragment in fragments:
        if fragment.style is FragmentStyle.QUOTE:
            parts.append(f'"{fragment.text}"')
        elif fragment.style is FragmentStyle.KEY:
            parts.append(f"{fragment.text} ")
        else:
            parts.append(fragment.text)
    return "".join(parts).strip()


def _format_token_count(text: str) -> str | None:
    if not tiktoken:
        return None
    try:
        encoding = tiktoken.get_encoding("o200k_base")
        total_tokens = len(encoding.encode(text, disallowed_special=()))
    except Exception:
        return None
    return format_count(total_tokens)
