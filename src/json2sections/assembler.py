"""Group a token stream into sections of formatted fragments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final, Sequence

from json2sections.heuristics import (
    classify_text,
    clean_heading,
    is_heading,
    is_list_item,
    section_type_for,
    strip_bullet,
)
from json2sections.options import DecodingOptions
from json2sections.schemas import Fragment, FragmentRole, FragmentStyle, Section
from json2sections.tokenizer import Token, TokenType

DEFAULT_HEADING: Final[str] = "Details"
LOOKAHEAD_TOKENS: Final[int] = 4

_PARAGRAPH_BREAK = Fragment(text="\n", style=FragmentStyle.STRUCTURAL)
_PROSE_STYLES = frozenset({FragmentStyle.PLAIN, FragmentStyle.PUNCTUATION})
_PUNCTUATION_TYPES = frozenset(
    {TokenType.COMMA, TokenType.COLON, TokenType.SEMICOLON, TokenType.PERIOD}
)
_FORMATTED_STYLES: Final[dict[TokenType, FragmentStyle]] = {
    TokenType.EMPHASIS: FragmentStyle.EMPHASIS,
    TokenType.BOLD: FragmentStyle.BOLD,
    TokenType.ITALIC: FragmentStyle.ITALIC,
    TokenType.HIGHLIGHT: FragmentStyle.HIGHLIGHT,
    TokenType.QUOTE: FragmentStyle.QUOTE,
}


@dataclass
class _OpenSection:
    heading: str
    level: int
    content: list[Fragment] = field(default_factory=list)
    implicit: bool = False


def assemble_sections(
    tokens: Sequence[Token],
    *,
    level: int,
    options: DecodingOptions | None = None,
    heading: str | None = None,
    split_headings: bool = True,
) -> list[Section]:
    """Build sections from a token stream.

    Content before the first detected heading lands in a preamble section at
    ``level`` titled ``heading`` (or ``"Details"`` when no heading is given;
    that implicit preamble is dropped if it stays empty). Headings detected
    inside the text open new sections, one level deeper when an explicit
    heading was given. With ``split_headings`` off the result is the single
    section titled ``heading`` and detected headings stay in its content as
    heading-role fragments.

    Args:
        tokens: Output of ``tokenize``.
        level: Nesting level of the preamble section.
        options: Formatting switches; defaults to ``DecodingOptions()``.
        heading: Heading of the preamble section, usually a formatted key.
        split_headings: Open a new section for each detected heading.

    Returns:
        Sections in text order. Never raises on malformed token streams.
    """
    return _Assembler(
        options or DecodingOptions(), level=level, heading=heading, split_headings=split_headings
    ).run(tokens)


class _Assembler:
    def __init__(
        self, options: DecodingOptions, *, level: int, heading: str | None, split_headings: bool = True
    ) -> None:
        self.options = options
        self.split_headings = split_headings or heading is None
        self.level = level
        self.child_level = level + 1 if heading is not None else level
        self.sections: list[Section] = []
        self.current = _OpenSection(
            heading=heading if heading is not None else DEFAULT_HEADING,
            level=level,
            implicit=heading is None,
        )
        self.paragraph: list[Fragment] = []

    def run(self, tokens: Sequence[Token]) -> list[Section]:
        index = 0
        at_line_start = True
        while index < len(tokens):
            if at_line_start:
                at_line_start = False
                found = _heading_at(tokens, index)
                if found is not None:
                    heading, index = found
                    if self.split_headings:
                        self._start_section(heading)
                    else:
                        self._flush_paragraph()
                        self._append_block([Fragment(text=heading, role=FragmentRole.HEADING)])
                    continue

            token = tokens[index]
            if token.type is TokenType.NEWLINE:
                self._flush_paragraph()
                at_line_start = True
            else:
                self.paragraph.extend(self._fragments_for(token))
            index += 1

        self._flush_section()
        return self.sections

    def _start_section(self, heading: str) -> None:
        self._flush_section()
        self.current = _OpenSection(heading=heading, level=self.child_level)

    def _flush_section(self) -> None:
        self._flush_paragraph()
        current = self.current
        if current.implicit and not current.content:
            return
        self.sections.append(
            Section(
                heading=current.heading,
                content=current.content,
                level=current.level,
                type=section_type_for(current.level, current.content),
                class_prefix=self.options.custom_class_prefix,
            )
        )
        self.current = _OpenSection(heading=DEFAULT_HEADING, level=self.child_level, implicit=True)

    def _flush_paragraph(self) -> None:
        fragments = _merge_prose(self.paragraph)
        self.paragraph = []
        self._append_block(fragments)

    def _append_block(self, fragments: list[Fragment]) -> None:
        if not fragments:
            return
        if self.current.content:
            self.current.content.append(_PARAGRAPH_BREAK)
        self.current.content.extend(fragments)

    def _fragments_for(self, token: Token) -> list[Fragment]:
        if token.type is TokenType.TEXT:
            return [Fragment(text=token.value)]
        if token.type is TokenType.KEY:
            key, value = token.parts
            return [
                Fragment(text=f"{key}:", style=FragmentStyle.KEY),
                Fragment(text=value, style=FragmentStyle.VALUE),
            ]
        if token.type in _PUNCTUATION_TYPES:
            return [Fragment(text=token.value, style=FragmentStyle.PUNCTUATION)]
        if token.type in (TokenType.BRACE, TokenType.BRACKET):
            return [Fragment(text=token.value, style=FragmentStyle.STRUCTURAL)]

        style = _FORMATTED_STYLES[token.type]
        if not self._enabled(style):
            text = token.raw if style is FragmentStyle.QUOTE else token.value
            return [Fragment(text=text)]
        return [Fragment(text=token.value, style=style)]

    def _enabled(self, style: FragmentStyle) -> bool:
        opts = self.options
        return {
            FragmentStyle.EMPHASIS: opts.enable_emphasis,
            FragmentStyle.BOLD: opts.enable_bold_formatting,
            FragmentStyle.ITALIC: opts.enable_italic_formatting,
            FragmentStyle.HIGHLIGHT: opts.enable_highlighting,
            FragmentStyle.QUOTE: opts.enable_quotes,
        }[style]


def _heading_at(tokens: Sequence[Token], start: int) -> tuple[str, int] | None:
    """Look ahead from a line start for a heading; return it and the resume index."""
    window: list[Token] = []
    index = start
    while index < len(tokens) and len(window) < LOOKAHEAD_TOKENS:
        token = tokens[index]
        if token.type in (TokenType.NEWLINE, TokenType.KEY):
            break
        window.append(token)
        index += 1
        if token.type is TokenType.COLON:
            break
    if not window:
        return None

    ends_line = index >= len(tokens) or tokens[index].type is TokenType.NEWLINE
    colon_label = window[-1].type is TokenType.COLON
    if not (ends_line or colon_label):
        return None

    text = "".join(token.raw for token in window).strip()
    if is_list_item(text):
        return None
    heading = clean_heading(text)
    if not (is_heading(text) or is_heading(heading)) or not _has_content(tokens, index):
        return None
    if not heading:
        return None
    return heading, index


def _has_content(tokens: Sequence[Token], start: int) -> bool:
    return any(
        token.type is not TokenType.NEWLINE and token.raw.strip() for token in tokens[start:]
    )


def _merge_prose(fragments: list[Fragment]) -> list[Fragment]:
    """Merge runs of plain text and punctuation into classified fragments."""
    merged: list[Fragment] = []
    run: list[Fragment] = []

    def close_run() -> None:
        if run:
            merged.append(_merge_run(run))
            run.clear()

    for fragment in fragments:
        if fragment.style in _PROSE_STYLES:
            run.append(fragment)
        else:
            close_run()
            merged.append(fragment)
    close_run()

    merged = _trim_edges(merged)
    if not merged:
        return []

    first = merged[0]
    if first.style in _PROSE_STYLES and is_list_item(first.text):
        stripped = strip_bullet(first.text)
        rest = merged[1:]
        merged = [first.model_copy(update={"text": stripped, "style": FragmentStyle.PLAIN})] if stripped else []
        merged += rest
        merged = [
            fragment.model_copy(update={"role": FragmentRole.LIST_ITEM})
            if fragment.style is not FragmentStyle.STRUCTURAL
            else fragment
            for fragment in merged
        ]
    return merged


def _merge_run(run: list[Fragment]) -> Fragment:
    text = "".join(fragment.text for fragment in run)
    stripped = text.strip()
    if not stripped:
        return Fragment(text=text)
    if all(not char.isalnum() for char in stripped):
        return Fragment(text=text, style=FragmentStyle.PUNCTUATION)
    role = classify_text(stripped)
    if role is FragmentRole.LIST_ITEM:
        role = FragmentRole.INLINE
    return Fragment(text=text, role=role)


def _trim_edges(fragments: list[Fragment]) -> list[Fragment]:
    if fragments and fragments[0].style is FragmentStyle.PLAIN:
        head = fragments[0].text.lstrip()
        fragments = ([fragments[0].model_copy(update={"text": head})] if head else []) + fragments[1:]
    if fragments and fragments[-1].style is FragmentStyle.PLAIN:
        tail = fragments[-1].text.rstrip()
        fragments = fragments[:-1] + ([fragments[-1].model_copy(update={"text": tail})] if tail else [])
    return fragments
