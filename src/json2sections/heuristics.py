"""Text classification heuristics shared by the cleaner, assembler and walker.

The numeric thresholds below are part of the decoder's observable behavior:
changing them changes which fragments are tagged as headings or paragraphs
and which quoted spans survive cleaning.
"""

from __future__ import annotations

import re
from typing import Final, Iterable

from json2sections.schemas import Fragment, FragmentRole, FragmentStyle, SectionType

HEADING_MAX_LENGTH: Final[int] = 50
PARAGRAPH_MIN_LENGTH: Final[int] = 50
MEANINGFUL_QUOTE_MIN_LENGTH: Final[int] = 20

BULLET_MARKERS: Final[str] = "-*•→▪▫‣"

_NUMBERED_RE = re.compile(r"^\d+\.")
_TITLE_RE = re.compile(r"^[A-Z][A-Za-z\s]*$")
_KEYWORD_RE = re.compile(
    r"^(Overview|Summary|Analysis|Recommendations?|Strateg(?:y|ies)|Insights?"
    r"|Conclusions?|Key Points?|Important|Note|Warning|Tips?)\b",
    re.IGNORECASE,
)
_CAPITALIZED_TITLE_RE = re.compile(r"^[A-Z][^:]*$")
_BULLET_RE = re.compile(rf"^[{re.escape(BULLET_MARKERS)}]\s+")

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_KEY_SEPARATOR_RE = re.compile(r"[_\-\s]+")

_EMPHASIS_STYLES = frozenset({FragmentStyle.BOLD, FragmentStyle.ITALIC, FragmentStyle.EMPHASIS})


def is_heading(text: str) -> bool:
    """Check if a line of text reads like a heading."""
    text = text.strip()
    if not text:
        return False
    return (
        text.endswith(":")
        or bool(_NUMBERED_RE.match(text))
        or (bool(_TITLE_RE.match(text)) and len(text) < HEADING_MAX_LENGTH)
        or bool(_KEYWORD_RE.match(text))
    )


def is_paragraph(text: str) -> bool:
    """Check if text is long or punctuated enough to style as a paragraph."""
    return len(text) > PARAGRAPH_MIN_LENGTH or any(char in text for char in ".,;")


def is_list_item(text: str) -> bool:
    """Check if text starts with a bullet marker."""
    return bool(_BULLET_RE.match(text.lstrip()))


def strip_bullet(text: str) -> str:
    """Remove a leading bullet marker."""
    return _BULLET_RE.sub("", text.lstrip(), count=1)


def is_meaningful_quote(content: str) -> bool:
    """Check if a quoted span should keep its quotation marks.

    Quotes introduced by naive string concatenation upstream are noise; quoted
    titles, sentences and labels are intentional.
    """
    stripped = content.strip()
    if not stripped:
        return False
    return (
        ":" in stripped
        or bool(_CAPITALIZED_TITLE_RE.match(stripped))
        or "'" in stripped
        or '"' in stripped
        or len(stripped) > MEANINGFUL_QUOTE_MIN_LENGTH
        or "\n" in stripped
        or stripped[-1] in ".!?"
        or stripped[0].isdigit()
    )


def clean_heading(text: str) -> str:
    """Strip numbering, asterisks and the trailing colon from heading text."""
    text = text.strip()
    text = re.sub(r"^\d+\.\s*", "", text)
    text = re.sub(r"^\*+\s*", "", text)
    text = re.sub(r"\s*\*+$", "", text)
    text = re.sub(r"\s*:$", "", text)
    text = re.sub(r"\s*\*+$", "", text)
    return text.strip()


def format_key(key: str) -> str:
    """Convert camelCase, snake_case or kebab-case keys into Title Case."""
    spaced = _CAMEL_BOUNDARY_RE.sub(" ", str(key))
    words = [word for word in _KEY_SEPARATOR_RE.split(spaced) if word]
    return " ".join(word[:1].upper() + word[1:] for word in words)


def classify_text(text: str) -> FragmentRole:
    """Pick the role of a merged prose run."""
    if is_list_item(text):
        return FragmentRole.LIST_ITEM
    if is_heading(text):
        return FragmentRole.HEADING
    if is_paragraph(text):
        return FragmentRole.PARAGRAPH
    return FragmentRole.INLINE


def section_type_for(level: int, fragments: Iterable[Fragment] = ()) -> SectionType:
    """Derive the section type from its level and content."""
    if level == 0:
        return SectionType.HEADING
    if level == 1:
        return SectionType.SUBHEADING

    visible = [
        fragment
        for fragment in fragments
        if fragment.style not in (FragmentStyle.STRUCTURAL, FragmentStyle.PUNCTUATION)
        and fragment.text.strip()
    ]
    if visible:
        if all(fragment.style is FragmentStyle.QUOTE for fragment in visible):
            return SectionType.QUOTE
        if all(fragment.style in _EMPHASIS_STYLES for fragment in visible):
            return SectionType.EMPHASIS
        if all(fragment.role is FragmentRole.LIST_ITEM for fragment in visible):
            return SectionType.LIST
    return SectionType.CONTENT
