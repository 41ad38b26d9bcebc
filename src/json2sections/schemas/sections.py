"""Section and fragment models produced by the decoder."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SectionType(str, Enum):
    """Styling class a renderer picks for a section."""

    HEADING = "heading"
    SUBHEADING = "subheading"
    CONTENT = "content"
    LIST = "list"
    BULLET = "bullet"
    PARAGRAPH = "paragraph"
    QUOTE = "quote"
    EMPHASIS = "emphasis"


class FragmentStyle(str, Enum):
    """Formatting annotation of a fragment, independent of any renderer."""

    PLAIN = "plain"
    BOLD = "bold"
    ITALIC = "italic"
    EMPHASIS = "emphasis"
    HIGHLIGHT = "highlight"
    QUOTE = "quote"
    KEY = "keyvalue-key"
    VALUE = "keyvalue-value"
    STRUCTURAL = "structural"
    PUNCTUATION = "punctuation"
    RAW = "raw"


class FragmentRole(str, Enum):
    """Text classification of a fragment within its section."""

    INLINE = "inline"
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    LIST_ITEM = "list-item"


class Fragment(BaseModel):
    """The smallest formatted unit of decoded text."""

    model_config = ConfigDict(frozen=True)

    text: str
    style: FragmentStyle = FragmentStyle.PLAIN
    role: FragmentRole = FragmentRole.INLINE


class Section(BaseModel):
    """A labeled group of fragments; one flat entry of a decode result.

    Attributes:
        heading: Human-readable label (object key, array index or inferred).
        content: Fragments belonging directly to this section. Child sections
            follow as siblings with a larger ``level``.
        level: Nesting depth at which the section was produced.
        type: Styling class derived from ``level`` and the content.
        class_prefix: Caller-supplied tag passed through unchanged.
    """

    model_config = ConfigDict(frozen=True)

    heading: str
    content: list[Fragment] = Field(default_factory=list)
    level: int = Field(default=0, ge=0)
    type: SectionType = SectionType.CONTENT
    class_prefix: str | None = None
