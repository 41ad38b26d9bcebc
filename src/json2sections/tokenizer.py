"""Split cleaned text into formatting, structural and key/value tokens."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Final, Pattern


class TokenType(str, Enum):
    """Token categories emitted by ``tokenize``."""

    TEXT = "text"
    EMPHASIS = "emphasis"
    BOLD = "bold"
    ITALIC = "italic"
    HIGHLIGHT = "highlight"
    QUOTE = "quote"
    KEY = "key"
    COMMA = "comma"
    COLON = "colon"
    SEMICOLON = "semicolon"
    PERIOD = "period"
    BRACE = "brace"
    BRACKET = "bracket"
    NEWLINE = "newline"


STRUCTURAL_TYPES: Final[frozenset[TokenType]] = frozenset(
    {
        TokenType.COMMA,
        TokenType.COLON,
        TokenType.SEMICOLON,
        TokenType.PERIOD,
        TokenType.BRACE,
        TokenType.BRACKET,
        TokenType.NEWLINE,
    }
)

_STRUCTURAL_CHARS: Final[dict[str, TokenType]] = {
    ",": TokenType.COMMA,
    ":": TokenType.COLON,
    ";": TokenType.SEMICOLON,
    ".": TokenType.PERIOD,
    "{": TokenType.BRACE,
    "}": TokenType.BRACE,
    "[": TokenType.BRACKET,
    "]": TokenType.BRACKET,
    "\n": TokenType.NEWLINE,
}


@dataclass(frozen=True)
class Token:
    """A typed span of cleaned text.

    Attributes:
        type: Token category.
        value: Display text (markers removed for formatted spans).
        position: Offset of the span in the tokenized text.
        raw: The exact source span, markers included.
        formatting: Formatting applied to the span, if any.
        parts: ``(key, value)`` for key/value tokens.
    """

    type: TokenType
    value: str
    position: int
    raw: str
    formatting: str | None = None
    parts: tuple[str, ...] = ()

    @property
    def is_structural(self) -> bool:
        return self.type in STRUCTURAL_TYPES


@dataclass(frozen=True)
class _Rule:
    pattern: Pattern[str]
    type: TokenType
    first_chars: str | None


_WORD = "A-Za-z0-9"

# Order is the tie-breaker when several rules match at one position.
_FORMATTING_RULES: Final[tuple[_Rule, ...]] = (
    _Rule(re.compile(r"\*\*\*(?!\s)([^*\n]+?)(?<!\s)\*\*\*"), TokenType.EMPHASIS, "*"),
    _Rule(re.compile(r"\*\*(?!\s)([^*\n]+?)(?<!\s)\*\*"), TokenType.BOLD, "*"),
    _Rule(re.compile(r"\*(?!\s)([^*\n]+?)(?<!\s)\*"), TokenType.ITALIC, "*"),
    _Rule(
        re.compile(rf"(?<![{_WORD}])__(?!\s)([^_\n]+?)(?<!\s)__(?![{_WORD}])"),
        TokenType.BOLD,
        "_",
    ),
    _Rule(
        re.compile(rf"(?<![{_WORD}])_(?!\s)([^_\n]+?)(?<!\s)_(?![{_WORD}])"),
        TokenType.ITALIC,
        "_",
    ),
    _Rule(re.compile(r"\[([^\[\]\n]+)\]"), TokenType.HIGHLIGHT, "["),
    _Rule(re.compile(r"\{([^{}\n]+)\}"), TokenType.HIGHLIGHT, "{"),
    _Rule(re.compile(r"\(IMPORTANT:\s*([^)\n]+)\)"), TokenType.HIGHLIGHT, "("),
    _Rule(re.compile(r'"([^"\n]+)"'), TokenType.QUOTE, '"'),
    _Rule(re.compile(rf"(?<![{_WORD}])'([^'\n]+)'(?![{_WORD}])"), TokenType.QUOTE, "'"),
)

KEY_MAX_LENGTH: Final[int] = 60

_KEY_RE: Final[Pattern[str]] = re.compile(
    rf"(?<![A-Za-z])([A-Za-z][A-Za-z ]{{0,{KEY_MAX_LENGTH - 1}}}):(?!//)[ \t]*"
)
_VALUE_STOPS: Final[frozenset[str]] = frozenset(",;\n")

_RULES_BY_CHAR: dict[str, list[_Rule]] = {}
for _rule in _FORMATTING_RULES:
    for _char in _rule.first_chars or "":
        _RULES_BY_CHAR.setdefault(_char, []).append(_rule)


def tokenize(text: str) -> list[Token]:
    """Convert cleaned text into an ordered list of tokens.

    The input is scanned left to right. At each position the formatting
    rules are tried in priority order (``***x***``, ``**x**``, ``*x*``,
    ``__x__``, ``_x_``, highlights, quotes), then single structural
    characters, then the ``Key: value`` shorthand; the first match wins.
    Characters that start no match accumulate into ``text`` tokens, so the
    ``raw`` spans of the result concatenate back to the input.
    """
    tokens: list[Token] = []
    pending_start = 0
    pos = 0
    length = len(text)
    next_colon = text.find(":")

    def flush_text(end: int) -> None:
        if end > pending_start:
            chunk = text[pending_start:end]
            tokens.append(Token(TokenType.TEXT, chunk, pending_start, chunk))

    while pos < length:
        if 0 <= next_colon < pos:
            next_colon = text.find(":", pos)
        token = _match_at(text, pos, next_colon)
        if token is None:
            pos += 1
            continue
        flush_text(pos)
        tokens.append(token)
        pos += len(token.raw)
        pending_start = pos

    flush_text(length)
    return tokens


def _match_at(text: str, pos: int, next_colon: int) -> Token | None:
    char = text[pos]

    token = _match_formatting(text, pos)
    if token is not None:
        return token

    structural = _STRUCTURAL_CHARS.get(char)
    if structural is not None:
        return Token(structural, char, pos, char)

    if char.isascii() and char.isalpha():
        # Keys are short, so the next colon must be close.
        if next_colon == -1 or next_colon - pos > KEY_MAX_LENGTH:
            return None
        return _match_key_value(text, pos)
    return None


def _match_formatting(text: str, pos: int) -> Token | None:
    for rule in _RULES_BY_CHAR.get(text[pos], ()):
        match = rule.pattern.match(text, pos)
        if match:
            return Token(
                type=rule.type,
                value=match.group(1),
                position=pos,
                raw=match.group(0),
                formatting=rule.type.value,
            )
    return None


def _match_key_value(text: str, pos: int) -> Token | None:
    match = _KEY_RE.match(text, pos)
    if not match:
        return None
    start = match.end()
    end = _value_end(text, start)
    value = text[start:end].rstrip()
    if not value or value[0].isspace():
        return None
    end = start + len(value)
    raw = text[pos:end]
    return Token(TokenType.KEY, raw, pos, raw, parts=(match.group(1).strip(), value))


def _value_end(text: str, start: int) -> int:
    """Return where a key/value value stops.

    Values run to a comma, semicolon, newline or sentence period (a period
    followed by a digit is a decimal point), or to a marker that opens a
    formatting span. Markers that open nothing, such as the underscore in
    ``in_progress``, stay in the value.
    """
    index = start
    length = len(text)
    while index < length:
        char = text[index]
        if char in _VALUE_STOPS:
            break
        if char == "." and not (index + 1 < length and text[index + 1].isdigit()):
            break
        if char in _RULES_BY_CHAR and _match_formatting(text, index) is not None:
            break
        index += 1
    return index
