"""A small language-agnostic syntax highlighter for single lines of code."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto


@dataclass(frozen=True)
class Style:
    color: str
    bold: bool = False
    italic: bool = False


class TokenType(Enum):
    KEYWORD = auto()
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()
    COMMENT = auto()
    SYMBOL = auto()
    WHITESPACE = auto()
    OTHER = auto()


@dataclass(frozen=True)
class HighlightedToken:
    text: str
    token_type: TokenType
    style: Style


_DEFAULT_STYLE = Style("#d4d4d4")

KEYWORDS = frozenset(
    {
        "fn", "let", "pub", "struct", "enum", "impl", "use", "mod", "if", "else",
        "for", "while", "loop", "match", "return", "true", "false", "const",
        "static", "mut", "as", "in", "break", "continue", "crate", "super", "self",
        "Self", "type", "where", "ref", "move", "async", "await", "dyn", "trait",
        "extern",
    }
)

_TOKEN_RE = re.compile(
    r"(?P<ws>\s+)"
    r"|(?P<comment>//.*)"
    r'|(?P<string>"[^"]*"?)'
    r"|(?P<number>[0-9][0-9.]*)"
    r"|(?P<word>[^\W\d]\w*)"
    r"|(?P<symbol>.)",
    re.DOTALL,
)

_GROUP_TYPES = {
    "ws": TokenType.WHITESPACE,
    "comment": TokenType.COMMENT,
    "string": TokenType.STRING,
    "number": TokenType.NUMBER,
    "symbol": TokenType.SYMBOL,
}


def _default_theme() -> dict[TokenType, Style]:
    return {
        TokenType.KEYWORD: Style("#569CD6", bold=True),
        TokenType.IDENTIFIER: Style("#d4d4d4"),
        TokenType.STRING: Style("#ce9178"),
        TokenType.NUMBER: Style("#b5cea8"),
        TokenType.COMMENT: Style("#6a9955", italic=True),
        TokenType.SYMBOL: Style("#d4d4d4"),
        TokenType.WHITESPACE: Style("#d4d4d4"),
        TokenType.OTHER: Style("#d4d4d4"),
    }


class SyntaxHighlighter:
    """Splits a line into styled tokens using ``theme``."""

    def __init__(self, theme: dict[TokenType, Style] | None = None) -> None:
        self.theme = theme if theme is not None else _default_theme()

    def highlight_line(self, line: str) -> list[HighlightedToken]:
        """Tokens that, joined together, give back ``line``."""
        tokens: list[HighlightedToken] = []
        for match in _TOKEN_RE.finditer(line):
            kind = match.lastgroup
            text = match.group()
            if kind == "word":
                token_type = TokenType.KEYWORD if text in KEYWORDS else TokenType.IDENTIFIER
            else:
                token_type = _GROUP_TYPES[kind]
            tokens.append(self._make_token(text, token_type))
        return tokens

    def _make_token(self, text: str, token_type: TokenType) -> HighlightedToken:
        return HighlightedToken(text, token_type, self.theme.get(token_type, _DEFAULT_STYLE))