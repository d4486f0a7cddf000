"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum, IntFlag

from litrewrite.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1

    # -------------------------
    # Trivia tokens (emitted by the lexer)
    # -------------------------
    WHITESPACE = 10
    NEWLINE = 11
    COMMENT = 12
    SKIPPED = 13  # unknown character, kept so the token list stays lossless

    # -------------------------
    # Identifiers / literals / punctuation
    # -------------------------
    IDENTIFIER = 20  # includes keywords, `true`/`false` and raw identifiers
    LITERAL = 21  # any literal, suffix included
    PUNCT = 22  # a single punctuation character

    # -------------------------
    # Delimiters
    # -------------------------
    LBRACE = 60  # {
    RBRACE = 61  # }
    LBRACKET = 62  # [
    RBRACKET = 63  # ]
    LPAREN = 64  # (
    RPAREN = 65  # )

    @property
    def is_trivia(self) -> bool:
        return self in (
            TokenKind.WHITESPACE,
            TokenKind.NEWLINE,
            TokenKind.COMMENT,
            TokenKind.SKIPPED,
        )

    @property
    def is_open_delimiter(self) -> bool:
        return self in (TokenKind.LBRACE, TokenKind.LBRACKET, TokenKind.LPAREN)

    @property
    def is_close_delimiter(self) -> bool:
        return self in (TokenKind.RBRACE, TokenKind.RBRACKET, TokenKind.RPAREN)


class TokenFlags(IntFlag):
    """Token metadata flags."""

    NONE = 0
    PRECEDING_LINE_BREAK = 1 << 0  # NEWLINE before
    JOINT = 1 << 1  # punctuation immediately followed by more punctuation
    RAW_IDENT = 1 << 2  # `r#name`
    HAS_SUFFIX = 1 << 3  # literal with a non-empty suffix


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token (trivia or non-trivia)."""

    kind: TokenKind
    range: TextRange
    flags: TokenFlags = TokenFlags.NONE

    def has_preceding_line_break(self) -> bool:
        return bool(self.flags & TokenFlags.PRECEDING_LINE_BREAK)

    def is_joint(self) -> bool:
        return bool(self.flags & TokenFlags.JOINT)
