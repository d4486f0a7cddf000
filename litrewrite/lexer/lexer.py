"""Lexer."""

import sys
from typing import Final, TextIO

from litrewrite.diagnostics import Diagnostic, DiagnosticSpec, diagnostic_from_spec
from litrewrite.diagnostics.codes import (
    LEXER_INVALID_LITERAL,
    LEXER_UNKNOWN_CHARACTER,
    LEXER_UNTERMINATED_BLOCK_COMMENT,
    LEXER_UNTERMINATED_CHAR,
    LEXER_UNTERMINATED_STRING,
)
from litrewrite.errors import MalformedLiteralError
from litrewrite.lexer.tokens import Token, TokenFlags, TokenKind
from litrewrite.literal.classify import (
    DECIMAL_DIGITS,
    is_ident_start,
    scan_ident,
    scan_number,
    scan_quoted,
    scan_raw_string,
    scan_suffix,
    validate_literal,
)
from litrewrite.text import TextRange, slice_text_range

PUNCT_CHARS: Final[frozenset[str]] = frozenset("=<>!~+-*/%^&|@.,;:#$?")
# Rust's Pattern_White_Space, minus the newline characters handled separately.
_WHITESPACE: Final[frozenset[str]] = frozenset(" \t\x0b\x0c\u0085\u200e\u200f\u2028\u2029")
_DELIMITERS: Final[dict[str, TokenKind]] = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
}


class Lexer:
    """Lossless Rust lexer that emits trivia and non-trivia tokens.

    Literals are lexed whole, suffix included, so `10km` is one LITERAL token.
    A lifetime `'a` is a joint `'` PUNCT followed by an IDENTIFIER, the same
    shape proc-macro token streams use.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._after_newline = False
        self._current_start = 0
        self._current_flags = TokenFlags.NONE
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """List of diagnostics emitted during lexing."""
        return self._diagnostics

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    @property
    def current_range(self) -> TextRange:
        return TextRange(self._current_start, self._position)

    def next_token(self) -> Token:
        self._current_start = self._position
        self._current_flags = TokenFlags.NONE

        if self.is_eof:
            return Token(TokenKind.EOF, TextRange.empty(self._position))

        kind = self._lex_token()
        if self._after_newline:
            self._current_flags |= TokenFlags.PRECEDING_LINE_BREAK

        if not kind.is_trivia:
            self._after_newline = False

        return Token(kind, self.current_range, self._current_flags)

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens

    def _lex_token(self) -> TokenKind:
        ch = self._current_char()
        nxt = self._peek_char()

        if ch == "\n" or ch == "\r" or ch in _WHITESPACE:
            return self._consume_newline_or_whitespaces()

        if ch == "/" and nxt == "/":
            return self._lex_line_comment()
        if ch == "/" and nxt == "*":
            return self._lex_block_comment()

        # Prefixed literals and raw identifiers must be tried before plain identifiers.
        if ch == "r":
            if nxt == "#" and is_ident_start(self._peek_char(2)):
                return self._lex_raw_identifier()
            if self._raw_string_follows(0):
                return self._lex_raw_string(0)
        if ch == "b" or ch == "c":
            if ch == "b" and nxt == "'":
                return self._lex_char(1)
            if nxt == '"':
                return self._lex_string(1)
            if nxt == "r" and self._raw_string_follows(1):
                return self._lex_raw_string(1)

        if ch in DECIMAL_DIGITS:
            return self._lex_number()

        if ch == "'":
            return self._lex_quote()

        if ch == '"':
            return self._lex_string(0)

        if is_ident_start(ch):
            self._position = scan_ident(self._source, self._position)
            return TokenKind.IDENTIFIER

        if ch in _DELIMITERS:
            self._advance(1)
            return _DELIMITERS[ch]

        if ch in PUNCT_CHARS:
            self._advance(1)
            if self._current_char() in PUNCT_CHARS:
                self._current_flags |= TokenFlags.JOINT
            return TokenKind.PUNCT

        # Fallback: preserve the character as SKIPPED for recovery.
        self._advance(1)
        self._report(LEXER_UNKNOWN_CHARACTER, f"Unknown start of token: {ch!r}.")
        return TokenKind.SKIPPED

    def _lex_line_comment(self) -> TokenKind:
        # Consume until end of line, do not consume the newline itself.
        while not self.is_eof:
            ch = self._current_char()
            if ch == "\n" or ch == "\r":
                break
            self._advance(1)
        return TokenKind.COMMENT

    def _lex_block_comment(self) -> TokenKind:
        # Block comments nest in Rust.
        self._advance(2)
        depth = 1
        while not self.is_eof:
            pair = self._source[self._position : self._position + 2]
            if pair == "/*":
                depth += 1
                self._advance(2)
            elif pair == "*/":
                depth -= 1
                self._advance(2)
                if depth == 0:
                    return TokenKind.COMMENT
            else:
                self._advance(1)
        self._report(LEXER_UNTERMINATED_BLOCK_COMMENT)
        return TokenKind.COMMENT

    def _lex_raw_identifier(self) -> TokenKind:
        self._position = scan_ident(self._source, self._position + 2)
        self._current_flags |= TokenFlags.RAW_IDENT
        return TokenKind.IDENTIFIER

    def _lex_number(self) -> TokenKind:
        scan = scan_number(self._source, self._position)
        self._position = scan.end
        return self._finish_literal()

    def _lex_quote(self) -> TokenKind:
        nxt = self._peek_char()
        if nxt != "\\" and self._peek_char(2) != "'" and is_ident_start(nxt):
            # Lifetime or label: `'a` lexes as a joint `'` followed by the identifier.
            self._advance(1)
            self._current_flags |= TokenFlags.JOINT
            return TokenKind.PUNCT
        return self._lex_char(0)

    def _lex_char(self, prefix_len: int) -> TokenKind:
        quote_at = self._position + prefix_len
        end = scan_quoted(self._source, quote_at)
        line_end = self._line_end(quote_at)
        if end is None or end > line_end:
            self._position = line_end
            self._report(LEXER_UNTERMINATED_CHAR)
            return TokenKind.LITERAL
        self._position = end
        return self._finish_literal()

    def _lex_string(self, prefix_len: int) -> TokenKind:
        end = scan_quoted(self._source, self._position + prefix_len)
        if end is None:
            self._position = len(self._source)
            self._report(LEXER_UNTERMINATED_STRING)
            return TokenKind.LITERAL
        self._position = end
        return self._finish_literal()

    def _lex_raw_string(self, prefix_len: int) -> TokenKind:
        end = scan_raw_string(self._source, self._position + prefix_len)
        if end is None:
            self._position = len(self._source)
            self._report(LEXER_UNTERMINATED_STRING)
            return TokenKind.LITERAL
        self._position = end
        return self._finish_literal()

    def _finish_literal(self) -> TokenKind:
        end = scan_suffix(self._source, self._position)
        if end != self._position:
            self._current_flags |= TokenFlags.HAS_SUFFIX
            self._position = end
        try:
            validate_literal(slice_text_range(self._source, self.current_range))
        except MalformedLiteralError as exc:
            self._report(LEXER_INVALID_LITERAL, f"Invalid literal: {exc.reason}.")
        return TokenKind.LITERAL

    def _raw_string_follows(self, r_offset: int) -> bool:
        # r"…", r#"…"#: any number of `#` then a double quote
        cursor = self._position + r_offset + 1
        while cursor < len(self._source) and self._source[cursor] == "#":
            cursor += 1
        return self._source[cursor : cursor + 1] == '"'

    def _consume_newline_or_whitespaces(self) -> TokenKind:
        if self._consume_newline():
            self._after_newline = True
            return TokenKind.NEWLINE
        self._consume_whitespaces()
        return TokenKind.WHITESPACE

    def _consume_whitespaces(self) -> None:
        while not self.is_eof and self._current_char() in _WHITESPACE:
            self._advance(1)

    def _consume_newline(self) -> bool:
        if self._current_char() == "\n":
            self._advance(1)
            return True
        if self._current_char() == "\r":
            if self._peek_char() == "\n":
                self._advance(2)
            else:
                self._advance(1)
            return True
        return False

    def _line_end(self, pos: int) -> int:
        newline = self._source.find("\n", pos)
        return len(self._source) if newline == -1 else newline

    def _report(self, spec: DiagnosticSpec, message: str | None = None) -> None:
        self._diagnostics.append(diagnostic_from_spec(spec, self.current_range, message))

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position += steps


def token_text(source: str, token: Token) -> str:
    """Get the text of a token from the source string based on its range."""
    if token.kind == TokenKind.EOF:
        return ""
    return slice_text_range(source, token.range)


def dump_tokens(
    tokens: list[Token],
    source: str,
    diagnostics: list[Diagnostic] | None = None,
    file: TextIO | None = None,
) -> None:
    """Print token list with kind, range, flags, and text for debugging."""
    out = file if file is not None else sys.stdout
    for i, tok in enumerate(tokens):
        text = token_text(source, tok)
        print(f"{i:03d} {tok.kind.name:<12} range={tok.range.as_tuple()} flags={tok.flags!r} text={text!r}", file=out)

    if diagnostics is not None:
        print("\nDiagnostics:", file=out)
        for d in diagnostics:
            print(f"- {d.severity.upper()} {d.code} range={d.range.as_tuple()} message={d.message}", file=out)
