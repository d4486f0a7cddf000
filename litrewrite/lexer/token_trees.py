"""Nesting flat lexer tokens into token trees."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from litrewrite.diagnostics import Diagnostic, diagnostic_from_spec, has_errors
from litrewrite.diagnostics.codes import (
    TREE_MISMATCHED_DELIMITER,
    TREE_UNCLOSED_DELIMITER,
    TREE_UNEXPECTED_CLOSE_DELIMITER,
)
from litrewrite.lexer.lexer import Lexer, token_text
from litrewrite.lexer.tokens import Token, TokenFlags, TokenKind
from litrewrite.tokens import Delimiter, Group, Ident, Literal, Punct, Spacing, TokenTree
from litrewrite.text import TextRange


@dataclass(frozen=True, slots=True)
class TokenTreeParse:
    """Token trees for a source text plus everything the lexer and builder reported."""

    source_text: str
    trees: tuple[TokenTree, ...]
    diagnostics: list[Diagnostic]

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)


@dataclass(slots=True)
class _OpenGroup:
    delimiter: Delimiter
    open_range: TextRange
    children: list[TokenTree] = field(default_factory=list)

    def close(self, end: int) -> Group:
        return Group(self.delimiter, tuple(self.children), TextRange(self.open_range.start, end))


def lex_token_trees(source: str) -> TokenTreeParse:
    """Lex `source` and nest it into token trees."""
    lexer = Lexer(source)
    tokens = lexer.lex()
    trees, diagnostics = build_token_trees(source, tokens)
    return TokenTreeParse(source, trees, [*lexer.diagnostics, *diagnostics])


def build_token_trees(source: str, tokens: Sequence[Token]) -> tuple[tuple[TokenTree, ...], list[Diagnostic]]:
    """Drop trivia and nest delimited groups.

    Recovery: a stray closing delimiter is dropped, a mismatched one closes the
    innermost group, and groups still open at the end are closed at EOF.
    """
    diagnostics: list[Diagnostic] = []
    root: list[TokenTree] = []
    stack: list[_OpenGroup] = []

    def sink() -> list[TokenTree]:
        return stack[-1].children if stack else root

    for token in tokens:
        kind = token.kind
        if kind.is_trivia or kind == TokenKind.EOF:
            continue

        text = token_text(source, token)
        if kind.is_open_delimiter:
            stack.append(_OpenGroup(_delimiter_for(text), token.range))
        elif kind.is_close_delimiter:
            if not stack:
                diagnostics.append(diagnostic_from_spec(TREE_UNEXPECTED_CLOSE_DELIMITER, token.range))
                continue
            if stack[-1].delimiter != Delimiter.for_close(text):
                diagnostics.append(
                    diagnostic_from_spec(
                        TREE_MISMATCHED_DELIMITER,
                        token.range,
                        f"Mismatched closing delimiter: expected `{stack[-1].delimiter.close}`, found `{text}`.",
                    )
                )
            group = stack.pop().close(token.range.end)
            sink().append(group)
        else:
            sink().append(_leaf(kind, text, token))

    while stack:
        open_group = stack.pop()
        diagnostics.append(diagnostic_from_spec(TREE_UNCLOSED_DELIMITER, open_group.open_range))
        sink().append(open_group.close(len(source)))

    return tuple(root), diagnostics


def _leaf(kind: TokenKind, text: str, token: Token) -> TokenTree:
    match kind:
        case TokenKind.IDENTIFIER:
            if token.flags & TokenFlags.RAW_IDENT:
                return Ident(text[2:], token.range, raw=True)
            return Ident(text, token.range)
        case TokenKind.LITERAL:
            return Literal(text, token.range)
        case TokenKind.PUNCT:
            spacing = Spacing.JOINT if token.is_joint() else Spacing.ALONE
            return Punct(text, spacing, token.range)
        case _:
            raise ValueError(f"Not a leaf token kind: {kind!r}")


def _delimiter_for(text: str) -> Delimiter:
    delimiter = Delimiter.for_open(text)
    if delimiter is None:
        raise ValueError(f"Not an opening delimiter: {text!r}")
    return delimiter
