"""Lexer."""

from litrewrite.lexer.lexer import PUNCT_CHARS, Lexer, dump_tokens, token_text
from litrewrite.lexer.token_trees import TokenTreeParse, build_token_trees, lex_token_trees
from litrewrite.lexer.tokens import Token, TokenFlags, TokenKind

__all__ = [
    "PUNCT_CHARS",
    "Lexer",
    "Token",
    "TokenFlags",
    "TokenKind",
    "TokenTreeParse",
    "build_token_trees",
    "dump_tokens",
    "lex_token_trees",
    "token_text",
]
