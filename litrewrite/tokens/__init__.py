"""Token trees."""

from litrewrite.tokens.printer import render_tokens
from litrewrite.tokens.tree import (
    Delimiter,
    Group,
    Ident,
    Literal,
    Punct,
    Spacing,
    TokenTree,
    iter_literals,
)

__all__ = [
    "Delimiter",
    "Group",
    "Ident",
    "Literal",
    "Punct",
    "Spacing",
    "TokenTree",
    "iter_literals",
    "render_tokens",
]
