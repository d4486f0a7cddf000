"""Building the replacement token sequences: handler calls and `compile_error!`s.

Every token built here is stamped with the span of the literal it replaces, so
errors inside a handler and IDE navigation point at the literal itself.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Final

from litrewrite.literal import LiteralKind
from litrewrite.text import TextRange
from litrewrite.tokens import Delimiter, Group, Ident, Literal, Punct, Spacing, TokenTree

# NOTE: renaming either of these is a breaking change for every handler crate.
HANDLER_ROOT: Final[str] = "crate"
HANDLER_NAMESPACE: Final[str] = "custom_literal"

# `::core::compile_error!` resolves even when the call site shadows `compile_error`.
COMPILE_ERROR_PATH: Final[tuple[str, ...]] = ("core", "compile_error")


@dataclass(frozen=True, slots=True)
class HandlerPath:
    """`crate::custom_literal::<kind>::<suffix>`"""

    kind: LiteralKind
    suffix: str

    @property
    def segments(self) -> tuple[str, ...]:
        return (HANDLER_ROOT, HANDLER_NAMESPACE, self.kind.value, self.suffix)

    def __str__(self) -> str:
        return "::".join(self.segments)


def synthesize_call(path: HandlerPath, components: Iterable[TokenTree], span: TextRange) -> tuple[TokenTree, ...]:
    """`<path>!(<components>)` with every token at `span`."""
    return (
        *path_tokens(path.segments, span),
        Punct("!", Spacing.ALONE, span),
        Group(Delimiter.PARENTHESIS, tuple(components), span),
    )


def compile_error(message: str, span: TextRange) -> tuple[TokenTree, ...]:
    """`::core::compile_error! { "<message>" }` with every token at `span`."""
    return (
        *path_tokens(COMPILE_ERROR_PATH, span, absolute=True),
        Punct("!", Spacing.ALONE, span),
        Group(Delimiter.BRACE, (Literal.string(message, span),), span),
    )


def path_tokens(segments: Sequence[str], span: TextRange, *, absolute: bool = False) -> list[TokenTree]:
    tokens: list[TokenTree] = []
    for index, segment in enumerate(segments):
        if index > 0 or absolute:
            tokens.append(Punct(":", Spacing.JOINT, span))
            tokens.append(Punct(":", Spacing.ALONE, span))
        tokens.append(Ident(segment, span))
    return tokens
