"""The rewriting pass: walk a token stream and expand every custom literal."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from litrewrite.diagnostics import Diagnostic, diagnostic_from_spec, has_errors
from litrewrite.errors import ExpansionError
from litrewrite.expand.decompose import decompose
from litrewrite.expand.options import EngineOptions
from litrewrite.expand.router import Route, route_literal
from litrewrite.expand.synthesize import HandlerPath, compile_error, synthesize_call
from litrewrite.literal import parse_literal
from litrewrite.tokens import Group, Literal, TokenTree

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LiteralExpansion:
    """What one literal turned into."""

    literal: Literal
    tokens: tuple[TokenTree, ...]
    diagnostic: Diagnostic | None = None

    @property
    def changed(self) -> bool:
        return self.tokens != (self.literal,)


@dataclass(frozen=True, slots=True)
class TransformResult:
    tokens: tuple[TokenTree, ...]
    # Only literals that were rewritten or diagnosed, in source order.
    expansions: tuple[LiteralExpansion, ...]

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return [e.diagnostic for e in self.expansions if e.diagnostic is not None]

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)


def expand_literal(literal: Literal, options: EngineOptions) -> LiteralExpansion:
    """Expand a single literal token.

    MalformedLiteralError propagates: it means the token did not come from a
    Rust lexer. ExpansionErrors become a `compile_error!` at the literal.
    """
    parsed = parse_literal(literal.text)
    try:
        if route_literal(parsed, options) == Route.PASS_THROUGH:
            return LiteralExpansion(literal, (literal,))
        components = decompose(parsed, literal.span)
    except ExpansionError as exc:
        logger.debug("rejecting %s at %r: %s", literal.text, literal.span, exc.message)
        diagnostic = diagnostic_from_spec(exc.spec, literal.span, exc.message)
        return LiteralExpansion(literal, compile_error(exc.message, literal.span), diagnostic)

    path = HandlerPath(parsed.kind, parsed.suffix)
    logger.debug("expanding %s at %r into %s!", literal.text, literal.span, path)
    return LiteralExpansion(literal, synthesize_call(path, components, literal.span))


def transform(stream: Sequence[TokenTree], options: EngineOptions | None = None) -> TransformResult:
    """Rewrite every custom literal in `stream`, recursing into groups.

    Everything that is not a literal comes out unchanged and in order; groups
    keep their delimiter and span.
    """
    expansions: list[LiteralExpansion] = []
    tokens = _transform_stream(stream, options or EngineOptions(), expansions)
    return TransformResult(tokens, tuple(expansions))


def _transform_stream(
    stream: Sequence[TokenTree],
    options: EngineOptions,
    expansions: list[LiteralExpansion],
) -> tuple[TokenTree, ...]:
    out: list[TokenTree] = []
    for tree in stream:
        if isinstance(tree, Literal):
            expansion = expand_literal(tree, options)
            if expansion.changed:
                expansions.append(expansion)
            out.extend(expansion.tokens)
        elif isinstance(tree, Group):
            out.append(Group(tree.delimiter, _transform_stream(tree.stream, options, expansions), tree.span))
        else:
            out.append(tree)
    return tuple(out)
