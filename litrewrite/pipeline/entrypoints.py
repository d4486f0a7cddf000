"""Entrypoints: the attribute-style token transform and the source-text rewrite."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from litrewrite.diagnostics import collect_diagnostics
from litrewrite.errors import UsageError
from litrewrite.expand import EngineOptions, LiteralExpansion, TransformResult, transform
from litrewrite.lexer import lex_token_trees
from litrewrite.pipeline.result import RewriteResult
from litrewrite.tokens import TokenTree, render_tokens

logger = logging.getLogger(__name__)

ATTRIBUTE_NAME = "litrewrite"


def expand_attribute(
    args: Sequence[TokenTree],
    body: Sequence[TokenTree],
    options: EngineOptions | None = None,
) -> TransformResult:
    """Apply `#[litrewrite]` to `body`.

    The attribute takes no arguments; anything in `args` is a UsageError,
    raised before a single literal is looked at.
    """
    if args:
        raise UsageError(f"`#[{ATTRIBUTE_NAME}]` does not take any arguments between `(...)`")
    return transform(body, options)


def rewrite_source(
    text: str,
    options: EngineOptions | None = None,
    *,
    args: str = "",
) -> RewriteResult:
    """Rewrite every custom literal in Rust source text.

    If the text does not lex cleanly it is returned unchanged together with
    the lexer diagnostics.
    """
    arg_parse = lex_token_trees(args)
    if arg_parse.trees or arg_parse.diagnostics:
        raise UsageError(f"`#[{ATTRIBUTE_NAME}]` does not take any arguments between `(...)`")

    parsed = lex_token_trees(text)
    if parsed.has_errors:
        logger.debug("not rewriting: %d lexer diagnostics", len(parsed.diagnostics))
        return RewriteResult(text, text, parsed.trees, list(parsed.diagnostics))

    result = expand_attribute(arg_parse.trees, parsed.trees, options)
    logger.debug("rewrote %d literals", len(result.expansions))
    return RewriteResult(
        source_text=text,
        text=splice_expansions(text, result.expansions),
        tokens=result.tokens,
        diagnostics=collect_diagnostics(parsed.diagnostics, result.diagnostics),
    )


def splice_expansions(source: str, expansions: Iterable[LiteralExpansion]) -> str:
    """Replace each expanded literal's span in `source` with its rendered tokens."""
    parts: list[str] = []
    cursor = 0
    for expansion in sorted(expansions, key=lambda e: e.literal.span.start):
        span = expansion.literal.span
        if span.start < cursor:
            raise ValueError(f"Overlapping literal spans at {span!r}")
        parts.append(source[cursor : span.start])
        parts.append(render_tokens(expansion.tokens))
        cursor = span.end
    parts.append(source[cursor:])
    return "".join(parts)
