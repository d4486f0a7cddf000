"""Rewrite suffixed Rust literals into calls to user-defined literal handlers.

`10km` becomes `crate::custom_literal::integer::km!(10)`; literals without a
suffix, or with one Rust already understands, are left alone.
"""

from litrewrite.errors import ExpansionError, MalformedLiteralError, UsageError
from litrewrite.expand import EngineOptions, LiteralExpansion, TransformResult, transform
from litrewrite.literal import LiteralKind
from litrewrite.pipeline import RewriteResult, expand_attribute, rewrite_source

__all__ = [
    "EngineOptions",
    "ExpansionError",
    "LiteralExpansion",
    "LiteralKind",
    "MalformedLiteralError",
    "RewriteResult",
    "TransformResult",
    "UsageError",
    "expand_attribute",
    "rewrite_source",
    "transform",
]
