"""Rewrite entrypoints and result carriers."""

from litrewrite.pipeline.entrypoints import (
    ATTRIBUTE_NAME,
    expand_attribute,
    rewrite_source,
    splice_expansions,
)
from litrewrite.pipeline.result import RewriteResult

__all__ = [
    "ATTRIBUTE_NAME",
    "RewriteResult",
    "expand_attribute",
    "rewrite_source",
    "splice_expansions",
]
