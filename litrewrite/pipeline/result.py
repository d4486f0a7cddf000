"""Text rewrite carrier."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from litrewrite.diagnostics import has_errors

if TYPE_CHECKING:
    from litrewrite.diagnostics import Diagnostic
    from litrewrite.tokens import TokenTree


@dataclass(slots=True)
class RewriteResult:
    """Outcome of rewriting one source text.

    `text` is `source_text` with every custom literal replaced by its expansion;
    everything between literals, comments included, is kept byte for byte.
    """

    source_text: str
    text: str
    tokens: tuple[TokenTree, ...]
    diagnostics: list[Diagnostic]

    @property
    def changed(self) -> bool:
        return self.text != self.source_text

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)
