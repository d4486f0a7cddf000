"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from litrewrite.diagnostics.codes import DiagnosticSpec
from litrewrite.diagnostics.diagnostic import Diagnostic
from litrewrite.text import LineIndex, TextRange


def diagnostic_from_spec(spec: DiagnosticSpec, range: TextRange, message: str | None = None) -> Diagnostic:
    return Diagnostic(
        code=spec.code,
        message=spec.message if message is None else message,
        range=range,
        severity=spec.severity,
        hint=spec.hint,
        category=spec.category,
    )


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def format_diagnostic(diagnostic: Diagnostic, source: str, path: str = "<input>") -> str:
    """Render a diagnostic as `path:line:col: severity[CODE]: message`."""
    line, col = LineIndex(source).line_col(diagnostic.range.start)
    text = f"{path}:{line}:{col}: {diagnostic.severity}[{diagnostic.code}]: {diagnostic.message}"
    if diagnostic.hint:
        text += f"\n  hint: {diagnostic.hint}"
    return text
