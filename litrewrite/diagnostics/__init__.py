"""Diagnostics."""

from litrewrite.diagnostics.codes import (
    EXPAND_INTEGER_OVERFLOW,
    EXPAND_RESERVED_SUFFIX,
    EXPAND_UNSUPPORTED_C_STRING,
    LEXER_INVALID_LITERAL,
    LEXER_UNKNOWN_CHARACTER,
    LEXER_UNTERMINATED_BLOCK_COMMENT,
    LEXER_UNTERMINATED_CHAR,
    LEXER_UNTERMINATED_STRING,
    TREE_MISMATCHED_DELIMITER,
    TREE_UNCLOSED_DELIMITER,
    TREE_UNEXPECTED_CLOSE_DELIMITER,
    DiagnosticSpec,
)
from litrewrite.diagnostics.diagnostic import Diagnostic, Severity
from litrewrite.diagnostics.report import (
    collect_diagnostics,
    diagnostic_from_spec,
    format_diagnostic,
    has_errors,
)

__all__ = [
    "EXPAND_INTEGER_OVERFLOW",
    "EXPAND_RESERVED_SUFFIX",
    "EXPAND_UNSUPPORTED_C_STRING",
    "LEXER_INVALID_LITERAL",
    "LEXER_UNKNOWN_CHARACTER",
    "LEXER_UNTERMINATED_BLOCK_COMMENT",
    "LEXER_UNTERMINATED_CHAR",
    "LEXER_UNTERMINATED_STRING",
    "TREE_MISMATCHED_DELIMITER",
    "TREE_UNCLOSED_DELIMITER",
    "TREE_UNEXPECTED_CLOSE_DELIMITER",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "diagnostic_from_spec",
    "format_diagnostic",
    "has_errors",
]
