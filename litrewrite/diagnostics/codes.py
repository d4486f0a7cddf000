"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string literal.",
    hint="Close the string with a double quote (and matching `#`s for raw strings).",
    severity="error",
    category="lexer",
)

LEXER_UNTERMINATED_CHAR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_CHAR",
    message="Unterminated character literal.",
    hint="Close the character literal with a single quote.",
    severity="error",
    category="lexer",
)

LEXER_UNTERMINATED_BLOCK_COMMENT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_BLOCK_COMMENT",
    message="Unterminated block comment.",
    hint="Close every `/*` with a matching `*/`.",
    severity="error",
    category="lexer",
)

LEXER_UNKNOWN_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNKNOWN_CHARACTER",
    message="Unknown start of token.",
    severity="error",
    category="lexer",
)

LEXER_INVALID_LITERAL: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INVALID_LITERAL",
    message="Invalid literal.",
    hint="Check the digits for the literal's base and its escape sequences.",
    severity="error",
    category="lexer",
)

TREE_UNEXPECTED_CLOSE_DELIMITER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TREE_UNEXPECTED_CLOSE_DELIMITER",
    message="Unexpected closing delimiter.",
    severity="error",
    category="tree",
)

TREE_MISMATCHED_DELIMITER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TREE_MISMATCHED_DELIMITER",
    message="Mismatched closing delimiter.",
    severity="error",
    category="tree",
)

TREE_UNCLOSED_DELIMITER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="TREE_UNCLOSED_DELIMITER",
    message="Unclosed delimiter.",
    severity="error",
    category="tree",
)

EXPAND_RESERVED_SUFFIX: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EXPAND_RESERVED_SUFFIX",
    message="Suffix is reserved for a future Rust numeric type.",
    hint="Pick a different suffix for the custom literal.",
    severity="error",
    category="expand",
)

EXPAND_UNSUPPORTED_C_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EXPAND_UNSUPPORTED_C_STRING",
    message="Custom c-string literal with suffix is only supported on Rust version >=1.79.",
    hint="Raise the host version or drop the suffix.",
    severity="error",
    category="expand",
)

EXPAND_INTEGER_OVERFLOW: Final[DiagnosticSpec] = DiagnosticSpec(
    code="EXPAND_INTEGER_OVERFLOW",
    message="Integer literal is too large for a custom literal (maximum is u128::MAX).",
    severity="error",
    category="expand",
)
