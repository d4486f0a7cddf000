"""Exceptions raised while rewriting literals."""

from litrewrite.diagnostics.codes import (
    EXPAND_INTEGER_OVERFLOW,
    EXPAND_RESERVED_SUFFIX,
    EXPAND_UNSUPPORTED_C_STRING,
    DiagnosticSpec,
)


class UsageError(ValueError):
    """The rewriter was invoked with configuration it does not accept."""


class MalformedLiteralError(RuntimeError):
    """Literal text that the lexer should never have produced.

    Reaching this is a bug in whatever built the token, not a user error.
    """

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"malformed literal {text!r}: {reason}")
        self.text = text
        self.reason = reason


class ExpansionError(Exception):
    """A single literal could not be expanded.

    Turned into a `compile_error!` at the literal's span by the walker; the
    rest of the pass continues.
    """

    spec: DiagnosticSpec

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ReservedSuffixError(ExpansionError):
    spec = EXPAND_RESERVED_SUFFIX

    def __init__(self, suffix: str) -> None:
        super().__init__(
            f"suffix {suffix} is not currently used by rust, but it likely will be in the future. "
            "To avoid breakage and not compromise rust's compatibility guarantees, we forbid this suffix"
        )
        self.suffix = suffix


class UnsupportedCapabilityError(ExpansionError):
    spec = EXPAND_UNSUPPORTED_C_STRING

    def __init__(self, capability: str) -> None:
        super().__init__(f"custom {capability} literal with suffix is only supported on Rust version >=1.79")
        self.capability = capability


class LiteralOverflowError(ExpansionError):
    spec = EXPAND_INTEGER_OVERFLOW

    def __init__(self, text: str) -> None:
        super().__init__(f"integer literal `{text}` is too large, custom integer literals are limited to u128::MAX")
        self.text = text
