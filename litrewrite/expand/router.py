"""Suffix routing: pass a literal through, rewrite it, or refuse it."""

from enum import StrEnum

from litrewrite.errors import ReservedSuffixError, UnsupportedCapabilityError
from litrewrite.expand.options import EngineOptions
from litrewrite.literal import LiteralKind, ParsedLiteral, native_suffixes, reserved_suffixes


class Route(StrEnum):
    PASS_THROUGH = "pass_through"
    CUSTOM = "custom"


def route_literal(parsed: ParsedLiteral, options: EngineOptions) -> Route:
    """Decide what happens to one literal.

    Raises ReservedSuffixError for suffixes Rust is expected to claim, and
    UnsupportedCapabilityError for custom c-strings on toolchains without them.
    """
    suffix = parsed.suffix
    if not suffix or suffix in native_suffixes(parsed.kind):
        return Route.PASS_THROUGH
    if suffix in reserved_suffixes(parsed.kind):
        raise ReservedSuffixError(suffix)
    if parsed.kind == LiteralKind.C_STRING and not options.c_string_literals:
        raise UnsupportedCapabilityError("c-string")
    return Route.CUSTOM
