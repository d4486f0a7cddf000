"""Rust literal grammar: classification, escapes and suffix sets."""

from litrewrite.literal.classify import (
    NumberScan,
    ParsedLiteral,
    is_ident_continue,
    is_ident_start,
    parse_literal,
    scan_ident,
    scan_number,
    scan_quoted,
    scan_raw_string,
    scan_suffix,
    validate_literal,
)
from litrewrite.literal.escapes import (
    EscapeMode,
    quote_bytes,
    quote_char,
    quote_str,
    raw_bytes,
    unescape_bytes,
    unescape_str,
)
from litrewrite.literal.kind import LiteralKind
from litrewrite.literal.suffixes import (
    FLOAT_SUFFIXES,
    FLOAT_SUFFIXES_RESERVED,
    INTEGER_SUFFIXES,
    INTEGER_SUFFIXES_RESERVED,
    native_suffixes,
    reserved_suffixes,
)

__all__ = [
    "FLOAT_SUFFIXES",
    "FLOAT_SUFFIXES_RESERVED",
    "INTEGER_SUFFIXES",
    "INTEGER_SUFFIXES_RESERVED",
    "EscapeMode",
    "LiteralKind",
    "NumberScan",
    "ParsedLiteral",
    "is_ident_continue",
    "is_ident_start",
    "native_suffixes",
    "parse_literal",
    "quote_bytes",
    "quote_char",
    "quote_str",
    "raw_bytes",
    "reserved_suffixes",
    "scan_ident",
    "scan_number",
    "scan_quoted",
    "scan_raw_string",
    "scan_suffix",
    "validate_literal",
    "unescape_bytes",
    "unescape_str",
]
