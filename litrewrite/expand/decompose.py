"""Per-kind decomposition of a literal into the components its handler receives.

Handler-facing contract, one component per kind:

| kind             | component                                         |
|------------------|---------------------------------------------------|
| `integer`        | unsuffixed decimal integer, `0xFF` -> `255`       |
| `float`          | unsuffixed float, separators removed              |
| `string`         | string literal with every escape resolved         |
| `character`      | character literal of the resolved scalar          |
| `byte_character` | unsuffixed integer of the byte value, `b'a'` -> `97` |
| `byte_string`    | byte-string literal of the resolved bytes         |
| `c_string`       | c-string literal of the resolved bytes            |
"""

from typing import Final

from litrewrite.errors import LiteralOverflowError, MalformedLiteralError
from litrewrite.literal import (
    EscapeMode,
    LiteralKind,
    ParsedLiteral,
    raw_bytes,
    unescape_bytes,
    unescape_str,
)
from litrewrite.text import TextRange
from litrewrite.tokens import Literal

# Widest literal a proc-macro can emit. Anything larger is rejected, never truncated.
U128_MAX: Final[int] = 2**128 - 1
# Digits of U128_MAX per base; longer digit strings overflow without being converted.
_MAX_DIGITS: Final[dict[int, int]] = {
    2: len(f"{U128_MAX:b}"),
    8: len(f"{U128_MAX:o}"),
    10: len(str(U128_MAX)),
    16: len(f"{U128_MAX:x}"),
}


def decompose(parsed: ParsedLiteral, span: TextRange) -> tuple[Literal, ...]:
    match parsed.kind:
        case LiteralKind.INTEGER:
            return (Literal.integer(integer_value(parsed), span),)
        case LiteralKind.FLOAT:
            return (Literal.float(float_text(parsed), span),)
        case LiteralKind.STRING:
            return (Literal.string(string_value(parsed), span),)
        case LiteralKind.CHARACTER:
            return (Literal.character(character_value(parsed), span),)
        case LiteralKind.BYTE_CHARACTER:
            return (Literal.integer(byte_value(parsed), span),)
        case LiteralKind.BYTE_STRING:
            return (Literal.byte_string(byte_string_value(parsed), span),)
        case LiteralKind.C_STRING:
            return (Literal.c_string(c_string_value(parsed), span),)


def integer_value(parsed: ParsedLiteral) -> int:
    digits = parsed.body.replace("_", "").lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS[parsed.base]:
        raise LiteralOverflowError(parsed.text)
    value = int(digits, parsed.base)
    if value > U128_MAX:
        raise LiteralOverflowError(parsed.text)
    return value


def float_text(parsed: ParsedLiteral) -> str:
    text = parsed.body.replace("_", "")
    # `1.` is a complete float literal in Rust, but keep the component unambiguous.
    if text.endswith("."):
        text += "0"
    return text


def string_value(parsed: ParsedLiteral) -> str:
    if parsed.raw:
        return parsed.body
    return unescape_str(parsed.body, EscapeMode.STR, text=parsed.text)


def character_value(parsed: ParsedLiteral) -> str:
    value = unescape_str(parsed.body, EscapeMode.CHAR, text=parsed.text)
    if len(value) != 1:
        raise MalformedLiteralError(parsed.text, "character literal must hold exactly one character")
    return value


def byte_value(parsed: ParsedLiteral) -> int:
    value = unescape_bytes(parsed.body, EscapeMode.BYTE, text=parsed.text)
    if len(value) != 1:
        raise MalformedLiteralError(parsed.text, "byte literal must hold exactly one byte")
    return value[0]


def byte_string_value(parsed: ParsedLiteral) -> bytes:
    if parsed.raw:
        return raw_bytes(parsed.body, EscapeMode.BYTE_STR, text=parsed.text)
    return unescape_bytes(parsed.body, EscapeMode.BYTE_STR, text=parsed.text)


def c_string_value(parsed: ParsedLiteral) -> bytes:
    if parsed.raw:
        return raw_bytes(parsed.body, EscapeMode.C_STR, text=parsed.text)
    return unescape_bytes(parsed.body, EscapeMode.C_STR, text=parsed.text)
