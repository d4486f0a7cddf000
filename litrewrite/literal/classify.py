"""Literal classification: splitting Rust literal text into kind, payload and suffix.

The scanning helpers are shared with the lexer so that the lexer's idea of
where a literal ends and the classifier's idea of what it contains can never
drift apart.
"""

from dataclasses import dataclass
from typing import Final

from litrewrite.errors import MalformedLiteralError
from litrewrite.literal.escapes import EscapeMode, raw_bytes, unescape_bytes, unescape_str
from litrewrite.literal.kind import LiteralKind
from litrewrite.literal.suffixes import is_float_type_suffix

DECIMAL_DIGITS: Final[frozenset[str]] = frozenset("0123456789")
_DECIMAL_OR_SEPARATOR: Final[frozenset[str]] = frozenset("0123456789_")
_HEX_OR_SEPARATOR: Final[frozenset[str]] = frozenset("0123456789abcdefABCDEF_")
_DIGITS_FOR_BASE: Final[dict[int, frozenset[str]]] = {
    2: frozenset("01"),
    8: frozenset("01234567"),
    10: DECIMAL_DIGITS,
    16: frozenset("0123456789abcdefABCDEF"),
}
_RADIX_PREFIXES: Final[dict[str, int]] = {"0b": 2, "0o": 8, "0x": 16}
_ESCAPE_MODES: Final[dict[LiteralKind, EscapeMode]] = {
    LiteralKind.CHARACTER: EscapeMode.CHAR,
    LiteralKind.STRING: EscapeMode.STR,
    LiteralKind.BYTE_CHARACTER: EscapeMode.BYTE,
    LiteralKind.BYTE_STRING: EscapeMode.BYTE_STR,
    LiteralKind.C_STRING: EscapeMode.C_STR,
}


@dataclass(frozen=True, slots=True)
class ParsedLiteral:
    """A literal split along Rust's lexical grammar.

    `body` is the payload the decomposers work on:
    - integers: the digits after any radix prefix, separators kept;
    - floats: the numeric text, separators kept;
    - quoted kinds: the text between the quotes, escapes unresolved.
    """

    kind: LiteralKind
    text: str
    body: str
    suffix: str
    base: int = 10
    raw: bool = False


@dataclass(frozen=True, slots=True)
class NumberScan:
    base: int
    digits_start: int
    end: int
    is_float: bool


def is_ident_start(ch: str) -> bool:
    return ch != "" and (ch == "_" or ch.isidentifier())


def is_ident_continue(ch: str) -> bool:
    return ch != "" and ("a" + ch).isidentifier()


def scan_ident(source: str, pos: int) -> int:
    """End of the identifier starting at `pos` (which must be an identifier start)."""
    pos += 1
    while pos < len(source) and is_ident_continue(source[pos]):
        pos += 1
    return pos


def scan_suffix(source: str, pos: int) -> int:
    """End of the literal suffix at `pos`; `pos` itself when there is none."""
    if is_ident_start(_char(source, pos)):
        return scan_ident(source, pos)
    return pos


def scan_number(source: str, pos: int) -> NumberScan:
    """Scan the numeric part of a literal starting with a decimal digit at `pos`."""
    prefix = source[pos : pos + 2]
    if prefix in _RADIX_PREFIXES:
        base = _RADIX_PREFIXES[prefix]
        allowed = _HEX_OR_SEPARATOR if base == 16 else _DECIMAL_OR_SEPARATOR
        digits_start = pos + 2
        return NumberScan(base, digits_start, _eat(source, digits_start, allowed), False)

    end = _eat(source, pos, _DECIMAL_OR_SEPARATOR)
    after_dot = _char(source, end + 1)
    # `1..2` is a range and `1.max(2)` a method call; neither dot belongs to the number.
    if _char(source, end) == "." and after_dot != "." and not is_ident_start(after_dot):
        end += 1
        if _char(source, end) in DECIMAL_DIGITS:
            end = _eat(source, end, _DECIMAL_OR_SEPARATOR)
            end = _scan_exponent(source, end) or end
        return NumberScan(10, pos, end, True)

    exponent_end = _scan_exponent(source, end)
    if exponent_end is not None:
        return NumberScan(10, pos, exponent_end, True)
    return NumberScan(10, pos, end, False)


def scan_quoted(source: str, pos: int) -> int | None:
    """End (past the closing quote) of the escaped `'…'`/`"…"` body opening at `pos`."""
    quote = source[pos]
    pos += 1
    while pos < len(source):
        ch = source[pos]
        if ch == "\\":
            pos += 2
            continue
        if ch == quote:
            return pos + 1
        pos += 1
    return None


def scan_raw_string(source: str, pos: int) -> int | None:
    """End of the raw string whose `r` is at `pos`: `r"…"`, `r#"…"#`, …"""
    hashes = _eat(source, pos + 1, frozenset("#")) - (pos + 1)
    open_quote = pos + 1 + hashes
    if _char(source, open_quote) != '"':
        return None
    close = source.find('"' + "#" * hashes, open_quote + 1)
    if close == -1:
        return None
    return close + 1 + hashes


def parse_literal(text: str) -> ParsedLiteral:
    """Classify literal token text.

    The text must be a single literal as produced by a Rust lexer. Anything
    else (`true`, `-1`, an unterminated string) raises MalformedLiteralError.
    """
    first = _char(text, 0)
    if first in DECIMAL_DIGITS:
        return _parse_number(text)
    if first == "'":
        return _parse_quoted(text, 0, LiteralKind.CHARACTER)
    if first == '"':
        return _parse_quoted(text, 0, LiteralKind.STRING)
    if text.startswith(("r\"", "r#")):
        return _parse_raw(text, 0, LiteralKind.STRING)
    if text.startswith("b'"):
        return _parse_quoted(text, 1, LiteralKind.BYTE_CHARACTER)
    if text.startswith('b"'):
        return _parse_quoted(text, 1, LiteralKind.BYTE_STRING)
    if text.startswith(("br\"", "br#")):
        return _parse_raw(text, 1, LiteralKind.BYTE_STRING)
    if text.startswith('c"'):
        return _parse_quoted(text, 1, LiteralKind.C_STRING)
    if text.startswith(("cr\"", "cr#")):
        return _parse_raw(text, 1, LiteralKind.C_STRING)
    raise MalformedLiteralError(text, "not a literal")


def validate_literal(text: str) -> ParsedLiteral:
    """Classify `text` and check its payload the way rustc does.

    On top of `parse_literal`, escapes are resolved and character/byte
    literals must hold exactly one unit. Integer range is not checked here.
    """
    parsed = parse_literal(text)
    mode = _ESCAPE_MODES.get(parsed.kind)
    if mode is None:
        return parsed
    if parsed.raw:
        if mode.produces_bytes:
            raw_bytes(parsed.body, mode, text=text)
        return parsed
    if mode.produces_bytes:
        units = len(unescape_bytes(parsed.body, mode, text=text))
    else:
        units = len(unescape_str(parsed.body, mode, text=text))
    if mode in (EscapeMode.CHAR, EscapeMode.BYTE) and units != 1:
        raise MalformedLiteralError(text, "character literal must hold exactly one character")
    return parsed


def _parse_number(text: str) -> ParsedLiteral:
    scan = scan_number(text, 0)
    suffix = _split_suffix(text, scan.end)
    body = text[scan.digits_start : scan.end]

    digits = body.replace("_", "")
    if scan.is_float:
        return ParsedLiteral(LiteralKind.FLOAT, text, body, suffix)

    if not digits:
        raise MalformedLiteralError(text, "no digits")
    if any(d not in _DIGITS_FOR_BASE[scan.base] for d in digits):
        raise MalformedLiteralError(text, f"invalid digit for a base {scan.base} literal")
    if scan.base == 10 and is_float_type_suffix(suffix):
        return ParsedLiteral(LiteralKind.FLOAT, text, body, suffix)
    return ParsedLiteral(LiteralKind.INTEGER, text, body, suffix, base=scan.base)


def _parse_quoted(text: str, quote_at: int, kind: LiteralKind) -> ParsedLiteral:
    end = scan_quoted(text, quote_at)
    if end is None:
        raise MalformedLiteralError(text, "unterminated quoted literal")
    suffix = _split_suffix(text, end)
    return ParsedLiteral(kind, text, text[quote_at + 1 : end - 1], suffix)


def _parse_raw(text: str, r_at: int, kind: LiteralKind) -> ParsedLiteral:
    end = scan_raw_string(text, r_at)
    if end is None:
        raise MalformedLiteralError(text, "unterminated raw string")
    hashes = _eat(text, r_at + 1, frozenset("#")) - (r_at + 1)
    body = text[r_at + 2 + hashes : end - 1 - hashes]
    suffix = _split_suffix(text, end)
    return ParsedLiteral(kind, text, body, suffix, raw=True)


def _split_suffix(text: str, end: int) -> str:
    if scan_suffix(text, end) != len(text):
        raise MalformedLiteralError(text, f"unexpected trailing text {text[end:]!r}")
    return text[end:]


def _scan_exponent(source: str, pos: int) -> int | None:
    if _char(source, pos) not in ("e", "E"):
        return None
    cursor = pos + 1
    if _char(source, cursor) in ("+", "-"):
        cursor += 1
    cursor = _eat(source, cursor, frozenset("_"))
    if _char(source, cursor) not in DECIMAL_DIGITS:
        return None
    return _eat(source, cursor, _DECIMAL_OR_SEPARATOR)


def _eat(source: str, pos: int, allowed: frozenset[str]) -> int:
    while pos < len(source) and source[pos] in allowed:
        pos += 1
    return pos


def _char(source: str, pos: int) -> str:
    return source[pos : pos + 1]
