"""Rust escape sequences: resolving them in literal bodies and writing them back out."""

from collections.abc import Iterator
from enum import IntEnum
from typing import Final

from litrewrite.errors import MalformedLiteralError

_SIMPLE_ESCAPES: Final[dict[str, str]] = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
    "0": "\0",
    "'": "'",
    '"': '"',
}
_HEX_DIGITS: Final[frozenset[str]] = frozenset("0123456789abcdefABCDEF")
# Skipped after a backslash-newline continuation.
_CONTINUATION_WHITESPACE: Final[str] = " \t\n\r"
_MAX_CODEPOINT: Final[int] = 0x10FFFF


class EscapeMode(IntEnum):
    """Which escapes a quoted literal body accepts and what it resolves to."""

    CHAR = 1
    STR = 2
    BYTE = 3
    BYTE_STR = 4
    C_STR = 5

    @property
    def produces_bytes(self) -> bool:
        return self in (EscapeMode.BYTE, EscapeMode.BYTE_STR, EscapeMode.C_STR)

    @property
    def ascii_only(self) -> bool:
        # `b'…'` and `b"…"` bodies may only spell ASCII; `\x` covers the rest.
        return self in (EscapeMode.BYTE, EscapeMode.BYTE_STR)

    @property
    def allows_unicode_escape(self) -> bool:
        return not self.ascii_only

    @property
    def allows_line_continuation(self) -> bool:
        return self in (EscapeMode.STR, EscapeMode.BYTE_STR, EscapeMode.C_STR)


def unescape_str(body: str, mode: EscapeMode, *, text: str = "") -> str:
    """Resolve escapes in a `'…'` or `"…"` body."""
    if mode.produces_bytes:
        raise ValueError(f"{mode.name} literals resolve to bytes")
    return "".join(_resolve(body, mode, text or body))  # type: ignore[arg-type]


def unescape_bytes(body: str, mode: EscapeMode, *, text: str = "") -> bytes:
    """Resolve escapes in a `b'…'`, `b"…"` or `c"…"` body."""
    if not mode.produces_bytes:
        raise ValueError(f"{mode.name} literals resolve to text")
    out = bytearray()
    for unit in _resolve(body, mode, text or body):
        if isinstance(unit, int):
            out.append(unit)
        else:
            out.extend(unit.encode("utf-8"))
    return _check_c_str(bytes(out), mode, text or body)


def raw_bytes(body: str, mode: EscapeMode, *, text: str = "") -> bytes:
    """Value of a raw byte-string or raw c-string body."""
    if mode.ascii_only and not body.isascii():
        raise MalformedLiteralError(text or body, "non-ASCII character in raw byte string")
    return _check_c_str(body.encode("utf-8"), mode, text or body)


def _check_c_str(value: bytes, mode: EscapeMode, text: str) -> bytes:
    if mode == EscapeMode.C_STR and 0 in value:
        raise MalformedLiteralError(text, "c-string literal contains a nul byte")
    return value


def _resolve(body: str, mode: EscapeMode, text: str) -> Iterator[str | int]:
    # Yields characters, or raw byte values for `\x` escapes in byte-producing modes.
    i = 0
    n = len(body)
    while i < n:
        ch = body[i]
        if ch != "\\":
            if mode.ascii_only and not ch.isascii():
                raise MalformedLiteralError(text, f"non-ASCII character {ch!r} in byte literal")
            yield ch
            i += 1
            continue

        if i + 1 >= n:
            raise MalformedLiteralError(text, "dangling backslash")
        esc = body[i + 1]

        if esc in _SIMPLE_ESCAPES:
            yield _SIMPLE_ESCAPES[esc]
            i += 2
        elif esc == "x":
            digits = body[i + 2 : i + 4]
            if len(digits) != 2 or not all(d in _HEX_DIGITS for d in digits):
                raise MalformedLiteralError(text, "`\\x` needs exactly two hex digits")
            value = int(digits, 16)
            if mode.produces_bytes:
                yield value
            elif value > 0x7F:
                raise MalformedLiteralError(text, "`\\x` escape out of range, must be at most 0x7F")
            else:
                yield chr(value)
            i += 4
        elif esc == "u":
            if not mode.allows_unicode_escape:
                raise MalformedLiteralError(text, "unicode escape in byte literal")
            yield chr(_unicode_escape(body, i, text))
            i = body.index("}", i) + 1
        elif esc in "\n\r" and mode.allows_line_continuation:
            i += 1
            while i < n and body[i] in _CONTINUATION_WHITESPACE:
                i += 1
        else:
            raise MalformedLiteralError(text, f"unknown character escape `\\{esc}`")


def _unicode_escape(body: str, start: int, text: str) -> int:
    # body[start:] looks like `\u{1F_600}`
    if body[start + 2 : start + 3] != "{":
        raise MalformedLiteralError(text, "`\\u` must be followed by `{`")
    close = body.find("}", start + 3)
    if close == -1:
        raise MalformedLiteralError(text, "unterminated unicode escape")
    spelled = body[start + 3 : close]
    digits = spelled.replace("_", "")
    if spelled.startswith("_") or not 1 <= len(digits) <= 6 or not all(d in _HEX_DIGITS for d in digits):
        raise MalformedLiteralError(text, f"invalid unicode escape `\\u{{{spelled}}}`")
    codepoint = int(digits, 16)
    if codepoint > _MAX_CODEPOINT or 0xD800 <= codepoint <= 0xDFFF:
        raise MalformedLiteralError(text, f"invalid unicode character escape `\\u{{{spelled}}}`")
    return codepoint


def quote_str(value: str) -> str:
    """Spell `value` as a Rust string literal."""
    return '"' + "".join(_escape_char(ch, '"') for ch in value) + '"'


def quote_char(value: str) -> str:
    """Spell a single character as a Rust character literal."""
    if len(value) != 1:
        raise ValueError(f"expected a single character, got {value!r}")
    return "'" + _escape_char(value, "'") + "'"


def quote_bytes(value: bytes, prefix: str = "b") -> str:
    """Spell `value` as a byte-string (`b"…"`) or c-string (`c"…"`) literal."""
    return prefix + '"' + "".join(_escape_byte(byte) for byte in value) + '"'


def _escape_char(ch: str, quote: str) -> str:
    if ch == quote or ch == "\\":
        return "\\" + ch
    if ch == "\n":
        return "\\n"
    if ch == "\r":
        return "\\r"
    if ch == "\t":
        return "\\t"
    if ch == "\0":
        return "\\0"
    if ch.isprintable():
        return ch
    return f"\\u{{{ord(ch):x}}}"


def _escape_byte(byte: int) -> str:
    match byte:
        case 0x09:
            return "\\t"
        case 0x0A:
            return "\\n"
        case 0x0D:
            return "\\r"
        case 0x22 | 0x27 | 0x5C:
            return "\\" + chr(byte)
        case _ if 0x20 <= byte <= 0x7E:
            return chr(byte)
        case _:
            return f"\\x{byte:02x}"
