import pytest

from litrewrite.errors import MalformedLiteralError
from litrewrite.literal import LiteralKind, ParsedLiteral, is_ident_start, parse_literal, validate_literal


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("100km", ParsedLiteral(LiteralKind.INTEGER, "100km", "100", "km")),
        ("0xFFu8", ParsedLiteral(LiteralKind.INTEGER, "0xFFu8", "FF", "u8", base=16)),
        ("0b1111x", ParsedLiteral(LiteralKind.INTEGER, "0b1111x", "1111", "x", base=2)),
        ("0o17", ParsedLiteral(LiteralKind.INTEGER, "0o17", "17", "", base=8)),
        ("1_000_usize", ParsedLiteral(LiteralKind.INTEGER, "1_000_usize", "1_000_", "usize")),
        ("1.5f32", ParsedLiteral(LiteralKind.FLOAT, "1.5f32", "1.5", "f32")),
        ("70.8e7x", ParsedLiteral(LiteralKind.FLOAT, "70.8e7x", "70.8e7", "x")),
        ("1e10", ParsedLiteral(LiteralKind.FLOAT, "1e10", "1e10", "")),
        ("2.", ParsedLiteral(LiteralKind.FLOAT, "2.", "2.", "")),
        ("2f64", ParsedLiteral(LiteralKind.FLOAT, "2f64", "2", "f64")),
        ("1f16", ParsedLiteral(LiteralKind.FLOAT, "1f16", "1", "f16")),
        ("'a'", ParsedLiteral(LiteralKind.CHARACTER, "'a'", "a", "")),
        ("'\\''c", ParsedLiteral(LiteralKind.CHARACTER, "'\\''c", "\\'", "c")),
        ('"hi"s', ParsedLiteral(LiteralKind.STRING, '"hi"s', "hi", "s")),
        ('r#"a"b"#s', ParsedLiteral(LiteralKind.STRING, 'r#"a"b"#s', 'a"b', "s", raw=True)),
        ("b'a'x", ParsedLiteral(LiteralKind.BYTE_CHARACTER, "b'a'x", "a", "x")),
        ('b"ab"', ParsedLiteral(LiteralKind.BYTE_STRING, 'b"ab"', "ab", "")),
        ('br"ab"z', ParsedLiteral(LiteralKind.BYTE_STRING, 'br"ab"z', "ab", "z", raw=True)),
        ('c"foo"x', ParsedLiteral(LiteralKind.C_STRING, 'c"foo"x', "foo", "x")),
        ('cr##"f"#o"##', ParsedLiteral(LiteralKind.C_STRING, 'cr##"f"#o"##', 'f"#o', "", raw=True)),
    ],
)
def test_parse_literal_splits_kind_body_and_suffix(text: str, expected: ParsedLiteral) -> None:
    assert parse_literal(text) == expected


def test_decimal_integer_with_float_type_suffix_is_float() -> None:
    assert parse_literal("1f32").kind == LiteralKind.FLOAT
    # Not for other bases: `0x1f32` is a hex integer.
    assert parse_literal("0x1f32").kind == LiteralKind.INTEGER


@pytest.mark.parametrize(
    "text",
    [
        "true",
        "-1",
        "x",
        '"abc',
        "'a",
        "0x",
        "0b102",
        "0o8",
        "1.0.0",
        'r#"abc"',
    ],
)
def test_parse_literal_rejects_non_literals(text: str) -> None:
    with pytest.raises(MalformedLiteralError):
        parse_literal(text)


def test_is_ident_start_accepts_unicode_letters() -> None:
    assert is_ident_start("é")
    assert is_ident_start("_")
    assert not is_ident_start("1")
    assert not is_ident_start("")


@pytest.mark.parametrize(
    "text",
    [
        "0b12",
        "0o9",
        "0x",
        '"\\q"up',
        'b"é"x',
        "b'ab'",
        "'\\u{D800}'",
        'c"a\\0"z',
        'br"é"',
    ],
)
def test_validate_literal_rejects_invalid_payloads(text: str) -> None:
    with pytest.raises(MalformedLiteralError):
        validate_literal(text)


@pytest.mark.parametrize("text", ["0b1010", '"\\u{1F600}"up', "b'\\xff'", 'cr"\\0"', 'r"\\q"', "'\\n'", "9" * 50])
def test_validate_literal_accepts_valid_literals(text: str) -> None:
    assert validate_literal(text) == parse_literal(text)
