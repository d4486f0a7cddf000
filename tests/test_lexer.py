import io

import pytest

from litrewrite.lexer import Lexer, Token, TokenFlags, TokenKind, dump_tokens, token_text


def lex(text: str) -> list[Token]:
    return Lexer(text).lex()


def kinds(tokens: list[Token]) -> list[TokenKind]:
    return [token.kind for token in tokens]


def non_trivia(text: str) -> list[tuple[TokenKind, str]]:
    return [(t.kind, token_text(text, t)) for t in lex(text) if not t.kind.is_trivia and t.kind != TokenKind.EOF]


def test_lexer_statement_with_suffixed_literal() -> None:
    source = "let d = 10km;"
    tokens = lex(source)

    assert kinds(tokens) == [
        TokenKind.IDENTIFIER,
        TokenKind.WHITESPACE,
        TokenKind.IDENTIFIER,
        TokenKind.WHITESPACE,
        TokenKind.PUNCT,
        TokenKind.WHITESPACE,
        TokenKind.LITERAL,
        TokenKind.PUNCT,
        TokenKind.EOF,
    ]
    literal = tokens[6]
    assert token_text(source, literal) == "10km"
    assert literal.range.as_tuple() == (8, 12)
    assert literal.flags & TokenFlags.HAS_SUFFIX


def test_lexer_is_lossless() -> None:
    source = 'fn main() {\r\n    let s = r#"a"b"#x; // done\n    /* x /* y */ z */ 1.5e3_f\n}\n'
    tokens = lex(source)

    assert "".join(token_text(source, t) for t in tokens) == source


def test_lexer_nested_block_comment_is_one_token() -> None:
    source = "/* a /* b */ c */x"

    assert kinds(lex(source)) == [TokenKind.COMMENT, TokenKind.IDENTIFIER, TokenKind.EOF]


def test_lexer_line_break_flag_survives_comments() -> None:
    tokens = lex("a\n// note\nb")
    ident = [t for t in tokens if t.kind == TokenKind.IDENTIFIER][-1]

    assert ident.has_preceding_line_break()
    assert not tokens[0].has_preceding_line_break()


def test_lexer_literal_forms() -> None:
    source = "1u8 0xFF_u8 1.5f32 1e10 'a' b'a' \"s\"x r\"raw\" br#\"b\"#y c\"c\" cr\"c\"z 2."

    assert non_trivia(source) == [
        (TokenKind.LITERAL, "1u8"),
        (TokenKind.LITERAL, "0xFF_u8"),
        (TokenKind.LITERAL, "1.5f32"),
        (TokenKind.LITERAL, "1e10"),
        (TokenKind.LITERAL, "'a'"),
        (TokenKind.LITERAL, "b'a'"),
        (TokenKind.LITERAL, '"s"x'),
        (TokenKind.LITERAL, 'r"raw"'),
        (TokenKind.LITERAL, 'br#"b"#y'),
        (TokenKind.LITERAL, 'c"c"'),
        (TokenKind.LITERAL, 'cr"c"z'),
        (TokenKind.LITERAL, "2."),
    ]


def test_lexer_range_and_method_call_dots_are_not_floats() -> None:
    assert non_trivia("1..2") == [
        (TokenKind.LITERAL, "1"),
        (TokenKind.PUNCT, "."),
        (TokenKind.PUNCT, "."),
        (TokenKind.LITERAL, "2"),
    ]
    assert non_trivia("1.max(2)")[:3] == [
        (TokenKind.LITERAL, "1"),
        (TokenKind.PUNCT, "."),
        (TokenKind.IDENTIFIER, "max"),
    ]


def test_lexer_lifetime_is_joint_quote_then_ident() -> None:
    tokens = [t for t in lex("'a 'b'") if not t.kind.is_trivia]

    assert tokens[0].kind == TokenKind.PUNCT
    assert tokens[0].is_joint()
    assert tokens[1].kind == TokenKind.IDENTIFIER
    assert tokens[2].kind == TokenKind.LITERAL


def test_lexer_raw_identifier() -> None:
    tokens = lex("r#fn")

    assert tokens[0].kind == TokenKind.IDENTIFIER
    assert tokens[0].flags & TokenFlags.RAW_IDENT
    assert tokens[0].range.as_tuple() == (0, 4)


def test_lexer_punct_spacing() -> None:
    tokens = [t for t in lex("a::b += c") if t.kind == TokenKind.PUNCT]

    assert [t.is_joint() for t in tokens] == [True, False, True, False]


def test_lexer_unterminated_string_reports_diagnostic() -> None:
    lexer = Lexer('let s = "abc')
    tokens = lexer.lex()

    assert tokens[-2].kind == TokenKind.LITERAL
    assert [d.code for d in lexer.diagnostics] == ["LEXER_UNTERMINATED_STRING"]


def test_lexer_unterminated_char_stops_at_end_of_line() -> None:
    lexer = Lexer("'\\n\nx")
    tokens = lexer.lex()

    assert tokens[0].range.as_tuple() == (0, 3)
    assert [d.code for d in lexer.diagnostics] == ["LEXER_UNTERMINATED_CHAR"]


def test_lexer_unterminated_block_comment() -> None:
    lexer = Lexer("/* /* */")
    lexer.lex()

    assert [d.code for d in lexer.diagnostics] == ["LEXER_UNTERMINATED_BLOCK_COMMENT"]


def test_lexer_unknown_character_is_skipped_with_diagnostic() -> None:
    lexer = Lexer("a ` b")
    tokens = lexer.lex()

    assert TokenKind.SKIPPED in kinds(tokens)
    assert lexer.diagnostics[0].code == "LEXER_UNKNOWN_CHARACTER"
    assert lexer.diagnostics[0].range.as_tuple() == (2, 3)


def test_dump_tokens_writes_one_line_per_token() -> None:
    source = "x 1km"
    lexer = Lexer(source)
    tokens = lexer.lex()
    out = io.StringIO()

    dump_tokens(tokens, source, lexer.diagnostics, file=out)

    lines = out.getvalue().splitlines()
    assert lines[0].startswith("000 IDENTIFIER")
    assert "text='1km'" in lines[2]
    assert lines[-1] == "Diagnostics:"


@pytest.mark.parametrize(
    ("source", "reason"),
    [
        ("let x = 0b12;", "invalid digit for a base 2 literal"),
        ("0o9", "invalid digit for a base 8 literal"),
        ("0x;", "no digits"),
        ('"\\q"up', "unknown character escape"),
        ('b"é"x', "non-ASCII character"),
    ],
)
def test_lexer_reports_invalid_literals(source: str, reason: str) -> None:
    lexer = Lexer(source)
    tokens = lexer.lex()

    (diagnostic,) = lexer.diagnostics
    assert diagnostic.code == "LEXER_INVALID_LITERAL"
    assert reason in diagnostic.message
    literal = next(t for t in tokens if t.kind == TokenKind.LITERAL)
    assert diagnostic.range == literal.range
