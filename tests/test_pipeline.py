import textwrap

import pytest

from litrewrite import EngineOptions, UsageError, expand_attribute, rewrite_source
from litrewrite.diagnostics import format_diagnostic
from litrewrite.lexer import lex_token_trees
from litrewrite.tokens import render_tokens


def test_rewrite_source_splices_expansions_and_keeps_trivia() -> None:
    source = textwrap.dedent(
        """
        // 10km in a comment stays put
        fn main() {
            let d = 10km;   /* spacing kept */
            let s = "hi"upper;
        }
        """
    )

    result = rewrite_source(source)

    assert result.text == textwrap.dedent(
        """
        // 10km in a comment stays put
        fn main() {
            let d = crate::custom_literal::integer::km!(10);   /* spacing kept */
            let s = crate::custom_literal::string::upper!("hi");
        }
        """
    )
    assert result.changed
    assert not result.has_errors
    assert result.source_text == source


def test_rewrite_source_without_custom_literals_is_unchanged() -> None:
    source = "let x = 1u8 + 2;\nlet y = 'c';\n"

    result = rewrite_source(source)

    assert result.text == source
    assert not result.changed
    assert result.diagnostics == []


def test_rewrite_source_tokens_match_spliced_text() -> None:
    result = rewrite_source("f(1km,\n  2)")

    assert render_tokens(result.tokens) == render_tokens(lex_token_trees(result.text).trees)


def test_rewrite_source_reports_expansion_diagnostics_at_the_literal() -> None:
    source = "let a = 1km;\nlet b = 1i256;\n"

    result = rewrite_source(source)

    assert result.has_errors
    (diagnostic,) = result.diagnostics
    assert format_diagnostic(diagnostic, source, "src/lib.rs").startswith(
        "src/lib.rs:2:9: error[EXPAND_RESERVED_SUFFIX]: suffix i256 is not currently used by rust"
    )
    assert "crate::custom_literal::integer::km!(1)" in result.text
    assert "::core::compile_error!{" in result.text


def test_rewrite_source_leaves_text_that_does_not_lex_untouched() -> None:
    source = 'let a = 1km;\nlet s = "open'

    result = rewrite_source(source)

    assert result.text == source
    assert [d.code for d in result.diagnostics] == ["LEXER_UNTERMINATED_STRING"]


def test_rewrite_source_leaves_unbalanced_text_untouched() -> None:
    source = "fn f() { 1km"

    result = rewrite_source(source)

    assert result.text == source
    assert [d.code for d in result.diagnostics] == ["TREE_UNCLOSED_DELIMITER"]


def test_rewrite_source_honours_options() -> None:
    result = rewrite_source('c"x"s', EngineOptions.for_host_version("1.78.0"))

    assert [d.code for d in result.diagnostics] == ["EXPAND_UNSUPPORTED_C_STRING"]


@pytest.mark.parametrize("args", ["x", "()", "1"])
def test_rewrite_source_rejects_attribute_arguments(args: str) -> None:
    with pytest.raises(UsageError, match="does not take any arguments"):
        rewrite_source("1km", args=args)


def test_rewrite_source_accepts_blank_attribute_arguments() -> None:
    assert rewrite_source("1km", args="  ").changed


def test_expand_attribute_rejects_arguments_before_touching_the_body() -> None:
    args = lex_token_trees("foo").trees
    body = lex_token_trees("1i256").trees

    with pytest.raises(UsageError, match=r"`#\[litrewrite\]`"):
        expand_attribute(args, body)


def test_expand_attribute_transforms_body() -> None:
    result = expand_attribute((), lex_token_trees("x = 5sec;").trees)

    assert render_tokens(result.tokens) == "x = crate::custom_literal::integer::sec!(5);"


def test_rewrite_source_reports_huge_integer_as_overflow() -> None:
    source = "let x = " + "9" * 5000 + "km;"

    result = rewrite_source(source)

    (diagnostic,) = result.diagnostics
    assert diagnostic.code == "EXPAND_INTEGER_OVERFLOW"
    assert diagnostic.range.as_tuple() == (8, 8 + 5002)
    assert result.text.startswith("let x = ::core::compile_error!{")
    assert result.text.endswith("\"};")


@pytest.mark.parametrize(
    "source",
    [
        "let x = 0b12;",
        "fn f() { 0o9 }",
        "let x = 0x;",
        'let s = "\\q"up;',
        'let b = b"é"x;',
    ],
)
def test_rewrite_source_reports_invalid_literals_without_rewriting(source: str) -> None:
    result = rewrite_source(source + " let d = 1km;")

    assert result.text == source + " let d = 1km;"
    assert [d.code for d in result.diagnostics] == ["LEXER_INVALID_LITERAL"]
    assert result.has_errors
