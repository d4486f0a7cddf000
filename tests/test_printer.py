import pytest

from litrewrite.lexer import lex_token_trees
from litrewrite.text import TextRange
from litrewrite.tokens import Delimiter, Group, Ident, Literal, Punct, Spacing, render_tokens


@pytest.mark.parametrize(
    "source",
    [
        "let x = 1 + 2;",
        "a::b!(1, 2)",
        "vec![1]",
        "x += 1",
        "foo {}",
        "f(a)",
        "::core::compile_error!{\"boom\"}",
    ],
)
def test_render_tokens_normalized_source_is_stable(source: str) -> None:
    assert render_tokens(lex_token_trees(source).trees) == source


def test_render_tokens_collapses_whitespace_and_drops_comments() -> None:
    trees = lex_token_trees("let   x =\n  1 // one\n;").trees

    assert render_tokens(trees) == "let x = 1;"


def test_render_tokens_output_relexes_to_same_texts() -> None:
    trees = lex_token_trees("if a<=b && 'x' != c { return -1; }").trees
    rendered = render_tokens(trees)

    assert render_tokens(lex_token_trees(rendered).trees) == rendered


def test_render_tokens_invisible_group_renders_contents_only() -> None:
    span = TextRange(0, 0)
    stream = (
        Group(Delimiter.NONE, (Literal("1", span), Punct("+", Spacing.ALONE, span), Ident("x", span)), span),
    )

    assert render_tokens(stream) == "1 + x"


def test_group_str_includes_delimiters() -> None:
    (_, group) = lex_token_trees("f( a ,b )").trees

    assert str(group) == "(a, b)"
