from litrewrite.lexer import lex_token_trees
from litrewrite.text import TextRange
from litrewrite.tokens import Delimiter, Group, Ident, Literal, Punct, Spacing, iter_literals


def test_token_trees_nest_groups_and_drop_trivia() -> None:
    parsed = lex_token_trees("f(1, /* c */ [2])")

    assert parsed.diagnostics == []
    assert parsed.trees == (
        Ident("f", TextRange(0, 1)),
        Group(
            Delimiter.PARENTHESIS,
            (
                Literal("1", TextRange(2, 3)),
                Punct(",", Spacing.ALONE, TextRange(3, 4)),
                Group(Delimiter.BRACKET, (Literal("2", TextRange(14, 15)),), TextRange(13, 16)),
            ),
            TextRange(1, 17),
        ),
    )


def test_token_trees_raw_identifier_strips_prefix() -> None:
    (ident,) = lex_token_trees("r#fn").trees

    assert isinstance(ident, Ident)
    assert ident.name == "fn"
    assert ident.raw
    assert str(ident) == "r#fn"


def test_token_trees_stray_close_is_dropped() -> None:
    parsed = lex_token_trees("a)")

    assert parsed.trees == (Ident("a", TextRange(0, 1)),)
    assert [d.code for d in parsed.diagnostics] == ["TREE_UNEXPECTED_CLOSE_DELIMITER"]
    assert parsed.has_errors


def test_token_trees_mismatched_close_closes_innermost_group() -> None:
    parsed = lex_token_trees("(a]")

    (group,) = parsed.trees
    assert isinstance(group, Group)
    assert group.delimiter == Delimiter.PARENTHESIS
    assert group.span == TextRange(0, 3)
    assert [d.code for d in parsed.diagnostics] == ["TREE_MISMATCHED_DELIMITER"]
    assert "expected `)`" in parsed.diagnostics[0].message


def test_token_trees_unclosed_groups_close_at_eof() -> None:
    parsed = lex_token_trees("{ (a")

    (outer,) = parsed.trees
    assert isinstance(outer, Group)
    assert outer.span == TextRange(0, 4)
    inner = outer.stream[0]
    assert isinstance(inner, Group)
    assert inner.span == TextRange(2, 4)
    assert [d.range for d in parsed.diagnostics] == [TextRange(2, 3), TextRange(0, 1)]


def test_iter_literals_walks_groups_in_source_order() -> None:
    parsed = lex_token_trees('a(1, [2, "x"]) 3')

    assert [lit.text for lit in iter_literals(parsed.trees)] == ["1", "2", '"x"', "3"]
