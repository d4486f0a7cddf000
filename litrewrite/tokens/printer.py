"""Printing token streams back to Rust source text."""

from __future__ import annotations

from collections.abc import Sequence

from litrewrite.tokens.tree import Delimiter, Group, Ident, Punct, Spacing, TokenTree


def render_tokens(stream: Sequence[TokenTree]) -> str:
    """Render a token stream as Rust source.

    Spacing is normalized: words are separated by one space, joint punctuation
    is glued to what follows, and `::` paths, `name!(…)` macro calls and
    `f(…)`/`a[…]` are printed tight. The output re-lexes to the same tokens.
    """
    parts: list[str] = []
    for index, tree in enumerate(stream):
        if index > 0 and _needs_space(stream, index):
            parts.append(" ")
        parts.append(_render_tree(tree))
    return "".join(parts)


def _render_tree(tree: TokenTree) -> str:
    if isinstance(tree, Group):
        if tree.delimiter == Delimiter.NONE:
            return render_tokens(tree.stream)
        return f"{tree.delimiter.open}{render_tokens(tree.stream)}{tree.delimiter.close}"
    return str(tree)


def _needs_space(stream: Sequence[TokenTree], index: int) -> bool:
    prev = stream[index - 1]
    current = stream[index]

    if isinstance(prev, Punct):
        if prev.spacing == Spacing.JOINT:
            return False
        if _is_path_separator_end(stream, index - 1):
            return False
        if prev.char == "!" and isinstance(current, Group):
            return False

    if isinstance(current, Punct):
        if current.char in ",;":
            return False
        if isinstance(prev, Ident) and _is_path_separator_start(stream, index):
            return False
        if isinstance(prev, Ident) and current.char == "!" and _is_group(stream, index + 1):
            return False

    if isinstance(current, Group) and isinstance(prev, Ident):
        return current.delimiter not in (Delimiter.PARENTHESIS, Delimiter.BRACKET)

    return True


def _is_path_separator_start(stream: Sequence[TokenTree], index: int) -> bool:
    current = stream[index]
    following = stream[index + 1] if index + 1 < len(stream) else None
    return (
        isinstance(current, Punct)
        and current.char == ":"
        and current.spacing == Spacing.JOINT
        and isinstance(following, Punct)
        and following.char == ":"
    )


def _is_path_separator_end(stream: Sequence[TokenTree], index: int) -> bool:
    return index > 0 and _is_path_separator_start(stream, index - 1)


def _is_group(stream: Sequence[TokenTree], index: int) -> bool:
    return index < len(stream) and isinstance(stream[index], Group)
