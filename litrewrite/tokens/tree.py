"""Token trees: the stream shape the rewriter consumes and produces."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TypeAlias
from enum import StrEnum

from litrewrite.literal.escapes import quote_bytes, quote_char, quote_str
from litrewrite.text import TextRange


class Delimiter(StrEnum):
    PARENTHESIS = "parenthesis"
    BRACE = "brace"
    BRACKET = "bracket"
    # Invisible group, e.g. from macro_rules captures. Never produced by the lexer.
    NONE = "none"

    @property
    def open(self) -> str:
        return _OPEN[self]

    @property
    def close(self) -> str:
        return _CLOSE[self]

    @staticmethod
    def for_open(ch: str) -> Delimiter | None:
        return _BY_OPEN.get(ch)

    @staticmethod
    def for_close(ch: str) -> Delimiter | None:
        return _BY_CLOSE.get(ch)


_OPEN = {Delimiter.PARENTHESIS: "(", Delimiter.BRACE: "{", Delimiter.BRACKET: "[", Delimiter.NONE: ""}
_CLOSE = {Delimiter.PARENTHESIS: ")", Delimiter.BRACE: "}", Delimiter.BRACKET: "]", Delimiter.NONE: ""}
_BY_OPEN = {"(": Delimiter.PARENTHESIS, "{": Delimiter.BRACE, "[": Delimiter.BRACKET}
_BY_CLOSE = {")": Delimiter.PARENTHESIS, "}": Delimiter.BRACE, "]": Delimiter.BRACKET}


class Spacing(StrEnum):
    """Whether a punctuation character is immediately followed by another one."""

    ALONE = "alone"
    JOINT = "joint"


@dataclass(frozen=True, slots=True)
class Ident:
    name: str
    span: TextRange
    raw: bool = False

    def __str__(self) -> str:
        return f"r#{self.name}" if self.raw else self.name


@dataclass(frozen=True, slots=True)
class Punct:
    char: str
    spacing: Spacing
    span: TextRange

    def __post_init__(self):
        if len(self.char) != 1:
            raise ValueError(f"Punct holds a single character, got {self.char!r}")

    def __str__(self) -> str:
        return self.char


@dataclass(frozen=True, slots=True)
class Literal:
    """A literal token, stored as its exact source spelling (suffix included)."""

    text: str
    span: TextRange

    @classmethod
    def string(cls, value: str, span: TextRange) -> Literal:
        return cls(quote_str(value), span)

    @classmethod
    def character(cls, value: str, span: TextRange) -> Literal:
        return cls(quote_char(value), span)

    @classmethod
    def byte_string(cls, value: bytes, span: TextRange) -> Literal:
        return cls(quote_bytes(value, "b"), span)

    @classmethod
    def c_string(cls, value: bytes, span: TextRange) -> Literal:
        if 0 in value:
            raise ValueError("c-string literals cannot contain a nul byte")
        return cls(quote_bytes(value, "c"), span)

    @classmethod
    def integer(cls, value: int, span: TextRange) -> Literal:
        """Unsuffixed decimal integer literal."""
        if value < 0:
            raise ValueError("integer literals are unsigned, negation is a separate `-` token")
        return cls(str(value), span)

    @classmethod
    def float(cls, text: str, span: TextRange) -> Literal:
        """Unsuffixed float literal from already-normalized decimal text."""
        return cls(text, span)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Group:
    delimiter: Delimiter
    stream: tuple[TokenTree, ...]
    span: TextRange

    def __str__(self) -> str:
        from litrewrite.tokens.printer import render_tokens

        return f"{self.delimiter.open}{render_tokens(self.stream)}{self.delimiter.close}"


TokenTree: TypeAlias = Ident | Punct | Literal | Group


def iter_literals(stream: Sequence[TokenTree]) -> Iterator[Literal]:
    """Every literal in `stream`, depth-first, in source order."""
    for tree in stream:
        if isinstance(tree, Literal):
            yield tree
        elif isinstance(tree, Group):
            yield from iter_literals(tree.stream)
