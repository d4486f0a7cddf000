"""Closed suffix sets for Rust's numeric literals.

NOTE: adding to or changing these sets changes which literals get rewritten,
which is a breaking change for every handler module.
"""

from typing import Final

from litrewrite.literal.kind import LiteralKind

# Suffixes rustc accepts today. Literals carrying them are never rewritten.
INTEGER_SUFFIXES: Final[frozenset[str]] = frozenset(
    {
        "i8", "i16", "i32", "i64", "i128", "isize",
        "u8", "u16", "u32", "u64", "u128", "usize",
    }
)  # fmt: skip
FLOAT_SUFFIXES: Final[frozenset[str]] = frozenset({"f32", "f64"})

# Not accepted by rustc yet, but likely to be claimed later.
INTEGER_SUFFIXES_RESERVED: Final[frozenset[str]] = frozenset({"i256", "u256"})
FLOAT_SUFFIXES_RESERVED: Final[frozenset[str]] = frozenset({"f16", "f128"})

_EMPTY: Final[frozenset[str]] = frozenset()

NATIVE_SUFFIXES: Final[dict[LiteralKind, frozenset[str]]] = {
    LiteralKind.INTEGER: INTEGER_SUFFIXES,
    LiteralKind.FLOAT: FLOAT_SUFFIXES,
}
RESERVED_SUFFIXES: Final[dict[LiteralKind, frozenset[str]]] = {
    LiteralKind.INTEGER: INTEGER_SUFFIXES_RESERVED,
    LiteralKind.FLOAT: FLOAT_SUFFIXES_RESERVED,
}


def native_suffixes(kind: LiteralKind) -> frozenset[str]:
    return NATIVE_SUFFIXES.get(kind, _EMPTY)


def reserved_suffixes(kind: LiteralKind) -> frozenset[str]:
    return RESERVED_SUFFIXES.get(kind, _EMPTY)


def is_float_type_suffix(suffix: str) -> bool:
    """`1f32` and `1f128` are floats even though they are spelled like integers."""
    return suffix in FLOAT_SUFFIXES or suffix in FLOAT_SUFFIXES_RESERVED
