from enum import StrEnum


class LiteralKind(StrEnum):
    """The seven literal subtypes.

    Values double as the handler module names under `crate::custom_literal`,
    so renaming one is a breaking change for every handler crate.
    """

    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    CHARACTER = "character"
    BYTE_CHARACTER = "byte_character"
    BYTE_STRING = "byte_string"
    C_STRING = "c_string"
