"""Custom literal expansion."""

from litrewrite.expand.decompose import (
    U128_MAX,
    byte_string_value,
    byte_value,
    c_string_value,
    character_value,
    decompose,
    float_text,
    integer_value,
    string_value,
)
from litrewrite.expand.options import (
    C_STRING_MIN_VERSION,
    HOST_VERSION_ENV,
    EngineOptions,
    parse_host_version,
)
from litrewrite.expand.router import Route, route_literal
from litrewrite.expand.synthesize import (
    HANDLER_NAMESPACE,
    HANDLER_ROOT,
    HandlerPath,
    compile_error,
    path_tokens,
    synthesize_call,
)
from litrewrite.expand.walker import LiteralExpansion, TransformResult, expand_literal, transform

__all__ = [
    "C_STRING_MIN_VERSION",
    "HANDLER_NAMESPACE",
    "HANDLER_ROOT",
    "HOST_VERSION_ENV",
    "U128_MAX",
    "EngineOptions",
    "HandlerPath",
    "LiteralExpansion",
    "Route",
    "TransformResult",
    "byte_string_value",
    "byte_value",
    "c_string_value",
    "character_value",
    "compile_error",
    "decompose",
    "expand_literal",
    "float_text",
    "integer_value",
    "parse_host_version",
    "path_tokens",
    "route_literal",
    "string_value",
    "synthesize_call",
    "transform",
]
