"""Engine configuration: capability flags for the active Rust toolchain."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

HOST_VERSION_ENV: Final[str] = "LITREWRITE_HOST_VERSION"
# `c"…"` literals were stabilized in Rust 1.79.
C_STRING_MIN_VERSION: Final[tuple[int, int, int]] = (1, 79, 0)

_VERSION_RE = re.compile(r"(\d+)\.(\d+)(?:\.(\d+))?")


@dataclass(frozen=True, slots=True)
class EngineOptions:
    """Feature flags the rewriter consults per literal."""

    c_string_literals: bool = True

    @staticmethod
    def for_host_version(version: str) -> EngineOptions:
        """Options for a toolchain version such as `1.79.0`, `1.80.0-nightly` or `rustc 1.78.0 (…)`."""
        return EngineOptions(c_string_literals=parse_host_version(version) >= C_STRING_MIN_VERSION)

    @staticmethod
    def from_environ(environ: Mapping[str, str]) -> EngineOptions:
        version = environ.get(HOST_VERSION_ENV, "").strip()
        if not version:
            return EngineOptions()
        return EngineOptions.for_host_version(version)


def parse_host_version(version: str) -> tuple[int, int, int]:
    match = _VERSION_RE.search(version)
    if match is None:
        raise ValueError(f"Not a Rust version: {version!r}")
    major, minor, patch = match.groups()
    return int(major), int(minor), int(patch or 0)
