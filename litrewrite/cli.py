"""`litrewrite` command line: rewrite custom literals in Rust source files."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from tqdm import tqdm

from litrewrite.diagnostics import format_diagnostic
from litrewrite.expand import HOST_VERSION_ENV, EngineOptions
from litrewrite.lexer import Lexer, dump_tokens
from litrewrite.pipeline import rewrite_source

logger = logging.getLogger(__name__)


def _collect_rust_files(paths: Sequence[Path]) -> list[Path]:
    files: list[Path] = []
    for path in paths:
        if path.is_dir():
            files.extend(p for p in sorted(path.rglob("*.rs")) if p.is_file())
        else:
            files.append(path)
    return files


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="litrewrite",
        description="Rewrite suffixed Rust literals into custom literal handler calls",
    )
    parser.add_argument("paths", nargs="+", type=Path, help="Rust files, or directories searched for *.rs")
    parser.add_argument("--in-place", action="store_true", help="Write rewritten files back instead of printing them")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Write nothing, exit 1 if any file would change or has errors",
    )
    parser.add_argument(
        "--host-version",
        type=str,
        default=None,
        help=f"Target Rust version, e.g. 1.79.0 (default: ${HOST_VERSION_ENV}, else latest)",
    )
    parser.add_argument(
        "--no-c-strings",
        action="store_true",
        help="Reject custom c-string literals regardless of the host version",
    )
    parser.add_argument("--dump-tokens", action="store_true", help="Print the flat token dump and exit")
    parser.add_argument("--no-progress", action="store_true", help="Disable the tqdm progress bar")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every expansion")
    return parser


def _resolve_options(args: argparse.Namespace) -> EngineOptions:
    if args.host_version:
        options = EngineOptions.for_host_version(args.host_version)
    else:
        options = EngineOptions.from_environ(os.environ)
    if args.no_c_strings:
        options = EngineOptions(c_string_literals=False)
    return options


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = _resolve_options(args)
    except ValueError as exc:
        parser.error(str(exc))

    files = _collect_rust_files(args.paths)
    missing = [path for path in files if not path.is_file()]
    if missing:
        parser.error(f"No such file: {missing[0]}")

    if args.dump_tokens:
        for path in files:
            text = path.read_text(encoding="utf-8")
            lexer = Lexer(text)
            tokens = lexer.lex()
            print(f"== {path}")
            dump_tokens(tokens, text, lexer.diagnostics)
        return 0

    failed = False
    show_progress = not args.no_progress and len(files) > 1
    iterator = tqdm(files, desc="rewrite", unit="file", file=sys.stderr) if show_progress else files
    for path in iterator:
        logger.debug("rewriting %s", path)
        text = path.read_text(encoding="utf-8")
        result = rewrite_source(text, options)
        for diagnostic in result.diagnostics:
            print(format_diagnostic(diagnostic, text, str(path)), file=sys.stderr)
        if result.has_errors:
            failed = True

        if args.check:
            if result.changed:
                print(f"would rewrite {path}")
                failed = True
        elif args.in_place:
            if result.changed:
                path.write_text(result.text, encoding="utf-8")
                logger.info("rewrote %s", path)
        else:
            sys.stdout.write(result.text)

    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
