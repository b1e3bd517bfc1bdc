"""Command line entry point: `python -m nitme [--fix] PATH...`."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterator, Sequence
from pathlib import Path

from nitme import __version__
from nitme.diagnostics import Diagnostic
from nitme.parser import ParseMode
from nitme.pipeline import run_fix, run_lint
from nitme.text import line_column

logger = logging.getLogger(__name__)

EXIT_CLEAN = 0
EXIT_UNREADABLE = 1
EXIT_DIAGNOSTICS = 3


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="nitme", description="Catch nits before your reviewer does.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("paths", nargs="+", type=Path, help="Go files or directories to analyze")
    parser.add_argument("--fix", action="store_true", help="Apply suggested fixes in place")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in ParseMode],
        default=ParseMode.STRICT.value,
        help="Report syntax errors as errors (strict) or warnings (permissive)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    mode = ParseMode(args.mode)
    exit_code = EXIT_CLEAN
    for path in _iter_go_files(args.paths):
        try:
            text = path.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            print(f"{path}: cannot read: {exc}", file=sys.stderr)
            exit_code = max(exit_code, EXIT_UNREADABLE)
            continue

        if args.fix:
            result = run_fix(text, mode=mode)
            parse = result.parse
            diagnostics = result.diagnostics
            if result.changed:
                path.write_bytes(result.fixed_text.encode("utf-8"))
                logger.debug("Wrote %d fixes to %s", len(result.applied), path)
        else:
            lint = run_lint(text, mode=mode)
            parse = lint.parse
            diagnostics = lint.diagnostics

        for diagnostic in diagnostics:
            print(_format_diagnostic(path, parse.source_bytes, diagnostic))
        if diagnostics:
            exit_code = max(exit_code, EXIT_DIAGNOSTICS)

    return exit_code


def _iter_go_files(paths: Sequence[Path]) -> Iterator[Path]:
    for path in paths:
        if path.is_dir():
            yield from sorted(path.rglob("*.go"))
        else:
            yield path


def _format_diagnostic(path: Path, source: bytes, diagnostic: Diagnostic) -> str:
    position = line_column(source, diagnostic.range.start)
    return f"{path}:{position.line}:{position.column}: {diagnostic.message}"


if __name__ == "__main__":
    sys.exit(main())
