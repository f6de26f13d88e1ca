"""Command line entry point: translate an operator file into OpenQASM.

Usage::

    pauliqasm ansatz.txt
    pauliqasm ansatz.txt --qasm-version 3 --multiplier 0.25 -o ansatz.qasm
"""

from __future__ import annotations

import argparse
import logging
import sys

from pauliqasm.errors import InputFormatError, PauliQasmError, TranslationError
from pauliqasm.program import parse_circuit

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pauliqasm",
        description="Translate a weighted sum of Pauli strings into OpenQASM.",
    )
    p.add_argument(
        "input",
        help="Text file with one '<pauli-string> <coefficient> <parameter>' per line.",
    )
    p.add_argument(
        "-o",
        "--out",
        default="",
        help="Optional output path. If omitted, prints to stdout.",
    )
    p.add_argument(
        "--qasm-version",
        type=int,
        choices=(2, 3),
        default=2,
        help="OpenQASM version of the emitted program.",
    )
    p.add_argument(
        "--multiplier",
        type=float,
        default=None,
        help="Scalar folded into every rotation angle (default 0.5).",
    )
    p.add_argument(
        "--sequential",
        action="store_true",
        help="Translate terms one after another instead of on a thread pool.",
    )
    p.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Maximum number of worker threads.",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress to stderr.",
    )
    return p


def _location(exc: PauliQasmError) -> str:
    if isinstance(exc, InputFormatError):
        return f"At line {exc.line}"
    if isinstance(exc, TranslationError):
        return f"At operator {exc.position}"
    return "Invalid configuration"


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint. Returns the process exit status."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        program = parse_circuit(
            args.input,
            format_version=args.qasm_version,
            output_path=args.out or None,
            angle_multiplier=args.multiplier,
            parallel=not args.sequential,
            max_workers=args.workers,
        )
    except PauliQasmError as exc:
        message = getattr(exc, "message", str(exc))
        logger.error("Error! %s: %s", _location(exc), message)
        return 1
    except OSError as exc:
        logger.error("Error! Cannot access %s: %s", exc.filename, exc.strerror)
        return 1

    if not args.out:
        sys.stdout.write(program)
    return 0


if __name__ == "__main__":
    sys.exit(main())
