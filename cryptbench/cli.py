"""Command line entry point: run the benchmark sequentially and in parallel."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Callable
from typing import TextIO

from .runner import PARALLEL_WORKDIR, SEQUENTIAL_WORKDIR, run_parallel, run_sequential

MIN_COPIES = 1
MAX_COPIES = 50

_PROMPT = "Indica el numero de copias a realizar (menor a 50): "
_RETRY = "El numero debe ser entre 1 y 50. Intenta de nuevo: "
_BANNER = "=" * 32


def improvement_percent(sequential_seconds: float, parallel_seconds: float) -> float:
    """Percentage of the sequential time saved by the parallel run.

    With a zero sequential time the result follows IEEE division:
    infinite with the sign of the difference, or NaN when both are zero.
    """
    difference = sequential_seconds - parallel_seconds
    if sequential_seconds == 0:
        if difference == 0:
            return math.nan
        return math.copysign(math.inf, difference)
    return difference / sequential_seconds * 100.0


def _parse_copies(text: str) -> int | None:
    try:
        value = int(text.strip())
    except ValueError:
        return None
    return value if MIN_COPIES <= value <= MAX_COPIES else None


def read_copies(
    prompt_input: Callable[[], str] | None = None,
    out: TextIO | None = None,
) -> int:
    """Ask for the number of copies until a value from 1 to 50 is given.

    ``prompt_input`` returns one line per call; an empty string means the
    input has ended, which raises EOFError.
    """
    prompt_input = sys.stdin.readline if prompt_input is None else prompt_input
    out = sys.stdout if out is None else out

    prompt = _PROMPT
    while True:
        out.write(prompt)
        out.flush()
        line = prompt_input()
        if not line:
            raise EOFError("no number of copies given")
        copies = _parse_copies(line)
        if copies is not None:
            return copies
        prompt = _RETRY


def _copies_argument(text: str) -> int:
    copies = _parse_copies(text)
    if copies is None:
        raise argparse.ArgumentTypeError(
            f"must be an integer between {MIN_COPIES} and {MAX_COPIES}"
        )
    return copies


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cryptbench",
        description="Copy, encrypt, hash and verify a file N times, "
        "sequentially and in parallel, and compare the times.",
    )
    parser.add_argument(
        "copies",
        nargs="?",
        type=_copies_argument,
        help=f"number of copies ({MIN_COPIES}-{MAX_COPIES}); asked for when omitted",
    )
    parser.add_argument(
        "--sequential-dir",
        default=SEQUENTIAL_WORKDIR,
        help="directory holding original.txt for the sequential run",
    )
    parser.add_argument(
        "--parallel-dir",
        default=PARALLEL_WORKDIR,
        help="directory holding original.txt for the parallel run",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run both benchmarks and print the improvement of the parallel run."""
    args = _build_parser().parse_args(argv)
    out = sys.stdout

    copies = args.copies
    if copies is None:
        try:
            copies = read_copies(sys.stdin.readline, out)
        except EOFError as error:
            print(f"\nError: {error}", file=sys.stderr)
            return 1

    try:
        sequential = run_sequential(copies, args.sequential_dir, out)
        out.write("\n")
        parallel = run_parallel(copies, args.parallel_dir, out)
    except OSError as error:
        print(f"Error al abrir los archivos: {error}", file=sys.stderr)
        return 1

    improvement = improvement_percent(
        sequential.duration_seconds(), parallel.duration_seconds()
    )
    out.write(f"{_BANNER}\n")
    out.write(f"PORCENTAJE DE MEJORA: {improvement:.2f} %\n")
    out.write(f"{_BANNER}\n")
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())