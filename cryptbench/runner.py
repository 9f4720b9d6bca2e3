"""Sequential and threaded benchmark runs over numbered file copies."""

from __future__ import annotations

import os
import sys
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import TextIO

from .process import run_process
from .timer import Timer

SEQUENTIAL_WORKDIR = "file_workspace_sequential/"
PARALLEL_WORKDIR = "file_workspace_parallel/"

_BANNER = "=" * 32
_SEPARATOR = "-" * 32


def _emit(out: TextIO, *lines: str) -> None:
    for line in lines:
        out.write(f"{line}\n")
    out.flush()


def _print_header(out: TextIO, title: str, timer: Timer) -> None:
    _emit(
        out,
        "",
        _BANNER,
        title,
        _BANNER,
        f"Tiempo Inicial:     {timer.start_text()}",
        _BANNER,
        "",
    )


def _print_process_time(out: TextIO, index: int, duration: str) -> None:
    padding = " " if index < 10 else ""
    _emit(out, f"TIEMPO PROCESO {index}:{padding} {duration}", _SEPARATOR)


def _print_footer(out: TextIO, title: str, timer: Timer) -> None:
    _emit(
        out,
        _BANNER,
        title,
        _BANNER,
        f"Tiempo Final:       {timer.end_text()}",
        f"Tiempo Total:       {timer.elapsed()}",
        f"Tiempo promedio:    {timer.average_per_process()}",
        _BANNER,
    )


def run_sequential(
    copies: int,
    workdir: str | os.PathLike[str] = SEQUENTIAL_WORKDIR,
    out: TextIO | None = None,
) -> Timer:
    """Process copies 1..copies one after another and report each one's time.

    Returns the stopped timer holding one mark per finished copy.
    """
    out = sys.stdout if out is None else out
    timer = Timer()
    _print_header(out, "    INICIO PROCESO SECUENCIAL   ", timer)

    for index in range(1, copies + 1):
        run_process(workdir, index)
        timer.register()
        _print_process_time(out, index, timer.duration_between(index - 1, index))

    timer.stop()
    _print_footer(out, "      FIN PROCESO SECUENCIAL    ", timer)
    return timer


def run_parallel(
    copies: int,
    workdir: str | os.PathLike[str] = PARALLEL_WORKDIR,
    out: TextIO | None = None,
) -> Timer:
    """Process copies 1..copies in one thread each.

    Times are reported in the order the copies finished; each is the interval
    since the previous finish. Returns the stopped timer.
    """
    out = sys.stdout if out is None else out
    timer = Timer()
    lock = threading.Lock()
    finished: list[tuple[int, str]] = []

    _print_header(out, "    INICIO PROCESO PARALELO     ", timer)

    def work(index: int) -> None:
        run_process(workdir, index)
        with lock:
            timer.register()
            count = len(timer.records())
            if count >= 2:
                finished.append((index, timer.duration_between(count - 2, count - 1)))

    indexes = range(1, copies + 1)
    if indexes:
        with ThreadPoolExecutor(max_workers=len(indexes)) as pool:
            futures = [pool.submit(work, index) for index in indexes]
        for future in futures:
            future.result()

    timer.stop()

    for index, duration in finished:
        _print_process_time(out, index, duration)

    _print_footer(out, "      FIN PROCESO PARALELO      ", timer)
    return timer