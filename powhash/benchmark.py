"""Multi-threaded throughput benchmark of every supported digest."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from dataclasses import dataclass
from functools import partial
from typing import Callable, Iterable, Optional, Sequence, TextIO

from .proofofwork import HashAlgorithm, algorithm_by_name, compute_hash

DEFAULT_THREADS = 24
DEFAULT_DURATION = 10
TEST_DATA = b"Hello World"

_LABELS = {HashAlgorithm.NT: "NT Hash"}
_BANNER = "================================================================================="


@dataclass(frozen=True)
class BenchmarkResult:
    """Hashes completed in each second of a benchmark run, summed over threads."""

    algorithm: HashAlgorithm
    per_second: tuple[int, ...]

    @property
    def label(self) -> str:
        return _LABELS.get(self.algorithm, self.algorithm.value)

    @property
    def total(self) -> int:
        return sum(self.per_second)

    @property
    def average(self) -> int:
        return self.total // len(self.per_second)

    @property
    def minimum(self) -> int:
        return min(self.per_second)

    @property
    def maximum(self) -> int:
        return max(self.per_second)


def _worker(
    hasher: Callable[[bytes], bytes],
    data: bytes,
    duration: int,
    stop: threading.Event,
    counts: list[int],
) -> None:
    start = time.monotonic()
    current = 0
    local = 0
    while not stop.is_set():
        hasher(data)
        local += 1
        elapsed = int(time.monotonic() - start)
        if elapsed != current and elapsed < duration:
            counts[current] = local
            local = 0
            current = elapsed
    if current < duration:
        counts[current] = local


def benchmark_algorithm(
    algorithm: HashAlgorithm,
    threads: int = DEFAULT_THREADS,
    duration: int = DEFAULT_DURATION,
    data: bytes = TEST_DATA,
) -> BenchmarkResult:
    """Hash ``data`` on ``threads`` threads for ``duration`` seconds and count per second."""
    if threads < 1:
        raise ValueError(f"threads must be at least 1, got {threads}")
    if duration < 1:
        raise ValueError(f"duration must be at least 1, got {duration}")

    hasher = partial(compute_hash, algorithm)
    stop = threading.Event()
    counts = [[0] * duration for _ in range(threads)]
    workers = [
        threading.Thread(target=_worker, args=(hasher, data, duration, stop, thread_counts), daemon=True)
        for thread_counts in counts
    ]
    for worker in workers:
        worker.start()
    time.sleep(duration)
    stop.set()
    for worker in workers:
        worker.join()

    per_second = tuple(sum(column) for column in zip(*counts))
    return BenchmarkResult(algorithm, per_second)


def _separator(duration: int) -> str:
    return "--------------" + "-+-----------" * duration + "-+------------+------------+-----------"


def format_header(duration: int) -> str:
    """Return the table heading: a rule, the column titles and another rule."""
    titles = f"{'Algorithm':<14}" + "".join(f" | Sec {second:<6d}" for second in range(1, duration + 1))
    titles += f" | {'Average':<10} | {'Min':<10} | {'Max':<10}"
    rule = _separator(duration)
    return "\n".join((rule, titles, rule))


def format_row(result: BenchmarkResult) -> str:
    """Return one table row for ``result``."""
    cells = "".join(f" | {count:10d}" for count in result.per_second)
    return (
        f"{result.label:<14}{cells}"
        f" | {result.average:10d} | {result.minimum:10d} | {result.maximum:10d}"
    )


def run_benchmark(
    algorithms: Optional[Iterable[HashAlgorithm]] = None,
    threads: int = DEFAULT_THREADS,
    duration: int = DEFAULT_DURATION,
    stream: Optional[TextIO] = None,
) -> list[BenchmarkResult]:
    """Benchmark each algorithm in turn, writing the table to ``stream``."""
    out = sys.stdout if stream is None else stream
    chosen = list(HashAlgorithm) if algorithms is None else list(algorithms)

    print(file=out)
    print(_BANNER, file=out)
    print(f"Hash Algorithm Benchmark - {threads} threads, {duration} seconds per algorithm", file=out)
    print(f'Test data: "{TEST_DATA.decode("ascii")}"', file=out)
    print(_BANNER, file=out)
    print(file=out)
    print(format_header(duration), file=out, flush=True)

    results = []
    for algorithm in chosen:
        result = benchmark_algorithm(algorithm, threads, duration)
        results.append(result)
        print(format_row(result), file=out, flush=True)

    print(_BANNER, file=out)
    print("Benchmark complete! (All values are hashes per second)", file=out, flush=True)
    return results


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the benchmark from the command line."""
    parser = argparse.ArgumentParser(description="Measure hashes per second for each algorithm.")
    parser.add_argument("--threads", type=int, default=DEFAULT_THREADS, help="worker threads")
    parser.add_argument("--duration", type=int, default=DEFAULT_DURATION, help="seconds per algorithm")
    parser.add_argument(
        "--algorithm",
        action="append",
        type=algorithm_by_name,
        dest="algorithms",
        help="algorithm to benchmark (repeatable; default all)",
    )
    args = parser.parse_args(argv)
    if args.threads < 1:
        parser.error("--threads must be at least 1")
    if args.duration < 1:
        parser.error("--duration must be at least 1")

    print("Starting hash algorithm benchmark...")
    run_benchmark(args.algorithms, args.threads, args.duration)
    return 0


if __name__ == "__main__":
    sys.exit(main())