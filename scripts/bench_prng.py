#!/usr/bin/env python3
"""Time xorshift128+ draws per operation.

Usage (from the repository root):
    python scripts/bench_prng.py                      # int64, 100000 draws x 5 runs
    python scripts/bench_prng.py int64 bounded bytes  # several operations in one go
    python scripts/bench_prng.py bounded --bound 7 --runs 10
"""

import argparse
import statistics
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from xorshift128 import XorShift128Plus  # noqa: E402

OPS = ("int64", "int32", "bounded", "float64", "float32", "bool", "bytes")


def _workload(rng, op, count, bound):
    """Zero-argument callable doing ``count`` draws (or ``count`` bytes)."""
    if op == "bytes":
        buf = bytearray(count)
        return lambda: rng.fill_bytes(buf)
    if op == "bounded":
        draw = rng.next_bounded_int32
        return lambda: [draw(bound) for _ in range(count)]
    draw = getattr(rng, f"next_{op}")
    return lambda: [draw() for _ in range(count)]


def _time_runs(work, runs):
    work()  # warmup
    samples = []
    for _ in range(runs):
        start = time.perf_counter()
        work()
        samples.append((time.perf_counter() - start) * 1000)
    return samples


def _report(op, count, samples):
    median = statistics.median(samples)
    spread = statistics.stdev(samples) if len(samples) > 1 else 0.0
    rate = count / (median / 1000) if median > 0 else float("inf")
    print(
        f"{op:>8}: median {median:8.2f} ms  "
        f"(min {min(samples):.2f}, stdev {spread:.2f})  "
        f"{rate:>14,.0f}/s"
    )


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "ops",
        nargs="*",
        default=["int64"],
        help=f"Operations to time, any of {', '.join(OPS)} (default: int64)",
    )
    parser.add_argument("--runs", type=int, default=5, help="Timed runs per op")
    parser.add_argument(
        "--count", type=int, default=100_000, help="Draws (or bytes) per run"
    )
    parser.add_argument("--seed", type=int, default=123456789)
    parser.add_argument(
        "--bound", type=int, default=1000, help="Bound used by 'bounded'"
    )
    args = parser.parse_args()
    unknown = [op for op in args.ops if op not in OPS]
    if unknown:
        parser.error(f"unknown operation(s): {', '.join(unknown)}")

    print(f"seed={args.seed} count={args.count} runs={args.runs}")
    for op in args.ops:
        rng = XorShift128Plus(args.seed)
        samples = _time_runs(_workload(rng, op, args.count, args.bound), args.runs)
        _report(op, args.count, samples)


if __name__ == "__main__":
    main()
