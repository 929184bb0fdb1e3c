"""Timing of signing, verification, key generation and hashing."""

from __future__ import annotations

import argparse
import hashlib
import random
import time
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from edsig.ed25519 import create_keypair, sign, verify

__all__ = ["BenchmarkResult", "random_message", "run_benchmarks", "main"]

DEFAULT_SEED = 1337
DEFAULT_SIZES = (1, 10, 100, 1_000, 10_000, 100_000, 1_000_000)
DEFAULT_ITERATIONS = 10


@dataclass(frozen=True)
class BenchmarkResult:
    """Total time spent on a number of repetitions of one operation."""

    name: str
    size: int | None
    iterations: int
    total_seconds: float

    @property
    def per_operation(self) -> float:
        """Average seconds per repetition."""
        return self.total_seconds / self.iterations

    def __str__(self) -> str:
        label = self.name if self.size is None else f"{self.name}/{self.size}"
        return f"{label:<28}{self.iterations:>8}{self.per_operation * 1e6:>16.1f} us"


def random_message(size: int, seed: int = DEFAULT_SEED) -> bytes:
    """Deterministic pseudo-random bytes of the given length."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return random.Random(seed).randbytes(size)


def _time(
    name: str,
    size: int | None,
    iterations: int,
    operation: Callable[[], object],
) -> BenchmarkResult:
    total = 0.0
    for _ in range(iterations):
        start = time.perf_counter()
        operation()
        total += time.perf_counter() - start
    return BenchmarkResult(name, size, iterations, total)


def run_benchmarks(
    sizes: Iterable[int] = DEFAULT_SIZES, iterations: int = DEFAULT_ITERATIONS
) -> list[BenchmarkResult]:
    """Time every operation, the size-dependent ones once per message size."""
    if iterations < 1:
        raise ValueError(f"iterations must be at least 1, got {iterations}")
    size_list = list(sizes)
    if any(size < 0 for size in size_list):
        raise ValueError("message sizes must not be negative")

    results: list[BenchmarkResult] = []

    private_key, public_key = create_keypair()
    for size in size_list:
        msg = random_message(size)
        results.append(
            _time("Sign", size, iterations, lambda: sign(msg, public_key, private_key))
        )

    for size in size_list:
        msg = random_message(size)
        results.append(
            _time("SHA512", size, iterations, lambda: hashlib.sha512(msg).digest())
        )

    message = b"hello"
    signature = sign(message, public_key, private_key)
    results.append(
        _time(
            "VerifyCorrectSig",
            None,
            iterations,
            lambda: verify(signature, message, public_key),
        )
    )

    broken = bytearray(signature)
    broken[0] = 0
    broken[1] = 1
    broken_signature = bytes(broken)
    results.append(
        _time(
            "VerifyIncorrectSig",
            None,
            iterations,
            lambda: verify(broken_signature, message, public_key),
        )
    )

    results.append(_time("GenerateKeypair", None, iterations, create_keypair))
    return results


def main(argv: Sequence[str] | None = None) -> int:
    """Run the benchmarks and print one line per result."""
    parser = argparse.ArgumentParser(prog="edsig-bench", description=__doc__)
    parser.add_argument(
        "--iterations", type=int, default=DEFAULT_ITERATIONS, help="repetitions per case"
    )
    parser.add_argument(
        "--sizes",
        type=int,
        nargs="+",
        default=list(DEFAULT_SIZES),
        help="message sizes in bytes",
    )
    args = parser.parse_args(argv)
    try:
        results = run_benchmarks(args.sizes, args.iterations)
    except ValueError as exc:
        parser.error(str(exc))
    for result in results:
        print(result)
    return 0