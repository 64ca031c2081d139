#!/usr/bin/env python3
"""
Demo and benchmarks for the SLOTH square-root permutation.

Usage:
    python3 demo.py --demo        # Encode and decode one random block
    python3 demo.py --benchmark   # Time encode, decode and a full round trip
"""

import argparse
import logging
import time

from sloth import Params, SqrtPermutation, run
from sloth.block import encode_block
from sloth.pipeline import sample_block


# =============================================================================
# Formatting Utilities
# =============================================================================


def format_time(seconds: float) -> str:
    """Format time with appropriate unit."""
    if seconds >= 1:
        return f"{seconds:.2f}s"
    if seconds >= 0.001:
        return f"{seconds*1000:.2f}ms"
    if seconds >= 0.000001:
        return f"{seconds*1_000_000:.1f}us"
    return f"{seconds*1_000_000_000:.0f}ns"


def time_per_call(fn, iterations: int) -> float:
    """Average wall time of fn() over the given number of iterations."""
    start = time.perf_counter()
    for _ in range(iterations):
        fn()
    return (time.perf_counter() - start) / iterations


# =============================================================================
# Demo
# =============================================================================


def run_demo(params: Params, num_runs: int):
    """Run and print encode/decode round trips on random blocks."""
    print("=" * 70)
    print("SLOTH Square-Root Permutation Demo")
    print("=" * 70)
    print(f"\nParameters: {params}")

    print("\n[1] Generating prime...")
    start = time.perf_counter()
    perm = SqrtPermutation.from_params(params)
    print(f"    Prime generated in {format_time(time.perf_counter() - start)}")
    print(f"    prime:    {perm.prime}")
    print(f"    exponent: {perm.exponent}")
    print(f"    2^{params.prime_bits} - prime = {params.bound + 1 - perm.prime}")

    print(f"\n[2] Running {num_runs} round trip(s)...")
    for i in range(num_runs):
        result = run(params, prime=perm.prime)
        print(f"\n    Round trip {i+1}:")
        print(f"      block in:  {result.block_in.hex()}")
        print(f"      input:     {result.value}")
        print(f"      perm:      {result.perm}")
        print(f"      inv:       {result.inv}")
        print(f"      block out: {result.block_out.hex()}")
        print(f"      correct:   {result.block_in == result.block_out}")

    print("\n" + "=" * 70)
    print("Demo complete!")
    print("=" * 70)


# =============================================================================
# Benchmark
# =============================================================================


def run_benchmark(params: Params, iterations: int):
    """Time encode, decode and end-to-end round trips."""
    print("=" * 70)
    print(f"{'SLOTH Benchmark':^70}")
    print("=" * 70)
    print(f"\nParameters: {params}, iterations={iterations}")

    start = time.perf_counter()
    perm = SqrtPermutation.from_params(params)
    prime_time = time.perf_counter() - start

    value = encode_block(sample_block(params, perm.prime))
    encoded = perm.forward(value)

    encode_time = time_per_call(lambda: perm.forward(value), iterations)
    decode_time = time_per_call(lambda: perm.inverse(encoded), iterations)
    round_trip_time = time_per_call(lambda: run(params, prime=perm.prime), iterations)

    print(f"\n{'Timing (avg per call)':─^70}")
    print(f"  Prime generation:  {format_time(prime_time):>10}")
    print(f"  Encode:            {format_time(encode_time):>10}  (exponentiation by (p+1)/4)")
    print(f"  Decode:            {format_time(decode_time):>10}  (one modular squaring)")
    print(f"  Round trip:        {format_time(round_trip_time):>10}  (sample + encode + decode)")

    # Cost ratio between the slow and fast direction
    print(f"\n{'Summary':─^70}")
    if decode_time > 0:
        print(f"  Encode/decode ratio: {encode_time / decode_time:.1f}")
    else:
        print("  Encode/decode ratio: n/a (decode below timer resolution)")
    print("=" * 70)


# =============================================================================
# Main
# =============================================================================


# Default parameters
DEFAULT_NUM_RUNS = 1
DEFAULT_ITERATIONS = 1000


def main():
    defaults = Params()
    parser = argparse.ArgumentParser(
        description="SLOTH square-root permutation demo and benchmarks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 demo.py --demo                 # One 256-bit round trip
  python3 demo.py --demo --runs 5        # Five round trips
  python3 demo.py --benchmark            # Encode/decode timings
  python3 demo.py --benchmark --bytes 64 # 512-bit blocks and prime
        """,
    )
    parser.add_argument("--demo", action="store_true", help="Run encode/decode demo")
    parser.add_argument("--benchmark", action="store_true", help="Run encode/decode benchmark")
    parser.add_argument("--bytes", type=int, default=defaults.block_size, help=f"Block and prime size in bytes (default: {defaults.block_size})")
    parser.add_argument("--rounds", type=int, default=defaults.prime_check_rounds, help=f"Miller-Rabin rounds (default: {defaults.prime_check_rounds})")
    parser.add_argument("--runs", type=int, default=DEFAULT_NUM_RUNS, help=f"Round trips for --demo (default: {DEFAULT_NUM_RUNS})")
    parser.add_argument("--iterations", type=int, default=DEFAULT_ITERATIONS, help=f"Iterations for --benchmark (default: {DEFAULT_ITERATIONS})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.runs < 1:
        parser.error("--runs must be at least 1")
    if args.iterations < 1:
        parser.error("--iterations must be at least 1")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    params = Params(block_size=args.bytes, prime_size=args.bytes, prime_check_rounds=args.rounds)

    if args.benchmark:
        run_benchmark(params, args.iterations)
    elif args.demo:
        run_demo(params, args.runs)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
