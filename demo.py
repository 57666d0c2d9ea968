#!/usr/bin/env python3
"""
Demo and benchmarks for the multiplicative-blinding DH-OPRF.

Usage:
    python3 demo.py --oprf                    # Run one blind/evaluate/finalize exchange
    python3 demo.py --oprf --pepper secret    # Same, with an HKDF pepper
    python3 demo.py --benchmark --runs 50     # Time each step
"""

import argparse
import time

from pake.errors import PakeError
from pake.oprf import Client, Params, Server, blind, finalize


# =============================================================================
# Formatting Utilities
# =============================================================================


def format_bytes(n: int) -> str:
    """Format bytes with KiB suffix."""
    if n >= 1024:
        return f"{n / 1024:.2f} KiB"
    return f"{n} B"


def format_time(seconds: float) -> str:
    """Format time with appropriate unit."""
    if seconds >= 1:
        return f"{seconds:.2f}s"
    if seconds >= 0.001:
        return f"{seconds*1000:.2f}ms"
    return f"{seconds*1_000_000:.1f}us"


# =============================================================================
# OPRF Demo
# =============================================================================


def run_oprf_demo(input: bytes, pepper: bytes | None, server: Server):
    """Run one OPRF exchange and show what crosses the wire."""
    print("=" * 70)
    print("Multiplicative-Blinding DH-OPRF - Demo")
    print("=" * 70)

    params = server.params
    print(f"\n{'Parameters':─^70}")
    print(f"  {params}")
    print(f"  Pepper:             {'yes' if pepper else 'no':>12}")

    client = Client(params)

    print(f"\n{'Client: blind':─^70}")
    with client.blind(input, pepper) as state:
        alpha_wire = state.alpha_bytes()
        print(f"  alpha:  {alpha_wire.hex()}")

        print(f"\n{'Server: evaluate':─^70}")
        beta_wire = server.evaluate(alpha_wire)
        print(f"  beta:   {beta_wire.hex()}")

        print(f"\n{'Client: finalize':─^70}")
        output = client.finalize(input, beta_wire, state)
        print(f"  output: {output.hex()}")

    # A second exchange uses a fresh blinding factor: different wire
    # messages, same output.
    with client.blind(input, pepper) as state:
        again = client.finalize(input, server.evaluate(state.alpha_bytes()), state)

    print(f"\n{'Communication Costs':─^70}")
    print(f"  Client -> server:   {format_bytes(params.element_length):>12}")
    print(f"  Server -> client:   {format_bytes(params.element_length):>12}")
    print(f"  Output:             {format_bytes(params.output_length):>12}")
    print(f"\n  Repeat exchange matches: {'PASS' if again == output else 'FAIL'}")


def run_benchmark(input: bytes, pepper: bytes | None, server: Server, runs: int):
    """Time each OPRF step over several runs."""
    print("=" * 70)
    print(f"DH-OPRF Benchmark ({runs} runs)")
    print("=" * 70)

    params = server.params
    blind_times = []
    evaluate_times = []
    finalize_times = []

    for _ in range(runs):
        start = time.perf_counter()
        state = blind(input, pepper, params=params)
        blind_times.append(time.perf_counter() - start)

        start = time.perf_counter()
        beta_wire = server.evaluate(state.alpha_bytes())
        evaluate_times.append(time.perf_counter() - start)

        start = time.perf_counter()
        finalize(input, beta_wire, state.blinding_factor, params)
        finalize_times.append(time.perf_counter() - start)
        state.zeroize()

    avg_blind = sum(blind_times) / runs
    avg_evaluate = sum(evaluate_times) / runs
    avg_finalize = sum(finalize_times) / runs

    print(f"\n  Timing breakdown (avg per exchange):")
    print(f"    Client blind():      {format_time(avg_blind):>10}")
    print(f"    Server evaluate():   {format_time(avg_evaluate):>10}")
    print(f"    Client finalize():   {format_time(avg_finalize):>10}")
    print(f"    ─────────────────────────────────")
    print(f"    Total:               {format_time(avg_blind + avg_evaluate + avg_finalize):>10}")


# =============================================================================
# Main
# =============================================================================


DEFAULT_INPUT = "hunter2"
DEFAULT_KEY_HEX = bytes(range(1, 32)).hex() + "00"
DEFAULT_NUM_RUNS = 20


def main():
    parser = argparse.ArgumentParser(
        description="DH-OPRF demo with per-step benchmarks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 demo.py --oprf                     # One exchange
  python3 demo.py --oprf --input swordfish   # Custom password
  python3 demo.py --benchmark --runs 100     # Step timings
        """,
    )
    parser.add_argument("--oprf", action="store_true", help="Run one OPRF exchange")
    parser.add_argument("--benchmark", action="store_true", help="Benchmark each OPRF step")
    parser.add_argument("--input", default=DEFAULT_INPUT, help=f"Client input (default: {DEFAULT_INPUT})")
    parser.add_argument("--pepper", default=None, help="Optional pepper mixed into the input hash")
    parser.add_argument("--key-hex", default=DEFAULT_KEY_HEX, help="Server key as 64 hex characters")
    parser.add_argument("--runs", type=int, default=DEFAULT_NUM_RUNS, help=f"Benchmark runs (default: {DEFAULT_NUM_RUNS})")
    args = parser.parse_args()

    input = args.input.encode()
    pepper = args.pepper.encode() if args.pepper else None

    try:
        server = Server.from_key_bytes(bytes.fromhex(args.key_hex), Params())
    except (ValueError, PakeError) as exc:
        parser.error(f"invalid --key-hex: {exc}")

    if args.benchmark:
        if args.runs < 1:
            parser.error("--runs must be at least 1")
        run_benchmark(input, pepper, server, args.runs)
    elif args.oprf:
        run_oprf_demo(input, pepper, server)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
