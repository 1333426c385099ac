#!/usr/bin/env python3
"""Benchmark the word differ on regulation-sized documents.

Usage:
  uv run python scripts/bench_diff.py [--tokens 20000] [--edits 200] [--runs 20]

Builds a synthetic document, applies random word edits, and reports
diff latency (p50, p95) plus the number of segments produced.
"""
from __future__ import annotations

import argparse
import os
import random
import statistics
import sys
import time

from regwatch.infrastructure.diffing import WordDiffer, new_text, old_text

_WORDS = (
    "shall must may regulation section paragraph authority compliance fee "
    "applicant permit record report submit notice period days within under"
).split()


def make_document(rng: random.Random, tokens: int) -> list[str]:
    words = [rng.choice(_WORDS) for _ in range(tokens)]
    for i in range(12, tokens, 12):
        words[i] = words[i] + ".\n"
    return words


def mutate(rng: random.Random, words: list[str], edits: int) -> list[str]:
    out = list(words)
    for _ in range(edits):
        op = rng.choice(("replace", "insert", "delete"))
        i = rng.randrange(len(out)) if out else 0
        if op == "replace" and out:
            out[i] = rng.choice(_WORDS).upper()
        elif op == "insert":
            out.insert(i, rng.choice(_WORDS))
        elif out:
            del out[i]
    return out


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark word differ")
    parser.add_argument("--tokens", type=int, default=20000, help="Words in the prior document")
    parser.add_argument("--edits", type=int, default=200, help="Random edits applied to the current document")
    parser.add_argument("--runs", type=int, default=20, help="Number of diff runs")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--output", type=str, default="", help="Optional output file path")
    args = parser.parse_args()

    rng = random.Random(args.seed)
    base = make_document(rng, args.tokens)
    old = " ".join(base)
    new = " ".join(mutate(rng, base, args.edits))

    differ = WordDiffer()
    latencies: list[float] = []
    segments = []
    for _ in range(args.runs):
        t0 = time.perf_counter()
        segments = list(differ.diff(old, new))
        latencies.append(time.perf_counter() - t0)

    if old_text(segments) != old or new_text(segments) != new:
        print("Round-trip check failed.")
        return 1

    n = len(latencies)
    p50 = statistics.median(latencies) * 1000
    p95 = sorted(latencies)[int(n * 0.95) - 1] * 1000 if n >= 20 else p50
    summary = (
        f"Diff benchmark (tokens={args.tokens}, edits={args.edits}, runs={n})\n"
        f"  Segments: {len(segments)}\n"
        f"  Latency: p50={p50:.1f} ms, p95={p95:.1f} ms\n"
    )
    print(summary)

    if args.output:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(summary)
        print(f"Wrote {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
