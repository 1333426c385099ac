#!/usr/bin/env python3
"""Benchmark the change API: listing and detail latency (p50, p95, p99).

Usage:
    export API_URL=http://localhost:8000
    uv run python scripts/bench_api.py [--num-requests 100] [--view unified]

Detail requests mark changes reviewed as a side effect; run against a
disposable database.
"""
from __future__ import annotations

import argparse
import os
import statistics
import sys
import time

import httpx


def percentiles(latencies: list[float]) -> tuple[float, float, float]:
    n = len(latencies)
    ordered = sorted(latencies)
    p50 = statistics.median(latencies) * 1000
    p95 = ordered[int(n * 0.95) - 1] * 1000 if n >= 20 else p50
    p99 = ordered[int(n * 0.99) - 1] * 1000 if n >= 100 else p95
    return p50, p95, p99


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark change API")
    parser.add_argument("--num-requests", type=int, default=50, help="Requests per endpoint")
    parser.add_argument("--view", choices=("split", "unified"), default="split", help="Detail view mode")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")

    list_latencies: list[float] = []
    detail_latencies: list[float] = []
    errors = 0
    with httpx.Client(timeout=30.0) as client:
        change_ids: list[str] = []
        for _ in range(args.num_requests):
            t0 = time.perf_counter()
            r = client.get(f"{api_url}/v1/changes")
            elapsed = time.perf_counter() - t0
            if r.status_code == 200:
                list_latencies.append(elapsed)
                change_ids = [item["change_id"] for item in r.json()["items"]]
            else:
                errors += 1

        if not change_ids:
            print("No changes in the reporting window; skipping detail benchmark.")
        for i in range(args.num_requests if change_ids else 0):
            change_id = change_ids[i % len(change_ids)]
            t0 = time.perf_counter()
            r = client.get(f"{api_url}/v1/changes/{change_id}", params={"view": args.view})
            elapsed = time.perf_counter() - t0
            if r.status_code == 200:
                detail_latencies.append(elapsed)
            else:
                errors += 1

    if not list_latencies:
        print("No successful listing requests.")
        return 1

    for name, latencies in (("list", list_latencies), ("detail", detail_latencies)):
        if not latencies:
            continue
        p50, p95, p99 = percentiles(latencies)
        print(
            f"{name}: n={len(latencies)} p50={p50:.1f} ms, p95={p95:.1f} ms, p99={p99:.1f} ms"
        )
    print(f"errors={errors}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
