#!/usr/bin/env python3
"""Benchmark duplicate detection: scan latency against a populated corpus.

Usage:
  export API_URL=http://localhost:8000 BENCH_OWNER=bench-owner
  uv run python scripts/bench_detect.py [--corpus-size 100] [--scans 50]

Registers --corpus-size documents for the owner, uploads distinct content for
each, then times --scans scan requests. Every 10th document repeats an
earlier document's content so scans report exact matches.
"""
from __future__ import annotations

import argparse
import os
import statistics
import sys
import time

import httpx


def register(client: httpx.Client, api_url: str, index: int, content: bytes) -> str:
    r = client.post(
        f"{api_url}/v1/documents",
        json={"name": f"bench_{index}.txt", "size": len(content), "file_type": "text/plain"},
    )
    r.raise_for_status()
    doc_id = r.json()["id"]
    r = client.put(
        f"{api_url}/v1/documents/{doc_id}/content",
        content=content,
        headers={"Content-Type": "application/octet-stream"},
    )
    r.raise_for_status()
    return doc_id


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark duplicate detection")
    parser.add_argument("--corpus-size", type=int, default=100, help="Documents to register")
    parser.add_argument("--scans", type=int, default=50, help="Number of scan requests")
    parser.add_argument("--output", type=str, default="/results/bench_detect.txt", help="Output file path")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
    owner = os.environ.get("BENCH_OWNER", f"bench-{int(time.time())}")
    headers = {"X-Owner-Id": owner}

    doc_ids: list[str] = []
    print(f"Registering {args.corpus_size} documents for owner {owner}...")
    with httpx.Client(timeout=60.0, headers=headers) as client:
        for i in range(args.corpus_size):
            source = i - 1 if i % 10 == 9 else i
            doc_ids.append(register(client, api_url, i, f"bench content {source}".encode()))

    latencies: list[float] = []
    exact_found = 0
    errors = 0
    print(f"Running {args.scans} scans...")
    start_total = time.perf_counter()
    with httpx.Client(timeout=120.0, headers=headers) as client:
        for i in range(args.scans):
            doc_id = doc_ids[i % len(doc_ids)]
            t0 = time.perf_counter()
            r = client.post(f"{api_url}/v1/documents/{doc_id}/scan", json={})
            elapsed = time.perf_counter() - t0
            if r.status_code == 200:
                latencies.append(elapsed)
                exact_found += len(r.json()["exact"])
            else:
                errors += 1
    total_elapsed = time.perf_counter() - start_total

    n = len(latencies)
    if n == 0:
        print("No successful scans.")
        return 1

    p50 = statistics.median(latencies) * 1000
    p95 = sorted(latencies)[int(n * 0.95) - 1] * 1000 if n >= 20 else p50
    summary = (
        f"Detection benchmark (corpus={args.corpus_size}, scans={n}, errors={errors})\n"
        f"  Throughput: {n / total_elapsed:.2f} scans/s\n"
        f"  Latency: p50={p50:.1f} ms, p95={p95:.1f} ms\n"
        f"  Exact matches reported: {exact_found}\n"
    )
    print(summary)

    try:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(summary)
        print(f"Wrote {args.output}")
    except OSError as e:
        print(f"Could not write {args.output}: {e}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
