#!/usr/bin/env python3
"""Benchmark script for catalog API latency."""

import argparse
import statistics
import time

import httpx

BOOKS_PATH = "/api/books"


def _summarize(latencies: list[float]) -> dict:
    return {
        "min": min(latencies),
        "max": max(latencies),
        "mean": statistics.mean(latencies),
        "median": statistics.median(latencies),
        "stdev": statistics.stdev(latencies) if len(latencies) > 1 else 0,
        "p95": sorted(latencies)[int(len(latencies) * 0.95)],
    }


def benchmark_catalog(base_url: str, num_requests: int) -> dict:
    """Create, list and delete books, timing each call."""
    timings: dict[str, list[float]] = {"create": [], "list": [], "delete": []}
    created: list[str] = []
    errors = 0

    print(f"Benchmarking {num_requests} create/list/delete cycles...")
    print()

    with httpx.Client(base_url=base_url, timeout=10.0) as client:
        for i in range(num_requests):
            try:
                start = time.perf_counter()
                response = client.post(
                    BOOKS_PATH,
                    json={"title": f"Benchmark Book {i + 1}", "author": "Benchmark"},
                )
                elapsed = (time.perf_counter() - start) * 1000  # ms
                if response.status_code != 201:
                    errors += 1
                    print(f"  Create {i + 1}: ERROR ({response.status_code})")
                    continue
                timings["create"].append(elapsed)
                created.append(response.json()["id"])

                start = time.perf_counter()
                response = client.get(BOOKS_PATH)
                elapsed = (time.perf_counter() - start) * 1000
                if response.status_code == 200:
                    timings["list"].append(elapsed)
                else:
                    errors += 1
                    print(f"  List {i + 1}: ERROR ({response.status_code})")

            except httpx.HTTPError as e:
                errors += 1
                print(f"  Request {i + 1}: EXCEPTION ({e})")

        # Leave the catalog as we found it
        for book_id in created:
            try:
                start = time.perf_counter()
                response = client.request("DELETE", BOOKS_PATH, json={"id": book_id})
                elapsed = (time.perf_counter() - start) * 1000
                if response.status_code == 200:
                    timings["delete"].append(elapsed)
                else:
                    errors += 1
                    print(f"  Delete {book_id}: ERROR ({response.status_code})")
            except httpx.HTTPError as e:
                errors += 1
                print(f"  Delete {book_id}: EXCEPTION ({e})")

    if not timings["create"]:
        return {"error": "All requests failed"}

    return {
        "cycles": num_requests,
        "failed_requests": errors,
        "latency_ms": {
            operation: _summarize(values)
            for operation, values in timings.items()
            if values
        },
    }


def main():
    parser = argparse.ArgumentParser(description="Benchmark the book catalog API")
    parser.add_argument(
        "--url",
        default="http://localhost:8000",
        help="Base URL of the catalog service",
    )
    parser.add_argument(
        "--requests",
        type=int,
        default=50,
        help="Number of create/list cycles to run",
    )

    args = parser.parse_args()

    print("=" * 50)
    print("Book Catalog Benchmark")
    print("=" * 50)
    print()

    results = benchmark_catalog(base_url=args.url, num_requests=args.requests)

    print()
    print("=" * 50)
    print("Results")
    print("=" * 50)
    print()

    if "error" in results:
        print(f"Error: {results['error']}")
        return

    print(f"Cycles:              {results['cycles']}")
    print(f"Failed requests:     {results['failed_requests']}")
    for operation, stats in results["latency_ms"].items():
        print()
        print(f"{operation.capitalize()} latency (ms):")
        print(f"  Min:               {stats['min']:.2f}")
        print(f"  Max:               {stats['max']:.2f}")
        print(f"  Mean:              {stats['mean']:.2f}")
        print(f"  Median:            {stats['median']:.2f}")
        print(f"  Std Dev:           {stats['stdev']:.2f}")
        print(f"  P95:               {stats['p95']:.2f}")


if __name__ == "__main__":
    main()
