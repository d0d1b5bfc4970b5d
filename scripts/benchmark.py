"""Performance benchmarking script for the document listing API."""

import asyncio
import time
from typing import Dict

import httpx


async def benchmark_listing(
    base_url: str = "http://localhost:8000",
    num_requests: int = 100,
    concurrent: int = 10,
) -> Dict:
    """
    Benchmark the document listing endpoint.

    Args:
        base_url: Base URL of the document service.
        num_requests: Total number of requests to run.
        concurrent: Number of concurrent requests.

    Returns:
        Benchmark results.
    """
    queries = [
        {},
        {"search": "strategy"},
        {"type": "spreadsheet"},
        {"category": "business", "sortBy": "title", "sortOrder": "asc"},
        {"search": "budget", "page": 1, "limit": 5},
    ] * (num_requests // 5 + 1)
    queries = queries[:num_requests]

    latencies = []
    errors = 0

    async def run_request(params: Dict) -> None:
        nonlocal errors
        async with httpx.AsyncClient(timeout=30.0) as client:
            try:
                start = time.time()
                response = await client.get(f"{base_url}/documents", params=params)
                latency = time.time() - start

                if response.status_code == 200 and response.json().get("success"):
                    latencies.append(latency)
                else:
                    errors += 1
            except httpx.HTTPError as e:
                print(f"Error: {e}")
                errors += 1

    start_time = time.time()

    for i in range(0, len(queries), concurrent):
        chunk = queries[i:i + concurrent]
        await asyncio.gather(*[run_request(q) for q in chunk])

    total_time = time.time() - start_time

    if latencies:
        ordered = sorted(latencies)
        avg_latency = sum(latencies) / len(latencies)
        p50 = ordered[len(ordered) // 2]
        p95 = ordered[int(len(ordered) * 0.95)]
        p99 = ordered[int(len(ordered) * 0.99)]
    else:
        avg_latency = p50 = p95 = p99 = 0

    return {
        "total_requests": num_requests,
        "successful": len(latencies),
        "errors": errors,
        "total_time_seconds": total_time,
        "requests_per_second": num_requests / total_time if total_time > 0 else 0,
        "avg_latency_seconds": avg_latency,
        "p50_latency_seconds": p50,
        "p95_latency_seconds": p95,
        "p99_latency_seconds": p99,
    }


if __name__ == "__main__":
    import json

    print("Running document listing benchmark...")

    results = asyncio.run(benchmark_listing())
    print("\nListing Results:")
    print(json.dumps(results, indent=2))
