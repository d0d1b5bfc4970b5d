"""Prometheus metrics for monitoring."""

from prometheus_client import Counter, Histogram

generation_requests_total = Counter(
    "docdash_generation_requests_total", "Total number of document generation requests")
generation_errors_total = Counter(
    "docdash_generation_errors_total", "Generation requests where every model failed")
generation_attempts_total = Counter(
    "docdash_generation_attempts_total", "Generation attempts per model",
    ["model", "outcome"])
generation_latency_seconds = Histogram(
    "docdash_generation_latency_seconds", "End-to-end generation latency in seconds",
    buckets=[0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0])

documents_created_total = Counter(
    "docdash_documents_created_total", "Total number of documents created")
documents_deleted_total = Counter(
    "docdash_documents_deleted_total", "Total number of documents deleted")
