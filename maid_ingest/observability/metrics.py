"""
Prometheus metrics collection for maid-ingest

This module provides metrics instrumentation for monitoring
bulk upload volume, row outcomes and reporting health.
"""
import os
from typing import Optional

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

# Global registry for metrics
REGISTRY = CollectorRegistry()


# =======================
# ROW METRICS
# =======================

# Rows processed counter
rows_processed_total = Counter(
    name="ingest_rows_processed_total",
    documentation="Total number of profile rows processed",
    labelnames=["status", "error_kind"],  # status: created, validated, failed
    registry=REGISTRY,
)

# Validation failures by rule
validation_failures_total = Counter(
    name="ingest_validation_failures_total",
    documentation="Total number of failed validation rules",
    labelnames=["rule_name"],
    registry=REGISTRY,
)

# =======================
# BATCH METRICS
# =======================

# Batches counter
batches_total = Counter(
    name="ingest_batches_total",
    documentation="Total number of bulk uploads",
    labelnames=["mode", "outcome"],  # mode: dry_run, commit; outcome: completed, rejected, failed, cancelled
    registry=REGISTRY,
)

# Batch size
batch_size = Histogram(
    name="ingest_batch_size_rows",
    documentation="Number of rows in each attempted batch",
    labelnames=["mode"],
    buckets=[1, 5, 10, 25, 50, 75, 100],
    registry=REGISTRY,
)

# Batch duration
batch_duration_seconds = Histogram(
    name="ingest_batch_duration_seconds",
    documentation="Time spent processing one batch in seconds",
    labelnames=["mode"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0],
    registry=REGISTRY,
)

# =======================
# REPORTING METRICS
# =======================

# Audit/event sink failures
reporting_failures_total = Counter(
    name="ingest_reporting_failures_total",
    documentation="Total number of failed audit or event emissions",
    labelnames=["sink"],  # sink: audit, event
    registry=REGISTRY,
)


# =======================
# HELPER FUNCTIONS
# =======================

def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics in text format

    Returns:
        Metrics in Prometheus text format
    """
    return generate_latest(REGISTRY)


def get_content_type() -> str:
    return CONTENT_TYPE_LATEST


def start_metrics_server(port: Optional[int] = None) -> None:
    """
    Start HTTP server for Prometheus metrics

    Args:
        port: Port to listen on (defaults to env var METRICS_PORT or 8000)
    """
    # Lazy import: avoids port binding on import
    from prometheus_client import start_http_server

    metrics_port = port or int(os.getenv("METRICS_PORT", "8000"))
    start_http_server(metrics_port, registry=REGISTRY)


def increment_counter(counter: Counter, value: float = 1.0, **labels) -> None:
    """
    Increment a counter metric

    Args:
        counter: Prometheus Counter metric
        value: Amount to increment (default: 1.0)
        **labels: Label values for the metric
    """
    counter.labels(**labels).inc(value)


def observe_histogram(histogram: Histogram, value: float, **labels) -> None:
    histogram.labels(**labels).observe(value)


def get_sample_value(name: str, labels: dict[str, str] | None = None) -> float:
    """Read a sample from the ingest registry (0.0 when never recorded)."""
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


# =======================
# INGEST-SPECIFIC HELPERS
# =======================

def record_row_outcome(status: str, error_kind: str | None = None) -> None:
    increment_counter(rows_processed_total, 1, status=status, error_kind=error_kind or "none")


def record_validation_failures(rule_names: list[str]) -> None:
    for rule_name in rule_names:
        increment_counter(validation_failures_total, 1, rule_name=rule_name)


def record_batch(mode: str, outcome: str, row_count: int = 0, duration_seconds: float = 0.0) -> None:
    """
    Record a finished (or rejected) batch.

    Args:
        mode: "dry_run" or "commit"
        outcome: "completed", "rejected", "failed" or "cancelled"
        row_count: Rows in the batch (skipped for rejected batches)
        duration_seconds: Processing duration in seconds
    """
    increment_counter(batches_total, 1, mode=mode, outcome=outcome)
    if row_count > 0:
        observe_histogram(batch_size, row_count, mode=mode)
    if duration_seconds > 0:
        observe_histogram(batch_duration_seconds, duration_seconds, mode=mode)


def record_reporting_failure(sink: str) -> None:
    increment_counter(reporting_failures_total, 1, sink=sink)
