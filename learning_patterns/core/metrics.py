"""Prometheus metrics for the assessment service."""

from prometheus_client import Counter, Histogram

# ---------------------------------------------------------------------------
# Scoring engine
# ---------------------------------------------------------------------------

pattern_scoring_requests_total = Counter(
    "pattern_scoring_requests_total",
    "Total scoring requests",
    ["algorithm", "status"],
)

pattern_scoring_latency_seconds = Histogram(
    "pattern_scoring_latency_seconds",
    "Scoring engine latency in seconds",
    ["algorithm"],
    buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.25],
)

# ---------------------------------------------------------------------------
# Persistence
# ---------------------------------------------------------------------------

pattern_results_saved_total = Counter(
    "pattern_results_saved_total",
    "Total assessment results persisted",
    ["kind"],  # learning | cognitive
)

pattern_storage_latency_seconds = Histogram(
    "pattern_storage_latency_seconds",
    "Flat-file storage operation latency in seconds",
    ["operation"],  # read | write | list
    buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.25, 0.5],
)

pattern_storage_failures_total = Counter(
    "pattern_storage_failures_total",
    "Total flat-file storage failures",
    ["operation"],
)
