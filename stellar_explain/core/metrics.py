"""Prometheus metrics for Stellar Explain."""

from prometheus_client import Counter, Histogram

# ---------------------------------------------------------------------------
# Explain requests
# ---------------------------------------------------------------------------

stellar_explain_requests_total = Counter(
    "stellar_explain_requests_total",
    "Total explain requests",
    ["kind", "status"],  # kind: transaction | operations | account | account_transactions
)

stellar_explain_latency_seconds = Histogram(
    "stellar_explain_latency_seconds",
    "End-to-end explain latency in seconds",
    ["kind"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0],
)

stellar_explain_cache_lookups_total = Counter(
    "stellar_explain_cache_lookups_total",
    "Transaction explanation cache lookups",
    ["result"],  # hit | miss
)

# ---------------------------------------------------------------------------
# Horizon
# ---------------------------------------------------------------------------

stellar_explain_horizon_requests_total = Counter(
    "stellar_explain_horizon_requests_total",
    "Total Horizon requests",
    ["endpoint", "status"],
)

stellar_explain_horizon_latency_seconds = Histogram(
    "stellar_explain_horizon_latency_seconds",
    "Horizon request latency in seconds",
    ["endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0],
)

stellar_explain_dependency_failures_total = Counter(
    "stellar_explain_dependency_failures_total",
    "Total external dependency failures",
    ["dependency"],
)
