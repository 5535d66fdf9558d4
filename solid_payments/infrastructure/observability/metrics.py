"""Prometheus metrics for payment outcomes and processing pass latency"""

from prometheus_client import Counter, Histogram

payment_counter = Counter(
    "solid_payments_processed_total",
    "Total payments processed by payment method",
    ["method", "outcome"],  # outcome: success | failure
)

payment_pass_histogram = Histogram(
    "solid_payments_pass_duration_seconds",
    "Time spent running one processing pass over all gateways",
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
)


def record_payment(method: str, success: bool) -> None:
    """Record a single payment attempt"""
    outcome = "success" if success else "failure"
    payment_counter.labels(method=method, outcome=outcome).inc()
