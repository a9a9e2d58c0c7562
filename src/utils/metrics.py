"""Metrics and monitoring utilities."""

from prometheus_client import Counter, Histogram

from src.core.config import settings

# Order total metrics
order_totals_total = Counter(
    'order_totals_total',
    'Total number of order totals calculated',
    ['currency']
)

order_total_amount = Histogram(
    'order_total_amount',
    'Order total amounts in whole currency units',
    ['currency'],
    buckets=[10, 50, 100, 500, 1000, 5000, 10000, 50000]
)

order_total_failures = Counter(
    'order_total_failures_total',
    'Number of order total calculations rejected',
    ['error']
)


def track_order_total(currency: str, amount: float = None):
    """Track a calculated order total."""
    if not settings.ENABLE_METRICS:
        return
    order_totals_total.labels(currency=currency).inc()
    if amount is not None:
        order_total_amount.labels(currency=currency).observe(amount)


def track_order_total_failure(error: str):
    """Track a rejected order total calculation."""
    if not settings.ENABLE_METRICS:
        return
    order_total_failures.labels(error=error).inc()
