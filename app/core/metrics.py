"""Prometheus metrics for monitoring"""
from prometheus_client import Counter, Histogram, CollectorRegistry, generate_latest

registry = CollectorRegistry()

request_count = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status'],
    registry=registry
)

request_duration = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint'],
    registry=registry
)

rental_checkouts = Counter(
    'rental_checkouts_total',
    'Total successful car checkouts',
    ['car_type'],
    registry=registry
)

rental_returns = Counter(
    'rental_returns_total',
    'Total successful car returns',
    registry=registry
)

rental_errors = Counter(
    'rental_errors_total',
    'Total rejected rental operations',
    ['error'],
    registry=registry
)

rental_revenue = Counter(
    'rental_revenue_total',
    'Sum of total cost over returned rentals',
    registry=registry
)


def get_metrics_text() -> str:
    """Generate Prometheus metrics in text format"""
    return generate_latest(registry).decode('utf-8')
