"""
Prometheus Metrics: validation observability.

Exposes counters and histograms for:
- Rule violations per rule key
- Validation outcomes per record type
- validate_all() latency per record type

Recording is skipped when settings.METRICS_ENABLED is false (the metric
objects are still registered, so exporters keep a stable set of series).

Usage
-----
    from beancheck.validation.metrics import record_rule_violation, timed_validation

    with timed_validation("Order"):
        result = order_validator.validate_all(order)

    record_rule_violation("is_not_null")
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram

from beancheck.config import settings


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Total rule violations, labelled by rule key.
RULE_VIOLATIONS: Counter = Counter(
    "beancheck_rule_violations_total",
    "Total rule violations by rule key",
    ["rule_key"],
)

# validate_all() calls, labelled by record type and outcome (valid / invalid).
VALIDATIONS: Counter = Counter(
    "beancheck_validations_total",
    "Record validations by record type and outcome",
    ["record_type", "outcome"],
)

# validate_all() latency per record type (seconds).
VALIDATION_LATENCY: Histogram = Histogram(
    "beancheck_validation_seconds",
    "Time spent in validate_all per record type in seconds",
    ["record_type"],
    buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5),
)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_rule_violation(rule_key: str) -> None:
    """Increment the violation counter for *rule_key*."""
    if settings.METRICS_ENABLED:
        RULE_VIOLATIONS.labels(rule_key=rule_key).inc()


def record_validation_outcome(record_type: str, valid: bool) -> None:
    """Increment the outcome counter for *record_type*."""
    if settings.METRICS_ENABLED:
        outcome = "valid" if valid else "invalid"
        VALIDATIONS.labels(record_type=record_type, outcome=outcome).inc()


@contextmanager
def timed_validation(record_type: str) -> Generator[None, None, None]:
    """
    Context manager that records validate_all() latency.

    Usage::

        with timed_validation("Order"):
            result = validator.validate_all(order)
    """
    if not settings.METRICS_ENABLED:
        yield
        return
    with VALIDATION_LATENCY.labels(record_type=record_type).time():
        yield
