"""Helper utility functions."""

import math
from datetime import datetime, timezone
from typing import Optional


def safe_ratio(numerator: Optional[float], denominator: Optional[float]) -> float:
    """Return numerator / denominator as a percentage, or 0 when the denominator is 0."""
    if not denominator:
        return 0.0
    return (numerator or 0) / denominator * 100


def mean(values) -> float:
    """Arithmetic mean, 0 for an empty sequence."""
    values = list(values)
    if not values:
        return 0.0
    return sum(values) / len(values)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return int(math.floor(value + 0.5))


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, the form MongoDB hands back."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    """Normalize an aware datetime to naive UTC so stored and parsed dates compare."""
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value
