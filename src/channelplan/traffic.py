from __future__ import annotations

import math
from typing import Optional

from .channels import DEFAULT_MAX_CHANNELS, calculate_channels


def _check_positive(value: float, name: str) -> float:
    v = float(value)
    if math.isnan(v) or math.isinf(v) or v <= 0:
        raise ValueError(f"{name} must be a finite number > 0")
    return v


def offered_load_erlangs(calls: float, avg_call_duration_minutes: float, period_minutes: float = 60.0) -> float:
    """
    Offered load a (Erlangs) = arrival_rate * holding time.
    With calls counted over a period:
      arrival_rate = calls / period_minutes
      => a = calls * avg_call_duration_minutes / period_minutes
    """
    period = _check_positive(period_minutes, "period_minutes")
    c = float(calls)
    if math.isnan(c) or math.isinf(c) or c < 0:
        raise ValueError("calls must be a finite number >= 0")
    duration = _check_positive(avg_call_duration_minutes, "avg_call_duration_minutes")
    if c == 0:
        return 0.0
    return c * duration / period


def users_to_erlangs(
    users: int,
    avg_call_duration_minutes: float,
    concurrent_calls: float,
    busy_hour_factor: float = 1.0,
) -> float:
    """
    Busy-hour traffic offered by a user population.

      erlangs = users * concurrent_calls * avg_call_duration_minutes / 60 * busy_hour_factor

    concurrent_calls is the number of calls each user places in the busy hour;
    busy_hour_factor scales an average-hour figure up to the busy hour (1.0 = none).
    """
    if isinstance(users, bool) or int(users) != users:
        raise ValueError("users must be an integer")
    if users < 0:
        raise ValueError("users must be >= 0")
    per_user = _check_positive(concurrent_calls, "concurrent_calls")
    factor = _check_positive(busy_hour_factor, "busy_hour_factor")

    calls = int(users) * per_user
    return offered_load_erlangs(calls, avg_call_duration_minutes, period_minutes=60.0) * factor


def required_channels(
    users: int,
    avg_call_duration_minutes: float,
    concurrent_calls: float,
    target_blocking: float,
    max_channels: int = DEFAULT_MAX_CHANNELS,
    busy_hour_factor: float = 1.0,
) -> Optional[int]:
    """Channels needed by `users` at the given grade of service (None if above max_channels)."""
    traffic = users_to_erlangs(
        users,
        avg_call_duration_minutes,
        concurrent_calls,
        busy_hour_factor=busy_hour_factor,
    )
    return calculate_channels(traffic, target_blocking, max_channels)


__all__ = [
    "offered_load_erlangs",
    "users_to_erlangs",
    "required_channels",
]
