from __future__ import annotations

import math

import numpy as np


def _check_traffic(traffic: float) -> float:
    t = float(traffic)
    if math.isnan(t) or math.isinf(t):
        raise ValueError("traffic must be a finite number")
    if t < 0:
        raise ValueError("traffic must be >= 0")
    return t


def _check_channels(channels: int, name: str = "channels") -> int:
    if isinstance(channels, bool):
        raise ValueError(f"{name} must be an integer")
    try:
        n = int(channels)
    except (TypeError, ValueError, OverflowError):
        raise ValueError(f"{name} must be an integer") from None
    if n != channels:
        raise ValueError(f"{name} must be an integer")
    if n < 0:
        raise ValueError(f"{name} must be >= 0")
    return n


def erlang_b_step(traffic: float, n: int, prev: float) -> float:
    """
    One step of the Erlang B recurrence:

      B(n) = a * B(n-1) / (n + a * B(n-1))

    Every B(n) stays in [0, 1], so no large intermediates appear.
    """
    x = traffic * prev
    return x / (n + x)


def erlang_b(traffic: float, channels: int) -> float:
    """
    Erlang B blocking probability for `traffic` Erlangs offered to `channels` trunks.

    Computed with the recurrence starting from B(0) = 1 rather than
    a^N / N! (which overflows for a few hundred channels).

    Zero-channel convention:
      erlang_b(a, 0) = 1.0 for a > 0
      erlang_b(0, n) = 0.0 for all n (no traffic, nothing to block)
    """
    a = _check_traffic(traffic)
    n_max = _check_channels(channels)

    if a == 0.0:
        return 0.0

    b = 1.0
    for n in range(1, n_max + 1):
        b = erlang_b_step(a, n, b)
    return float(b)


def blocking_curve(traffic: float, max_channels: int) -> np.ndarray:
    """Returns B(0..max_channels) as a float array (index = channel count)."""
    a = _check_traffic(traffic)
    n_max = _check_channels(max_channels, "max_channels")

    curve = np.empty(n_max + 1, dtype=float)
    if a == 0.0:
        curve[:] = 0.0
        return curve

    b = 1.0
    curve[0] = b
    for n in range(1, n_max + 1):
        b = erlang_b_step(a, n, b)
        curve[n] = b
    return curve


__all__ = [
    "erlang_b",
    "erlang_b_step",
    "blocking_curve",
]
