# src/channelplan/channels.py
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .erlangb import _check_channels, _check_traffic, erlang_b_step

logger = logging.getLogger(__name__)

# Search ceiling used when the caller does not pass one
DEFAULT_MAX_CHANNELS: int = 10_000

# Voice channels carried by one E1 trunk (32 timeslots minus framing + signalling)
E1_VOICE_CHANNELS: int = 30


# -----------------------------
# Data models
# -----------------------------
@dataclass(frozen=True)
class ChannelInputs:
    traffic_erlangs: float
    target_blocking: float
    max_channels: int = DEFAULT_MAX_CHANNELS


@dataclass(frozen=True)
class ChannelPlan:
    offered_load_erlangs: float
    target_blocking: float
    required_channels: Optional[int]
    achieved_blocking: Optional[float]
    carried_erlangs: Optional[float]
    e1_lines: Optional[int]

    @property
    def solved(self) -> bool:
        return self.required_channels is not None


# -----------------------------
# Internal helpers
# -----------------------------
def _check_target(target_blocking: float) -> float:
    p = float(target_blocking)
    if math.isnan(p) or not (0.0 <= p <= 1.0):
        raise ValueError("target_blocking must be in [0, 1]")
    return p


def _search(traffic: float, target_blocking: float, max_channels: int) -> tuple[Optional[int], Optional[float]]:
    """
    Linear scan n = 1..max_channels (inclusive), carrying B(n-1) forward.

    B(n) is non-increasing in n, so the first n that meets the target is the minimum.
    Returns (n, B(n)) or (None, None).
    """
    if traffic == 0.0:
        # B(n) = 0 for every n >= 1
        return (1, 0.0) if max_channels >= 1 else (None, None)

    b = 1.0
    for n in range(1, max_channels + 1):
        b = erlang_b_step(traffic, n, b)
        if b <= target_blocking:
            return n, float(b)
    return None, None


# -----------------------------
# Public API
# -----------------------------
def calculate_channels(
    traffic: float,
    target_blocking: float,
    max_channels: int = DEFAULT_MAX_CHANNELS,
) -> Optional[int]:
    """
    Minimum number of channels n in [1, max_channels] with erlang_b(traffic, n) <= target_blocking.

    Returns None when no n up to the ceiling meets the target.
    """
    a = _check_traffic(traffic)
    p = _check_target(target_blocking)
    n_max = _check_channels(max_channels, "max_channels")

    n, _ = _search(a, p, n_max)
    if n is None:
        logger.debug("No channel count <= %d meets blocking %.4g at %.4g Erlangs", n_max, p, a)
    else:
        logger.debug("%.4g Erlangs at blocking <= %.4g needs %d channels", a, p, n)
    return n


def e1_lines_for_channels(channels: int) -> int:
    """Number of E1 trunks needed to carry `channels` voice channels."""
    n = _check_channels(channels)
    return int(math.ceil(n / E1_VOICE_CHANNELS))


def compute_channel_plan(inputs: ChannelInputs) -> ChannelPlan:
    """
    Runs the channel search and packages the outcome with the achieved blocking,
    carried traffic a * (1 - B) and E1 trunk count.

    An unmet target is not an error: the plan comes back with solved == False.
    """
    a = _check_traffic(inputs.traffic_erlangs)
    p = _check_target(inputs.target_blocking)
    n_max = _check_channels(inputs.max_channels, "max_channels")

    n, b = _search(a, p, n_max)
    if n is None or b is None:
        logger.debug("Channel plan unsolved: %.4g Erlangs, target %.4g, ceiling %d", a, p, n_max)
        return ChannelPlan(
            offered_load_erlangs=a,
            target_blocking=p,
            required_channels=None,
            achieved_blocking=None,
            carried_erlangs=None,
            e1_lines=None,
        )

    return ChannelPlan(
        offered_load_erlangs=a,
        target_blocking=p,
        required_channels=int(n),
        achieved_blocking=float(b),
        carried_erlangs=float(a * (1.0 - b)),
        e1_lines=e1_lines_for_channels(n),
    )


def plan_to_dict(plan: ChannelPlan) -> Dict[str, Any]:
    return {
        "erlangs": plan.offered_load_erlangs,
        "target_blocking": plan.target_blocking,
        "required_channels": plan.required_channels,
        "achieved_blocking": plan.achieved_blocking,
        "carried_erlangs": plan.carried_erlangs,
        "e1_lines": plan.e1_lines,
    }


__all__ = [
    "DEFAULT_MAX_CHANNELS",
    "E1_VOICE_CHANNELS",
    "ChannelInputs",
    "ChannelPlan",
    "calculate_channels",
    "compute_channel_plan",
    "e1_lines_for_channels",
    "plan_to_dict",
]
