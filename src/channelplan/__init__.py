# src/channelplan/__init__.py
from __future__ import annotations

# -----------------------------
# Erlang B core
# -----------------------------
from .erlangb import (
    erlang_b,
    blocking_curve,
)

from .channels import (
    DEFAULT_MAX_CHANNELS,
    E1_VOICE_CHANNELS,
    ChannelInputs,
    ChannelPlan,
    calculate_channels,
    compute_channel_plan,
    e1_lines_for_channels,
    plan_to_dict,
)

from .traffic import (
    offered_load_erlangs,
    users_to_erlangs,
    required_channels,
)

# -----------------------------
# Scenario tables
# -----------------------------
from .table import (
    compute_channel_table,
    blocking_grid,
)

__all__ = [
    # Erlang B
    "erlang_b",
    "blocking_curve",
    # Channel search
    "DEFAULT_MAX_CHANNELS",
    "E1_VOICE_CHANNELS",
    "ChannelInputs",
    "ChannelPlan",
    "calculate_channels",
    "compute_channel_plan",
    "e1_lines_for_channels",
    "plan_to_dict",
    # Traffic conversion
    "offered_load_erlangs",
    "users_to_erlangs",
    "required_channels",
    # Tables
    "compute_channel_table",
    "blocking_grid",
]
