# src/channelplan/table.py
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional

import numpy as np
import pandas as pd

from .channels import DEFAULT_MAX_CHANNELS, ChannelInputs, compute_channel_plan, plan_to_dict
from .erlangb import blocking_curve
from .traffic import users_to_erlangs
from .validation import validate_scenario_df

logger = logging.getLogger(__name__)

_RESULT_COLUMNS = ["erlangs", "target_blocking", "required_channels", "achieved_blocking", "carried_erlangs", "e1_lines"]


def _empty_result(target_blocking: Optional[float]) -> Dict[str, Any]:
    out: Dict[str, Any] = {c: None for c in _RESULT_COLUMNS}
    out["target_blocking"] = target_blocking
    return out


def _row_target(row: pd.Series, default: float) -> float:
    v = row.get("target_blocking", None)
    if v is None or pd.isna(v):
        return float(default)
    return float(v)


def _row_factor(row: pd.Series) -> float:
    v = row.get("busy_hour_factor", None)
    if v is None or pd.isna(v):
        return 1.0
    return float(v)


def compute_channel_table(
    scenario_df: pd.DataFrame,
    *,
    target_blocking: float = 0.01,
    max_channels: int = DEFAULT_MAX_CHANNELS,
) -> pd.DataFrame:
    """
    One channel plan per scenario row.

    A per-row target_blocking column overrides the global target. Rows with
    invalid values, or whose target cannot be met within max_channels, get
    missing results instead of aborting the table.
    """
    validate_scenario_df(scenario_df)

    df = scenario_df.reset_index(drop=True)
    rows: list[Dict[str, Any]] = []
    errors = 0

    for idx, row in df.iterrows():
        target = _row_target(row, target_blocking)
        try:
            erlangs = users_to_erlangs(
                row["users"],
                float(row["avg_call_duration_minutes"]),
                float(row["concurrent_calls"]),
                busy_hour_factor=_row_factor(row),
            )
            plan = compute_channel_plan(
                ChannelInputs(traffic_erlangs=erlangs, target_blocking=target, max_channels=max_channels)
            )
            rows.append(plan_to_dict(plan))
        except ValueError as e:
            errors += 1
            logger.warning("Scenario row %s skipped: %s", idx, e)
            rows.append(_empty_result(target))

    if errors:
        logger.warning("%d of %d scenario rows could not be planned", errors, len(df))

    out = pd.DataFrame(rows, columns=_RESULT_COLUMNS)
    base = df.drop(columns=[c for c in _RESULT_COLUMNS if c in df.columns])
    out = pd.concat([base, out], axis=1)
    out["required_channels"] = out["required_channels"].astype("Int64")
    out["e1_lines"] = out["e1_lines"].astype("Int64")
    return out


def blocking_grid(traffic_values: Iterable[float], max_channels: int) -> pd.DataFrame:
    """
    Blocking probability table: index = channels 0..max_channels, one column per traffic value.
    """
    values = [float(t) for t in traffic_values]
    data = {t: blocking_curve(t, max_channels) for t in values}
    grid = pd.DataFrame(data, index=np.arange(int(max_channels) + 1))
    grid.index.name = "channels"
    return grid


__all__ = [
    "compute_channel_table",
    "blocking_grid",
]
