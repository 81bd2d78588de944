from __future__ import annotations

import pandas as pd


REQUIRED_SCENARIO_COLUMNS = {"scenario", "users", "avg_call_duration_minutes", "concurrent_calls"}
_NUMERIC_COLUMNS = ["users", "avg_call_duration_minutes", "concurrent_calls"]
_OPTIONAL_NUMERIC_COLUMNS = ["target_blocking", "busy_hour_factor"]


def validate_scenario_df(df: pd.DataFrame) -> None:
    missing = REQUIRED_SCENARIO_COLUMNS - set(df.columns)
    if missing:
        raise ValueError(
            f"Scenario dataframe missing required columns: {sorted(missing)}. "
            f"Expected: {sorted(REQUIRED_SCENARIO_COLUMNS)}"
        )

    if df.empty:
        raise ValueError("Scenario dataframe is empty")

    for col in _NUMERIC_COLUMNS:
        if pd.to_numeric(df[col], errors="coerce").isna().any():
            raise ValueError(f"{col} must be numeric")

    # Optional columns: blank cells fall back to defaults
    for col in [c for c in _OPTIONAL_NUMERIC_COLUMNS if c in df.columns]:
        if pd.to_numeric(df[col].dropna(), errors="coerce").isna().any():
            raise ValueError(f"{col} must be numeric")


def validate_scenarios(df: pd.DataFrame) -> pd.DataFrame:
    """
    Row-level sanity flags. Does not raise for bad values; the channel table
    skips flagged rows on its own.
    """
    out = df.copy()
    users = pd.to_numeric(out["users"], errors="coerce")
    duration = pd.to_numeric(out["avg_call_duration_minutes"], errors="coerce")
    concurrency = pd.to_numeric(out["concurrent_calls"], errors="coerce")

    out["flag_users_negative"] = users < 0
    out["flag_duration_nonpositive"] = duration <= 0
    out["flag_concurrency_nonpositive"] = concurrency <= 0

    if "target_blocking" in out.columns:
        target = pd.to_numeric(out["target_blocking"], errors="coerce")
        out["flag_target_out_of_range"] = (target < 0) | (target > 1)
    else:
        out["flag_target_out_of_range"] = False

    return out
