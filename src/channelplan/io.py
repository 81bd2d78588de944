from __future__ import annotations

import pandas as pd


REQUIRED_COLUMNS = ["scenario", "users", "avg_call_duration_minutes", "concurrent_calls"]
OPTIONAL_COLUMNS = ["target_blocking", "busy_hour_factor"]


def read_scenario_csv(file) -> pd.DataFrame:
    """
    Reads the scenario-level channel planning CSV.
    Expected columns:
      scenario (label)
      users (int)
      avg_call_duration_minutes (float)
      concurrent_calls (float, calls per user in the busy hour)
    Optional:
      target_blocking (float, overrides the global grade of service)
      busy_hour_factor (float, defaults to 1.0)

    Returns a normalized DataFrame.
    """
    df = pd.read_csv(file)
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Required: {REQUIRED_COLUMNS}")

    df = df.copy()
    df["scenario"] = df["scenario"].astype(str)
    # Not cast to int: fractional users must fail per row, not truncate
    df["users"] = pd.to_numeric(df["users"], errors="coerce")
    df["avg_call_duration_minutes"] = df["avg_call_duration_minutes"].astype(float)
    df["concurrent_calls"] = df["concurrent_calls"].astype(float)

    if "target_blocking" in df.columns:
        df["target_blocking"] = df["target_blocking"].astype(float)
    if "busy_hour_factor" in df.columns:
        df["busy_hour_factor"] = df["busy_hour_factor"].fillna(1.0).astype(float)
    else:
        df["busy_hour_factor"] = 1.0

    return df.reset_index(drop=True)
