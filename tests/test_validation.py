import pandas as pd
import pytest

from channelplan.validation import validate_scenario_df, validate_scenarios


def test_validate_scenarios_flags_expected_columns():
    df = pd.DataFrame(
        {
            "scenario": ["ok", "bad"],
            "users": [100, -1],
            "avg_call_duration_minutes": [3.0, 0.0],
            "concurrent_calls": [1.0, 0.0],
            "target_blocking": [0.01, 1.5],
        }
    )

    out = validate_scenarios(df)

    assert len(out) == 2

    # row 0: all fine
    assert not out.loc[0, "flag_users_negative"]
    assert not out.loc[0, "flag_duration_nonpositive"]
    assert not out.loc[0, "flag_concurrency_nonpositive"]
    assert not out.loc[0, "flag_target_out_of_range"]

    # row 1: everything out of range
    assert out.loc[1, "flag_users_negative"]
    assert out.loc[1, "flag_duration_nonpositive"]
    assert out.loc[1, "flag_concurrency_nonpositive"]
    assert out.loc[1, "flag_target_out_of_range"]


def test_validate_scenario_df_missing_columns():
    df = pd.DataFrame({"scenario": ["a"], "users": [10]})
    with pytest.raises(ValueError, match="missing required columns"):
        validate_scenario_df(df)


def test_validate_scenario_df_empty():
    df = pd.DataFrame(columns=["scenario", "users", "avg_call_duration_minutes", "concurrent_calls"])
    with pytest.raises(ValueError, match="empty"):
        validate_scenario_df(df)


def test_validate_scenario_df_non_numeric():
    df = pd.DataFrame(
        {"scenario": ["a"], "users": ["lots"], "avg_call_duration_minutes": [3.0], "concurrent_calls": [1.0]}
    )
    with pytest.raises(ValueError, match="users must be numeric"):
        validate_scenario_df(df)


def test_validate_scenario_df_allows_blank_optional_cells():
    df = pd.DataFrame(
        {
            "scenario": ["a", "b"],
            "users": [10, 20],
            "avg_call_duration_minutes": [3.0, 3.0],
            "concurrent_calls": [1.0, 1.0],
            "target_blocking": [0.02, None],
            "busy_hour_factor": [None, 1.2],
        }
    )
    validate_scenario_df(df)


def test_validate_scenario_df_rejects_text_in_optional_column():
    df = pd.DataFrame(
        {
            "scenario": ["a"],
            "users": [10],
            "avg_call_duration_minutes": [3.0],
            "concurrent_calls": [1.0],
            "target_blocking": ["strict"],
        }
    )
    with pytest.raises(ValueError, match="target_blocking must be numeric"):
        validate_scenario_df(df)
