import io

import pytest

from channelplan.io import read_scenario_csv


def test_read_scenario_csv_normalizes_columns():
    csv = io.StringIO(
        "scenario,users,avg_call_duration_minutes,concurrent_calls\n"
        "branch,100,3,1\n"
        "hq,1200,4.5,1.5\n"
    )
    df = read_scenario_csv(csv)

    assert list(df["scenario"]) == ["branch", "hq"]
    assert df["users"].dtype.kind == "i"
    assert df["avg_call_duration_minutes"].dtype.kind == "f"
    assert (df["busy_hour_factor"] == 1.0).all()


def test_read_scenario_csv_missing_columns():
    csv = io.StringIO("scenario,users\nbranch,100\n")
    with pytest.raises(ValueError, match="Missing required columns"):
        read_scenario_csv(csv)


def test_read_scenario_csv_keeps_fractional_users():
    csv = io.StringIO("scenario,users,avg_call_duration_minutes,concurrent_calls\nbranch,2.7,60,1\n")
    df = read_scenario_csv(csv)
    assert df.loc[0, "users"] == 2.7


def test_read_scenario_csv_keeps_blank_target():
    csv = io.StringIO(
        "scenario,users,avg_call_duration_minutes,concurrent_calls,target_blocking\n"
        "branch,100,3,1,0.02\n"
        "hq,1200,4.5,1.5,\n"
    )
    df = read_scenario_csv(csv)
    assert df.loc[0, "target_blocking"] == 0.02
    assert df["target_blocking"].isna().iloc[1]
