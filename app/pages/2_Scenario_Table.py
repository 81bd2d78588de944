import io

import pandas as pd
import streamlit as st

from channelplan.io import read_scenario_csv
from channelplan.table import compute_channel_table
from channelplan.validation import validate_scenarios

st.set_page_config(page_title="Scenario Table", layout="wide")
st.title("Scenario Table (CSV Upload)")

st.write(
    """
Upload one row per scenario with columns `scenario`, `users`, `avg_call_duration_minutes`,
`concurrent_calls` (calls per user in the busy hour).
Optional columns: `target_blocking` (overrides the global target) and `busy_hour_factor`.
"""
)

with st.sidebar:
    st.header("Global Grade of Service")
    target = st.slider("Target blocking probability", 0.001, 0.20, 0.01, 0.001, format="%.3f")
    max_channels = st.number_input("Search ceiling (channels)", min_value=1, value=10_000, step=100)

uploaded = st.file_uploader("Upload scenario CSV", type=["csv"])

if uploaded is None:
    st.info("No file uploaded yet. Download a template below.")
    template = pd.DataFrame(
        {
            "scenario": ["branch", "hq"],
            "users": [100, 1200],
            "avg_call_duration_minutes": [3.0, 4.5],
            "concurrent_calls": [1.0, 1.5],
            "target_blocking": [0.01, 0.005],
        }
    )
    st.download_button(
        "Download scenario template CSV",
        data=template.to_csv(index=False),
        file_name="scenarios_template.csv",
        mime="text/csv",
    )
    st.stop()

try:
    df = read_scenario_csv(uploaded)
except ValueError as e:
    st.error(f"Could not read CSV: {e}")
    st.stop()

st.subheader("Input preview (first 30 rows)")
st.dataframe(validate_scenarios(df).head(30), use_container_width=True)

try:
    out = compute_channel_table(df, target_blocking=float(target), max_channels=int(max_channels))
except ValueError as e:
    st.error(f"Could not compute channel table: {e}")
    st.stop()

st.subheader("Results")
st.dataframe(out, use_container_width=True)

c1, c2, c3 = st.columns(3)
c1.metric("Scenarios", f"{len(out)}")
c2.metric("Unsolved / invalid", f"{int(out['required_channels'].isna().sum())}")
c3.metric("Total E1 lines (sum)", f"{int(out['e1_lines'].fillna(0).sum())}")

buf = io.StringIO()
out.to_csv(buf, index=False)
st.download_button(
    label="Download results CSV",
    data=buf.getvalue(),
    file_name="channel_plan_results.csv",
    mime="text/csv",
)
