from __future__ import annotations

import pandas as pd
import streamlit as st

from channelplan.channels import ChannelInputs, compute_channel_plan
from channelplan.erlangb import blocking_curve
from channelplan.traffic import users_to_erlangs


# -----------------------------
# Page config
# -----------------------------
st.set_page_config(page_title="Channel Calculator", layout="wide")
st.title("Channel Calculator")
st.caption("Minimum number of channels whose Erlang B blocking stays at or below the target.")


# -----------------------------
# Sidebar controls
# -----------------------------
with st.sidebar:
    st.header("Traffic input")
    mode = st.radio("Traffic from", ["Users + call profile", "Erlangs"], index=0)

    if mode == "Erlangs":
        traffic = st.number_input("Offered traffic (Erlangs)", min_value=0.0, value=20.0, step=1.0)
    else:
        users = st.number_input("Users", min_value=0, value=100, step=10)
        duration = st.number_input("Average call duration (minutes)", min_value=0.1, value=3.0, step=0.5)
        calls_per_user = st.number_input("Calls per user in the busy hour", min_value=0.1, value=1.0, step=0.5)
        bh_factor = st.number_input("Busy-hour factor", min_value=0.1, value=1.0, step=0.1)
        traffic = None

    st.divider()
    st.header("Grade of Service")
    target = st.slider("Target blocking probability", 0.001, 0.20, 0.01, 0.001, format="%.3f")
    max_channels = st.number_input("Search ceiling (channels)", min_value=1, value=10_000, step=100)


# -----------------------------
# Compute
# -----------------------------
try:
    if traffic is None:
        traffic = users_to_erlangs(int(users), float(duration), float(calls_per_user), busy_hour_factor=float(bh_factor))
    plan = compute_channel_plan(
        ChannelInputs(traffic_erlangs=float(traffic), target_blocking=float(target), max_channels=int(max_channels))
    )
except ValueError as e:
    st.error(f"Invalid input: {e}")
    st.stop()

c1, c2, c3, c4 = st.columns(4)
c1.metric("Offered traffic (E)", f"{plan.offered_load_erlangs:.2f}")

if not plan.solved:
    c2.metric("Required channels", "n/a")
    st.warning(
        f"No channel count up to {int(max_channels)} meets {target:.3%} blocking. "
        "Raise the ceiling or relax the target."
    )
    st.stop()

c2.metric("Required channels", f"{plan.required_channels}")
c3.metric("E1 lines", f"{plan.e1_lines}")
c4.metric("Achieved blocking", f"{plan.achieved_blocking:.4%}")

st.subheader("Blocking curve")
upper = int(min(int(max_channels), max(int(plan.required_channels) * 2, 10)))
curve = blocking_curve(plan.offered_load_erlangs, upper)
chart = pd.DataFrame({"blocking": curve}, index=pd.Index(range(upper + 1), name="channels"))
st.line_chart(chart)
