import streamlit as st

st.set_page_config(page_title="E1 Channel Planner (Erlang B)", layout="wide")

st.title("E1 Channel Planner (Erlang B)")
st.write(
    """
This app computes **required voice channels** for a target blocking probability using an Erlang B engine.

Included:
- Channel Calculator (Erlangs or users + call profile)
- Scenario Table (CSV upload, one plan per row)
- E1 trunk sizing (30 voice channels per E1)
- Blocking curve per channel count
"""
)

st.info("Use the left sidebar to navigate to the calculator or the scenario table.")
