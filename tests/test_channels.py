import pytest

from channelplan.channels import (
    ChannelInputs,
    calculate_channels,
    compute_channel_plan,
    e1_lines_for_channels,
    plan_to_dict,
)
from channelplan.erlangb import erlang_b


def test_search_returns_minimal_channel_count():
    n = calculate_channels(20.0, 0.05, 10_000)
    assert n is not None
    assert 20 <= n <= 30
    assert erlang_b(20.0, n) <= 0.05
    assert erlang_b(20.0, n - 1) > 0.05


@pytest.mark.parametrize("traffic, target", [(1.0, 0.01), (7.5, 0.02), (45.0, 0.001), (120.0, 0.1)])
def test_no_smaller_count_meets_target(traffic, target):
    n = calculate_channels(traffic, target)
    assert n is not None
    assert erlang_b(traffic, n) <= target
    assert all(erlang_b(traffic, k) > target for k in range(1, n))


def test_search_exhausted_returns_none():
    assert calculate_channels(1000.0, 0.01, 50) is None


def test_ceiling_is_inclusive():
    n = calculate_channels(20.0, 0.05)
    assert calculate_channels(20.0, 0.05, n) == n
    assert calculate_channels(20.0, 0.05, n - 1) is None


def test_zero_ceiling_has_no_solution():
    assert calculate_channels(5.0, 0.5, 0) is None


def test_zero_traffic_needs_one_channel():
    assert calculate_channels(0.0, 0.01) == 1


def test_target_of_one_is_met_by_first_channel():
    assert calculate_channels(50.0, 1.0) == 1


@pytest.mark.parametrize("target", [-0.1, 1.5, float("nan")])
def test_target_out_of_range_raises(target):
    with pytest.raises(ValueError):
        calculate_channels(10.0, target)


def test_negative_traffic_raises():
    with pytest.raises(ValueError):
        calculate_channels(-5.0, 0.01)


def test_e1_lines_round_up():
    assert e1_lines_for_channels(0) == 0
    assert e1_lines_for_channels(1) == 1
    assert e1_lines_for_channels(30) == 1
    assert e1_lines_for_channels(31) == 2
    assert e1_lines_for_channels(90) == 3


def test_plan_carries_achieved_blocking_and_e1_lines():
    plan = compute_channel_plan(ChannelInputs(traffic_erlangs=20.0, target_blocking=0.05))
    assert plan.solved
    assert plan.required_channels == calculate_channels(20.0, 0.05)
    assert plan.achieved_blocking == pytest.approx(erlang_b(20.0, plan.required_channels))
    assert plan.carried_erlangs == pytest.approx(20.0 * (1.0 - plan.achieved_blocking))
    assert plan.e1_lines == 1


def test_unsolved_plan_has_no_results():
    plan = compute_channel_plan(ChannelInputs(traffic_erlangs=1000.0, target_blocking=0.01, max_channels=50))
    assert not plan.solved
    d = plan_to_dict(plan)
    assert d["erlangs"] == 1000.0
    assert d["required_channels"] is None
    assert d["e1_lines"] is None
