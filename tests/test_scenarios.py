# tests/test_scenarios.py
from __future__ import annotations

import pytest

from coldemail_roi.scenarios import (
    DEFAULT_INPUTS,
    DEFAULT_RATES,
    SCENARIOS,
    FunnelRates,
    GrowthScenario,
    get_scenario,
)


def test_default_rates():
    assert DEFAULT_RATES.response_rate == 0.02
    assert DEFAULT_RATES.positive_reply_rate == 0.05
    assert DEFAULT_RATES.call_booking_rate == 0.40
    assert DEFAULT_RATES.emails_to_calls == pytest.approx(0.0004)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"response_rate": 0.0},
        {"positive_reply_rate": -0.1},
        {"call_booking_rate": 1.5},
    ],
)
def test_rates_out_of_range_rejected(kwargs):
    with pytest.raises(ValueError):
        FunnelRates(**kwargs)


def test_rate_of_one_is_allowed():
    assert FunnelRates(call_booking_rate=1.0).call_booking_rate == 1.0


def test_every_scenario_has_a_rule():
    assert set(SCENARIOS) == set(GrowthScenario)
    for key, rule in SCENARIOS.items():
        assert rule.scenario is key


@pytest.mark.parametrize("tag", ["linear", "scaling", "improving"])
def test_get_scenario_by_string(tag):
    assert get_scenario(tag).scenario.value == tag


def test_get_scenario_by_enum():
    assert get_scenario(GrowthScenario.SCALING) is SCENARIOS[GrowthScenario.SCALING]


def test_get_scenario_unknown():
    with pytest.raises(ValueError, match="Unknown scenario"):
        get_scenario("exponential")


def test_linear_is_constant():
    adjust = get_scenario("linear").adjust
    for month in range(1, 7):
        assert adjust(month, DEFAULT_INPUTS) == (15000, 0.25)


def test_scaling_compounds_20_percent():
    adjust = get_scenario("scaling").adjust

    assert adjust(1, DEFAULT_INPUTS)[0] == pytest.approx(15000)
    assert adjust(2, DEFAULT_INPUTS)[0] == pytest.approx(18000)
    assert adjust(3, DEFAULT_INPUTS)[0] == pytest.approx(21600)
    for month in range(1, 7):
        emails, close_rate = adjust(month, DEFAULT_INPUTS)
        assert emails == pytest.approx(15000 * 1.2 ** (month - 1))
        assert close_rate == 0.25


def test_scaling_has_no_cap():
    adjust = get_scenario("scaling").adjust
    assert adjust(24, DEFAULT_INPUTS)[0] == pytest.approx(15000 * 1.2 ** 23)


def test_improving_adds_two_points_per_month():
    adjust = get_scenario("improving").adjust
    for month in range(1, 7):
        emails, close_rate = adjust(month, DEFAULT_INPUTS)
        assert emails == 15000
        assert close_rate == pytest.approx(min(0.25 + 0.02 * (month - 1), 0.5))


def test_improving_caps_at_fifty_percent():
    adjust = get_scenario("improving").adjust
    rates = [adjust(month, DEFAULT_INPUTS)[1] for month in range(1, 40)]

    assert all(r <= 0.5 for r in rates)
    assert all(later >= earlier for earlier, later in zip(rates, rates[1:]))
    for month in range(14, 40):
        assert adjust(month, DEFAULT_INPUTS)[1] == 0.5
