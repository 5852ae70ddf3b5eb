# tests/test_schemas.py
from __future__ import annotations

import pytest
from pydantic import ValidationError

from coldemail_roi.projection import run_calculator
from coldemail_roi.scenarios import DEFAULT_INPUTS, GrowthScenario
from coldemail_roi.schemas import CalculatorRequest, CalculatorResponse


def test_defaults_match_default_inputs():
    req = CalculatorRequest()
    assert req.to_inputs() == DEFAULT_INPUTS
    assert req.scenario is GrowthScenario.LINEAR


@pytest.mark.parametrize("raw", ["", "   ", None, "abc", float("nan"), float("inf")])
def test_blank_or_invalid_values_become_zero(raw):
    req = CalculatorRequest(ltv=raw)
    assert req.ltv == 0.0


@pytest.mark.parametrize("raw, expected", [("2500", 2500.0), (" 15,000 ", 15000.0), ("-3.5", -3.5), (7, 7.0)])
def test_numeric_text_is_parsed(raw, expected):
    assert CalculatorRequest(monthly_retainer=raw).monthly_retainer == expected


def test_scenario_from_text():
    assert CalculatorRequest(scenario="scaling").scenario is GrowthScenario.SCALING


def test_unknown_scenario_rejected():
    with pytest.raises(ValidationError):
        CalculatorRequest(scenario="hypergrowth")


def test_response_from_report():
    req = CalculatorRequest(scenario="scaling")
    report = run_calculator(req.to_inputs(), req.scenario)
    resp = CalculatorResponse.from_report(report)

    assert resp.scenario is GrowthScenario.SCALING
    assert resp.funnel["roi"] == pytest.approx(800)
    assert resp.return_per_dollar == pytest.approx(8.0)
    assert len(resp.projections) == 6
    assert resp.projections[1].new_clients_this_month == pytest.approx(1.8)
    assert resp.this_month.month == 1
    assert resp.six_month.month == 6
    assert resp.break_even_emails == pytest.approx(2500 / 1.5)
    assert resp.warnings == []


def test_response_for_zero_retainer_carries_warning():
    req = CalculatorRequest(monthly_retainer="")
    resp = CalculatorResponse.from_report(run_calculator(req.to_inputs(), req.scenario))

    assert resp.funnel["roi"] == 0.0
    assert resp.six_month.monthly_roi == 0.0
    assert any("monthly_retainer is 0" in w for w in resp.warnings)
