# coldemail_roi/projection.py
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import List, Optional, Union

import numpy as np
import pandas as pd

from .funnel import FunnelResult, break_even_emails, compute_funnel_for, input_warnings, safe_roi
from .scenarios import (
    DEFAULT_RATES,
    PROJECTION_MONTHS,
    SCENARIOS,
    FunnelInputs,
    FunnelRates,
    GrowthScenario,
    get_scenario,
)

PROJECTION_COLUMNS = [
    "month",
    "new_clients_this_month",
    "cumulative_clients",
    "cumulative_revenue",
    "cumulative_cost",
    "cumulative_profit",
    "monthly_roi",
]


@dataclass(frozen=True)
class MonthProjection:
    month: int
    new_clients_this_month: float
    cumulative_clients: float
    cumulative_revenue: float
    cumulative_cost: float
    cumulative_profit: float
    monthly_roi: float


@dataclass(frozen=True)
class ProjectionSummary:
    this_month: MonthProjection
    six_month: MonthProjection


@dataclass(frozen=True)
class CalculatorReport:
    inputs: FunnelInputs
    scenario: GrowthScenario
    funnel: FunnelResult
    projections: List[MonthProjection]
    summary: ProjectionSummary
    break_even_emails: Optional[float]
    warnings: List[str] = field(default_factory=list)


def monthly_new_clients(
    baseline: FunnelInputs,
    scenario: Union[str, GrowthScenario] = GrowthScenario.LINEAR,
    rates: FunnelRates = DEFAULT_RATES,
    months: int = PROJECTION_MONTHS,
) -> np.ndarray:
    """
    New clients won in each month 1..months under the scenario rule:
      new_clients(m) = emails(m) * response * positive * booking * close_rate(m)
    """
    rule = get_scenario(scenario)
    out = np.zeros(months, dtype=float)
    for i in range(months):
        emails, close_rate = rule.adjust(i + 1, baseline)
        out[i] = emails * rates.response_rate * rates.positive_reply_rate * rates.call_booking_rate * close_rate
    return out


def project_months(
    baseline: FunnelInputs,
    scenario: Union[str, GrowthScenario] = GrowthScenario.LINEAR,
    rates: FunnelRates = DEFAULT_RATES,
    months: int = PROJECTION_MONTHS,
) -> List[MonthProjection]:
    """
    Month-by-month cumulative projection, in ascending month order.

    Cumulative fields are running sums over months 1..m; cost is the
    retainer paid every month so far, and ROI is computed on the
    cumulative profit and cost (0.0 when the cumulative cost is 0).
    """
    if months < 1:
        raise ValueError(f"months must be >= 1, got {months}")

    new_clients = monthly_new_clients(baseline, scenario, rates=rates, months=months)
    cum_clients = np.cumsum(new_clients)
    cum_revenue = np.cumsum(new_clients * baseline.ltv)
    cum_cost = baseline.monthly_retainer * np.arange(1, months + 1, dtype=float)
    cum_profit = cum_revenue - cum_cost

    rows: List[MonthProjection] = []
    for i in range(months):
        rows.append(
            MonthProjection(
                month=i + 1,
                new_clients_this_month=float(new_clients[i]),
                cumulative_clients=float(cum_clients[i]),
                cumulative_revenue=float(cum_revenue[i]),
                cumulative_cost=float(cum_cost[i]),
                cumulative_profit=float(cum_profit[i]),
                monthly_roi=safe_roi(float(cum_profit[i]), float(cum_cost[i])),
            )
        )
    return rows


def summarize_projection(projections: List[MonthProjection]) -> ProjectionSummary:
    """First month ("this month") and last month (horizon total)."""
    if not projections:
        raise ValueError("projections must not be empty")
    return ProjectionSummary(this_month=projections[0], six_month=projections[-1])


def projections_to_frame(projections: List[MonthProjection]) -> pd.DataFrame:
    """One row per month, for table/chart consumers."""
    return pd.DataFrame([asdict(p) for p in projections], columns=PROJECTION_COLUMNS)


def compare_scenarios(
    inputs: FunnelInputs,
    rates: FunnelRates = DEFAULT_RATES,
    months: int = PROJECTION_MONTHS,
) -> pd.DataFrame:
    """
    Horizon totals for every growth scenario on the same inputs.
    Returns a DataFrame sorted by cumulative profit descending.
    """
    rows = []
    for key, rule in SCENARIOS.items():
        last = project_months(inputs, key, rates=rates, months=months)[-1]
        rows.append({
            "scenario": key.value,
            "label": rule.label,
            "cumulative_clients": last.cumulative_clients,
            "cumulative_revenue": last.cumulative_revenue,
            "cumulative_cost": last.cumulative_cost,
            "cumulative_profit": last.cumulative_profit,
            "roi": last.monthly_roi,
        })

    return (
        pd.DataFrame(rows)
        .sort_values("cumulative_profit", ascending=False, kind="stable")
        .reset_index(drop=True)
    )


def run_calculator(
    inputs: FunnelInputs,
    scenario: Union[str, GrowthScenario] = GrowthScenario.LINEAR,
    rates: FunnelRates = DEFAULT_RATES,
) -> CalculatorReport:
    """
    Full recomputation for one set of inputs: baseline funnel, projection
    over the horizon, summary and break-even volume.
    """
    rule = get_scenario(scenario)
    projections = project_months(inputs, rule.scenario, rates=rates)

    return CalculatorReport(
        inputs=inputs,
        scenario=rule.scenario,
        funnel=compute_funnel_for(inputs, rates=rates),
        projections=projections,
        summary=summarize_projection(projections),
        break_even_emails=break_even_emails(
            inputs.close_rate, inputs.ltv, inputs.monthly_retainer, rates=rates
        ),
        warnings=input_warnings(inputs),
    )
