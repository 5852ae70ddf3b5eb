# coldemail_roi/schemas.py
from __future__ import annotations

import math
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, field_validator

from .projection import CalculatorReport
from .scenarios import DEFAULT_INPUTS, FunnelInputs, GrowthScenario


# -----------------------
# Request
# -----------------------
class CalculatorRequest(BaseModel):
    """
    Raw values from the input widgets.
    Empty or unparsable text (and NaN/inf) becomes 0 before reaching the core.
    """
    monthly_retainer: float = DEFAULT_INPUTS.monthly_retainer
    close_rate: float = DEFAULT_INPUTS.close_rate
    ltv: float = DEFAULT_INPUTS.ltv
    emails_per_month: float = DEFAULT_INPUTS.emails_per_month
    scenario: GrowthScenario = GrowthScenario.LINEAR

    @field_validator("monthly_retainer", "close_rate", "ltv", "emails_per_month", mode="before")
    @classmethod
    def _coerce_number(cls, v: Any) -> float:
        if v is None or isinstance(v, bool):
            return 0.0
        if isinstance(v, str):
            v = v.strip().replace(",", "")
            if not v:
                return 0.0
        try:
            x = float(v)
        except (TypeError, ValueError):
            return 0.0
        return x if math.isfinite(x) else 0.0

    def to_inputs(self) -> FunnelInputs:
        return FunnelInputs(
            monthly_retainer=self.monthly_retainer,
            close_rate=self.close_rate,
            ltv=self.ltv,
            emails_per_month=self.emails_per_month,
        )


# -----------------------
# Response
# -----------------------
class MonthRow(BaseModel):
    month: int
    new_clients_this_month: float
    cumulative_clients: float
    cumulative_revenue: float
    cumulative_cost: float
    cumulative_profit: float
    monthly_roi: float


class CalculatorResponse(BaseModel):
    scenario: GrowthScenario
    funnel: Dict[str, float]
    return_per_dollar: float
    projections: List[MonthRow]
    this_month: MonthRow
    six_month: MonthRow
    break_even_emails: Optional[float] = None
    warnings: List[str] = []

    @classmethod
    def from_report(cls, report: CalculatorReport) -> "CalculatorResponse":
        return cls(
            scenario=report.scenario,
            funnel=asdict(report.funnel),
            return_per_dollar=report.funnel.return_per_dollar,
            projections=[MonthRow(**asdict(p)) for p in report.projections],
            this_month=MonthRow(**asdict(report.summary.this_month)),
            six_month=MonthRow(**asdict(report.summary.six_month)),
            break_even_emails=report.break_even_emails,
            warnings=list(report.warnings),
        )
