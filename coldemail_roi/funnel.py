# coldemail_roi/funnel.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .scenarios import DEFAULT_RATES, FunnelInputs, FunnelRates


@dataclass(frozen=True)
class FunnelResult:
    emails_per_month: float
    total_replies: float
    positive_replies: float
    calls_booked: float
    new_clients: float
    total_revenue: float
    net_profit: float
    roi: float

    @property
    def return_per_dollar(self) -> float:
        """Dollars returned per $1 of retainer (ROI / 100)."""
        return self.roi / 100


def safe_roi(profit: float, cost: float) -> float:
    """
    ROI in percent: profit / cost * 100.
    A zero cost has no defined ROI and maps to 0.0.
    """
    if cost == 0:
        return 0.0
    return profit / cost * 100


def compute_funnel(
    emails_per_month: float,
    close_rate: float,
    ltv: float,
    monthly_retainer: float,
    rates: FunnelRates = DEFAULT_RATES,
) -> FunnelResult:
    """
    Single-month funnel and financials:
      replies          = emails * response_rate
      positive replies = replies * positive_reply_rate
      calls booked     = positive replies * call_booking_rate
      new clients      = calls booked * close_rate / 100
      revenue          = new clients * LTV
      net profit       = revenue - retainer
      ROI              = net profit / retainer * 100

    No rounding and no input validation: negative values flow through.
    """
    total_replies = emails_per_month * rates.response_rate
    positive_replies = total_replies * rates.positive_reply_rate
    calls_booked = positive_replies * rates.call_booking_rate
    new_clients = calls_booked * (close_rate / 100)
    total_revenue = new_clients * ltv
    net_profit = total_revenue - monthly_retainer

    return FunnelResult(
        emails_per_month=emails_per_month,
        total_replies=total_replies,
        positive_replies=positive_replies,
        calls_booked=calls_booked,
        new_clients=new_clients,
        total_revenue=total_revenue,
        net_profit=net_profit,
        roi=safe_roi(net_profit, monthly_retainer),
    )


def compute_funnel_for(inputs: FunnelInputs, rates: FunnelRates = DEFAULT_RATES) -> FunnelResult:
    return compute_funnel(
        inputs.emails_per_month,
        inputs.close_rate,
        inputs.ltv,
        inputs.monthly_retainer,
        rates=rates,
    )


def break_even_emails(
    close_rate: float,
    ltv: float,
    monthly_retainer: float,
    rates: FunnelRates = DEFAULT_RATES,
) -> Optional[float]:
    """
    Monthly email volume at which revenue exactly covers the retainer.

    Returns None when a single email earns nothing (or loses money),
    i.e. no volume reaches break-even.
    """
    revenue_per_email = rates.emails_to_calls * (close_rate / 100) * ltv
    if revenue_per_email <= 0:
        return None
    return monthly_retainer / revenue_per_email


def input_warnings(inputs: FunnelInputs) -> List[str]:
    """
    Advisory messages for inputs that compute fine but are probably unintended.
    Nothing is rejected: the funnel math still runs on these values.
    """
    warnings: List[str] = []
    for name in ("monthly_retainer", "close_rate", "ltv", "emails_per_month"):
        value = getattr(inputs, name)
        if value < 0:
            warnings.append(f"{name} is negative ({value}); results will be negative or meaningless")
    if inputs.close_rate > 100:
        warnings.append(f"close_rate above 100% ({inputs.close_rate})")
    if inputs.monthly_retainer == 0:
        warnings.append("monthly_retainer is 0; ROI is reported as 0")
    return warnings
