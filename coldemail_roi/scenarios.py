# coldemail_roi/scenarios.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Tuple, Union

PROJECTION_MONTHS = 6

SCALING_GROWTH_RATE = 0.20      # +20% emails per month, compounded
IMPROVING_STEP_POINTS = 2.0     # +2 close-rate points per month
IMPROVING_CLOSE_RATE_CAP = 0.5  # hard ceiling (fraction)


@dataclass(frozen=True)
class FunnelRates:
    """
    Fixed conversion rates of the outbound service funnel.

    emails -> replies -> positive replies -> booked calls
    """
    response_rate: float = 0.02
    positive_reply_rate: float = 0.05
    call_booking_rate: float = 0.40

    def __post_init__(self) -> None:
        for name in ("response_rate", "positive_reply_rate", "call_booking_rate"):
            value = getattr(self, name)
            if not 0.0 < value <= 1.0:
                raise ValueError(f"{name} must be in (0, 1], got {value}")

    @property
    def emails_to_calls(self) -> float:
        """Share of sent emails that end up as a booked call."""
        return self.response_rate * self.positive_reply_rate * self.call_booking_rate


DEFAULT_RATES = FunnelRates()


@dataclass(frozen=True)
class FunnelInputs:
    monthly_retainer: float
    close_rate: float  # percentage points, e.g. 25 == 25%
    ltv: float
    emails_per_month: float


DEFAULT_INPUTS = FunnelInputs(
    monthly_retainer=2500.0,
    close_rate=25.0,
    ltv=15000.0,
    emails_per_month=15000.0,
)


class GrowthScenario(str, Enum):
    LINEAR = "linear"
    SCALING = "scaling"
    IMPROVING = "improving"


# (month, baseline) -> (adjusted_emails, adjusted_close_rate as a fraction)
Adjustment = Callable[[int, FunnelInputs], Tuple[float, float]]


def _linear(month: int, base: FunnelInputs) -> Tuple[float, float]:
    return base.emails_per_month, base.close_rate / 100


def _scaling(month: int, base: FunnelInputs) -> Tuple[float, float]:
    emails = base.emails_per_month * (1 + SCALING_GROWTH_RATE) ** (month - 1)
    return emails, base.close_rate / 100


def _improving(month: int, base: FunnelInputs) -> Tuple[float, float]:
    close_rate = min(
        (base.close_rate + (month - 1) * IMPROVING_STEP_POINTS) / 100,
        IMPROVING_CLOSE_RATE_CAP,
    )
    return base.emails_per_month, close_rate


@dataclass(frozen=True)
class ScenarioRule:
    scenario: GrowthScenario
    label: str
    description: str
    adjust: Adjustment


SCENARIOS: Dict[GrowthScenario, ScenarioRule] = {
    GrowthScenario.LINEAR:    ScenarioRule(GrowthScenario.LINEAR,    "Linear Growth",         "Constant performance each month", _linear),
    GrowthScenario.SCALING:   ScenarioRule(GrowthScenario.SCALING,   "Scaling Volume",        "+20% emails each month",          _scaling),
    GrowthScenario.IMPROVING: ScenarioRule(GrowthScenario.IMPROVING, "Improving Conversions", "+2% close rate each month",       _improving),
}


def get_scenario(scenario: Union[str, GrowthScenario]) -> ScenarioRule:
    """Resolve a scenario tag ('linear', 'scaling', 'improving') to its rule."""
    try:
        key = GrowthScenario(scenario)
    except ValueError:
        valid = ", ".join(s.value for s in GrowthScenario)
        raise ValueError(f"Unknown scenario: {scenario!r}. Use one of: {valid}.") from None
    return SCENARIOS[key]
