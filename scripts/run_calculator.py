# scripts/run_calculator.py
from __future__ import annotations

import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).resolve().parents[1]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import argparse

from coldemail_roi.projection import compare_scenarios, projections_to_frame, run_calculator
from coldemail_roi.scenarios import DEFAULT_INPUTS, GrowthScenario
from coldemail_roi.schemas import CalculatorRequest


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Cold email ROI calculator: funnel + 6-month projection.")
    parser.add_argument("--retainer", default=str(DEFAULT_INPUTS.monthly_retainer), help="Monthly retainer ($).")
    parser.add_argument("--close-rate", default=str(DEFAULT_INPUTS.close_rate), help="Close rate on booked calls (%%).")
    parser.add_argument("--ltv", default=str(DEFAULT_INPUTS.ltv), help="Customer lifetime value ($).")
    parser.add_argument("--emails", default=str(DEFAULT_INPUTS.emails_per_month), help="Emails sent per month.")
    parser.add_argument(
        "--scenario",
        default=GrowthScenario.LINEAR.value,
        choices=[s.value for s in GrowthScenario],
        help="Growth scenario for the projection.",
    )
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)

    # Same coercion the UI applies: blank/invalid text -> 0
    req = CalculatorRequest(
        monthly_retainer=args.retainer,
        close_rate=args.close_rate,
        ltv=args.ltv,
        emails_per_month=args.emails,
        scenario=args.scenario,
    )
    inputs = req.to_inputs()
    report = run_calculator(inputs, req.scenario)

    for msg in report.warnings:
        print(f"[warn] {msg}")

    f = report.funnel
    print("\n" + "=" * 60)
    print(f"FUNNEL | scenario={report.scenario.value}")
    print("=" * 60)
    print(f"  Emails sent:      {f.emails_per_month:,.0f}")
    print(f"  Replies:          {round(f.total_replies)}")
    print(f"  Positive replies: {round(f.positive_replies)}")
    print(f"  Calls booked:     {round(f.calls_booked)}")
    print(f"  New clients:      {f.new_clients:.1f}")
    print(f"  Revenue:          ${f.total_revenue:,.0f}")
    print(f"  Net profit:       ${f.net_profit:,.0f}")
    print(f"  ROI:              {f.roi:.0f}% (${f.return_per_dollar:.2f} back per $1)")

    if report.break_even_emails is None:
        print("  Break-even:       not reachable with these inputs")
    else:
        print(f"  Break-even:       {report.break_even_emails:,.0f} emails/month")

    print("\n=== MONTHLY PROJECTION ===")
    print(projections_to_frame(report.projections).round(2).to_string(index=False))

    six = report.summary.six_month
    print(f"\n6-month total: {six.cumulative_clients:.1f} clients | "
          f"${six.cumulative_profit:,.0f} profit | {six.monthly_roi:.0f}% ROI")

    print("\n=== SCENARIO COMPARISON (6 months) ===")
    print(compare_scenarios(inputs).round(2).to_string(index=False))


if __name__ == "__main__":
    main()
