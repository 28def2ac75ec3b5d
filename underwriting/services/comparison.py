# This project was developed with assistance from AI tools.
"""Points vs. no-points comparison over a holding period.

Pure math, no I/O.
"""

import math

from ..schemas.pricing import PricingScenario, ScenarioComparison
from .amortization import round_half_up


def compare_scenarios(
    scenario_1: PricingScenario,
    scenario_2: PricingScenario,
    hold_years: float,
) -> ScenarioComparison:
    """Decide which scenario is cheaper if the loan is held for ``hold_years``.

    Total cost per scenario is the upfront points cost plus the monthly
    payments made during the hold. Ties go to scenario 1. Break-even is the
    number of months of payment savings needed to recover the extra points
    cost (0 when the payments are equal).
    """
    months = hold_years * 12
    cost_1 = scenario_1.points_cost + scenario_1.monthly_payment * months
    cost_2 = scenario_2.points_cost + scenario_2.monthly_payment * months

    winner = 1 if cost_1 <= cost_2 else 2

    monthly_diff = scenario_1.monthly_payment - scenario_2.monthly_payment
    points_diff = scenario_2.points_cost - scenario_1.points_cost
    break_even_months = math.ceil(points_diff / monthly_diff) if monthly_diff != 0 else 0

    return ScenarioComparison(
        winner=winner,
        savings=round_half_up(abs(cost_1 - cost_2), 0),
        break_even_months=break_even_months,
        total_cost_1=round_half_up(cost_1, 2),
        total_cost_2=round_half_up(cost_2, 2),
    )
