# roi_calculator/services/projection.py

from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import Optional, Protocol

import numpy as np

from roi_calculator.schemas.projection import MonthlyDataPoint
from roi_calculator.services.growth import growth_factors, seasonal_multiplier
from roi_calculator.services.payback import estimate_payback_period

RAMP_UP_SHARE = 0.6  # ventures start at 60% of the expected monthly revenue
VARIANCE = 0.05  # ±5% on growth rate and operating cost


class RandomSource(Protocol):
    """Anything with `uniform(low, high)`: numpy Generator, random.Random, ..."""

    def uniform(self, low: float, high: float) -> float: ...


@dataclass(frozen=True, slots=True)
class FinancialInputs:
    initial_investment: int
    expected_monthly_revenue: int
    monthly_operating_cost: int
    timeframe_months: int
    business_model: Optional[str] = None


@dataclass(slots=True)
class ProjectionResult:
    monthly_data: list[MonthlyDataPoint]
    total_revenue: int
    total_operating_cost: int
    net_profit: int
    roi_percentage: float  # 2 decimals
    payback_period_years: float  # 2 decimals
    inputs: Optional[FinancialInputs] = field(default=None, repr=False)


# ── common utils ─────────────────────────────────────────────────────────────
def round_half_up(x: float) -> int:
    """x.5 always rounds up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(x + 0.5))


def _variance(rng: RandomSource) -> float:
    return float(rng.uniform(-VARIANCE, VARIANCE))


# ── monthly series ───────────────────────────────────────────────────────────
def generate_monthly_data(
    inputs: FinancialInputs, rng: Optional[RandomSource] = None
) -> list[MonthlyDataPoint]:
    """
    Month-by-month revenue/cost/profit projection.

    Revenue starts at 60% of the expected value and compounds monthly with the
    business model's growth rate (±5% variance), capped at
    expected revenue * max capacity, then gets the seasonal multiplier.
    Cost does not compound: every month it is the base operating cost ±5%.
    Without `rng` a fresh numpy generator is used, so every call differs.
    """
    if rng is None:
        rng = np.random.default_rng()

    factors = growth_factors(inputs.business_model)
    ceiling = inputs.expected_monthly_revenue * factors.max_capacity
    current_revenue = inputs.expected_monthly_revenue * RAMP_UP_SHARE
    current_cost = float(inputs.monthly_operating_cost)

    out: list[MonthlyDataPoint] = []
    prev_adjusted: Optional[float] = None
    cumulative = -inputs.initial_investment

    for month in range(1, inputs.timeframe_months + 1):
        if month > 1:
            growth_rate = factors.monthly_growth * (1 + _variance(rng))
            current_revenue = min(current_revenue * (1 + growth_rate), ceiling)

        current_cost = inputs.monthly_operating_cost * (1 + _variance(rng))

        adjusted = current_revenue * seasonal_multiplier(month)
        profit = round_half_up(adjusted - current_cost)
        # accumulate rounded profits so the running total stays exact
        cumulative += profit

        base = adjusted if prev_adjusted is None else prev_adjusted
        growth_pct = (adjusted - base) / base * 100 if base else 0.0

        out.append(
            MonthlyDataPoint(
                month=month,
                revenue=round_half_up(adjusted),
                cost=round_half_up(current_cost),
                profit=profit,
                cumulative_profit=cumulative,
                revenue_growth_pct=round_half_up(growth_pct),
                capacity_utilization_pct=round_half_up(
                    adjusted / inputs.expected_monthly_revenue * 100
                ),
            )
        )
        prev_adjusted = adjusted

    return out


def project_roi(
    inputs: FinancialInputs, rng: Optional[RandomSource] = None
) -> ProjectionResult:
    """Run the generator once and reduce the aggregate ROI figures."""
    monthly = generate_monthly_data(inputs, rng)

    total_revenue = sum(p.revenue for p in monthly)
    total_cost = sum(p.cost for p in monthly)
    net_profit = total_revenue - total_cost
    roi = net_profit / inputs.initial_investment * 100

    return ProjectionResult(
        monthly_data=monthly,
        total_revenue=total_revenue,
        total_operating_cost=total_cost,
        net_profit=net_profit,
        roi_percentage=round(roi, 2),
        payback_period_years=round(estimate_payback_period(monthly), 2),
        inputs=inputs,
    )
