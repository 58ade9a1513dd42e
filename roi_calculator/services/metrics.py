# roi_calculator/services/metrics.py
from dataclasses import dataclass

from roi_calculator.schemas.projection import (
    MetricsAverages,
    MetricsEfficiency,
    MetricsSummary,
    PerformanceMetrics,
)


@dataclass(frozen=True, slots=True)
class StoredResult:
    """Flat view of a persisted calculation (roi result + financial details)."""

    roi_percentage: float
    net_profit: int
    payback_period_years: float
    timeframe: int
    expected_monthly_revenue: int
    monthly_operating_cost: int
    initial_investment: int

    @classmethod
    def from_row(cls, row) -> "StoredResult":
        """`row` is a RoiResult with financial_details loaded."""
        fd = row.financial_details
        return cls(
            roi_percentage=row.roi_percentage,
            net_profit=row.net_profit,
            payback_period_years=row.payback_period_years,
            timeframe=fd.timeframe,
            expected_monthly_revenue=fd.expected_monthly_revenue,
            monthly_operating_cost=fd.monthly_operating_cost,
            initial_investment=fd.initial_investment,
        )


def compute_performance_metrics(result: StoredResult) -> PerformanceMetrics:
    planned_revenue = result.expected_monthly_revenue * result.timeframe
    profit_margin = (
        result.net_profit / planned_revenue * 100 if planned_revenue else 0.0
    )
    return PerformanceMetrics(
        summary=MetricsSummary(
            roi=result.roi_percentage,
            net_profit=result.net_profit,
            payback_period=result.payback_period_years,
            total_months=result.timeframe,
        ),
        averages=MetricsAverages(
            monthly_revenue=result.expected_monthly_revenue,
            monthly_cost=result.monthly_operating_cost,
            monthly_profit=result.expected_monthly_revenue
            - result.monthly_operating_cost,
        ),
        efficiency=MetricsEfficiency(
            profit_margin=profit_margin,
            investment_efficiency=result.net_profit / result.initial_investment * 100,
        ),
    )
