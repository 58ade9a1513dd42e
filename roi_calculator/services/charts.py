# roi_calculator/services/charts.py
# -----------------------------------------------------------------------------
# Chart.js ready series built from the monthly projection
# - uniform stride down-sampling keeps long horizons readable
# - the ROI curve is clamped to the reported final ROI
# -----------------------------------------------------------------------------
import math
from typing import Sequence, TypeVar

from roi_calculator.schemas.projection import ChartDataset, ChartSeries, MonthlyDataPoint

REVENUE_COST_POINTS = 24
ROI_GROWTH_POINTS = 12

T = TypeVar("T")


def sample_rate(length: int, target_points: int) -> int:
    return max(1, math.ceil(length / target_points))


def downsample(items: Sequence[T], target_points: int) -> list[T]:
    """Keep every n-th item (index 0, n, 2n, ...) so at most target_points stay."""
    step = sample_rate(len(items), target_points)
    return [item for i, item in enumerate(items) if i % step == 0]


def _labels(points: Sequence[MonthlyDataPoint]) -> list[str]:
    return [f"Month {p.month}" for p in points]


def build_revenue_cost_chart(series: Sequence[MonthlyDataPoint]) -> ChartSeries:
    sampled = downsample(series, REVENUE_COST_POINTS)
    return ChartSeries(
        labels=_labels(sampled),
        datasets=[
            ChartDataset(
                label="Revenue",
                data=[p.revenue for p in sampled],
                border_color="#8884d8",
                background_color="#8884d8",
                type="line",
                tension=0.4,
            ),
            ChartDataset(
                label="Cost",
                data=[p.cost for p in sampled],
                border_color="#82ca9d",
                background_color="#82ca9d",
                type="line",
                tension=0.4,
            ),
            ChartDataset(
                label="Profit",
                data=[p.profit for p in sampled],
                border_color="#ffc658",
                background_color="#ffc658",
                type="bar",
            ),
        ],
    )


def monthly_roi(point: MonthlyDataPoint, initial_investment: int) -> float:
    """Share of the investment recovered so far, in percent."""
    return (point.cumulative_profit + initial_investment) / initial_investment * 100


def build_roi_growth_chart(
    series: Sequence[MonthlyDataPoint], final_roi_pct: float, initial_investment: int
) -> ChartSeries:
    sampled = downsample(series, ROI_GROWTH_POINTS)
    progress = [min(monthly_roi(p, initial_investment), final_roi_pct) for p in sampled]
    return ChartSeries(
        labels=_labels(sampled),
        datasets=[
            ChartDataset(
                label="ROI Progress",
                data=progress,
                border_color="#ff7300",
                background_color="rgba(255, 115, 0, 0.1)",
                fill=True,
                tension=0.4,
            ),
            ChartDataset(
                label="Target ROI",
                data=[final_roi_pct] * len(sampled),
                border_color="#000000",
                border_dash=[5, 5],
                border_width=1,
                fill=False,
            ),
        ],
    )
