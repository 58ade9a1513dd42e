# roi_calculator/schemas/projection.py
# -----------------------------------------------------------------------------
# Projection / chart schemas (camelCase on the wire, snake_case in Python)
# -----------------------------------------------------------------------------
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MonthlyDataPoint(CamelModel):
    month: int
    revenue: int
    cost: int
    profit: int
    cumulative_profit: int
    revenue_growth_pct: int
    capacity_utilization_pct: int


class ChartDataset(CamelModel):
    label: str
    data: List[Union[int, float]]
    border_color: str
    background_color: Optional[str] = None
    type: Optional[str] = None
    tension: Optional[float] = None
    fill: Optional[bool] = None
    border_dash: Optional[List[int]] = None
    border_width: Optional[int] = None


class ChartSeries(CamelModel):
    labels: List[str]
    datasets: List[ChartDataset]


class MetricsSummary(CamelModel):
    roi: float
    net_profit: int
    payback_period: float
    total_months: int


class MetricsAverages(CamelModel):
    monthly_revenue: int
    monthly_cost: int
    monthly_profit: int


class MetricsEfficiency(CamelModel):
    profit_margin: float
    investment_efficiency: float


class PerformanceMetrics(CamelModel):
    summary: MetricsSummary
    averages: MetricsAverages
    efficiency: MetricsEfficiency


class ChartBundle(CamelModel):
    revenue_cost: ChartSeries
    roi_growth: ChartSeries
    performance_metrics: PerformanceMetrics
    monthly_data: List[MonthlyDataPoint]
