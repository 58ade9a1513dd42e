# roi_calculator/schemas/roi.py
# -----------------------------------------------------------------------------
# Request / response schemas of the ROI endpoints
# - request fields stay loose (Any) so that presence/number checks produce the
#   400 responses of the calculator instead of FastAPI's 422
# -----------------------------------------------------------------------------
from datetime import datetime
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from roi_calculator.schemas.projection import ChartBundle


class LabeledOption(BaseModel):
    label: Optional[str] = None
    value: Optional[Any] = None


class FinancialDetailsIn(BaseModel):
    initial_investment: Optional[Any] = None
    expected_monthly_revenue: Optional[Any] = None
    monthly_operating_cost: Optional[Any] = None
    timeframe: Optional[Any] = None


class BusinessStrategyIn(BaseModel):
    funding_option: Union[LabeledOption, str, None] = None
    business_model: Union[LabeledOption, str, None] = None


class RoiCalculationRequest(BaseModel):
    financial_details: Optional[FinancialDetailsIn] = None
    business_strategy: Optional[BusinessStrategyIn] = None
    equipments: Optional[List[Any]] = None


# ── stored rows ───────────────────────────────────────────────────────────────
class ORMModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class FinancialDetailsOut(ORMModel):
    id: int
    initial_investment: int
    expected_monthly_revenue: int
    monthly_operating_cost: int
    timeframe: int
    created_at: Optional[datetime] = None


class EquipmentOut(ORMModel):
    id: int
    name: str
    price: Optional[int] = None
    description: Optional[str] = None


class StrategyEquipmentOut(ORMModel):
    id: int
    equipment_id: int
    equipment: Optional[EquipmentOut] = None


class BusinessStrategyOut(ORMModel):
    id: int
    strategy_name: str
    funding_option: Optional[str] = None
    business_model: Optional[str] = None
    created_at: Optional[datetime] = None
    equipments: List[StrategyEquipmentOut] = []


class RoiResultOut(ORMModel):
    id: int
    roi_percentage: float
    net_profit: int
    payback_period_years: float
    total_revenue: int
    total_operating_cost: int
    financial_details_id: int
    business_strategy_id: Optional[int] = None
    created_at: Optional[datetime] = None
    financial_details: FinancialDetailsOut
    business_strategy: Optional[BusinessStrategyOut] = None


class RoiResultWithCharts(RoiResultOut):
    chart_data: ChartBundle = Field(serialization_alias="chartData")


class RoiCalculationResponse(BaseModel):
    message: str
    data: RoiResultWithCharts


class RoiResultListResponse(BaseModel):
    message: str
    count: int
    data: List[RoiResultOut]
