# roi_calculator/services/roi.py
# -----------------------------------------------------------------------------
# Calculation flow behind POST /api/calculate-roi
# - request parsing / coercion (400 on missing or non numeric fields)
# - projection -> persistence -> chart bundle
# -----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Iterable, Optional, Sequence

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from roi_calculator.db import crud
from roi_calculator.db.models import RoiResult
from roi_calculator.schemas.projection import ChartBundle, MonthlyDataPoint
from roi_calculator.schemas.roi import (
    FinancialDetailsIn,
    LabeledOption,
    RoiCalculationRequest,
    RoiResultOut,
    RoiResultWithCharts,
)
from roi_calculator.services.charts import build_revenue_cost_chart, build_roi_growth_chart
from roi_calculator.services.metrics import StoredResult, compute_performance_metrics
from roi_calculator.services.projection import FinancialInputs, RandomSource, project_roi

REQUIRED_FIELDS = (
    "initial_investment",
    "expected_monthly_revenue",
    "monthly_operating_cost",
    "timeframe",
)


class InputValidationError(ValueError):
    """Financial input missing or not a number; mapped to HTTP 400."""


def _to_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        pass
    # decimal strings such as "1500.7"
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return None


def parse_financial_inputs(
    details: Optional[FinancialDetailsIn], business_model: Optional[str] = None
) -> FinancialInputs:
    if details is None:
        raise InputValidationError("financial_details data is required")

    values = {name: _to_int(getattr(details, name)) for name in REQUIRED_FIELDS}
    # zero or negative counts as missing, same as an absent field
    if any(v is None or v <= 0 for v in values.values()):
        raise InputValidationError(
            "All financial data is required: " + ", ".join(REQUIRED_FIELDS)
        )

    return FinancialInputs(
        initial_investment=values["initial_investment"],
        expected_monthly_revenue=values["expected_monthly_revenue"],
        monthly_operating_cost=values["monthly_operating_cost"],
        timeframe_months=values["timeframe"],
        business_model=business_model,
    )


def option_label(option: LabeledOption | str | None) -> Optional[str]:
    """Select widgets send {label, value}; plain strings pass through."""
    if isinstance(option, LabeledOption):
        return option.label
    return option


def valid_equipment_ids(raw: Optional[Iterable[Any]]) -> list[int]:
    return [
        i for i in raw or [] if isinstance(i, int) and not isinstance(i, bool) and i > 0
    ]


def build_chart_bundle(
    monthly: Sequence[MonthlyDataPoint], final_roi_pct: float, row: RoiResult
) -> ChartBundle:
    stored = StoredResult.from_row(row)
    return ChartBundle(
        revenue_cost=build_revenue_cost_chart(monthly),
        roi_growth=build_roi_growth_chart(
            monthly, final_roi_pct, stored.initial_investment
        ),
        performance_metrics=compute_performance_metrics(stored),
        monthly_data=list(monthly),
    )


async def calculate_roi(
    db: AsyncSession,
    req: RoiCalculationRequest,
    *,
    rng: Optional[RandomSource] = None,
) -> RoiResultWithCharts:
    strategy = req.business_strategy
    funding_option = option_label(strategy.funding_option) if strategy else None
    business_model = option_label(strategy.business_model) if strategy else None

    inputs = parse_financial_inputs(req.financial_details, business_model)
    result = project_roi(inputs, rng)

    logger.info(
        "roi calculated: revenue={} cost={} net={} roi={}% payback={}y months={}",
        result.total_revenue,
        result.total_operating_cost,
        result.net_profit,
        result.roi_percentage,
        result.payback_period_years,
        len(result.monthly_data),
    )

    row = await crud.save_calculation(
        db,
        initial_investment=inputs.initial_investment,
        expected_monthly_revenue=inputs.expected_monthly_revenue,
        monthly_operating_cost=inputs.monthly_operating_cost,
        timeframe=inputs.timeframe_months,
        funding_option=funding_option,
        business_model=business_model,
        equipment_ids=valid_equipment_ids(req.equipments),
        roi_percentage=result.roi_percentage,
        net_profit=result.net_profit,
        payback_period_years=result.payback_period_years,
        total_revenue=result.total_revenue,
        total_operating_cost=result.total_operating_cost,
    )

    stored = RoiResultOut.model_validate(row)
    return RoiResultWithCharts(
        **stored.model_dump(),
        chart_data=build_chart_bundle(
            result.monthly_data, result.roi_percentage, row
        ),
    )
