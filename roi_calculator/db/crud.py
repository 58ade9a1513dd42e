# roi_calculator/db/crud.py
# -----------------------------------------------------------------------------
# Read/write helpers for calculation results
# - every function takes the request scoped AsyncSession explicitly
# - results are loaded together with financial details / strategy / equipments
# -----------------------------------------------------------------------------
from typing import Iterable, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from roi_calculator.db.models import (
    BusinessStrategy,
    BusinessStrategyEquipment,
    Equipment,
    FinancialDetails,
    RoiResult,
)


def _with_relations(stmt):
    return stmt.options(
        selectinload(RoiResult.financial_details),
        selectinload(RoiResult.business_strategy)
        .selectinload(BusinessStrategy.equipments)
        .selectinload(BusinessStrategyEquipment.equipment),
    )


async def get_roi_results(db: AsyncSession) -> Sequence[RoiResult]:
    stmt = _with_relations(select(RoiResult).order_by(RoiResult.id))
    res = await db.execute(stmt)
    return res.scalars().all()


async def get_roi_result(db: AsyncSession, result_id: int) -> RoiResult | None:
    stmt = _with_relations(select(RoiResult).where(RoiResult.id == result_id))
    # refresh relations of objects already in the identity map
    stmt = stmt.execution_options(populate_existing=True)
    res = await db.execute(stmt)
    return res.scalar_one_or_none()


async def get_existing_equipment_ids(
    db: AsyncSession, ids: Iterable[int]
) -> list[int]:
    """Keep only ids that exist in the catalog, in request order."""
    wanted = list(dict.fromkeys(ids))
    if not wanted:
        return []
    res = await db.execute(select(Equipment.id).where(Equipment.id.in_(wanted)))
    found = set(res.scalars().all())
    return [i for i in wanted if i in found]


async def save_calculation(
    db: AsyncSession,
    *,
    initial_investment: int,
    expected_monthly_revenue: int,
    monthly_operating_cost: int,
    timeframe: int,
    funding_option: Optional[str],
    business_model: Optional[str],
    equipment_ids: Iterable[int],
    roi_percentage: float,
    net_profit: int,
    payback_period_years: float,
    total_revenue: int,
    total_operating_cost: int,
) -> RoiResult:
    """
    Store one calculation: financial details, a "Custom Strategy" row,
    equipment links and the roi result, in a single commit.
    Returns the result reloaded with all relations.
    """
    financial = FinancialDetails(
        initial_investment=initial_investment,
        expected_monthly_revenue=expected_monthly_revenue,
        monthly_operating_cost=monthly_operating_cost,
        timeframe=timeframe,
    )
    strategy = BusinessStrategy(
        strategy_name="Custom Strategy",
        funding_option=funding_option,
        business_model=business_model,
    )
    db.add_all([financial, strategy])
    await db.flush()

    for equipment_id in await get_existing_equipment_ids(db, equipment_ids):
        db.add(
            BusinessStrategyEquipment(
                business_strategy_id=strategy.id, equipment_id=equipment_id
            )
        )

    result = RoiResult(
        roi_percentage=roi_percentage,
        net_profit=net_profit,
        payback_period_years=payback_period_years,
        total_revenue=total_revenue,
        total_operating_cost=total_operating_cost,
        financial_details_id=financial.id,
        business_strategy_id=strategy.id,
    )
    db.add(result)
    await db.commit()

    return await get_roi_result(db, result.id)
