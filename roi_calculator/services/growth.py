# roi_calculator/services/growth.py
# -----------------------------------------------------------------------------
# Growth / seasonality lookup tables
# - business model label -> (monthly growth, capacity ceiling)
# - calendar month -> seasonal revenue multiplier
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class GrowthFactors:
    monthly_growth: float
    max_capacity: float  # revenue ceiling as a multiple of expected revenue


DEFAULT_GROWTH = GrowthFactors(monthly_growth=0.08, max_capacity=1.20)

GROWTH_FACTORS: dict[str, GrowthFactors] = {
    "B2B Manufacturing": GrowthFactors(0.08, 1.20),
    "Direct-to-consumer sales": GrowthFactors(0.12, 1.50),
    "Subscription service": GrowthFactors(0.05, 1.10),
    "Franchise": GrowthFactors(0.06, 1.30),
    "Production (B2B)": GrowthFactors(0.07, 1.15),
}

SEASONAL_PATTERN: dict[int, float] = {
    1: 0.90,
    2: 0.95,
    3: 1.00,
    4: 1.00,
    5: 1.05,
    6: 1.10,
    7: 1.15,
    8: 1.10,
    9: 1.05,
    10: 1.00,
    11: 0.95,
    12: 0.90,
}


def growth_factors(business_model: Optional[str]) -> GrowthFactors:
    """Unknown or missing labels fall back to the default row."""
    if business_model is None:
        return DEFAULT_GROWTH
    return GROWTH_FACTORS.get(business_model, DEFAULT_GROWTH)


def seasonal_multiplier(month: int) -> float:
    """`month` is 1-based and wraps every 12 months (13 -> January)."""
    return SEASONAL_PATTERN.get(((month - 1) % 12) + 1, 1.0)
