# roi_calculator/services/payback.py
from typing import Sequence

import numpy as np

from roi_calculator.schemas.projection import MonthlyDataPoint


def estimate_payback_period(series: Sequence[MonthlyDataPoint]) -> float:
    """
    Years until cumulative profit first reaches 0.
    Not reached within the series -> the full horizon (len / 12).
    """
    cumulative = np.array([p.cumulative_profit for p in series], dtype=float)
    hits = np.flatnonzero(cumulative >= 0)
    if hits.size:
        return (int(hits[0]) + 1) / 12
    return len(series) / 12
