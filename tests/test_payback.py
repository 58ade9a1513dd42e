from roi_calculator.schemas.projection import MonthlyDataPoint
from roi_calculator.services.payback import estimate_payback_period


def _series(cumulative):
    return [
        MonthlyDataPoint(
            month=i + 1,
            revenue=0,
            cost=0,
            profit=0,
            cumulative_profit=c,
            revenue_growth_pct=0,
            capacity_utilization_pct=0,
        )
        for i, c in enumerate(cumulative)
    ]


def test_first_non_negative_month():
    series = _series([-400, -300, -200, -100, 0, 100, 200])
    assert estimate_payback_period(series) == 5 / 12


def test_break_even_in_first_month():
    assert estimate_payback_period(_series([10, 20])) == 1 / 12


def test_not_reached_returns_horizon():
    series = _series([-500] * 18)
    assert estimate_payback_period(series) == 18 / 12


def test_dip_after_break_even_keeps_first_month():
    series = _series([-10, 5, -3, 8])
    assert estimate_payback_period(series) == 2 / 12
