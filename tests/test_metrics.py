import pytest

from roi_calculator.services.metrics import StoredResult, compute_performance_metrics


def _stored(**overrides):
    base = dict(
        roi_percentage=80.99,
        net_profit=80_994,
        payback_period_years=1.0,
        timeframe=12,
        expected_monthly_revenue=20_000,
        monthly_operating_cost=12_000,
        initial_investment=100_000,
    )
    base.update(overrides)
    return StoredResult(**base)


def test_summary_and_averages():
    m = compute_performance_metrics(_stored())
    assert m.summary.roi == 80.99
    assert m.summary.net_profit == 80_994
    assert m.summary.payback_period == 1.0
    assert m.summary.total_months == 12
    assert m.averages.monthly_revenue == 20_000
    assert m.averages.monthly_cost == 12_000
    assert m.averages.monthly_profit == 8_000


def test_efficiency():
    m = compute_performance_metrics(_stored())
    assert m.efficiency.profit_margin == pytest.approx(80_994 / 240_000 * 100)
    assert m.efficiency.investment_efficiency == pytest.approx(80.994)


def test_profit_margin_guard_on_zero_denominator():
    m = compute_performance_metrics(_stored(expected_monthly_revenue=0))
    assert m.efficiency.profit_margin == 0


def test_wire_names():
    dumped = compute_performance_metrics(_stored()).model_dump(by_alias=True)
    assert set(dumped) == {"summary", "averages", "efficiency"}
    assert set(dumped["efficiency"]) == {"profitMargin", "investmentEfficiency"}
    assert "paybackPeriod" in dumped["summary"]
