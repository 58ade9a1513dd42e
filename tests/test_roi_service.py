import pytest

from roi_calculator.schemas.roi import BusinessStrategyIn, FinancialDetailsIn
from roi_calculator.services.roi import (
    InputValidationError,
    option_label,
    parse_financial_inputs,
    valid_equipment_ids,
)


def test_parse_coerces_numbers():
    inputs = parse_financial_inputs(
        FinancialDetailsIn(
            initial_investment="100000",
            expected_monthly_revenue=20000.9,
            monthly_operating_cost="12000.5",
            timeframe=12,
        ),
        "Franchise",
    )
    assert inputs.initial_investment == 100_000
    assert inputs.expected_monthly_revenue == 20_000
    assert inputs.monthly_operating_cost == 12_000
    assert inputs.timeframe_months == 12
    assert inputs.business_model == "Franchise"


def test_missing_details():
    with pytest.raises(InputValidationError, match="financial_details"):
        parse_financial_inputs(None)


@pytest.mark.parametrize("bad", [None, 0, "0", "abc", "", True, -1, "-5", -0.5])
def test_missing_or_bad_field(bad):
    details = FinancialDetailsIn(
        initial_investment=100_000,
        expected_monthly_revenue=20_000,
        monthly_operating_cost=12_000,
        timeframe=bad,
    )
    with pytest.raises(InputValidationError, match="timeframe"):
        parse_financial_inputs(details)


def test_option_label():
    strategy = BusinessStrategyIn(
        funding_option={"label": "Bank loan", "value": 2},
        business_model="Franchise",
    )
    assert option_label(strategy.funding_option) == "Bank loan"
    assert option_label(strategy.business_model) == "Franchise"
    assert option_label(None) is None


def test_valid_equipment_ids():
    assert valid_equipment_ids([3, -1, 0, "4", 2.0, True, 7]) == [3, 7]
    assert valid_equipment_ids(None) == []


def test_large_integer_keeps_precision():
    inputs = parse_financial_inputs(
        FinancialDetailsIn(
            initial_investment="9007199254740993",
            expected_monthly_revenue=9007199254740993,
            monthly_operating_cost="12000.5",
            timeframe=12,
        )
    )
    assert inputs.initial_investment == 9007199254740993
    assert inputs.expected_monthly_revenue == 9007199254740993
    assert inputs.monthly_operating_cost == 12_000
