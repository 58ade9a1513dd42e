import pytest

from roi_calculator.services.growth import growth_factors, seasonal_multiplier


@pytest.mark.parametrize(
    "label, growth, capacity",
    [
        ("B2B Manufacturing", 0.08, 1.20),
        ("Direct-to-consumer sales", 0.12, 1.50),
        ("Subscription service", 0.05, 1.10),
        ("Franchise", 0.06, 1.30),
        ("Production (B2B)", 0.07, 1.15),
    ],
)
def test_known_business_models(label, growth, capacity):
    f = growth_factors(label)
    assert f.monthly_growth == growth
    assert f.max_capacity == capacity


@pytest.mark.parametrize("label", [None, "", "Food truck", "franchise"])
def test_unknown_business_model_uses_default(label):
    f = growth_factors(label)
    assert (f.monthly_growth, f.max_capacity) == (0.08, 1.20)


def test_seasonal_table():
    expected = [0.90, 0.95, 1.00, 1.00, 1.05, 1.10, 1.15, 1.10, 1.05, 1.00, 0.95, 0.90]
    assert [seasonal_multiplier(m) for m in range(1, 13)] == expected


def test_seasonal_wraps_every_year():
    assert seasonal_multiplier(13) == seasonal_multiplier(1)
    assert seasonal_multiplier(19) == 1.15
    assert seasonal_multiplier(36) == 0.90
