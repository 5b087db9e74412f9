import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from bridge.core.errors import ValidationError
from bridge.pricing.purchase import (
    PRICING_FIELDS,
    calculate_purchase_price,
    purchase_price_from_payload,
)


def test_purchase_price_example():
    assert calculate_purchase_price(100, 0.1, 5, 2) == 100 * (1 + 0.1) + 5 + 2
    assert math.isclose(calculate_purchase_price(100, 0.1, 5, 2), 117.0)


finite = st.floats(min_value=-1e9, max_value=1e9, allow_nan=False, allow_infinity=False)


@given(finite, finite, finite, finite)
def test_purchase_price_matches_formula(m, a, o, h):
    assert calculate_purchase_price(m, a, o, h) == m * (1 + a) + o + h


def test_purchase_price_is_not_rounded():
    price = calculate_purchase_price(1, 0.12345, 0, 0)
    assert math.isclose(price, 1.12345)
    assert round(price, 2) != price


@pytest.mark.parametrize(
    "args",
    [
        (None, 0.1, 5, 2),
        (100, "0.1", 5, 2),
        (100, 0.1, float("nan"), 2),
        (100, 0.1, 5, True),
    ],
)
def test_purchase_price_rejects_non_numbers(args):
    with pytest.raises(ValidationError) as exc:
        calculate_purchase_price(*args)
    for name in PRICING_FIELDS:
        assert name in str(exc.value)
    assert exc.value.fields == PRICING_FIELDS


def test_purchase_price_from_payload():
    payload = {
        "marketPrice": 200,
        "adjustmentFactor": -0.25,
        "operationalCosts": 10,
        "hedgingImpact": 0,
    }
    assert purchase_price_from_payload(payload) == 160


def test_purchase_price_from_payload_missing_field():
    with pytest.raises(ValidationError):
        purchase_price_from_payload({"marketPrice": 1, "adjustmentFactor": 0})


def test_purchase_price_overflow_is_rejected():
    with pytest.raises(ValidationError):
        calculate_purchase_price(1e308, 1, 0, 0)


def test_purchase_price_rejects_int_too_large_for_float():
    with pytest.raises(ValidationError):
        calculate_purchase_price(10**400, 0.1, 5, 2)
