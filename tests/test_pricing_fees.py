"""
Tests for delivery fee tiers.

Fee formulas are checked against hand-computed values; unknown tier input
must fall back to the free tier rather than raise.
"""

import logging

import pytest

from food_delivery.pricing.fees import (
    FeeTier,
    compute_fee,
    express_fee,
    fee_function,
    format_fee,
    free_fee,
    standard_fee,
)


@pytest.mark.parametrize("distance", [0, 1, 2.5, 5, 120])
def test_fee_formulas(distance):
    assert standard_fee(distance) == 5 * distance
    assert express_fee(distance) == 10 * distance
    assert free_fee(distance) == 0


def test_express_tier_at_five_units():
    assert compute_fee("express", 5) == 50


def test_unknown_tier_defaults_to_free():
    assert compute_fee("unknown", 5) == 0
    assert FeeTier.parse("unknown") is FeeTier.FREE


@pytest.mark.parametrize("value", [None, "", "EXPRESS", " standard"])
def test_parse_is_strict_and_permissive(value):
    """Matching is exact; anything else is free, never an error."""
    assert FeeTier.parse(value) is FeeTier.FREE


def test_parse_accepts_enum_members():
    assert FeeTier.parse(FeeTier.EXPRESS) is FeeTier.EXPRESS


def test_fee_function_mapping():
    assert fee_function(FeeTier.STANDARD) is standard_fee
    assert fee_function(FeeTier.EXPRESS) is express_fee
    assert fee_function(FeeTier.FREE) is free_fee


def test_negative_distance_is_not_validated():
    assert compute_fee(FeeTier.STANDARD, -2) == -10


def test_format_fee():
    assert format_fee(50.0) == "Delivery Fee: ₹50"
    assert format_fee(0) == "Delivery Fee: ₹0"
    assert format_fee(12.5, currency="$") == "Delivery Fee: $12.5"


def test_unknown_tier_fallback_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger="order_log"):
        FeeTier.parse("teleport")

    assert "fallback tier='teleport' reason=unknown_tier default=free" in caplog.text
