"""Tests for total price derivation"""
from decimal import Decimal

from property_inventory.services.valuation import MAX_TOTAL_PRICE, as_json_number, compute_total_price


class TestComputeTotalPrice:
    """Test the price_per_square_meter * square_meters rule"""

    def test_whole_numbers(self):
        assert compute_total_price(Decimal("3000"), Decimal("50")) == Decimal("150000.00")

    def test_result_has_two_decimals(self):
        total = compute_total_price(Decimal("2000"), Decimal("120"))
        assert total.as_tuple().exponent == -2

    def test_sub_cent_remainder_rounds_half_up(self):
        """2.5 * 3.33 = 8.325 rounds to 8.33"""
        assert compute_total_price(Decimal("2.5"), Decimal("3.33")) == Decimal("8.33")

    def test_exact_fractional_product(self):
        assert compute_total_price(Decimal("1250.50"), Decimal("80.25")) == Decimal("100352.63")

    def test_zero_size(self):
        assert compute_total_price(Decimal("3000"), Decimal("0")) == Decimal("0.00")

    def test_accepts_integers(self):
        assert compute_total_price(3000, 50) == Decimal("150000")


class TestAsJsonNumber:
    """Test rendering of stored amounts as JSON numbers"""

    def test_whole_amount_is_int(self):
        value = as_json_number(Decimal("150000.00"))
        assert value == 150000
        assert isinstance(value, int)

    def test_fractional_amount_is_float(self):
        assert as_json_number(Decimal("100352.63")) == 100352.63

    def test_largest_total_survives_float_round_trip(self):
        """Every total up to the limit reads back to the same cents"""
        value = as_json_number(MAX_TOTAL_PRICE)
        assert Decimal(repr(value)) == MAX_TOTAL_PRICE

    def test_large_total_survives_float_round_trip(self):
        total = compute_total_price(Decimal("12345678.91"), Decimal("80000.13"))
        assert Decimal(repr(as_json_number(total))) == Decimal("987655917738.26")
