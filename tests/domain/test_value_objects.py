"""Unit tests for domain value objects."""

import pytest

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(1050)
        assert m.amount == 1050

    def test_of_factory_from_string(self):
        assert Money.of("2599") == Money(2599)

    def test_of_factory_from_int(self):
        assert Money.of(10) == Money(10)

    def test_of_rejects_decimal_text(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("25.99")

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="must be an int"):
            Money(10.5)

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(-1)

    def test_addition(self):
        assert Money(1000) + Money(550) == Money(1550)

    def test_subtraction(self):
        assert Money(1000) - Money(300) == Money(700)

    def test_subtraction_going_negative_rejected(self):
        with pytest.raises(ValidationError, match="negative amount"):
            Money(500) - Money(1000)

    def test_multiplication_by_int(self):
        assert Money(750) * 3 == Money(2250)

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money(750) * 1.5

    def test_percentage_floors(self):
        # 7% of 999 = 69.93 -> 69
        assert Money(999).percentage(7) == Money(69)
        assert Money(10000).percentage(10) == Money(1000)

    def test_str_formatting(self):
        assert str(Money(8000)) == "฿80.00"
        assert str(Money(5)) == "฿0.05"
        assert str(Money(123456)) == "฿1,234.56"

    def test_comparison_operators(self):
        assert Money(5) < Money(10)
        assert Money(10) > Money(5)
        assert Money(10) >= Money(10)
        assert Money(10) <= Money(10)
        assert min(Money(5000), Money(3000)) == Money(3000)


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        q = Quantity(5)
        assert q.value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    def test_str(self):
        assert str(Quantity(7)) == "7"
