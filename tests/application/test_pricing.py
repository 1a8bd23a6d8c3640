"""Tests for the PricingService (no persistence involved)."""

import pytest

from pos.application.dto import OrderItemSpec
from pos.application.pricing import PricingService
from pos.domain.exceptions import (
    EntityNotFoundError,
    InactiveDiscountError,
    ProductsUnavailableError,
    ValidationError,
)
from pos.domain.model.discount import DiscountRule, DiscountType
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from pos.domain.service.discount_evaluator import DiscountEvaluator
from tests.fakes import FakeDiscountRepository, FakeProductRepository


def _setup() -> tuple[PricingService, FakeProductRepository]:
    product_repo = FakeProductRepository([
        Product(id="pad-thai", name="Pad Thai", price=Money(8000)),
        Product(id="tom-yum", name="Tom Yum Kung", price=Money(15000)),
        Product(id="coke", name="Coke Zero", price=Money(2500)),
        Product(id="retired", name="Old Dish", price=Money(9900), is_active=False),
    ])
    discount_repo = FakeDiscountRepository([
        DiscountRule.create("SUMMER10", DiscountType.PERCENTAGE, 10),
        DiscountRule.create("WELCOME50", DiscountType.FIXED_AMOUNT, 5000),
        DiscountRule.create("EXPIRED", DiscountType.FIXED_AMOUNT, 10000, is_active=False),
    ])
    service = PricingService(product_repo, DiscountEvaluator(discount_repo))
    return service, product_repo


class TestPricingHappyPath:

    def test_totals_without_discount(self):
        service, _ = _setup()
        result = service.price_order([
            OrderItemSpec("pad-thai", 2),
            OrderItemSpec("coke", 1),
        ])
        assert result.subtotal == Money(18500)
        assert result.discount == Money(0)
        assert result.tax == Money(1295)
        assert result.final_total == Money(19795)
        assert result.rule is None
        assert result.applied_discount is None

    def test_tax_is_floored(self):
        service, _ = _setup()
        # 10500 - 1050 = 9450; 7% of 9450 = 661.5 -> 661
        result = service.price_order(
            [OrderItemSpec("pad-thai", 1), OrderItemSpec("coke", 1)], "SUMMER10"
        )
        assert result.discount == Money(1050)
        assert result.tax == Money(661)
        assert result.final_total == Money(10111)

    def test_percentage_discount(self):
        service, _ = _setup()
        result = service.price_order([OrderItemSpec("pad-thai", 1), OrderItemSpec("coke", 8)], "summer10")
        assert result.subtotal == Money(28000)
        assert result.discount == Money(2800)
        assert result.applied_discount.code == "SUMMER10"
        assert result.applied_discount.amount == Money(2800)

    def test_fixed_discount_clamped_to_subtotal(self):
        service, _ = _setup()
        result = service.price_order([OrderItemSpec("coke", 1)], "WELCOME50")
        assert result.subtotal == Money(2500)
        assert result.discount == Money(2500)
        assert result.tax == Money(0)
        assert result.final_total == Money(0)

    def test_blank_discount_code_means_no_discount(self):
        service, _ = _setup()
        result = service.price_order([OrderItemSpec("coke", 1)], "   ")
        assert result.rule is None
        assert result.discount == Money(0)

    def test_final_total_formula_holds(self):
        service, _ = _setup()
        for code in (None, "SUMMER10", "WELCOME50"):
            for qty in (1, 3, 7):
                r = service.price_order([OrderItemSpec("tom-yum", qty), OrderItemSpec("coke", 1)], code)
                base = r.subtotal.amount - r.discount.amount
                assert r.discount <= r.subtotal
                assert r.final_total.amount == base + base * 7 // 100


class TestDuplicateProducts:

    def test_same_product_twice_keeps_two_lines(self):
        service, _ = _setup()
        result = service.price_order([
            OrderItemSpec("pad-thai", 2),
            OrderItemSpec("pad-thai", 3),
        ])
        assert [line.quantity.value for line in result.lines] == [2, 3]
        assert [line.line_total for line in result.lines] == [Money(16000), Money(24000)]
        assert result.subtotal == Money(40000)

    def test_distinct_ids_resolved_once(self):
        service, product_repo = _setup()
        calls = []
        original = product_repo.find_active_by_ids

        def spy(ids):
            calls.append(list(ids))
            return original(ids)

        product_repo.find_active_by_ids = spy
        service.price_order([OrderItemSpec("pad-thai", 2), OrderItemSpec("pad-thai", 3)])
        assert calls == [["pad-thai"]]


class TestPricingFailures:

    def test_empty_basket(self):
        service, _ = _setup()
        with pytest.raises(ValidationError, match="at least 1 item"):
            service.price_order([])

    def test_zero_quantity(self):
        service, _ = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            service.price_order([OrderItemSpec("coke", 0)])

    def test_unknown_product(self):
        service, _ = _setup()
        with pytest.raises(ProductsUnavailableError) as exc_info:
            service.price_order([OrderItemSpec("coke", 1), OrderItemSpec("ghost", 1)])
        assert exc_info.value.product_ids == ["ghost"]

    def test_inactive_product(self):
        service, _ = _setup()
        with pytest.raises(ProductsUnavailableError, match="retired"):
            service.price_order([OrderItemSpec("retired", 1)])

    def test_unknown_discount_code(self):
        service, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            service.price_order([OrderItemSpec("coke", 1)], "NOPE")

    def test_inactive_discount_code(self):
        service, _ = _setup()
        with pytest.raises(InactiveDiscountError):
            service.price_order([OrderItemSpec("coke", 1)], "expired")


class TestPriceSnapshot:

    def test_uses_current_price(self):
        service, product_repo = _setup()
        coke = product_repo.get_by_id("coke")
        coke.update_price(Money(3000))
        product_repo.save(coke)

        result = service.price_order([OrderItemSpec("coke", 1)])
        assert result.lines[0].unit_price == Money(3000)
