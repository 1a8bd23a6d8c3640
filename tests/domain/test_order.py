"""Unit tests for the Order aggregate and its business rules."""

import dataclasses

import pytest

from pos.domain.exceptions import ValidationError
from pos.domain.model.order import AppliedDiscount, Order, OrderLineItem, OrderStatus
from pos.domain.model.value_objects import Money, Quantity


def _make_item(name: str = "Pad Thai", qty: int = 1, price: int = 8000) -> OrderLineItem:
    """Helper to build a valid line item."""
    return OrderLineItem(
        product_id="p-1",
        product_name=name,
        quantity=Quantity(qty),
        unit_price=Money(price),
    )


class TestOrderCreation:

    def test_happy_path(self):
        order = Order.create(
            items=[_make_item(qty=2, price=5000)],
            subtotal=Money(10000),
            discount=Money(0),
            tax=Money(700),
            final_total=Money(10700),
        )
        assert order.status == OrderStatus.OPEN
        assert len(order.items) == 1
        assert order.applied_discount is None

    def test_id_is_none_for_new_orders(self):
        order = Order.create([_make_item()], Money(8000), Money(0), Money(560), Money(8560))
        assert order.id is None  # assigned by repository

    def test_with_discount(self):
        applied = AppliedDiscount(discount_id=1, code="SUMMER10", amount=Money(1000))
        order = Order.create(
            items=[_make_item(qty=2, price=5000)],
            subtotal=Money(10000),
            discount=Money(1000),
            tax=Money(630),
            final_total=Money(9630),
            applied_discount=applied,
        )
        assert order.applied_discount == applied


class TestOrderInvariants:

    def test_no_items_rejected(self):
        with pytest.raises(ValidationError, match="at least one item"):
            Order.create([], Money(0), Money(0), Money(0), Money(0))

    def test_subtotal_must_match_lines(self):
        with pytest.raises(ValidationError, match="Subtotal"):
            Order.create([_make_item()], Money(9000), Money(0), Money(630), Money(9630))

    def test_discount_over_subtotal_rejected(self):
        applied = AppliedDiscount(discount_id=1, code="BIG", amount=Money(9000))
        with pytest.raises(ValidationError, match="exceeds subtotal"):
            Order.create([_make_item()], Money(8000), Money(9000), Money(0), Money(0), applied)

    def test_discount_without_audit_record_rejected(self):
        with pytest.raises(ValidationError, match="applied discount"):
            Order.create([_make_item()], Money(8000), Money(1000), Money(490), Money(7490))

    def test_wrong_tax_rejected(self):
        with pytest.raises(ValidationError, match="Tax"):
            Order.create([_make_item()], Money(8000), Money(0), Money(561), Money(8561))

    def test_wrong_final_total_rejected(self):
        with pytest.raises(ValidationError, match="Final total"):
            Order.create([_make_item()], Money(8000), Money(0), Money(560), Money(8000))


class TestOrderLineItem:

    def test_line_total_calculation(self):
        item = _make_item(qty=3, price=1500)
        assert item.line_total == Money(4500)

    def test_snapshot_is_frozen(self):
        item = _make_item()
        with pytest.raises(dataclasses.FrozenInstanceError):
            item.unit_price = Money(1)  # type: ignore[misc]
