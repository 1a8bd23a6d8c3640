"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Money travels as
integer minor units; formatting is the caller's business.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.model.order import Order, OrderLineItem


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for (product ID + quantity)."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class OrderLineItemDTO:
    """Output: a single line item as displayed to the user."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: int
    line_total: int


@dataclass(frozen=True)
class QuoteDTO:
    """Output: the priced basket, before anything is persisted."""

    items: list[OrderLineItemDTO]
    subtotal: int
    discount: int
    tax: int
    final_total: int
    discount_code: str | None


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    status: str
    items: list[OrderLineItemDTO]
    subtotal: int
    discount: int
    tax: int
    final_total: int
    discount_code: str | None
    created_at: str
    updated_at: str


def line_item_to_dto(item: OrderLineItem) -> OrderLineItemDTO:
    return OrderLineItemDTO(
        product_id=item.product_id,
        product_name=item.product_name,
        quantity=item.quantity.value,
        unit_price=item.unit_price.amount,
        line_total=item.line_total.amount,
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        status=order.status.value,
        items=[line_item_to_dto(item) for item in order.items],
        subtotal=order.subtotal.amount,
        discount=order.discount.amount,
        tax=order.tax.amount,
        final_total=order.final_total.amount,
        discount_code=order.applied_discount.code if order.applied_discount else None,
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        updated_at=order.updated_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
