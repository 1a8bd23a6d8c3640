"""Row <-> domain conversion shared by the SQLAlchemy repositories."""

from __future__ import annotations

from datetime import datetime, timezone

from pos.domain.model.discount import DiscountRule
from pos.domain.model.order import AppliedDiscount, Order, OrderLineItem
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money, Quantity
from pos.infrastructure.persistence.tables import (
    AppliedDiscountTable,
    DiscountTable,
    OrderItemTable,
    OrderTable,
    ProductTable,
)


def as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything is stored in UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


# --- Products -----------------------------------------------------------------


def product_to_row(product: Product) -> ProductTable:
    return ProductTable(
        id=product.id,
        name=product.name,
        price=product.price.amount,
        is_active=product.is_active,
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


def product_to_domain(row: ProductTable) -> Product:
    return Product(
        id=row.id,
        name=row.name,
        price=Money(row.price),
        is_active=row.is_active,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


# --- Discounts ----------------------------------------------------------------


def discount_to_domain(row: DiscountTable) -> DiscountRule:
    return DiscountRule(
        id=row.id,
        code=row.code,
        type=row.type,
        value=row.value,
        is_active=row.is_active,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


# --- Orders -------------------------------------------------------------------


def order_to_row(order: Order) -> OrderTable:
    row = OrderTable(
        status=order.status,
        subtotal=order.subtotal.amount,
        discount=order.discount.amount,
        tax=order.tax.amount,
        final_total=order.final_total.amount,
        created_at=order.created_at,
        updated_at=order.updated_at,
    )
    row.items = [
        OrderItemTable(
            product_id=item.product_id,
            quantity=item.quantity.value,
            unit_price=item.unit_price.amount,
            product_name=item.product_name,
            line_total=item.line_total.amount,
        )
        for item in order.items
    ]
    if order.applied_discount is not None:
        row.applied_discount = AppliedDiscountTable(
            discount_id=order.applied_discount.discount_id,
            code=order.applied_discount.code,
            amount=order.applied_discount.amount.amount,
        )
    return row


def order_to_domain(row: OrderTable) -> Order:
    applied = None
    if row.applied_discount is not None:
        applied = AppliedDiscount(
            discount_id=row.applied_discount.discount_id,
            code=row.applied_discount.code,
            amount=Money(row.applied_discount.amount),
        )
    return Order(
        id=row.id,
        items=[
            OrderLineItem(
                product_id=item.product_id,
                product_name=item.product_name,
                quantity=Quantity(item.quantity),
                unit_price=Money(item.unit_price),
            )
            for item in row.items
        ],
        subtotal=Money(row.subtotal),
        discount=Money(row.discount),
        tax=Money(row.tax),
        final_total=Money(row.final_total),
        applied_discount=applied,
        status=row.status,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )
