"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its line items and the
optional applied-discount audit record.  Monetary fields are fixed at
creation; afterwards only the status moves, one step at a time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from pos.domain.exceptions import InvalidTransitionError, ValidationError
from pos.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    OPEN = "OPEN"
    CONFIRMED = "CONFIRMED"
    PREPARING = "PREPARING"
    READY = "READY"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


# Strict linear workflow: the only step out of each state.
NEXT_STATUS: dict[OrderStatus, OrderStatus] = {
    OrderStatus.OPEN: OrderStatus.CONFIRMED,
    OrderStatus.CONFIRMED: OrderStatus.PREPARING,
    OrderStatus.PREPARING: OrderStatus.READY,
    OrderStatus.READY: OrderStatus.COMPLETED,
}

TERMINAL_STATUSES = frozenset({OrderStatus.COMPLETED, OrderStatus.CANCELLED})

TAX_RATE_PERCENT = 7


def tax_for(tax_base: Money) -> Money:
    return tax_base.percentage(TAX_RATE_PERCENT)


@dataclass(frozen=True)
class OrderLineItem:
    """Captures the product name and price at order-creation time.

    Frozen: the snapshot never changes, even when the product's price
    changes or it is deactivated later on.
    """

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass(frozen=True)
class AppliedDiscount:
    """Audit record of the discount used on an order."""

    discount_id: int | None  # None once the rule row is gone
    code: str
    amount: Money


@dataclass
class Order:
    """Aggregate root for POS orders.

    Use the ``Order.create()`` factory for new orders — it enforces the
    money invariants.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    items: list[OrderLineItem]
    subtotal: Money
    discount: Money
    tax: Money
    final_total: Money
    applied_discount: AppliedDiscount | None = None
    status: OrderStatus = OrderStatus.OPEN
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        items: list[OrderLineItem],
        subtotal: Money,
        discount: Money,
        tax: Money,
        final_total: Money,
        applied_discount: AppliedDiscount | None = None,
    ) -> Order:
        """Create a new OPEN order from already-priced figures.

        Nothing is recomputed here; the figures are only checked against
        each other so an inconsistent order can never be persisted.
        """
        if not items:
            raise ValidationError("Order must contain at least one item")

        expected_subtotal = Money.zero()
        for item in items:
            expected_subtotal = expected_subtotal + item.line_total
        if subtotal != expected_subtotal:
            raise ValidationError(
                f"Subtotal {subtotal} does not match line items ({expected_subtotal})"
            )

        if discount > subtotal:
            raise ValidationError("Discount exceeds subtotal")

        expected_discount = applied_discount.amount if applied_discount else Money.zero()
        if discount != expected_discount:
            raise ValidationError(
                f"Discount {discount} does not match the applied discount "
                f"({expected_discount})"
            )

        tax_base = subtotal - discount
        if tax != tax_for(tax_base):
            raise ValidationError(f"Tax {tax} does not match {TAX_RATE_PERCENT}% of {tax_base}")
        if final_total != tax_base + tax:
            raise ValidationError(f"Final total {final_total} is inconsistent")

        return Order(
            id=None,
            items=list(items),
            subtotal=subtotal,
            discount=discount,
            tax=tax,
            final_total=final_total,
            applied_discount=applied_discount,
        )

    # --- State transitions ----------------------------------------------------

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    @property
    def next_status(self) -> OrderStatus | None:
        return NEXT_STATUS.get(self.status)

    def advance(self) -> None:
        """Move to the single next step of the workflow."""
        next_status = self.next_status
        if next_status is None:
            raise InvalidTransitionError(
                f"Order is already {self.status.value} and cannot be advanced"
            )
        self._set_status(next_status)

    def cancel(self) -> None:
        """Transition any non-terminal status -> CANCELLED.

        Monetary fields are left exactly as they were charged.
        """
        if self.is_terminal:
            raise InvalidTransitionError(
                f"Cannot cancel an order that is {self.status.value}"
            )
        self._set_status(OrderStatus.CANCELLED)

    # --- Internal helpers -----------------------------------------------------

    def _set_status(self, status: OrderStatus) -> None:
        self.status = status
        self.updated_at = datetime.now(timezone.utc)
