"""Application service: Order Pricing.

Turns a basket request into priced line items and the four money
figures of an order.  No writes happen here, so the same call backs
both the live "preview as you shop" view and order creation; the two
can never disagree.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from pos.application.dto import OrderItemSpec
from pos.domain.exceptions import ProductsUnavailableError, ValidationError
from pos.domain.model.discount import DiscountRule
from pos.domain.model.order import AppliedDiscount, OrderLineItem, tax_for
from pos.domain.model.value_objects import Money, Quantity
from pos.domain.repository.product_repository import ProductRepository
from pos.domain.service.discount_evaluator import DiscountEvaluator


@dataclass(frozen=True)
class PricingResult:
    """Everything needed to show the numbers or persist them as-is."""

    lines: list[OrderLineItem]
    subtotal: Money
    discount: Money
    tax: Money
    final_total: Money
    rule: DiscountRule | None = None

    @property
    def applied_discount(self) -> AppliedDiscount | None:
        if self.rule is None:
            return None
        return AppliedDiscount(
            discount_id=self.rule.id,
            code=self.rule.code,
            amount=self.discount,
        )


class PricingService:

    def __init__(
        self,
        product_repo: ProductRepository,
        discount_evaluator: DiscountEvaluator,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._discount_evaluator = discount_evaluator
        self._logger = logger or structlog.get_logger(__name__)

    def price_order(
        self,
        item_specs: list[OrderItemSpec],
        discount_code: str | None = None,
    ) -> PricingResult:
        """Price a basket.

        Steps:
        1. Validate quantities and resolve the distinct product IDs
           (all-or-nothing: any missing/inactive product fails the call).
        2. Build one snapshot line per requested entry at current prices.
        3. Apply at most one discount code.
        4. Compute tax on (subtotal - discount) and the final total.
        """
        if not item_specs:
            raise ValidationError("Order must have at least 1 item")

        quantities = [Quantity(spec.quantity) for spec in item_specs]

        # Duplicates are resolved once but still priced as separate lines
        product_ids = list(dict.fromkeys(spec.product_id for spec in item_specs))
        products = {
            p.id: p for p in self._product_repo.find_active_by_ids(product_ids)
        }
        if len(products) != len(product_ids):
            missing = [pid for pid in product_ids if pid not in products]
            self._logger.warning(
                "products_unavailable", requested=product_ids, missing=missing
            )
            raise ProductsUnavailableError(missing)

        lines: list[OrderLineItem] = []
        subtotal = Money.zero()
        for spec, quantity in zip(item_specs, quantities):
            product = products[spec.product_id]
            line = OrderLineItem(
                product_id=product.id,
                product_name=product.name,
                quantity=quantity,
                unit_price=product.price,  # <-- price snapshot
            )
            lines.append(line)
            subtotal = subtotal + line.line_total

        discount = Money.zero()
        rule: DiscountRule | None = None
        if discount_code is not None and discount_code.strip():
            evaluation = self._discount_evaluator.evaluate(discount_code, subtotal)
            rule = evaluation.rule
            discount = evaluation.deduction

        if discount > subtotal:
            self._logger.warning(
                "discount_exceeds_subtotal",
                subtotal=subtotal.amount,
                discount=discount.amount,
            )
            raise ValidationError("Discount exceeds subtotal")

        tax_base = subtotal - discount
        tax = tax_for(tax_base)

        return PricingResult(
            lines=lines,
            subtotal=subtotal,
            discount=discount,
            tax=tax,
            final_total=tax_base + tax,
            rule=rule,
        )
