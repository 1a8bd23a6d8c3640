"""Application service: Preview Order use case (query).

Runs exactly the pricing that order creation runs, minus the writes.
"""

from __future__ import annotations

from pos.application.dto import OrderItemSpec, QuoteDTO, line_item_to_dto
from pos.application.pricing import PricingService


class PreviewOrderHandler:

    def __init__(self, pricing_service: PricingService) -> None:
        self._pricing_service = pricing_service

    def handle(
        self,
        item_specs: list[OrderItemSpec],
        discount_code: str | None = None,
    ) -> QuoteDTO:
        result = self._pricing_service.price_order(item_specs, discount_code)
        return QuoteDTO(
            items=[line_item_to_dto(line) for line in result.lines],
            subtotal=result.subtotal.amount,
            discount=result.discount.amount,
            tax=result.tax.amount,
            final_total=result.final_total.amount,
            discount_code=result.rule.code if result.rule else None,
        )
