"""Application service: Create Order use case.

Orchestrates pricing and persistence.  Pricing (product lookups, the
discount check) runs first and outside any transaction; the repository
then writes header, line items and the discount audit row in a single
unit of work, using the figures exactly as priced.
"""

from __future__ import annotations

import structlog

from pos.application.dto import OrderDTO, OrderItemSpec, order_to_dto
from pos.application.pricing import PricingService
from pos.domain.model.order import Order
from pos.domain.repository.order_repository import OrderRepository


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        pricing_service: PricingService,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._pricing_service = pricing_service
        self._logger = logger or structlog.get_logger(__name__)

    def handle(
        self,
        item_specs: list[OrderItemSpec],
        discount_code: str | None = None,
    ) -> OrderDTO:
        """Create a new order.

        Steps:
        1. Price the basket (fails without side effects).
        2. Let the Order aggregate check the figures.
        3. Persist atomically and return the stored order.
        """
        self._logger.info("order_create_started", item_count=len(item_specs))

        result = self._pricing_service.price_order(item_specs, discount_code)

        order = Order.create(
            items=result.lines,
            subtotal=result.subtotal,
            discount=result.discount,
            tax=result.tax,
            final_total=result.final_total,
            applied_discount=result.applied_discount,
        )
        saved = self._order_repo.add(order)

        self._logger.info(
            "order_created",
            order_id=saved.id,
            final_total=saved.final_total.amount,
            discount_code=saved.applied_discount.code if saved.applied_discount else None,
        )
        return order_to_dto(saved)
