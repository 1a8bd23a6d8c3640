"""Application services: order status transitions.

Both use cases are a single-row read-modify-write.  The write is a
compare-and-swap on the status that was read, so two concurrent calls
on the same order cannot both succeed from the same starting state.
"""

from __future__ import annotations

from typing import Callable

import structlog

from pos.application.dto import OrderDTO, order_to_dto
from pos.domain.exceptions import ConcurrentUpdateError, EntityNotFoundError
from pos.domain.model.order import Order
from pos.domain.repository.order_repository import OrderRepository


class _StatusChangeHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._logger = logger or structlog.get_logger(__name__)

    def _change(self, order_id: int, transition: Callable[[Order], None]) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            self._logger.warning("order_not_found", order_id=order_id)
            raise EntityNotFoundError(f"Order #{order_id} not found")

        previous = order.status
        transition(order)  # raises InvalidTransitionError

        if not self._order_repo.update_status(order_id, expected=previous, new=order.status):
            self._logger.warning(
                "order_status_conflict",
                order_id=order_id,
                expected=previous.value,
                wanted=order.status.value,
            )
            raise ConcurrentUpdateError(
                f"Order #{order_id} was modified concurrently; reload and retry"
            )

        self._logger.info(
            "order_status_changed",
            order_id=order_id,
            from_status=previous.value,
            to_status=order.status.value,
        )
        updated = self._order_repo.get_by_id(order_id)
        return order_to_dto(updated if updated is not None else order)


class AdvanceOrderHandler(_StatusChangeHandler):
    """OPEN -> CONFIRMED -> PREPARING -> READY -> COMPLETED, one step per call."""

    def handle(self, order_id: int) -> OrderDTO:
        return self._change(order_id, Order.advance)


class CancelOrderHandler(_StatusChangeHandler):
    """Any non-terminal status -> CANCELLED.  Charged amounts stay as they are."""

    def handle(self, order_id: int) -> OrderDTO:
        return self._change(order_id, Order.cancel)
