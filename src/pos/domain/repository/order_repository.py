"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime

from pos.domain.model.order import Order, OrderStatus


@dataclass(frozen=True)
class SalesTotals:
    """Sums over the non-cancelled orders of a time window, in minor units."""

    order_count: int
    subtotal: int
    discount: int
    tax: int
    final_total: int


class OrderRepository(ABC):

    @abstractmethod
    def add(self, order: Order) -> Order:
        """Insert a new order with its line items and applied discount.

        All rows are written in one transaction: either everything is
        visible afterwards or nothing is.  Returns the persisted order
        with its assigned ID.

        Raises ConflictError when a referenced product or discount rule
        was removed after the basket was priced.
        """

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, newest first."""

    @abstractmethod
    def summarize_sales(self, start: datetime, end: datetime) -> SalesTotals:
        """Totals of orders with ``start <= created_at < end``, CANCELLED excluded."""

    @abstractmethod
    def page_sales(
        self,
        start: datetime,
        end: datetime,
        offset: int,
        limit: int,
    ) -> list[Order]:
        """One page of the orders counted by ``summarize_sales``, newest first."""

    @abstractmethod
    def update_status(
        self,
        order_id: int,
        expected: OrderStatus,
        new: OrderStatus,
    ) -> bool:
        """Set the status only if it still equals *expected*.

        Returns False when the stored status changed since it was read
        (or the order is gone), in which case nothing is written.
        """
