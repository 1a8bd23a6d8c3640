"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the SQLAlchemy
repositories but keep everything in a dict. No database, no side effects.
Stored aggregates are copied on the way in and out, the way a real
store hands back fresh objects on every read.
"""

from __future__ import annotations

import copy
from datetime import datetime

from pos.domain.exceptions import ConflictError
from pos.domain.model.discount import DiscountRule
from pos.domain.model.order import Order, OrderStatus
from pos.domain.model.product import Product
from pos.domain.repository.discount_repository import DiscountRepository
from pos.domain.repository.order_repository import OrderRepository, SalesTotals
from pos.domain.repository.product_repository import ProductRepository


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1
        self.paged: list[tuple[int, int]] = []

    def add(self, order: Order) -> Order:
        order.id = self._next_id
        self._next_id += 1
        self._store[order.id] = copy.deepcopy(order)
        return copy.deepcopy(order)

    def get_by_id(self, order_id: int) -> Order | None:
        order = self._store.get(order_id)
        return copy.deepcopy(order) if order is not None else None

    def list_all(self) -> list[Order]:
        orders = sorted(self._store.values(), key=lambda o: (o.created_at, o.id), reverse=True)
        return [copy.deepcopy(o) for o in orders]

    def _sales(self, start: datetime, end: datetime) -> list[Order]:
        return [
            o for o in self.list_all()
            if start <= o.created_at < end and o.status != OrderStatus.CANCELLED
        ]

    def summarize_sales(self, start: datetime, end: datetime) -> SalesTotals:
        orders = self._sales(start, end)
        return SalesTotals(
            order_count=len(orders),
            subtotal=sum(o.subtotal.amount for o in orders),
            discount=sum(o.discount.amount for o in orders),
            tax=sum(o.tax.amount for o in orders),
            final_total=sum(o.final_total.amount for o in orders),
        )

    def page_sales(
        self, start: datetime, end: datetime, offset: int, limit: int
    ) -> list[Order]:
        self.paged.append((offset, limit))
        return self._sales(start, end)[offset:offset + limit]

    def update_status(self, order_id: int, expected: OrderStatus, new: OrderStatus) -> bool:
        order = self._store.get(order_id)
        if order is None or order.status != expected:
            return False
        order.status = new
        return True


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        self.sold_ids: set[str] = set()
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def find_active_by_ids(self, product_ids: list[str]) -> list[Product]:
        return [
            self._store[pid]
            for pid in product_ids
            if pid in self._store and self._store[pid].is_active
        ]

    def list_all(self) -> list[Product]:
        return sorted(self._store.values(), key=lambda p: p.name)

    def save(self, product: Product) -> None:
        self._store[product.id] = product

    def delete(self, product_id: str) -> None:
        if product_id in self.sold_ids:
            raise ConflictError(f"Product '{product_id}' has been sold")
        self._store.pop(product_id, None)


class FakeDiscountRepository(DiscountRepository):

    def __init__(self, rules: list[DiscountRule] | None = None) -> None:
        self._store: dict[int, DiscountRule] = {}
        self._next_id = 1
        for rule in rules or []:
            self.add(rule)

    def get_by_id(self, discount_id: int) -> DiscountRule | None:
        return self._store.get(discount_id)

    def find_by_normalized_code(self, code: str) -> DiscountRule | None:
        for rule in self._store.values():
            if rule.code == code:
                return rule
        return None

    def list_all(self) -> list[DiscountRule]:
        return sorted(self._store.values(), key=lambda r: r.code)

    def add(self, rule: DiscountRule) -> DiscountRule:
        if self.find_by_normalized_code(rule.code) is not None:
            raise ConflictError(f'Discount code "{rule.code}" already exists')
        if rule.id is None:
            rule.id = self._next_id
        self._next_id = max(self._next_id, rule.id) + 1
        self._store[rule.id] = rule
        return rule

    def save(self, rule: DiscountRule) -> None:
        self._store[rule.id] = rule
