"""Application service: seed demo products and discount codes.

Each table is only seeded while it is still empty, so running the
seed twice is harmless.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from pos.domain.model.discount import DiscountRule, DiscountType
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from pos.domain.repository.discount_repository import DiscountRepository
from pos.domain.repository.product_repository import ProductRepository

SEED_PRODUCTS: list[tuple[str, int]] = [
    ("Pad Thai", 8000),
    ("Tom Yum Kung", 15000),
    ("Green Curry", 12000),
    ("Coke Zero", 2500),
    ("Mango Sticky Rice", 9000),
]

SEED_DISCOUNTS: list[tuple[str, DiscountType, int, bool]] = [
    ("SUMMER10", DiscountType.PERCENTAGE, 10, True),
    ("WELCOME50", DiscountType.FIXED_AMOUNT, 5000, True),
    ("EXPIRED", DiscountType.FIXED_AMOUNT, 10000, False),
]


@dataclass(frozen=True)
class SeedResult:
    products_added: int
    discounts_added: int


class SeedCatalogHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        discount_repo: DiscountRepository,
    ) -> None:
        self._product_repo = product_repo
        self._discount_repo = discount_repo

    def handle(self) -> SeedResult:
        products_added = 0
        if not self._product_repo.list_all():
            for name, price in SEED_PRODUCTS:
                self._product_repo.save(
                    Product.create(str(uuid.uuid4()), name, Money(price))
                )
                products_added += 1

        discounts_added = 0
        if not self._discount_repo.list_all():
            for code, discount_type, value, active in SEED_DISCOUNTS:
                self._discount_repo.add(
                    DiscountRule.create(code, discount_type, value, is_active=active)
                )
                discounts_added += 1

        return SeedResult(products_added=products_added, discounts_added=discounts_added)
