"""Application service: Add Product use case."""

from __future__ import annotations

import uuid

from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from pos.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str, price: int | str) -> Product:
        """Add a new product to the catalog (price in minor units)."""
        product = Product.create(
            product_id=str(uuid.uuid4()),
            name=name,
            price=Money.of(price),
        )
        self._product_repo.save(product)
        return product
