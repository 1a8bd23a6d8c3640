"""Application services: change an existing product."""

from __future__ import annotations

from pos.domain.exceptions import EntityNotFoundError
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from pos.domain.repository.product_repository import ProductRepository


def _get_or_raise(product_repo: ProductRepository, product_id: str) -> Product:
    product = product_repo.get_by_id(product_id)
    if product is None:
        raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
    return product


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, new_price: int | str) -> Product:
        """Update a product's price.

        This does NOT affect any existing orders — they captured a
        price snapshot at creation time.
        """
        product = _get_or_raise(self._product_repo, product_id)
        product.update_price(Money.of(new_price))
        self._product_repo.save(product)
        return product


class SetProductActiveHandler:
    """Soft toggle: inactive products can no longer be ordered."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, active: bool) -> Product:
        product = _get_or_raise(self._product_repo, product_id)
        product.set_active(active)
        self._product_repo.save(product)
        return product


class DeleteProductHandler:
    """Hard delete, refused while any order line references the product."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        _get_or_raise(self._product_repo, product_id)
        self._product_repo.delete(product_id)
