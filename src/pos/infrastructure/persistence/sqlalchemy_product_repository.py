"""SQLAlchemy-backed implementation of ProductRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from pos.domain.exceptions import ConflictError
from pos.domain.model.product import Product
from pos.domain.repository.product_repository import ProductRepository
from pos.infrastructure.persistence._mapping import product_to_domain, product_to_row
from pos.infrastructure.persistence.tables import ProductTable


class SqlAlchemyProductRepository(ProductRepository):

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        with self._session_factory() as session:
            row = session.get(ProductTable, product_id)
            return product_to_domain(row) if row is not None else None

    def find_active_by_ids(self, product_ids: list[str]) -> list[Product]:
        if not product_ids:
            return []
        stmt = select(ProductTable).where(
            ProductTable.id.in_(product_ids),
            ProductTable.is_active.is_(True),
        )
        with self._session_factory() as session:
            return [product_to_domain(row) for row in session.scalars(stmt)]

    def list_all(self) -> list[Product]:
        stmt = select(ProductTable).order_by(ProductTable.name)
        with self._session_factory() as session:
            return [product_to_domain(row) for row in session.scalars(stmt)]

    def save(self, product: Product) -> None:
        with self._session_factory.begin() as session:
            session.merge(product_to_row(product))

    def delete(self, product_id: str) -> None:
        try:
            with self._session_factory.begin() as session:
                row = session.get(ProductTable, product_id)
                if row is not None:
                    session.delete(row)
        except IntegrityError as exc:
            raise ConflictError(
                f"Product '{product_id}' has been sold and cannot be deleted; "
                f"deactivate it instead"
            ) from exc
