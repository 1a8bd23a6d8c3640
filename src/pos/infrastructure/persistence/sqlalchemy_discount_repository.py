"""SQLAlchemy-backed implementation of DiscountRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from pos.domain.exceptions import ConflictError, EntityNotFoundError
from pos.domain.model.discount import DiscountRule
from pos.domain.repository.discount_repository import DiscountRepository
from pos.infrastructure.persistence._mapping import discount_to_domain
from pos.infrastructure.persistence.tables import DiscountTable


class SqlAlchemyDiscountRepository(DiscountRepository):

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    # --- DiscountRepository interface -----------------------------------------

    def get_by_id(self, discount_id: int) -> DiscountRule | None:
        with self._session_factory() as session:
            row = session.get(DiscountTable, discount_id)
            return discount_to_domain(row) if row is not None else None

    def find_by_normalized_code(self, code: str) -> DiscountRule | None:
        stmt = select(DiscountTable).where(DiscountTable.code == code)
        with self._session_factory() as session:
            row = session.scalars(stmt).one_or_none()
            return discount_to_domain(row) if row is not None else None

    def list_all(self) -> list[DiscountRule]:
        stmt = select(DiscountTable).order_by(DiscountTable.code)
        with self._session_factory() as session:
            return [discount_to_domain(row) for row in session.scalars(stmt)]

    def add(self, rule: DiscountRule) -> DiscountRule:
        row = DiscountTable(
            code=rule.code,
            type=rule.type,
            value=rule.value,
            is_active=rule.is_active,
            created_at=rule.created_at,
            updated_at=rule.updated_at,
        )
        try:
            with self._session_factory.begin() as session:
                session.add(row)
                session.flush()
                return discount_to_domain(row)
        except IntegrityError as exc:
            # Unique index on code lost a race with another writer
            raise ConflictError(f'Discount code "{rule.code}" already exists') from exc

    def save(self, rule: DiscountRule) -> None:
        with self._session_factory.begin() as session:
            row = session.get(DiscountTable, rule.id)
            if row is None:
                raise EntityNotFoundError(f"Discount #{rule.id} not found")
            row.type = rule.type
            row.value = rule.value
            row.is_active = rule.is_active
            row.updated_at = rule.updated_at
