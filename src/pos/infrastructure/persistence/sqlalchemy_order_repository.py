"""SQLAlchemy-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from pos.domain.exceptions import ConflictError
from pos.domain.model.order import Order, OrderStatus
from pos.domain.repository.order_repository import OrderRepository, SalesTotals
from pos.infrastructure.persistence._mapping import order_to_domain, order_to_row
from pos.infrastructure.persistence.tables import OrderTable


def _sales_window(start: datetime, end: datetime):
    return (
        OrderTable.status != OrderStatus.CANCELLED,
        OrderTable.created_at >= start,
        OrderTable.created_at < end,
    )


class SqlAlchemyOrderRepository(OrderRepository):

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    # --- OrderRepository interface --------------------------------------------

    def add(self, order: Order) -> Order:
        # One transaction: header, line items, discount audit row.
        # Any failure rolls all of them back when the block exits.
        try:
            with self._session_factory.begin() as session:
                row = order_to_row(order)
                session.add(row)
                session.flush()
                saved = order_to_domain(row)
        except IntegrityError as exc:
            # Prices are read before this transaction; a product or rule
            # deleted in between breaks a foreign key here
            raise ConflictError(
                "A product or discount in this order was removed while it was "
                "being placed; price the basket again"
            ) from exc
        order.id = saved.id
        return saved

    def get_by_id(self, order_id: int) -> Order | None:
        with self._session_factory() as session:
            row = session.get(OrderTable, order_id)
            return order_to_domain(row) if row is not None else None

    def list_all(self) -> list[Order]:
        stmt = select(OrderTable).order_by(OrderTable.created_at.desc(), OrderTable.id.desc())
        with self._session_factory() as session:
            return [order_to_domain(row) for row in session.scalars(stmt)]

    def summarize_sales(self, start: datetime, end: datetime) -> SalesTotals:
        stmt = select(
            func.count(OrderTable.id),
            func.coalesce(func.sum(OrderTable.subtotal), 0),
            func.coalesce(func.sum(OrderTable.discount), 0),
            func.coalesce(func.sum(OrderTable.tax), 0),
            func.coalesce(func.sum(OrderTable.final_total), 0),
        ).where(*_sales_window(start, end))
        with self._session_factory() as session:
            count, subtotal, discount, tax, final_total = session.execute(stmt).one()
        return SalesTotals(
            order_count=count,
            subtotal=subtotal,
            discount=discount,
            tax=tax,
            final_total=final_total,
        )

    def page_sales(
        self,
        start: datetime,
        end: datetime,
        offset: int,
        limit: int,
    ) -> list[Order]:
        # Line items and discount rows are selectin-loaded for this page only
        stmt = (
            select(OrderTable)
            .where(*_sales_window(start, end))
            .order_by(OrderTable.created_at.desc(), OrderTable.id.desc())
            .offset(offset)
            .limit(limit)
        )
        with self._session_factory() as session:
            return [order_to_domain(row) for row in session.scalars(stmt)]

    def update_status(
        self,
        order_id: int,
        expected: OrderStatus,
        new: OrderStatus,
    ) -> bool:
        stmt = (
            update(OrderTable)
            .where(OrderTable.id == order_id, OrderTable.status == expected)
            .values(status=new, updated_at=datetime.now(timezone.utc))
            .execution_options(synchronize_session=False)
        )
        with self._session_factory.begin() as session:
            result = session.execute(stmt)
            return result.rowcount == 1
