"""Application service: Sales Report use case (query).

A read-only projection over persisted orders.  Cancelled orders are
left out of every figure.  Totals are aggregated by the repository;
only the requested page of orders is ever loaded.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone

from pos.application.dto import OrderDTO, order_to_dto
from pos.domain.exceptions import ValidationError
from pos.domain.repository.order_repository import OrderRepository

MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class SalesSummaryDTO:
    order_count: int
    gross_sales: int
    discounts: int
    net_sales: int
    tax: int
    final_sales: int
    average_order_value: int


@dataclass(frozen=True)
class SalesReportDTO:
    date_from: date
    date_to: date
    summary: SalesSummaryDTO
    page: int
    page_size: int
    total: int
    total_pages: int
    orders: list[OrderDTO]


class SalesReportHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        date_from: date,
        date_to: date,
        page: int = 1,
        page_size: int = 20,
    ) -> SalesReportDTO:
        """Summarise orders created on the UTC days ``date_from..date_to``."""
        if date_to < date_from:
            raise ValidationError('"to" must be the same day or after "from"')
        if page < 1:
            raise ValidationError("page must be >= 1")
        if not 1 <= page_size <= MAX_PAGE_SIZE:
            raise ValidationError(f"page_size must be between 1 and {MAX_PAGE_SIZE}")

        start = datetime.combine(date_from, time.min, tzinfo=timezone.utc)
        end = datetime.combine(date_to + timedelta(days=1), time.min, tzinfo=timezone.utc)

        totals = self._order_repo.summarize_sales(start, end)
        count = totals.order_count
        summary = SalesSummaryDTO(
            order_count=count,
            gross_sales=totals.subtotal,
            discounts=totals.discount,
            net_sales=totals.subtotal - totals.discount,
            tax=totals.tax,
            final_sales=totals.final_total,
            average_order_value=totals.final_total // count if count else 0,
        )

        offset = (page - 1) * page_size
        orders = (
            self._order_repo.page_sales(start, end, offset, page_size)
            if offset < count
            else []
        )
        return SalesReportDTO(
            date_from=date_from,
            date_to=date_to,
            summary=summary,
            page=page,
            page_size=page_size,
            total=count,
            total_pages=-(-count // page_size),
            orders=[order_to_dto(o) for o in orders],
        )
