"""Shared output helpers for the CLI commands."""

from __future__ import annotations

import click

from pos.application.dto import OrderDTO, OrderLineItemDTO, QuoteDTO
from pos.domain.model.value_objects import Money


def money(amount: int) -> str:
    return str(Money(amount))


def _display_lines(items: list[OrderLineItemDTO]) -> None:
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*51}")
    for item in items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} "
            f"{money(item.unit_price):>12} {money(item.line_total):>12}"
        )
    click.echo(f"  {'-'*51}")


def _display_totals(dto: OrderDTO | QuoteDTO) -> None:
    click.echo(f"  {'Subtotal':<27} {money(dto.subtotal):>24}")
    if dto.discount_code:
        label = f"Discount ({dto.discount_code})"
        click.echo(f"  {label:<27} {'-' + money(dto.discount):>24}")
    click.echo(f"  {'Tax (7%)':<27} {money(dto.tax):>24}")
    click.echo(f"  {'Total':<27} {money(dto.final_total):>24}")


def display_quote(dto: QuoteDTO) -> None:
    click.echo("Preview (nothing saved)")
    click.echo()
    _display_lines(dto.items)
    _display_totals(dto)


def display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order receipt."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    _display_lines(dto.items)
    _display_totals(dto)
