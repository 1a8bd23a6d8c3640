"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from pos.application.change_status import AdvanceOrderHandler, CancelOrderHandler
from pos.application.create_order import CreateOrderHandler
from pos.application.dto import OrderItemSpec
from pos.application.preview_order import PreviewOrderHandler
from pos.application.show_order import ListOrdersHandler, ShowOrderHandler
from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import Services
from pos.infrastructure.cli._format import display_order, display_quote, money


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse 'productId:2,productId:1' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(OrderItemSpec(product_id=product_id.strip(), quantity=qty))
    return specs


_items_option = click.option(
    "--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'."
)
_discount_option = click.option(
    "--discount", "discount_code", default=None, help="Discount code to apply."
)


@click.command("preview")
@_items_option
@_discount_option
@click.pass_obj
def order_preview(services: Services, items: str, discount_code: str | None) -> None:
    """Price a basket without saving anything."""
    specs = _parse_items(items)
    handler = PreviewOrderHandler(pricing_service=services.pricing_service)

    try:
        dto = handler.handle(specs, discount_code=discount_code)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_quote(dto)


@click.command("create")
@_items_option
@_discount_option
@click.pass_obj
def order_create(services: Services, items: str, discount_code: str | None) -> None:
    """Create a new order."""
    specs = _parse_items(items)
    handler = CreateOrderHandler(
        order_repo=services.order_repo,
        pricing_service=services.pricing_service,
        logger=services.logger.bind(component="orders"),
    )

    try:
        dto = handler.handle(specs, discount_code=discount_code)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} created")
    display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(services: Services, order_id: int) -> None:
    """Show the receipt of an existing order."""
    handler = ShowOrderHandler(order_repo=services.order_repo)

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)


@click.command("list")
@click.pass_obj
def order_list(services: Services) -> None:
    """List all orders, newest first."""
    orders = ListOrdersHandler(order_repo=services.order_repo).handle()

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Status':<10} {'Created':<21} {'Total':>14}")
    click.echo("-" * 54)
    for dto in orders:
        click.echo(
            f"{dto.id:<6} {dto.status:<10} {dto.created_at:<21} {money(dto.final_total):>14}"
        )


@click.command("advance")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to advance.")
@click.pass_obj
def order_advance(services: Services, order_id: int) -> None:
    """Move an order to the next workflow step."""
    handler = AdvanceOrderHandler(
        order_repo=services.order_repo,
        logger=services.logger.bind(component="orders"),
    )

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} is now {dto.status}.")


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
@click.pass_obj
def order_cancel(services: Services, order_id: int) -> None:
    """Cancel an order that is not yet completed."""
    handler = CancelOrderHandler(
        order_repo=services.order_repo,
        logger=services.logger.bind(component="orders"),
    )

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} cancelled.")
