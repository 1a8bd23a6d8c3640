"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from pos.application.add_product import AddProductHandler
from pos.application.update_product import (
    DeleteProductHandler,
    SetProductActiveHandler,
    UpdateProductHandler,
)
from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import Services


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, type=int, help="Price in satang (e.g. 8000).")
@click.pass_obj
def product_add(services: Services, name: str, price: int) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=services.product_repo)

    try:
        product = handler.handle(name=name, price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.pass_obj
def product_list(services: Services) -> None:
    """List all products in the catalog."""
    products = services.product_repo.list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<36} {'Name':<20} {'Price':>12} {'Active':>7}")
    click.echo("-" * 78)
    for p in products:
        click.echo(
            f"{p.id:<36} {p.name:<20} {str(p.price):>12} {'yes' if p.is_active else 'no':>7}"
        )


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", required=True, type=int, help="New price in satang.")
@click.pass_obj
def product_update(services: Services, product_id: str, price: int) -> None:
    """Update a product's price."""
    handler = UpdateProductHandler(product_repo=services.product_repo)

    try:
        product = handler.handle(product_id=product_id, new_price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} price updated to {product.price}")


def _set_active(services: Services, product_id: str, active: bool) -> None:
    handler = SetProductActiveHandler(product_repo=services.product_repo)
    try:
        handler.handle(product_id=product_id, active=active)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Product {product_id} {'activated' if active else 'deactivated'}.")


@click.command("activate")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_activate(services: Services, product_id: str) -> None:
    """Make a product available for sale again."""
    _set_active(services, product_id, True)


@click.command("deactivate")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_deactivate(services: Services, product_id: str) -> None:
    """Take a product off sale (soft delete)."""
    _set_active(services, product_id, False)


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_delete(services: Services, product_id: str) -> None:
    """Delete a product that has never been sold."""
    handler = DeleteProductHandler(product_repo=services.product_repo)

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} deleted.")
