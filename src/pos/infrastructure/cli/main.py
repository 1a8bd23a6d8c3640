import click

from pos.application.seed_catalog import SeedCatalogHandler
from pos.infrastructure.bootstrap import Services, build_services
from pos.infrastructure.cli.discount_commands import (
    discount_activate,
    discount_add,
    discount_deactivate,
    discount_list,
    discount_show,
    discount_update,
)
from pos.infrastructure.cli.order_commands import (
    order_advance,
    order_cancel,
    order_create,
    order_list,
    order_preview,
    order_show,
)
from pos.infrastructure.cli.product_commands import (
    product_activate,
    product_add,
    product_deactivate,
    product_delete,
    product_list,
    product_update,
)
from pos.infrastructure.cli.report_commands import report_sales
from pos.infrastructure.config import Settings
from pos.infrastructure.logging_config import configure_logging


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """POS — point-of-sale order engine"""
    try:
        settings = Settings.from_env()
    except ValueError as exc:
        raise click.ClickException(str(exc))
    configure_logging(settings)
    services = build_services(settings)
    ctx.call_on_close(services.engine.dispose)
    ctx.obj = services


@cli.group()
def order() -> None:
    """Price, create and move orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def discount() -> None:
    """Manage discount codes."""


@cli.group()
def report() -> None:
    """Sales reports."""


@cli.command("seed")
@click.pass_obj
def seed(services: Services) -> None:
    """Load demo products and discount codes into empty tables."""
    result = SeedCatalogHandler(services.product_repo, services.discount_repo).handle()
    click.echo(
        f"Seeding complete: {result.products_added} products, "
        f"{result.discounts_added} discount codes added."
    )


# Register subcommands
order.add_command(order_advance)
order.add_command(order_cancel)
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_preview)
order.add_command(order_show)
product.add_command(product_activate)
product.add_command(product_add)
product.add_command(product_deactivate)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_update)
discount.add_command(discount_activate)
discount.add_command(discount_add)
discount.add_command(discount_deactivate)
discount.add_command(discount_list)
discount.add_command(discount_show)
discount.add_command(discount_update)
report.add_command(report_sales)
