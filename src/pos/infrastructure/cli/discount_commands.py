"""CLI commands for discount codes."""

from __future__ import annotations

import click

from pos.application.manage_discounts import (
    AddDiscountHandler,
    SetDiscountActiveHandler,
    ShowDiscountHandler,
    UpdateDiscountHandler,
)
from pos.domain.exceptions import DomainException
from pos.domain.model.discount import DiscountRule, DiscountType
from pos.infrastructure.bootstrap import Services
from pos.infrastructure.cli._format import money


def _describe(rule: DiscountRule) -> str:
    if rule.type is DiscountType.PERCENTAGE:
        return f"{rule.value}%"
    return money(rule.value)


@click.command("add")
@click.option("--code", required=True, help="Discount code (case-insensitive).")
@click.option(
    "--type",
    "discount_type",
    required=True,
    type=click.Choice([t.value for t in DiscountType], case_sensitive=False),
    help="PERCENTAGE or FIXED_AMOUNT.",
)
@click.option(
    "--value",
    required=True,
    type=int,
    help="Percentage points (10) or amount in satang (5000).",
)
@click.option("--inactive", is_flag=True, default=False, help="Create switched off.")
@click.pass_obj
def discount_add(
    services: Services, code: str, discount_type: str, value: int, inactive: bool
) -> None:
    """Create a new discount code."""
    handler = AddDiscountHandler(
        discount_repo=services.discount_repo,
        logger=services.logger.bind(component="discounts"),
    )

    try:
        rule = handler.handle(
            code=code,
            discount_type=DiscountType(discount_type.upper()),
            value=value,
            active=not inactive,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Discount #{rule.id} {rule.code} ({_describe(rule)}) created")


@click.command("list")
@click.pass_obj
def discount_list(services: Services) -> None:
    """List all discount codes."""
    rules = services.discount_repo.list_all()

    if not rules:
        click.echo("No discount codes found.")
        return

    click.echo(f"{'ID':<5} {'Code':<20} {'Type':<13} {'Value':>12} {'Active':>7}")
    click.echo("-" * 61)
    for r in rules:
        click.echo(
            f"{r.id:<5} {r.code:<20} {r.type.value:<13} {_describe(r):>12} "
            f"{'yes' if r.is_active else 'no':>7}"
        )


@click.command("show")
@click.option("--id", "discount_id", required=True, type=int, help="Discount ID.")
@click.pass_obj
def discount_show(services: Services, discount_id: int) -> None:
    """Show one discount code."""
    handler = ShowDiscountHandler(discount_repo=services.discount_repo)

    try:
        rule = handler.handle(discount_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Discount #{rule.id} {rule.code}")
    click.echo(f"  Type:    {rule.type.value}")
    click.echo(f"  Value:   {_describe(rule)}")
    click.echo(f"  Active:  {'yes' if rule.is_active else 'no'}")
    click.echo(f"  Updated: {rule.updated_at.strftime('%Y-%m-%d %H:%M UTC')}")


@click.command("update")
@click.option("--id", "discount_id", required=True, type=int, help="Discount ID.")
@click.option(
    "--type",
    "discount_type",
    default=None,
    type=click.Choice([t.value for t in DiscountType], case_sensitive=False),
    help="New type; unchanged when omitted.",
)
@click.option("--value", required=True, type=int, help="New value.")
@click.pass_obj
def discount_update(
    services: Services, discount_id: int, discount_type: str | None, value: int
) -> None:
    """Change what a discount code is worth."""
    handler = UpdateDiscountHandler(
        discount_repo=services.discount_repo,
        logger=services.logger.bind(component="discounts"),
    )

    try:
        rule = handler.handle(
            discount_id=discount_id,
            value=value,
            discount_type=DiscountType(discount_type.upper()) if discount_type else None,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Discount {rule.code} is now {_describe(rule)}")


def _set_active(services: Services, discount_id: int, active: bool) -> None:
    handler = SetDiscountActiveHandler(discount_repo=services.discount_repo)
    try:
        rule = handler.handle(discount_id=discount_id, active=active)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Discount {rule.code} {'activated' if active else 'deactivated'}.")


@click.command("activate")
@click.option("--id", "discount_id", required=True, type=int, help="Discount ID.")
@click.pass_obj
def discount_activate(services: Services, discount_id: int) -> None:
    """Switch a discount code back on."""
    _set_active(services, discount_id, True)


@click.command("deactivate")
@click.option("--id", "discount_id", required=True, type=int, help="Discount ID.")
@click.pass_obj
def discount_deactivate(services: Services, discount_id: int) -> None:
    """Switch a discount code off."""
    _set_active(services, discount_id, False)
