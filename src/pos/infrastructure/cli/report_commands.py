"""CLI commands for sales reporting."""

from __future__ import annotations

import click

from pos.application.sales_report import SalesReportHandler
from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import Services
from pos.infrastructure.cli._format import money


@click.command("sales")
@click.option("--from", "date_from", required=True, type=click.DateTime(["%Y-%m-%d"]),
              help="First day (YYYY-MM-DD, UTC).")
@click.option("--to", "date_to", required=True, type=click.DateTime(["%Y-%m-%d"]),
              help="Last day, inclusive (YYYY-MM-DD, UTC).")
@click.option("--page", default=1, type=int, show_default=True)
@click.option("--page-size", default=20, type=int, show_default=True)
@click.pass_obj
def report_sales(services: Services, date_from, date_to, page: int, page_size: int) -> None:
    """Sales summary for a date range (cancelled orders excluded)."""
    handler = SalesReportHandler(order_repo=services.order_repo)

    try:
        report = handler.handle(date_from.date(), date_to.date(), page=page, page_size=page_size)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    s = report.summary
    click.echo(f"Sales {report.date_from} .. {report.date_to}")
    click.echo()
    click.echo(f"  {'Orders':<20} {s.order_count:>16}")
    click.echo(f"  {'Gross sales':<20} {money(s.gross_sales):>16}")
    click.echo(f"  {'Discounts':<20} {money(s.discounts):>16}")
    click.echo(f"  {'Net sales':<20} {money(s.net_sales):>16}")
    click.echo(f"  {'Tax':<20} {money(s.tax):>16}")
    click.echo(f"  {'Final sales':<20} {money(s.final_sales):>16}")
    click.echo(f"  {'Avg order value':<20} {money(s.average_order_value):>16}")

    if not report.orders:
        return

    click.echo()
    click.echo(f"Page {report.page}/{report.total_pages} ({report.total} orders)")
    for dto in report.orders:
        click.echo(f"  #{dto.id:<6} {dto.status:<10} {dto.created_at:<21} {money(dto.final_total):>14}")
