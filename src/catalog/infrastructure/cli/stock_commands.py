"""CLI commands for stock adjustments and stock queries."""

from __future__ import annotations

import click

from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import product_service
from catalog.infrastructure.cli.formatting import domain_error
from catalog.infrastructure.config import Settings


@click.command("add")
@click.argument("product_id", type=int)
@click.option("--quantity", required=True, type=int, help="Units to put back into stock.")
@click.pass_obj
def stock_add(settings: Settings, product_id: int, quantity: int) -> None:
    """Release QUANTITY units into a product's stock."""
    try:
        dto = product_service(settings).add_stock(product_id, quantity)
    except DomainException as exc:
        raise domain_error(exc)

    click.echo(f"Product #{dto.id}: added {quantity}, stock is now {dto.stock_quantity}")


@click.command("remove")
@click.argument("product_id", type=int)
@click.option("--quantity", required=True, type=int, help="Units to reserve.")
@click.pass_obj
def stock_remove(settings: Settings, product_id: int, quantity: int) -> None:
    """Reserve QUANTITY units from a product's stock."""
    try:
        dto = product_service(settings).remove_stock(product_id, quantity)
    except DomainException as exc:
        raise domain_error(exc)

    click.echo(f"Product #{dto.id}: reserved {quantity}, stock is now {dto.stock_quantity}")


@click.command("quote")
@click.argument("product_id", type=int)
@click.option("--quantity", required=True, type=int, help="Units to price.")
@click.pass_obj
def stock_quote(settings: Settings, product_id: int, quantity: int) -> None:
    """Show the total price of QUANTITY units."""
    try:
        total = product_service(settings).quote_price(product_id, quantity)
    except DomainException as exc:
        raise domain_error(exc)

    click.echo(f"{quantity} x product #{product_id} = {total}")


@click.command("check")
@click.argument("product_id", type=int)
@click.option("--quantity", required=True, type=int, help="Units wanted.")
@click.pass_obj
def stock_check(settings: Settings, product_id: int, quantity: int) -> None:
    """Tell whether QUANTITY units could be reserved right now."""
    try:
        enough = product_service(settings).check_stock(product_id, quantity)
    except DomainException as exc:
        raise domain_error(exc)

    if enough:
        click.echo(f"Product #{product_id}: {quantity} can be reserved")
    else:
        click.echo(f"Product #{product_id}: {quantity} cannot be reserved")
