"""CLI commands for the Product aggregate."""

from __future__ import annotations

import json

import click

from catalog.application.dto import NewProductSpec, ProductUpdateSpec
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import product_service
from catalog.infrastructure.cli.formatting import (
    display_product,
    display_products,
    domain_error,
)
from catalog.infrastructure.config import Settings


@click.command("create")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 10000 or 15.50).")
@click.option("--description", default=None, help="Free-text description.")
@click.option("--stock", "stock_quantity", default=0, show_default=True, type=int,
              help="Initial stock quantity.")
@click.pass_obj
def product_create(
    settings: Settings,
    name: str,
    price: str,
    description: str | None,
    stock_quantity: int,
) -> None:
    """Add a new product to the catalog."""
    service = product_service(settings)
    spec = NewProductSpec(
        name=name, price=price, description=description, stock_quantity=stock_quantity
    )

    try:
        dto = service.create_product(spec)
    except DomainException as exc:
        raise domain_error(exc)

    click.echo(f"Product #{dto.id} '{dto.name}' created at {dto.price:.2f} "
               f"with {dto.stock_quantity} in stock")


@click.command("show")
@click.argument("product_id", type=int)
@click.option("--json", "as_json", is_flag=True, help="Print as JSON.")
@click.pass_obj
def product_show(settings: Settings, product_id: int, as_json: bool) -> None:
    """Show a single product."""
    service = product_service(settings)

    try:
        dto = service.get_product(product_id)
    except DomainException as exc:
        raise domain_error(exc)

    if as_json:
        click.echo(json.dumps(dto.to_dict(), indent=2))
    else:
        display_product(dto)


@click.command("list")
@click.option("--json", "as_json", is_flag=True, help="Print as JSON.")
@click.pass_obj
def product_list(settings: Settings, as_json: bool) -> None:
    """List all products in the catalog."""
    display_products(product_service(settings).get_all_products(), as_json)


@click.command("available")
@click.option("--json", "as_json", is_flag=True, help="Print as JSON.")
@click.pass_obj
def product_available(settings: Settings, as_json: bool) -> None:
    """List products whose status is AVAILABLE."""
    display_products(product_service(settings).get_available_products(), as_json)


@click.command("search")
@click.argument("name")
@click.option("--json", "as_json", is_flag=True, help="Print as JSON.")
@click.pass_obj
def product_search(settings: Settings, name: str, as_json: bool) -> None:
    """Find products whose name contains NAME (case-sensitive)."""
    display_products(product_service(settings).search_products(name), as_json)


@click.command("update")
@click.argument("product_id", type=int)
@click.option("--name", required=True, help="New product name.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
@click.option("--description", default=None, help="New description.")
@click.pass_obj
def product_update(
    settings: Settings,
    product_id: int,
    name: str,
    price: str,
    description: str | None,
) -> None:
    """Replace a product's name, description and price."""
    service = product_service(settings)
    spec = ProductUpdateSpec(name=name, price=price, description=description)

    try:
        dto = service.update_product(product_id, spec)
    except DomainException as exc:
        raise domain_error(exc)

    click.echo(f"Product #{dto.id} updated: '{dto.name}' at {dto.price:.2f}")


@click.command("discontinue")
@click.argument("product_id", type=int)
@click.pass_obj
def product_discontinue(settings: Settings, product_id: int) -> None:
    """Take a product off sale."""
    try:
        dto = product_service(settings).discontinue_product(product_id)
    except DomainException as exc:
        raise domain_error(exc)

    click.echo(f"Product #{dto.id} discontinued")


@click.command("activate")
@click.argument("product_id", type=int)
@click.pass_obj
def product_activate(settings: Settings, product_id: int) -> None:
    """Put a product back on sale."""
    try:
        dto = product_service(settings).activate_product(product_id)
    except DomainException as exc:
        raise domain_error(exc)

    click.echo(f"Product #{dto.id} activated")
