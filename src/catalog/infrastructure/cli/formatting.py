"""Output helpers shared by the CLI command modules."""

from __future__ import annotations

import json

import click

from catalog.application.dto import ProductDTO
from catalog.domain.exceptions import DomainException


def domain_error(exc: DomainException) -> click.ClickException:
    """Translate a domain error into a CLI error carrying its code."""
    return click.ClickException(f"[{exc.error_code.code}] {exc.message}")


def _timestamp(value) -> str:
    return value.strftime("%Y-%m-%d %H:%M UTC") if value else "-"


def display_product(dto: ProductDTO) -> None:
    click.echo(f"Product #{dto.id}  (status={dto.status})")
    click.echo(f"Name:        {dto.name}")
    click.echo(f"Description: {dto.description or '-'}")
    click.echo(f"Price:       {dto.price:.2f}")
    click.echo(f"Stock:       {dto.stock_quantity}")
    click.echo(f"Available:   {'yes' if dto.available else 'no'}")
    click.echo(f"Created:     {_timestamp(dto.created_at)}")
    click.echo(f"Updated:     {_timestamp(dto.updated_at)}")


def display_products(dtos: list[ProductDTO], as_json: bool = False) -> None:
    if as_json:
        click.echo(json.dumps([dto.to_dict() for dto in dtos], indent=2))
        return

    if not dtos:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>12} {'Stock':>7} {'Status':<13} {'Avail':<5}")
    click.echo("-" * 68)
    for p in dtos:
        click.echo(
            f"{p.id:<6} {p.name:<20} {p.price:>12.2f} {p.stock_quantity:>7} "
            f"{p.status:<13} {'yes' if p.available else 'no':<5}"
        )
