from __future__ import annotations

from pathlib import Path

import click

from catalog.infrastructure.cli.product_commands import (
    product_activate,
    product_available,
    product_create,
    product_discontinue,
    product_list,
    product_search,
    product_show,
    product_update,
)
from catalog.infrastructure.cli.stock_commands import (
    stock_add,
    stock_check,
    stock_quote,
    stock_remove,
)
from catalog.infrastructure.config import get_settings
from catalog.infrastructure.logging_setup import setup_logging


@click.group()
@click.option("--data-dir", type=click.Path(file_okay=False, path_type=Path),
              default=None, help="Directory holding the catalog file.")
@click.option("--log-level", default=None, help="Logging level (e.g. INFO, DEBUG).")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, log_level: str | None) -> None:
    """Product Catalog"""
    settings = get_settings()
    if data_dir is not None:
        settings.data_dir = data_dir

    try:
        setup_logging(log_level or settings.log_level)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--log-level")

    ctx.obj = settings


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def stock() -> None:
    """Adjust and query stock."""


# Register subcommands
product.add_command(product_activate)
product.add_command(product_available)
product.add_command(product_create)
product.add_command(product_discontinue)
product.add_command(product_list)
product.add_command(product_search)
product.add_command(product_show)
product.add_command(product_update)
stock.add_command(stock_add)
stock.add_command(stock_check)
stock.add_command(stock_quote)
stock.add_command(stock_remove)
