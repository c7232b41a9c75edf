"""CLI commands for stock levels and prices."""

from __future__ import annotations

import click

from stock.application.adjust_stock import (
    DecreaseStockHandler,
    IncreaseStockHandler,
    ShowStockHandler,
)
from stock.application.show_prices import ShowEmployeePriceHandler, ShowPublicPriceHandler
from stock.domain.exceptions import DomainException
from stock.infrastructure.bootstrap import product_repository


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def stock_show(product_id: str) -> None:
    """Show the stock available for a product."""
    try:
        level = ShowStockHandler(product_repository()).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id}: {level} in stock")


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units to add.")
def stock_add(product_id: str, quantity: int) -> None:
    """Add units to a product's stock."""
    try:
        level = IncreaseStockHandler(product_repository()).handle(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id}: stock now {level}")


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units to take out.")
def stock_remove(product_id: str, quantity: int) -> None:
    """Take units out of a product's stock."""
    try:
        level = DecreaseStockHandler(product_repository()).handle(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id}: stock now {level}")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--employee", is_flag=True, default=False, help="Show the employee price.")
def price_show(product_id: str, employee: bool) -> None:
    """Show the sale price of a product."""
    handler_cls = ShowEmployeePriceHandler if employee else ShowPublicPriceHandler
    try:
        price = handler_cls(product_repository()).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    label = "Employee price" if employee else "Public price"
    click.echo(f"{label} for #{product_id}: {price:.2f}")
