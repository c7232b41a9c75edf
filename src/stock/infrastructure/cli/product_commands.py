"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from stock.application.add_product import AddProductHandler
from stock.application.delete_product import DeleteProductHandler
from stock.application.dto import ProductChanges, ProductDTO, ProductSpec
from stock.application.list_products import ListProductsHandler
from stock.application.search_products import SearchProductsHandler
from stock.application.show_product import ShowProductHandler
from stock.application.update_product import UpdateProductHandler
from stock.domain.exceptions import DomainException
from stock.domain.service.product_filter import Condition, ProductSearchCriteria
from stock.infrastructure.bootstrap import (
    currency,
    product_repository,
    product_type_repository,
    provider_repository,
)


def _display_products(dtos: list[ProductDTO]) -> None:
    """Shared formatting for a list of products."""
    if not dtos:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<38} {'Name':<20} {'Brand':<14} {'Price':>10} {'Empl.':>10} {'Stock':>6}")
    click.echo("-" * 103)
    for p in dtos:
        click.echo(
            f"{p.id:<38} {p.name:<20} {p.brand:<14} "
            f"{p.public_price:>10.2f} {p.employee_price:>10.2f} {p.stock:>6}"
        )


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    _display_products(ListProductsHandler(product_repository()).handle())


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show one product."""
    try:
        dto = ShowProductHandler(product_repository()).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id}")
    click.echo(f"Name:           {dto.name}")
    click.echo(f"Brand:          {dto.brand or '-'}")
    click.echo(f"Provider:       {dto.provider_name or '-'}")
    click.echo(f"Public price:   {dto.public_price:.2f} {dto.currency}")
    click.echo(f"Employee price: {dto.employee_price:.2f} {dto.currency}")
    click.echo(f"Stock:          {dto.stock}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Public sale price (e.g. 15.00).")
@click.option("--employee-price", required=True, help="Employee sale price.")
@click.option("--type-id", required=True, help="Product type ID.")
@click.option("--provider-id", required=True, help="Provider ID.")
@click.option("--stock", default=0, type=int, show_default=True, help="Initial stock.")
def product_add(
    name: str,
    price: str,
    employee_price: str,
    type_id: str,
    provider_id: str,
    stock: int,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(
        product_repo=product_repository(),
        product_type_repo=product_type_repository(),
        provider_repo=provider_repository(),
        currency=currency(),
    )
    spec = ProductSpec(
        name=name,
        public_price=price,
        employee_price=employee_price,
        product_type_id=type_id,
        provider_id=provider_id,
        stock=stock,
    )

    try:
        dto = handler.handle(spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} '{dto.name}' added at {dto.public_price:.2f}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New public sale price.")
@click.option("--employee-price", default=None, help="New employee sale price.")
@click.option("--stock", default=None, type=int, help="New stock level.")
@click.option("--type-id", default=None, help="New product type ID.")
@click.option("--provider-id", default=None, help="New provider ID.")
def product_update(
    product_id: str,
    name: str | None,
    price: str | None,
    employee_price: str | None,
    stock: int | None,
    type_id: str | None,
    provider_id: str | None,
) -> None:
    """Update a product. Options left out keep their current value."""
    handler = UpdateProductHandler(
        product_repo=product_repository(),
        product_type_repo=product_type_repository(),
        provider_repo=provider_repository(),
    )
    changes = ProductChanges(
        name=name,
        public_price=price,
        employee_price=employee_price,
        stock=stock,
        product_type_id=type_id,
        provider_id=provider_id,
    )

    try:
        handler.handle(product_id, changes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} updated.")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Remove a product from the catalog."""
    try:
        DeleteProductHandler(product_repository()).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")


@click.command("search")
@click.option("--name", default=None, help="Substring of the product name.")
@click.option("--brand", default=None, help="Substring of the brand.")
@click.option(
    "--condition",
    type=click.Choice([c.value for c in Condition], case_sensitive=False),
    default=Condition.AND.value,
    show_default=True,
    help="How name and brand are combined.",
)
def product_search(name: str | None, brand: str | None, condition: str) -> None:
    """Search products by name and/or brand."""
    criteria = ProductSearchCriteria(
        name=name,
        brand=brand,
        condition=Condition(condition.upper()),
    )
    _display_products(SearchProductsHandler(product_repository()).handle(criteria))
