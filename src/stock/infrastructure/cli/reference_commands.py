"""CLI commands for product types and providers."""

from __future__ import annotations

import click

from stock.application.add_product_type import AddProductTypeHandler
from stock.application.add_provider import AddProviderHandler
from stock.domain.exceptions import DomainException
from stock.infrastructure.bootstrap import product_type_repository, provider_repository


@click.command("add")
@click.option("--initials", default="", help="Short code, e.g. 'CC'.")
@click.option("--description", required=True, help="Brand or category name.")
def type_add(initials: str, description: str) -> None:
    """Register a product type."""
    try:
        product_type = AddProductTypeHandler(product_type_repository()).handle(
            initials=initials, description=description
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product type #{product_type.id} '{product_type.description}' added")


@click.command("list")
def type_list() -> None:
    """List product types."""
    types = product_type_repository().list_all()
    if not types:
        click.echo("No product types found.")
        return

    click.echo(f"{'ID':<38} {'Initials':<10} {'Description':<20}")
    click.echo("-" * 70)
    for t in types:
        click.echo(f"{t.id:<38} {t.initials:<10} {t.description:<20}")


@click.command("add")
@click.option("--name", required=True, help="Provider name.")
@click.option("--email", default="", help="Contact e-mail.")
@click.option("--phone", default="", help="Contact phone.")
def provider_add(name: str, email: str, phone: str) -> None:
    """Register a provider."""
    try:
        provider = AddProviderHandler(provider_repository()).handle(
            name=name, email=email, phone=phone
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Provider #{provider.id} '{provider.name}' added")


@click.command("list")
def provider_list() -> None:
    """List providers."""
    providers = provider_repository().list_all()
    if not providers:
        click.echo("No providers found.")
        return

    click.echo(f"{'ID':<38} {'Name':<20} {'E-mail':<25}")
    click.echo("-" * 85)
    for p in providers:
        click.echo(f"{p.id:<38} {p.name:<20} {p.email:<25}")
