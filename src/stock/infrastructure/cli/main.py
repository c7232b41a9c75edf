import click
import uvicorn

from stock.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_search,
    product_show,
    product_update,
)
from stock.infrastructure.cli.reference_commands import (
    provider_add,
    provider_list,
    type_add,
    type_list,
)
from stock.infrastructure.cli.stock_commands import (
    price_show,
    stock_add,
    stock_remove,
    stock_show,
)
from stock.infrastructure.config import get_settings
from stock.infrastructure.logger import configure_logging


@click.group()
def cli() -> None:
    """Stock: inventory management"""
    configure_logging()


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group("stock")
def stock_group() -> None:
    """Query and move stock."""


@cli.group()
def price() -> None:
    """Query sale prices."""


@cli.group("type")
def type_group() -> None:
    """Manage product types (brands)."""


@cli.group()
def provider() -> None:
    """Manage providers."""


@cli.command()
@click.option("--host", default=None, help="Bind address (defaults to STOCK_API_HOST).")
@click.option("--port", default=None, type=int, help="Port (defaults to STOCK_API_PORT).")
def serve(host: str | None, port: int | None) -> None:
    """Run the HTTP API."""
    settings = get_settings()
    uvicorn.run(
        "stock.infrastructure.api.app:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
    )


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_search)
product.add_command(product_show)
product.add_command(product_update)
stock_group.add_command(stock_add)
stock_group.add_command(stock_remove)
stock_group.add_command(stock_show)
price.add_command(price_show)
type_group.add_command(type_add)
type_group.add_command(type_list)
provider.add_command(provider_add)
provider.add_command(provider_list)
