import logging
from pathlib import Path

import click

from pizzapos.application.mode_selector import Mode
from pizzapos.infrastructure.backend.http_backend import DEFAULT_TIMEOUT
from pizzapos.infrastructure.bootstrap import Session
from pizzapos.infrastructure.cli.order_commands import (
    order_create,
    order_list,
    order_print,
    order_show,
)
from pizzapos.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_update,
)
from pizzapos.infrastructure.cli.session import run_in_session
from pizzapos.infrastructure.config import Settings


@click.group()
@click.option(
    "--backend-url",
    envvar="PIZZAPOS_BACKEND_URL",
    default=None,
    help="Base URL of the shop backend. Without it the register runs on sample data.",
)
@click.option(
    "--timeout",
    envvar="PIZZAPOS_TIMEOUT",
    type=float,
    default=DEFAULT_TIMEOUT,
    show_default=True,
    help="Backend request timeout in seconds.",
)
@click.option(
    "--receipt-dir",
    envvar="PIZZAPOS_RECEIPT_DIR",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Spool receipts into this directory instead of echoing them.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output.")
@click.pass_context
def cli(
    ctx: click.Context,
    backend_url: str | None,
    timeout: float,
    receipt_dir: Path | None,
    verbose: bool,
) -> None:
    """Pizza POS — catalog, cart and orders for the register."""
    settings = Settings(
        backend_url=backend_url,
        timeout=timeout,
        receipt_dir=receipt_dir,
        verbose=verbose,
    )
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = settings


@cli.command("status")
@click.pass_obj
def status(settings: Settings) -> None:
    """Show which data source is in use."""

    async def use_case(session: Session) -> tuple[Mode, int, int]:
        return session.selector.mode, len(session.state.products), len(session.state.ledger)

    mode, products, orders = run_in_session(settings, use_case)
    source = settings.backend_url if mode is Mode.CONNECTED else "sample data"
    click.echo(f"Mode:     {mode.value} ({source})")
    click.echo(f"Products: {products}")
    click.echo(f"Orders:   {orders}")


@cli.group()
def order() -> None:
    """Ring up and look up orders."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_print)
order.add_command(order_show)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_update)
