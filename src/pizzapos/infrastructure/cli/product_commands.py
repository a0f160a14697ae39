"""CLI commands for the Product aggregate."""

from __future__ import annotations

from dataclasses import replace

import click

from pizzapos.application.add_product import AddProductHandler
from pizzapos.application.delete_product import DeleteProductHandler
from pizzapos.application.list_products import ListProductsHandler
from pizzapos.application.update_product import UpdateProductHandler
from pizzapos.domain.exceptions import NotFoundError
from pizzapos.domain.model.product import Product, ProductDraft
from pizzapos.domain.model.value_objects import Money
from pizzapos.infrastructure.bootstrap import Session
from pizzapos.infrastructure.cli.session import run_in_session
from pizzapos.infrastructure.config import Settings


def _print_products(products: list[Product]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<10} {'':<2} {'Name':<24} {'Price':>10}  Description")
    click.echo("-" * 72)
    for p in products:
        click.echo(f"{p.id:<10} {p.glyph:<2} {p.name:<24} {str(p.price):>10}  {p.description}")


@click.command("list")
@click.option("--search", default=None, help="Only show products whose name or description contains this.")
@click.pass_obj
def product_list(settings: Settings, search: str | None) -> None:
    """List all products in the catalog."""

    async def use_case(session: Session) -> list[Product]:
        return ListProductsHandler(session.selector, session.state).handle(search)

    _print_products(run_in_session(settings, use_case))


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 12.99).")
@click.option("--description", default="", help="Short description.")
@click.option("--image", "image_path", default=None, help="Display glyph or image reference.")
@click.pass_obj
def product_add(
    settings: Settings, name: str, price: str, description: str, image_path: str | None
) -> None:
    """Add a new product to the catalog."""

    async def use_case(session: Session) -> Product:
        draft = ProductDraft(
            name=name, price=Money.of(price), description=description, image_path=image_path
        )
        return await AddProductHandler(session.selector, session.state).handle(draft)

    product = run_in_session(settings, use_case)
    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New price (e.g. 13.49).")
@click.option("--description", default=None, help="New description.")
@click.option("--image", "image_path", default=None, help="New display glyph or image reference.")
@click.pass_obj
def product_update(
    settings: Settings,
    product_id: str,
    name: str | None,
    price: str | None,
    description: str | None,
    image_path: str | None,
) -> None:
    """Edit a product. Options left out keep their current value."""

    async def use_case(session: Session) -> Product:
        current = session.state.find_product(product_id)
        if current is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")

        changes: dict = {}
        if name is not None:
            changes["name"] = name
        if price is not None:
            changes["price"] = Money.of(price)
        if description is not None:
            changes["description"] = description
        if image_path is not None:
            changes["image_path"] = image_path

        handler = UpdateProductHandler(session.selector, session.state)
        return await handler.handle(replace(current, **changes))

    product = run_in_session(settings, use_case)
    click.echo(f"Product #{product.id} updated: '{product.name}' at {product.price}")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_delete(settings: Settings, product_id: str) -> None:
    """Remove a product from the catalog."""

    async def use_case(session: Session) -> None:
        await DeleteProductHandler(session.selector, session.state).handle(product_id)

    run_in_session(settings, use_case)
    click.echo(f"Product #{product_id} deleted.")
