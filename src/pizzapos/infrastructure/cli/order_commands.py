"""CLI commands for the cart, checkout and order history."""

from __future__ import annotations

import click

from pizzapos.application.checkout import CheckoutHandler
from pizzapos.application.dto import CheckoutRequest, OrderDTO, to_order_dto
from pizzapos.application.print_receipt import TAX_LABEL, PrintReceiptHandler
from pizzapos.application.show_order import ListOrdersHandler, ShowOrderHandler
from pizzapos.domain.exceptions import NotFoundError, PrintError
from pizzapos.domain.model.order import DeliveryService, PaymentMethod
from pizzapos.infrastructure.bootstrap import Session
from pizzapos.infrastructure.cli.session import run_in_session
from pizzapos.infrastructure.config import Settings


def _parse_items(raw: str) -> list[tuple[str, int]]:
    """Parse 'Margherita:2,Pepperoni:1' into (name, quantity) pairs."""
    specs: list[tuple[str, int]] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductName:Quantity'."
            )
        name, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{name}'."
            )
        if qty <= 0:
            raise click.BadParameter(f"Quantity for '{name}' must be positive.")
        specs.append((name.strip(), qty))
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}")
    click.echo(f"Customer: {dto.buyer}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo(f"Payment:  {dto.payment_method}")
    click.echo(f"Delivery: {dto.delivery_service}")
    if dto.coupon_code:
        click.echo(f"Coupon:   {dto.coupon_code}")
    click.echo()
    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*51}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<24} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Subtotal':<31} {dto.subtotal:>20}")
    click.echo(f"  {TAX_LABEL:<31} {dto.tax:>20}")
    click.echo(f"  {'Total':<31} {dto.total:>20}")


def _print_receipt(session: Session, order_id: int) -> None:
    try:
        PrintReceiptHandler(session.state, session.printer).handle(order_id)
    except PrintError as exc:
        click.echo(f"Warning: {exc} (the order itself was saved)", err=True)


@click.command("create")
@click.option("--items", required=True, help="Items as 'Product:Qty,Product:Qty'.")
@click.option("--buyer", default=None, help="Customer name (default: Walk-in Customer).")
@click.option(
    "--payment",
    type=click.Choice([m.value for m in PaymentMethod]),
    default=PaymentMethod.CASH.value,
    show_default=True,
)
@click.option(
    "--delivery",
    type=click.Choice([d.value for d in DeliveryService]),
    default=DeliveryService.NONE.value,
    show_default=True,
)
@click.option("--coupon", default=None, help="Coupon code to record on the order.")
@click.option("--print", "print_receipt", is_flag=True, default=False, help="Print the receipt afterwards.")
@click.pass_obj
def order_create(
    settings: Settings,
    items: str,
    buyer: str | None,
    payment: str,
    delivery: str,
    coupon: str | None,
    print_receipt: bool,
) -> None:
    """Ring up items and complete the order."""
    specs = _parse_items(items)

    async def use_case(session: Session) -> OrderDTO:
        cart = session.state.cart
        for name, qty in specs:
            product = session.state.find_product_by_name(name)
            if product is None:
                raise NotFoundError(f"Product not found: '{name}'")
            line = cart.get(product.id)
            already = line.quantity.value if line else 0
            cart.add_item(product)
            cart.set_quantity(product.id, already + qty)

        order = await CheckoutHandler(session.selector, session.state).handle(
            CheckoutRequest(
                buyer=buyer,
                payment_method=PaymentMethod(payment),
                delivery_service=DeliveryService(delivery),
                coupon_code=coupon,
            )
        )
        if print_receipt:
            _print_receipt(session, order.id)
        return to_order_dto(order)

    dto = run_in_session(settings, use_case)
    click.echo("Order completed successfully!")
    _display_order(dto)


@click.command("list")
@click.pass_obj
def order_list(settings: Settings) -> None:
    """List past orders, most recent first."""

    async def use_case(session: Session) -> list[OrderDTO]:
        return ListOrdersHandler(session.state).handle()

    orders = run_in_session(settings, use_case)
    if not orders:
        click.echo("No orders yet.")
        return

    click.echo(f"{'Order':<8} {'Created':<22} {'Customer':<20} {'Payment':<18} {'Total':>10}")
    click.echo("-" * 82)
    for dto in orders:
        click.echo(
            f"#{dto.id:<7} {dto.created_at:<22} {dto.buyer:<20} {dto.payment_method:<18} {dto.total:>10}"
        )


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(settings: Settings, order_id: int) -> None:
    """Show details of an existing order."""

    async def use_case(session: Session) -> OrderDTO | None:
        try:
            return ShowOrderHandler(session.state).handle(order_id)
        except NotFoundError:
            return None

    dto = run_in_session(settings, use_case)
    if dto is None:
        click.echo(f"Order #{order_id} not found.")
        return
    _display_order(dto)


@click.command("print")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to print.")
@click.pass_obj
def order_print(settings: Settings, order_id: int) -> None:
    """Print the receipt of an existing order."""

    async def use_case(session: Session) -> None:
        _print_receipt(session, order_id)

    run_in_session(settings, use_case)
