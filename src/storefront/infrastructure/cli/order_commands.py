"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.dto import OrderDTO
from storefront.domain.model.order import PROMOTED_MARKER
from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.common import parse_ids, unwrap


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.id}")
    click.echo(f"Customer:  {dto.customer_name}")
    click.echo(f"Promotion: {dto.promotion or '-'}")
    click.echo()
    click.echo(f"  {'ID':<6} {'Product':<20} {'Value':>10}")
    click.echo(f"  {'-'*38}")
    for line in dto.lines:
        marker = PROMOTED_MARKER if line.promoted else ""
        click.echo(f"  {line.product_id:<6} {line.product_name:<20} {line.value:>10}{marker}")
    click.echo(f"  {'-'*38}")
    click.echo(f"  {'Subtotal':<27} {dto.subtotal:>10}")
    click.echo(f"  {'Discount':<27} {dto.discount:>10}")
    click.echo(f"  {'Order Total':<27} {dto.total:>10}")


@click.command("create")
@click.option("--customer", "customer_id", required=True, type=int, help="Customer ID.")
@click.option("--products", required=True, help="Product IDs as '1,2,3'.")
@click.option("--promotion", "promotion_id", type=int, default=None, help="Promotion ID to apply.")
@click.pass_obj
def order_create(
    repos: bootstrap.Repositories,
    customer_id: int,
    products: str,
    promotion_id: int | None,
) -> None:
    """Create a new order."""
    handler = bootstrap.create_order_handler(repos)
    order_id = unwrap(handler.handle(customer_id, parse_ids(products), promotion_id))

    click.echo(f"Order #{order_id} created")
    _display_order(unwrap(bootstrap.show_order_handler(repos).handle(order_id)))


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(repos: bootstrap.Repositories, order_id: int) -> None:
    """Show details of an existing order."""
    _display_order(unwrap(bootstrap.show_order_handler(repos).handle(order_id)))


@click.command("print")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to print.")
@click.pass_obj
def order_print(repos: bootstrap.Repositories, order_id: int) -> None:
    """Print the plain-text summary of an order."""
    click.echo(unwrap(bootstrap.order_service(repos).print(order_id)), nl=False)


@click.command("list")
@click.pass_obj
def order_list(repos: bootstrap.Repositories) -> None:
    """List all orders."""
    orders = bootstrap.order_service(repos).list_all()
    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Customer':<20} {'Items':>5} {'Total':>12}")
    click.echo("-" * 46)
    for o in orders:
        click.echo(f"{o.id:<6} {o.customer.name:<20} {len(o.products):>5} {str(o.total):>12}")


@click.command("add-products")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--products", required=True, help="Product IDs as '1,2,3'.")
@click.pass_obj
def order_add_products(repos: bootstrap.Repositories, order_id: int, products: str) -> None:
    """Add catalog products to an order."""
    unwrap(bootstrap.add_products_handler(repos).handle(order_id, parse_ids(products)))
    click.echo(f"Products added to order #{order_id}.")


@click.command("remove-products")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--products", required=True, help="Product IDs as '1,2,3'.")
@click.pass_obj
def order_remove_products(repos: bootstrap.Repositories, order_id: int, products: str) -> None:
    """Remove every listed product from an order."""
    handler = bootstrap.remove_products_handler(repos)
    removed = unwrap(handler.handle(order_id, parse_ids(products)))
    click.echo(f"{removed} product(s) removed from order #{order_id}.")


@click.command("remove-product")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def order_remove_product(repos: bootstrap.Repositories, order_id: int, product_id: int) -> None:
    """Remove one catalog product from an order."""
    removed = unwrap(bootstrap.remove_product_handler(repos).handle(order_id, product_id))
    click.echo(f"{removed} product(s) removed from order #{order_id}.")


@click.command("apply-promotion")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--promotion", "promotion_id", required=True, type=int, help="Promotion ID.")
@click.pass_obj
def order_apply_promotion(repos: bootstrap.Repositories, order_id: int, promotion_id: int) -> None:
    """Attach a promotion to an order."""
    discount = unwrap(bootstrap.apply_promotion_handler(repos).handle(order_id, promotion_id))
    click.echo(f"Promotion #{promotion_id} applied to order #{order_id}: discount {discount}")


@click.command("delete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to delete.")
@click.pass_obj
def order_delete(repos: bootstrap.Repositories, order_id: int) -> None:
    """Delete an order."""
    unwrap(bootstrap.order_service(repos).delete(order_id))
    click.echo(f"Order #{order_id} deleted.")
