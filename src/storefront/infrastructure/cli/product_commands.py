"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.common import unwrap


def _money(raw: str) -> Money:
    try:
        return Money.of(raw)
    except DomainException as exc:
        raise click.BadParameter(str(exc))


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--value", required=True, help="Price (e.g. 15.00).")
@click.pass_obj
def product_add(repos: bootstrap.Repositories, name: str, value: str) -> None:
    """Add a new product to the catalog."""
    product = Product(id=None, name=name.strip(), value=_money(value))
    product_id = unwrap(bootstrap.product_service(repos).add(product))
    click.echo(f"Product #{product_id} '{product.name}' added at {product.value}")


@click.command("list")
@click.pass_obj
def product_list(repos: bootstrap.Repositories) -> None:
    """List all products in the catalog."""
    products = bootstrap.product_service(repos).list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Value':>10}")
    click.echo("-" * 38)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {str(p.value):>10}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_show(repos: bootstrap.Repositories, product_id: int) -> None:
    """Show one product."""
    click.echo(unwrap(bootstrap.product_service(repos).print(product_id)))


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--value", default=None, help="New price (e.g. 29.99).")
@click.pass_obj
def product_update(
    repos: bootstrap.Repositories,
    product_id: int,
    name: str | None,
    value: str | None,
) -> None:
    """Update a product's name and/or price.

    Orders already holding the product keep the version they were built with.
    """
    service = bootstrap.product_service(repos)
    current = unwrap(service.get(product_id))
    updated = Product(
        id=product_id,
        name=name.strip() if name is not None else current.name,
        value=_money(value) if value is not None else current.value,
    )
    unwrap(service.update(updated))
    click.echo(f"Product #{product_id} updated: {updated.name} at {updated.value}")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_delete(repos: bootstrap.Repositories, product_id: int) -> None:
    """Remove a product from the catalog."""
    unwrap(bootstrap.product_service(repos).delete(product_id))
    click.echo(f"Product #{product_id} deleted.")
