"""CLI commands for customers."""

from __future__ import annotations

import click

from storefront.domain.model.customer import Customer
from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.common import unwrap


@click.command("add")
@click.option("--name", required=True, help="Customer name.")
@click.pass_obj
def customer_add(repos: bootstrap.Repositories, name: str) -> None:
    """Register a new customer."""
    service = bootstrap.customer_service(repos)
    customer_id = unwrap(service.add(Customer(id=None, name=name.strip())))
    click.echo(f"Customer #{customer_id} '{name.strip()}' added")


@click.command("list")
@click.pass_obj
def customer_list(repos: bootstrap.Repositories) -> None:
    """List all customers."""
    customers = bootstrap.customer_service(repos).list_all()
    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"{'ID':<6} {'Name':<30}")
    click.echo("-" * 37)
    for c in customers:
        click.echo(f"{c.id:<6} {c.name:<30}")


@click.command("show")
@click.option("--id", "customer_id", required=True, type=int, help="Customer ID.")
@click.pass_obj
def customer_show(repos: bootstrap.Repositories, customer_id: int) -> None:
    """Show one customer."""
    click.echo(unwrap(bootstrap.customer_service(repos).print(customer_id)))


@click.command("update")
@click.option("--id", "customer_id", required=True, type=int, help="Customer ID.")
@click.option("--name", required=True, help="New name.")
@click.pass_obj
def customer_update(repos: bootstrap.Repositories, customer_id: int, name: str) -> None:
    """Rename a customer."""
    service = bootstrap.customer_service(repos)
    unwrap(service.update(Customer(id=customer_id, name=name.strip())))
    click.echo(f"Customer #{customer_id} renamed to '{name.strip()}'")


@click.command("delete")
@click.option("--id", "customer_id", required=True, type=int, help="Customer ID.")
@click.pass_obj
def customer_delete(repos: bootstrap.Repositories, customer_id: int) -> None:
    """Delete a customer."""
    unwrap(bootstrap.customer_service(repos).delete(customer_id))
    click.echo(f"Customer #{customer_id} deleted.")
