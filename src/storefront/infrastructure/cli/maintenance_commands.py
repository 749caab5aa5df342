"""CLI commands for store maintenance: seeding and health."""

from __future__ import annotations

import click

from storefront.application.health import HealthStatus
from storefront.infrastructure import bootstrap


@click.command("seed")
@click.pass_obj
def seed(repos: bootstrap.Repositories) -> None:
    """Fill empty stores with sample customers, products and promotions."""
    summary = bootstrap.seed_catalog_handler(repos).handle()
    click.echo(
        f"Seeded {summary.customers} customer(s), {summary.products} product(s), "
        f"{summary.promotions} promotion(s)."
    )


@click.command("health")
@click.pass_obj
def health(repos: bootstrap.Repositories) -> None:
    """Report whether the stores are usable."""
    report = bootstrap.health_check_handler(repos).handle()
    click.echo(f"{report.status.value}: {report.message}")
    if report.status == HealthStatus.UNHEALTHY:
        raise click.exceptions.Exit(1)
