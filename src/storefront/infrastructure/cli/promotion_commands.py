"""CLI commands for promotions."""

from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException
from storefront.domain.model.promotion import Promotion, PromotionType
from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.common import unwrap

_TYPES = [t.value.lower() for t in PromotionType]


def _build(
    promotion_id: int | None,
    promotion_type: str,
    target: int | None,
    discount: int,
    description: str,
) -> Promotion:
    try:
        return Promotion(
            id=promotion_id,
            type=PromotionType(promotion_type.upper()),
            target_id=target,
            discount_percentage=discount,
            description=description,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))


@click.command("add")
@click.option("--type", "promotion_type", required=True, type=click.Choice(_TYPES), help="Discount scope.")
@click.option("--target", type=int, default=None, help="Target product ID (product promotions).")
@click.option("--discount", required=True, type=int, help="Discount percentage (1-100).")
@click.option("--description", default="", help="Short description.")
@click.pass_obj
def promotion_add(
    repos: bootstrap.Repositories,
    promotion_type: str,
    target: int | None,
    discount: int,
    description: str,
) -> None:
    """Create a promotion."""
    promotion = _build(None, promotion_type, target, discount, description)
    promotion_id = unwrap(bootstrap.promotion_service(repos).add(promotion))
    click.echo(f"Promotion #{promotion_id} added: {promotion}")


@click.command("list")
@click.pass_obj
def promotion_list(repos: bootstrap.Repositories) -> None:
    """List all promotions."""
    promotions = bootstrap.promotion_service(repos).list_all()
    if not promotions:
        click.echo("No promotions found.")
        return

    click.echo(f"{'ID':<6} {'Type':<8} {'Target':>6} {'Discount':>9}  Description")
    click.echo("-" * 60)
    for p in promotions:
        target = p.target_id if p.has_target else "-"
        click.echo(
            f"{p.id:<6} {p.type.value:<8} {target:>6} {p.discount_percentage:>8}%  {p.description}"
        )


@click.command("show")
@click.option("--id", "promotion_id", required=True, type=int, help="Promotion ID.")
@click.pass_obj
def promotion_show(repos: bootstrap.Repositories, promotion_id: int) -> None:
    """Show one promotion."""
    click.echo(unwrap(bootstrap.promotion_service(repos).print(promotion_id)))


@click.command("update")
@click.option("--id", "promotion_id", required=True, type=int, help="Promotion ID.")
@click.option("--type", "promotion_type", required=True, type=click.Choice(_TYPES), help="Discount scope.")
@click.option("--target", type=int, default=None, help="Target product ID (product promotions).")
@click.option("--discount", required=True, type=int, help="Discount percentage (1-100).")
@click.option("--description", default="", help="Short description.")
@click.pass_obj
def promotion_update(
    repos: bootstrap.Repositories,
    promotion_id: int,
    promotion_type: str,
    target: int | None,
    discount: int,
    description: str,
) -> None:
    """Replace a promotion's terms."""
    promotion = _build(promotion_id, promotion_type, target, discount, description)
    unwrap(bootstrap.promotion_service(repos).update(promotion))
    click.echo(f"Promotion #{promotion_id} updated: {promotion}")


@click.command("delete")
@click.option("--id", "promotion_id", required=True, type=int, help="Promotion ID.")
@click.pass_obj
def promotion_delete(repos: bootstrap.Repositories, promotion_id: int) -> None:
    """Delete a promotion."""
    unwrap(bootstrap.promotion_service(repos).delete(promotion_id))
    click.echo(f"Promotion #{promotion_id} deleted.")
