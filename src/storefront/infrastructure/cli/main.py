import click

from storefront.domain.exceptions import RepositoryError
from storefront.infrastructure import bootstrap
from storefront.infrastructure.cli.customer_commands import (
    customer_add,
    customer_delete,
    customer_list,
    customer_show,
    customer_update,
)
from storefront.infrastructure.cli.maintenance_commands import health, seed
from storefront.infrastructure.cli.order_commands import (
    order_add_products,
    order_apply_promotion,
    order_create,
    order_delete,
    order_list,
    order_print,
    order_remove_product,
    order_remove_products,
    order_show,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from storefront.infrastructure.cli.promotion_commands import (
    promotion_add,
    promotion_delete,
    promotion_list,
    promotion_show,
    promotion_update,
)
from storefront.infrastructure.settings import Settings, configure_logging


class StorefrontGroup(click.Group):
    """Reports storage failures from any subcommand as CLI errors."""

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except RepositoryError as exc:
            raise click.ClickException(str(exc)) from exc


@click.group(cls=StorefrontGroup)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Storefront: customers, products, promotions and orders"""
    try:
        settings = Settings.from_env()
    except ValueError as exc:
        raise click.ClickException(str(exc))

    configure_logging("DEBUG" if verbose else settings.log_level)

    # Tests inject their own repositories through ``obj``.
    if ctx.obj is None:
        ctx.obj = bootstrap.repositories(settings)


@cli.group()
def customer() -> None:
    """Manage customers."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def promotion() -> None:
    """Manage promotions."""


@cli.group()
def order() -> None:
    """Manage orders."""


# Register subcommands
customer.add_command(customer_add)
customer.add_command(customer_delete)
customer.add_command(customer_list)
customer.add_command(customer_show)
customer.add_command(customer_update)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
promotion.add_command(promotion_add)
promotion.add_command(promotion_delete)
promotion.add_command(promotion_list)
promotion.add_command(promotion_show)
promotion.add_command(promotion_update)
order.add_command(order_add_products)
order.add_command(order_apply_promotion)
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_list)
order.add_command(order_print)
order.add_command(order_remove_product)
order.add_command(order_remove_products)
order.add_command(order_show)
cli.add_command(health)
cli.add_command(seed)
