import click

from checkout.domain.exceptions import DomainException
from checkout.infrastructure.cli.cart_commands import demo, price
from checkout.infrastructure.cli.catalog_commands import catalog
from checkout.infrastructure.config import LOG_LEVELS, Settings, configure_logging


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (overrides CHECKOUT_LOG_LEVEL).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Checkout: cart pricing with promotions"""
    try:
        settings = Settings.from_env(log_level=log_level)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    configure_logging(settings.log_level)
    ctx.obj = settings


# Register subcommands
cli.add_command(price)
cli.add_command(demo)
cli.add_command(catalog)
