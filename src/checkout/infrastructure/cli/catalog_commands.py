"""CLI commands for browsing the catalog."""

from __future__ import annotations

import asyncio

import click

from checkout.application.list_catalog import ListCatalogHandler
from checkout.domain.exceptions import DomainException
from checkout.infrastructure.bootstrap import product_lookup, promotion_lookup
from checkout.infrastructure.config import Settings


@click.command("catalog")
@click.pass_obj
def catalog(settings: Settings) -> None:
    """List all products and their promotions."""
    handler = ListCatalogHandler(
        product_lookup=product_lookup(settings),
        promotion_lookup=promotion_lookup(settings),
    )

    try:
        entries = asyncio.run(handler.handle())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not entries:
        click.echo("No products found.")
        return

    click.echo(f"{'SKU':<6} {'Name':<20} {'Price':>10}")
    click.echo("-" * 38)
    for entry in entries:
        click.echo(f"{entry.sku:<6} {entry.name:<20} {entry.price:>10}")
        for description in entry.promotions:
            click.echo(f"       * {description}")
