"""CLI commands that price carts."""

from __future__ import annotations

import asyncio
import json

import click

from checkout.application.dto import ReceiptDTO
from checkout.application.price_cart import PriceCartHandler
from checkout.application.run_scenarios import RunScenariosHandler
from checkout.domain.exceptions import DomainException
from checkout.infrastructure.bootstrap import product_lookup, promotion_lookup
from checkout.infrastructure.config import Settings


def _display_receipt(dto: ReceiptDTO) -> None:
    """Shared formatting for displaying a receipt."""
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Cost':>10}")
    click.echo(f"  {'-'*47}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_name:<20} {line.quantity:>5} {line.unit_price:>10} {line.cost:>10}"
        )
        for description in line.promotions:
            click.echo(f"    * {description}")
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Total':<27} {dto.total:>20}")


@click.command("price")
@click.argument("skus", nargs=-1, required=True)
@click.pass_obj
def price(settings: Settings, skus: tuple[str, ...]) -> None:
    """Scan SKUS in order and print the receipt."""
    handler = PriceCartHandler(
        product_lookup=product_lookup(settings),
        promotion_lookup=promotion_lookup(settings),
    )

    try:
        dto = asyncio.run(handler.handle(list(skus)))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart {dto.cart_id}")
    click.echo()
    _display_receipt(dto)


@click.command("demo")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print results as JSON.")
@click.pass_obj
def demo(settings: Settings, as_json: bool) -> None:
    """Run the fixed demonstration scenarios."""
    handler = RunScenariosHandler(
        product_lookup=product_lookup(settings),
        promotion_lookup=promotion_lookup(settings),
    )

    try:
        results = asyncio.run(handler.handle())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for result in results:
        if as_json:
            payload = {
                "description": result.description,
                "totalCost": float(result.receipt.total_amount),
                "asExpectation": result.as_expected,
                "receipt": [
                    {
                        "product": line.product_name,
                        "quantity": line.quantity,
                        "promotions": line.promotions,
                        "finalCost": line.cost,
                    }
                    for line in result.receipt.lines
                ],
            }
            click.echo(json.dumps(payload, indent=2))
        else:
            status = "OK" if result.as_expected else "MISMATCH"
            click.echo(f"{result.description}  [{status}]")
            _display_receipt(result.receipt)
        click.echo("\n----\n")
