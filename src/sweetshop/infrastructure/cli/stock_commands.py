"""CLI commands for stock transitions."""

from __future__ import annotations

import click

from sweetshop.application.adjust_stock import PurchaseSweetHandler, RestockSweetHandler
from sweetshop.domain.exceptions import DomainException
from sweetshop.domain.repository.sweet_repository import SweetRepository
from sweetshop.infrastructure.cli.errors import cli_error


@click.command("purchase")
@click.option("--id", "sweet_id", required=True, type=int, help="Sweet ID.")
@click.option("--quantity", required=True, type=int, help="Units to buy.")
@click.pass_obj
def stock_purchase(repo: SweetRepository, sweet_id: int, quantity: int) -> None:
    """Buy units of a sweet (decreases stock)."""
    handler = PurchaseSweetHandler(sweet_repo=repo)
    try:
        dto = handler.handle(sweet_id, quantity)
    except DomainException as exc:
        raise cli_error(exc)
    click.echo(f"Purchased {quantity} x {dto.name} — {dto.quantity} left in stock.")


@click.command("restock")
@click.option("--id", "sweet_id", required=True, type=int, help="Sweet ID.")
@click.option("--quantity", required=True, type=int, help="Units to add.")
@click.pass_obj
def stock_restock(repo: SweetRepository, sweet_id: int, quantity: int) -> None:
    """Add units of a sweet to stock."""
    handler = RestockSweetHandler(sweet_repo=repo)
    try:
        dto = handler.handle(sweet_id, quantity)
    except DomainException as exc:
        raise cli_error(exc)
    click.echo(f"Restocked {dto.name} — {dto.quantity} in stock.")
