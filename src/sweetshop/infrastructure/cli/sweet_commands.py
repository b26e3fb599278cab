"""CLI commands for the Sweet catalogue."""

from __future__ import annotations

import click

from sweetshop.application.add_sweet import AddSweetHandler
from sweetshop.application.delete_sweet import DeleteSweetHandler
from sweetshop.application.dto import SweetDTO
from sweetshop.application.search_sweets import SearchSweetsHandler
from sweetshop.application.show_sweets import ListSweetsHandler, ShowSweetHandler
from sweetshop.domain.exceptions import DomainException
from sweetshop.domain.repository.sweet_repository import SweetRepository
from sweetshop.infrastructure.cli.errors import cli_error


def display_sweets(sweets: list[SweetDTO]) -> None:
    """Shared table formatting for lists of sweets."""
    click.echo(f"{'ID':<6} {'Name':<24} {'Category':<14} {'Price':>8} {'Qty':>6}")
    click.echo("-" * 62)
    for s in sweets:
        click.echo(
            f"{s.id:<6} {s.name:<24} {s.category:<14} {s.price:>8} {s.quantity:>6}"
        )


def display_sweet(dto: SweetDTO) -> None:
    stock = f"{dto.quantity} in stock" if dto.in_stock else "out of stock"
    click.echo(f"Sweet #{dto.id}  {dto.name}")
    click.echo(f"Category: {dto.category}")
    click.echo(f"Price:    {dto.price}")
    click.echo(f"Stock:    {stock}")


@click.command("list")
@click.pass_obj
def sweet_list(repo: SweetRepository) -> None:
    """List all sweets in the catalogue."""
    sweets = ListSweetsHandler(sweet_repo=repo).handle()
    if not sweets:
        click.echo("No sweets found.")
        return
    display_sweets(sweets)


@click.command("show")
@click.option("--id", "sweet_id", required=True, type=int, help="Sweet ID to display.")
@click.pass_obj
def sweet_show(repo: SweetRepository, sweet_id: int) -> None:
    """Show details of a single sweet."""
    handler = ShowSweetHandler(sweet_repo=repo)
    try:
        dto = handler.handle(sweet_id)
    except DomainException as exc:
        raise cli_error(exc)
    display_sweet(dto)


@click.command("add")
@click.option("--id", "sweet_id", type=int, default=None, help="Explicit ID (auto-assigned if omitted).")
@click.option("--name", required=True, help="Sweet name.")
@click.option("--category", required=True, help="Category, e.g. chocolate.")
@click.option("--price", required=True, type=float, help="Unit price (e.g. 4.99).")
@click.option("--quantity", default=0, show_default=True, type=int, help="Initial stock.")
@click.pass_obj
def sweet_add(
    repo: SweetRepository,
    sweet_id: int | None,
    name: str,
    category: str,
    price: float,
    quantity: int,
) -> None:
    """Add a sweet to the catalogue."""
    handler = AddSweetHandler(sweet_repo=repo)
    try:
        dto = handler.handle(
            name=name, category=category, price=price,
            quantity=quantity, sweet_id=sweet_id,
        )
    except DomainException as exc:
        raise cli_error(exc)
    click.echo(f"Sweet #{dto.id} '{dto.name}' added at {dto.price}")


@click.command("delete")
@click.option("--id", "sweet_id", required=True, type=int, help="Sweet ID to delete.")
@click.pass_obj
def sweet_delete(repo: SweetRepository, sweet_id: int) -> None:
    """Remove a sweet from the catalogue."""
    handler = DeleteSweetHandler(sweet_repo=repo)
    try:
        handler.handle(sweet_id)
    except DomainException as exc:
        raise cli_error(exc)
    click.echo(f"Sweet #{sweet_id} deleted.")


@click.command("search")
@click.option("--name", default=None, help="Name contains (case-insensitive).")
@click.option("--category", default=None, help="Category contains (case-insensitive).")
@click.option("--min-price", type=float, default=None, help="Lowest price, inclusive.")
@click.option("--max-price", type=float, default=None, help="Highest price, inclusive.")
@click.pass_obj
def sweet_search(
    repo: SweetRepository,
    name: str | None,
    category: str | None,
    min_price: float | None,
    max_price: float | None,
) -> None:
    """Search sweets; all given criteria must match."""
    handler = SearchSweetsHandler(sweet_repo=repo)
    try:
        results = handler.handle({
            "name": name,
            "category": category,
            "min_price": min_price,
            "max_price": max_price,
        })
    except DomainException as exc:
        raise cli_error(exc)
    if not results:
        click.echo("No matching sweets.")
        return
    display_sweets(results)
