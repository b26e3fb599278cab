from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import click

from sweetshop.domain.exceptions import DomainException
from sweetshop.infrastructure.bootstrap import sweet_repository
from sweetshop.infrastructure.cli.errors import cli_error
from sweetshop.infrastructure.cli.stock_commands import stock_purchase, stock_restock
from sweetshop.infrastructure.cli.sweet_commands import (
    sweet_add,
    sweet_delete,
    sweet_list,
    sweet_search,
    sweet_show,
)
from sweetshop.infrastructure.config import Settings, configure_logging


@click.group()
@click.option(
    "--catalog",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON catalogue to seed the store from.",
)
@click.option("--log-level", default=None, help="Logging level (e.g. INFO, DEBUG).")
@click.pass_context
def cli(ctx: click.Context, catalog: Path | None, log_level: str | None) -> None:
    """Sweet Shop — catalogue and stock management"""
    settings = Settings.from_env()
    if catalog is not None:
        settings = replace(settings, catalog_path=catalog)
    if log_level is not None:
        settings = replace(settings, log_level=log_level.upper())
    try:
        configure_logging(settings.log_level)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--log-level")
    try:
        ctx.obj = sweet_repository(settings)
    except DomainException as exc:
        raise cli_error(exc)
    except (OSError, ValueError) as exc:
        raise click.ClickException(f"Cannot load catalogue: {exc}")


@cli.group()
def sweet() -> None:
    """Manage the sweet catalogue."""


@cli.group()
def stock() -> None:
    """Purchase and restock sweets."""


# Register subcommands
sweet.add_command(sweet_add)
sweet.add_command(sweet_delete)
sweet.add_command(sweet_list)
sweet.add_command(sweet_search)
sweet.add_command(sweet_show)

stock.add_command(stock_purchase)
stock.add_command(stock_restock)
