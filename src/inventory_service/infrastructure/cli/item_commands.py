"""CLI commands for stored items."""

from __future__ import annotations

import click

from inventory_service.application.delete_item import DeleteItemHandler
from inventory_service.application.list_items import ListItemsHandler
from inventory_service.application.show_item import ShowItemHandler
from inventory_service.domain.exceptions import DomainException
from inventory_service.infrastructure.bootstrap import open_storage
from inventory_service.infrastructure.cli.options import cache_option
from inventory_service.infrastructure.config import Settings


def _storage(cache_dir: str):
    return open_storage(Settings.from_env(cache_dir=cache_dir))


@click.command("list")
@cache_option
def item_list(cache_dir: str) -> None:
    """List all readable items."""
    try:
        items = ListItemsHandler(_storage(cache_dir).items).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not items:
        click.echo("No items found.")
        return

    click.echo(f"{'ID':<28} {'Name':<24} {'Photo':<5}")
    click.echo("-" * 59)
    for dto in items:
        click.echo(f"{dto.id:<28} {dto.name:<24} {'yes' if dto.photo_url else 'no':<5}")


@click.command("show")
@cache_option
@click.option("--id", "item_id", required=True, help="Item ID.")
def item_show(cache_dir: str, item_id: str) -> None:
    """Show a single item."""
    try:
        dto = ShowItemHandler(_storage(cache_dir).items).handle(item_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item #{dto.id}")
    click.echo(f"  Name:        {dto.name}")
    click.echo(f"  Description: {dto.description or '-'}")
    click.echo(f"  Photo:       {dto.photo_url or '-'}")


@click.command("remove")
@cache_option
@click.option("--id", "item_id", required=True, help="Item ID.")
def item_remove(cache_dir: str, item_id: str) -> None:
    """Delete an item and its photo."""
    storage = _storage(cache_dir)
    handler = DeleteItemHandler(storage.items, storage.photos, storage.locks)

    try:
        handler.handle(item_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item #{item_id} deleted")
