import click

from inventory_service.infrastructure.cli.item_commands import item_list, item_remove, item_show
from inventory_service.infrastructure.cli.serve_command import serve


@click.group()
@click.version_option("1.0.0", prog_name="inventory-service")
def cli() -> None:
    """Inventory Service: items with photos stored in a cache directory"""


@cli.group()
def item() -> None:
    """Inspect and manage stored items."""


# Register subcommands
cli.add_command(serve)
item.add_command(item_list)
item.add_command(item_remove)
item.add_command(item_show)
