"""Options shared by several commands."""

from __future__ import annotations

import click

cache_option = click.option(
    "-c",
    "--cache",
    "cache_dir",
    required=True,
    envvar="INVENTORY_CACHE_DIR",
    type=click.Path(file_okay=False),
    help="Cache directory holding item documents and photos.",
)
