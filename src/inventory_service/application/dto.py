"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the HTTP/CLI layers and the application layer
without exposing domain internals such as the stored photo reference.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from inventory_service.domain.model.item import InventoryItem


@dataclass(frozen=True)
class ItemDTO:
    """Output: an item as returned to clients."""

    id: str
    name: str
    description: str
    photo_url: str | None

    @staticmethod
    def from_item(item: InventoryItem) -> ItemDTO:
        return ItemDTO(
            id=item.id,
            name=item.name,
            description=item.description,
            photo_url=item.photo_url,
        )


@dataclass(frozen=True)
class ItemView:
    """Output: a projected item for lookup/search.

    ``photo_url`` is None when the caller did not ask for it or the item
    has no photo; the boundary omits the field entirely in that case.
    """

    id: str
    name: str
    description: str
    photo_url: str | None = None


@dataclass(frozen=True)
class PhotoFileDTO:
    """Output: where to stream a stored photo from."""

    path: Path
    media_type: str
