"""Application service: Search Item use case (query).

Returns a projection of one item: the internal photo reference is never
exposed, and the photo URL only appears when the caller asked for it and
the item actually has a photo.
"""

from __future__ import annotations

from inventory_service.application.dto import ItemView
from inventory_service.domain.exceptions import ValidationError
from inventory_service.domain.repository.item_repository import ItemRepository

TRUTHY_FLAGS = frozenset({"on", "true", "1", "yes"})


class SearchItemHandler:

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def handle(self, item_id: str | None, include_photo: bool = False) -> ItemView:
        if not item_id or not item_id.strip():
            raise ValidationError("Item id is required")

        item = self._item_repo.get_by_id(item_id.strip())
        return ItemView(
            id=item.id,
            name=item.name,
            description=item.description,
            photo_url=item.photo_url if include_photo else None,
        )


def parse_flag(value) -> bool:
    """Interpret a checkbox-style form value ("on", "true", "1", ...)."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in TRUTHY_FLAGS
