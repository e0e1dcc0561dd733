"""Application service: List Items use case (query).

Listing is best effort: documents that cannot be read are skipped by
the repository and the remaining items are still returned.
"""

from __future__ import annotations

from inventory_service.application.dto import ItemDTO
from inventory_service.domain.repository.item_repository import ItemRepository


class ListItemsHandler:

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def handle(self) -> list[ItemDTO]:
        return [ItemDTO.from_item(item) for item in self._item_repo.iter_all()]
