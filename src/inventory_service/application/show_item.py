"""Application service: Show Item use case (query)."""

from __future__ import annotations

from inventory_service.application.dto import ItemDTO
from inventory_service.domain.repository.item_repository import ItemRepository


class ShowItemHandler:

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def handle(self, item_id: str) -> ItemDTO:
        return ItemDTO.from_item(self._item_repo.get_by_id(item_id))
