"""Application service: Register Item use case.

Stores the optional photo first, then the item document. The two writes
are not atomic together, so if the document cannot be written the blob
that was just stored is deleted again before the error propagates.
"""

from __future__ import annotations

import logging

from inventory_service.application.dto import ItemDTO
from inventory_service.domain.model.item import InventoryItem
from inventory_service.domain.model.value_objects import PhotoUpload
from inventory_service.domain.repository.item_repository import ItemRepository
from inventory_service.domain.repository.photo_repository import PhotoRepository
from inventory_service.domain.service.id_generator import IdGenerator

logger = logging.getLogger(__name__)


class RegisterItemHandler:

    def __init__(
        self,
        item_repo: ItemRepository,
        photo_repo: PhotoRepository,
        id_generator: IdGenerator,
    ) -> None:
        self._item_repo = item_repo
        self._photo_repo = photo_repo
        self._id_generator = id_generator

    def handle(
        self,
        name: str | None,
        description: str | None = None,
        photo: PhotoUpload | None = None,
    ) -> ItemDTO:
        """Register a new item.

        Steps:
        1. Validate the fields (nothing touches the disk before this).
        2. Allocate an id that is not already on disk.
        3. Store the photo, if any.
        4. Persist the document, rolling back the photo on failure.
        """
        item = InventoryItem.register(self._allocate_id(), name, description)

        if photo is not None:
            item.attach_photo(self._photo_repo.put(photo))

        try:
            self._item_repo.save(item)
        except Exception:
            if item.photo_ref is not None:
                self._rollback_photo(item)
            raise

        logger.info("Registered item %s (%r)", item.id, item.name)
        return ItemDTO.from_item(item)

    def _allocate_id(self) -> str:
        item_id = self._id_generator.new_id()
        while self._item_repo.exists(item_id):
            item_id = self._id_generator.new_id()
        return item_id

    def _rollback_photo(self, item: InventoryItem) -> None:
        try:
            self._photo_repo.delete(item.photo_ref)
        except Exception:
            logger.warning(
                "Could not remove photo %s after failing to save item %s",
                item.photo_ref,
                item.id,
                exc_info=True,
            )
