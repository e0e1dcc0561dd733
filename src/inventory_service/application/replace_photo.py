"""Application service: Replace Photo use case.

Order of operations:
1. Store the new blob (failure leaves everything as it was).
2. Save the item pointing at the new blob (failure removes the new blob).
3. Remove the old blob (failure only leaves an orphan, which is logged).
"""

from __future__ import annotations

import logging

from inventory_service.application.dto import ItemDTO
from inventory_service.application.item_locks import ItemLocks
from inventory_service.domain.exceptions import ValidationError
from inventory_service.domain.model.value_objects import PhotoUpload
from inventory_service.domain.repository.item_repository import ItemRepository
from inventory_service.domain.repository.photo_repository import PhotoRepository

logger = logging.getLogger(__name__)


class ReplacePhotoHandler:

    def __init__(
        self,
        item_repo: ItemRepository,
        photo_repo: PhotoRepository,
        locks: ItemLocks,
    ) -> None:
        self._item_repo = item_repo
        self._photo_repo = photo_repo
        self._locks = locks

    def handle(self, item_id: str, photo: PhotoUpload | None) -> ItemDTO:
        if photo is None:
            raise ValidationError("A photo file is required")

        with self._locks.hold(item_id):
            item = self._item_repo.get_by_id(item_id)
            new_ref = self._photo_repo.put(photo)
            old_ref = item.attach_photo(new_ref)

            try:
                self._item_repo.save(item)
            except Exception:
                self._discard(new_ref, item_id)
                raise

            if old_ref is not None and old_ref != new_ref:
                self._discard(old_ref, item_id)

        logger.info("Replaced photo of item %s", item_id)
        return ItemDTO.from_item(item)

    def _discard(self, ref: str, item_id: str) -> None:
        try:
            self._photo_repo.delete(ref)
        except Exception:
            logger.warning(
                "Orphaned photo %s of item %s could not be removed",
                ref,
                item_id,
                exc_info=True,
            )
