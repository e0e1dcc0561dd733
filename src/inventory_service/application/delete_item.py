"""Application service: Delete Item use case.

The document is the primary resource: once it is gone the delete has
succeeded. A photo that cannot be removed afterwards is logged as an
orphan instead of failing the request.
"""

from __future__ import annotations

import logging

from inventory_service.application.item_locks import ItemLocks
from inventory_service.domain.repository.item_repository import ItemRepository
from inventory_service.domain.repository.photo_repository import PhotoRepository

logger = logging.getLogger(__name__)


class DeleteItemHandler:

    def __init__(
        self,
        item_repo: ItemRepository,
        photo_repo: PhotoRepository,
        locks: ItemLocks,
    ) -> None:
        self._item_repo = item_repo
        self._photo_repo = photo_repo
        self._locks = locks

    def handle(self, item_id: str) -> None:
        with self._locks.hold(item_id):
            item = self._item_repo.get_by_id(item_id)
            self._item_repo.delete(item_id)

            if item.photo_ref is not None:
                try:
                    self._photo_repo.delete(item.photo_ref)
                except Exception:
                    logger.warning(
                        "Item %s deleted but its photo %s could not be removed",
                        item_id,
                        item.photo_ref,
                        exc_info=True,
                    )

        logger.info("Deleted item %s", item_id)
