"""Application service: Update Item use case.

Partial update of the mutable text fields. The whole read-modify-write
cycle runs while holding the item's lock, so concurrent updates of the
same item are applied one after the other and none is lost.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from inventory_service.application.dto import ItemDTO
from inventory_service.application.item_locks import ItemLocks
from inventory_service.domain.exceptions import ValidationError
from inventory_service.domain.repository.item_repository import ItemRepository

logger = logging.getLogger(__name__)


class UpdateItemHandler:

    def __init__(self, item_repo: ItemRepository, locks: ItemLocks) -> None:
        self._item_repo = item_repo
        self._locks = locks

    def handle(self, item_id: str, changes: Mapping | None) -> ItemDTO:
        """Apply ``changes`` to an item and return the current record.

        An empty body is rejected. A body containing only keys that are
        not mutable fields is accepted and leaves the item untouched.
        """
        if not changes:
            raise ValidationError("Update body cannot be empty")

        with self._locks.hold(item_id):
            item = self._item_repo.get_by_id(item_id)
            if item.apply_changes(dict(changes)):
                self._item_repo.save(item)
                logger.info("Updated item %s", item_id)
            else:
                logger.debug("Update of item %s changed nothing", item_id)

        return ItemDTO.from_item(item)
