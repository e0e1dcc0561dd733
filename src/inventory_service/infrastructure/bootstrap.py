"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions. The cache directory is
always passed in; there is no module-level data path.
"""

from __future__ import annotations

from dataclasses import dataclass

from inventory_service.application.item_locks import ItemLocks
from inventory_service.domain.repository.item_repository import ItemRepository
from inventory_service.domain.repository.photo_repository import PhotoRepository
from inventory_service.domain.service.id_generator import IdGenerator
from inventory_service.infrastructure.config import Settings
from inventory_service.infrastructure.persistence.file_photo_repository import (
    FilePhotoRepository,
)
from inventory_service.infrastructure.persistence.json_item_repository import (
    JsonItemRepository,
)


@dataclass(frozen=True)
class Storage:
    """Everything the use-case handlers need for one cache directory."""

    items: ItemRepository
    photos: PhotoRepository
    ids: IdGenerator
    locks: ItemLocks


def open_storage(settings: Settings) -> Storage:
    return Storage(
        items=JsonItemRepository(settings.cache_dir),
        photos=FilePhotoRepository(settings.photos_dir),
        ids=IdGenerator(),
        locks=ItemLocks(),
    )
