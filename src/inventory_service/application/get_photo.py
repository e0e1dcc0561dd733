"""Application service: Get Photo use case (query).

An item whose document names a photo that no longer exists on disk is
reported as not found; the dangling reference is left as it is.
"""

from __future__ import annotations

import os

from inventory_service.application.dto import PhotoFileDTO
from inventory_service.domain.exceptions import EntityNotFoundError
from inventory_service.domain.repository.item_repository import ItemRepository
from inventory_service.domain.repository.photo_repository import PhotoRepository

EXT_TO_CONTENT_TYPE = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".bmp": "image/bmp",
    ".heic": "image/heic",
    ".heif": "image/heif",
    ".svg": "image/svg+xml",
    ".tif": "image/tiff",
    ".tiff": "image/tiff",
}
DEFAULT_CONTENT_TYPE = "application/octet-stream"


class GetPhotoHandler:

    def __init__(self, item_repo: ItemRepository, photo_repo: PhotoRepository) -> None:
        self._item_repo = item_repo
        self._photo_repo = photo_repo

    def handle(self, item_id: str) -> PhotoFileDTO:
        item = self._item_repo.get_by_id(item_id)
        if item.photo_ref is None:
            raise EntityNotFoundError(f"Item #{item_id} has no photo")

        path = self._photo_repo.resolve(item.photo_ref)
        return PhotoFileDTO(path=path, media_type=content_type_for(path.name))


def content_type_for(filename: str) -> str:
    ext = os.path.splitext(filename)[1].lower()
    return EXT_TO_CONTENT_TYPE.get(ext, DEFAULT_CONTENT_TYPE)
