"""Filesystem-backed implementation of PhotoRepository.

Blobs live in a single directory, named
``<field tag>-<epoch millis>-<random>.<ext>``. The directory is created
on the first write.
"""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable
from pathlib import Path

from inventory_service.domain.exceptions import EntityNotFoundError, StorageError
from inventory_service.domain.model.value_objects import PhotoUpload
from inventory_service.domain.repository.photo_repository import PhotoRepository
from inventory_service.infrastructure.persistence.atomic_file import (
    is_safe_name,
    write_atomic,
)

logger = logging.getLogger(__name__)


class FilePhotoRepository(PhotoRepository):

    def __init__(self, root: Path, clock: Callable[[], float] = time.time) -> None:
        self._root = root
        self._clock = clock
        self._random = random.SystemRandom()

    @property
    def root(self) -> Path:
        return self._root

    # --- PhotoRepository interface --------------------------------------------

    def put(self, upload: PhotoUpload) -> str:
        try:
            self._root.mkdir(parents=True, exist_ok=True)
            ref = self._new_name(upload)
            while (self._root / ref).exists():
                ref = self._new_name(upload)
            write_atomic(self._root / ref, bytes(upload.content))
        except OSError as exc:
            raise StorageError(f"Could not store photo {upload}: {exc}") from exc
        logger.debug("Stored photo %s (%d bytes)", ref, upload.size)
        return ref

    def delete(self, ref: str) -> None:
        if not is_safe_name(ref):
            return
        try:
            (self._root / ref).unlink()
        except FileNotFoundError:
            logger.debug("Photo %s already gone", ref)
        except OSError as exc:
            raise StorageError(f"Could not delete photo {ref}: {exc}") from exc

    def resolve(self, ref: str) -> Path:
        path = self._root / ref if is_safe_name(ref) else None
        if path is None or not path.is_file():
            raise EntityNotFoundError(f"Photo {ref} not found")
        return path

    # --- Naming ---------------------------------------------------------------

    def _new_name(self, upload: PhotoUpload) -> str:
        millis = int(self._clock() * 1000)
        disambiguator = self._random.randint(0, 10**9)
        return f"{upload.field_tag}-{millis}-{disambiguator}{upload.extension}"
