"""Abstract repository for photo blobs.

A blob is referenced by the name it was stored under. The repository
never knows which item owns a blob; keeping references consistent is
the job of the application layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from inventory_service.domain.model.value_objects import PhotoUpload


class PhotoRepository(ABC):

    @abstractmethod
    def put(self, upload: PhotoUpload) -> str:
        """Store a new blob and return its reference."""

    def replace(self, old_ref: str | None, upload: PhotoUpload) -> str:
        """Store ``upload`` then drop ``old_ref``.

        The new blob is written first so a failed write leaves the old
        one untouched. Removing the old blob tolerates its absence.
        """
        new_ref = self.put(upload)
        if old_ref is not None and old_ref != new_ref:
            self.delete(old_ref)
        return new_ref

    @abstractmethod
    def delete(self, ref: str) -> None:
        """Remove a blob. Deleting a missing blob is not an error."""

    @abstractmethod
    def resolve(self, ref: str) -> Path:
        """Return the path of an existing blob.

        Raises EntityNotFoundError if the blob is gone.
        """
