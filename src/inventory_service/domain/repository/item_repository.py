"""Abstract repository for the InventoryItem aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON files, in-memory)
live in the infrastructure layer and the test suite.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

from inventory_service.domain.model.item import InventoryItem


class ItemRepository(ABC):

    @abstractmethod
    def get_by_id(self, item_id: str) -> InventoryItem:
        """Return an item by its ID.

        Raises EntityNotFoundError if absent, CorruptRecordError if the
        stored document cannot be parsed.
        """

    @abstractmethod
    def exists(self, item_id: str) -> bool:
        """Return True if a document is stored under ``item_id``."""

    @abstractmethod
    def iter_all(self) -> Iterator[InventoryItem]:
        """Yield every readable item, skipping entries that fail to load."""

    def list_all(self) -> list[InventoryItem]:
        """Return every readable item."""
        return list(self.iter_all())

    @abstractmethod
    def save(self, item: InventoryItem) -> None:
        """Persist a new or updated item, replacing the whole document."""

    @abstractmethod
    def delete(self, item_id: str) -> None:
        """Remove the document. Raises EntityNotFoundError if absent."""
