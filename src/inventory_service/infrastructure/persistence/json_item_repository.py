"""JSON-file-backed implementation of ItemRepository.

One document per item, stored as ``<root>/<id>.json``. There is no index:
listing scans the directory and loads every document it finds.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path

from inventory_service.domain.exceptions import (
    CorruptRecordError,
    EntityNotFoundError,
    StorageError,
    ValidationError,
)
from inventory_service.domain.model.item import InventoryItem
from inventory_service.domain.repository.item_repository import ItemRepository
from inventory_service.infrastructure.persistence.atomic_file import (
    is_safe_name,
    write_atomic,
)

logger = logging.getLogger(__name__)

SUFFIX = ".json"


class JsonItemRepository(ItemRepository):

    def __init__(self, root: Path) -> None:
        self._root = root
        self._ensure_dir()

    @property
    def root(self) -> Path:
        return self._root

    # --- ItemRepository interface ---------------------------------------------

    def get_by_id(self, item_id: str) -> InventoryItem:
        path = self._path_for(item_id)
        if path is None:
            raise EntityNotFoundError(f"Item #{item_id} not found")
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise EntityNotFoundError(f"Item #{item_id} not found") from None
        except OSError as exc:
            raise StorageError(f"Could not read item #{item_id}: {exc}") from exc
        return self._parse(text, source=path)

    def exists(self, item_id: str) -> bool:
        path = self._path_for(item_id)
        return path is not None and path.is_file()

    def iter_all(self) -> Iterator[InventoryItem]:
        try:
            paths = sorted(p for p in self._root.iterdir() if p.suffix == SUFFIX)
        except FileNotFoundError:
            return
        except OSError as exc:
            raise StorageError(f"Could not list {self._root}: {exc}") from exc

        for path in paths:
            try:
                yield self._parse(path.read_text(encoding="utf-8"), source=path)
            except FileNotFoundError:
                # Deleted between listing and reading.
                continue
            except (OSError, CorruptRecordError) as exc:
                logger.warning("Skipping unreadable item file %s: %s", path.name, exc)

    def save(self, item: InventoryItem) -> None:
        path = self._path_for(item.id)
        if path is None:
            raise StorageError(f"Invalid item id {item.id!r}")
        data = json.dumps(self._to_raw(item), indent=2, ensure_ascii=False) + "\n"
        try:
            self._ensure_dir()
            write_atomic(path, data.encode("utf-8"))
        except OSError as exc:
            raise StorageError(f"Could not save item #{item.id}: {exc}") from exc

    def delete(self, item_id: str) -> None:
        path = self._path_for(item_id)
        if path is None:
            raise EntityNotFoundError(f"Item #{item_id} not found")
        try:
            path.unlink()
        except FileNotFoundError:
            raise EntityNotFoundError(f"Item #{item_id} not found") from None
        except OSError as exc:
            raise StorageError(f"Could not delete item #{item_id}: {exc}") from exc

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: InventoryItem) -> dict:
        return {
            "ID": item.id,
            "inventory_name": item.name,
            "description": item.description,
            "photo_path": item.photo_ref,
            "photo_url": item.photo_url,
        }

    @staticmethod
    def _to_domain(raw: dict) -> InventoryItem:
        # photo_url is derived from photo_path, never trusted from disk
        item_id = raw["ID"]
        if isinstance(item_id, bool) or not isinstance(item_id, (str, int)):
            raise TypeError(f"ID must be a string, got {type(item_id).__name__}")
        description = raw.get("description")
        if description is not None and not isinstance(description, str):
            raise TypeError(f"description must be a string, got {type(description).__name__}")
        photo_path = raw.get("photo_path")
        if photo_path is not None and not isinstance(photo_path, str):
            raise TypeError(f"photo_path must be a string, got {type(photo_path).__name__}")
        return InventoryItem(
            id=str(item_id),
            name=raw["inventory_name"],
            description=description or "",
            photo_ref=photo_path or None,
        )

    def _parse(self, text: str, source: Path) -> InventoryItem:
        """Load the document stored in ``source``, whose stem is its item id."""
        try:
            raw = json.loads(text)
            if not isinstance(raw, dict):
                raise TypeError(f"expected an object, got {type(raw).__name__}")
            item = self._to_domain(raw)
        except (ValueError, KeyError, TypeError, ValidationError) as exc:
            raise CorruptRecordError(f"Item file {source.name} is corrupt: {exc}") from exc
        if item.id != source.stem:
            raise CorruptRecordError(
                f"Item file {source.name} is corrupt: it claims ID {item.id!r}"
            )
        return item

    # --- File helpers ---------------------------------------------------------

    def _path_for(self, item_id: str) -> Path | None:
        if not isinstance(item_id, str) or not item_id or not is_safe_name(item_id + SUFFIX):
            return None
        return self._root / f"{item_id}{SUFFIX}"

    def _ensure_dir(self) -> None:
        self._root.mkdir(parents=True, exist_ok=True)
