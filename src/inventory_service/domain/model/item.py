"""InventoryItem aggregate: one registered thing and its optional photo.

Each item is persisted as a standalone document keyed by its id. The
photo itself lives elsewhere (see PhotoRepository); the item only holds
a reference to the stored blob.
"""

from __future__ import annotations

from dataclasses import dataclass

from inventory_service.domain.exceptions import ValidationError

# Wire names of the fields a client may change after registration.
NAME_FIELD = "inventory_name"
DESCRIPTION_FIELD = "description"
MUTABLE_FIELDS = (NAME_FIELD, DESCRIPTION_FIELD)


@dataclass
class InventoryItem:
    """Aggregate root for a single inventory entry.

    Invariants:
    - ``id`` never changes once assigned
    - ``name`` is never empty
    - ``photo_url`` is present exactly when ``photo_ref`` is
    """

    id: str
    name: str
    description: str = ""
    photo_ref: str | None = None

    def __post_init__(self) -> None:
        self.name = _require_name(self.name)
        if self.description is None:
            self.description = ""

    @property
    def photo_url(self) -> str | None:
        if self.photo_ref is None:
            return None
        return f"/inventory/{self.id}/photo"

    @property
    def has_photo(self) -> bool:
        return self.photo_ref is not None

    @staticmethod
    def register(
        item_id: str, name: str | None, description: str | None = None
    ) -> InventoryItem:
        """Create a brand-new item, validating the client-supplied fields."""
        return InventoryItem(id=item_id, name=name or "", description=description or "")

    def apply_changes(self, changes: dict) -> bool:
        """Merge recognized mutable fields from ``changes``.

        Unknown keys are ignored. Returns True if anything was modified.
        """
        changed = False
        if NAME_FIELD in changes:
            new_name = _require_name(changes[NAME_FIELD])
            if new_name != self.name:
                self.name = new_name
                changed = True
        if DESCRIPTION_FIELD in changes:
            new_description = changes[DESCRIPTION_FIELD]
            new_description = "" if new_description is None else str(new_description)
            if new_description != self.description:
                self.description = new_description
                changed = True
        return changed

    def attach_photo(self, photo_ref: str) -> str | None:
        """Point the item at a new photo blob, returning the previous ref."""
        previous = self.photo_ref
        self.photo_ref = photo_ref
        return previous


def _require_name(name) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Item name (inventory_name) is required")
    return name
