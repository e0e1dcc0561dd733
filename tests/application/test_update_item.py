"""Integration tests for the UpdateItem use case."""

import threading
import time

import pytest

from inventory_service.application.item_locks import ItemLocks
from inventory_service.application.update_item import UpdateItemHandler
from inventory_service.domain.exceptions import EntityNotFoundError, ValidationError
from inventory_service.domain.model.item import InventoryItem
from tests.fakes import FakeItemRepository


def _setup():
    item_repo = FakeItemRepository([
        InventoryItem(id="1", name="Lamp", description="desk lamp"),
    ])
    return UpdateItemHandler(item_repo, ItemLocks()), item_repo


class TestUpdateItemFields:

    def test_description_only(self):
        handler, item_repo = _setup()
        dto = handler.handle("1", {"description": "floor lamp"})
        assert dto.name == "Lamp"
        assert dto.description == "floor lamp"
        assert item_repo.get_by_id("1").description == "floor lamp"

    def test_name_only(self):
        handler, item_repo = _setup()
        dto = handler.handle("1", {"inventory_name": "Big lamp"})
        assert dto.name == "Big lamp"
        assert dto.description == "desk lamp"

    def test_unrecognized_fields_leave_record_unchanged(self):
        handler, item_repo = _setup()
        dto = handler.handle("1", {"colour": "red"})
        assert dto.name == "Lamp"
        assert dto.description == "desk lamp"
        assert item_repo.saves == 0


class TestUpdateItemValidation:

    @pytest.mark.parametrize("changes", [{}, None])
    def test_empty_body_rejected(self, changes):
        handler, _ = _setup()
        with pytest.raises(ValidationError, match="empty"):
            handler.handle("1", changes)

    def test_empty_body_rejected_before_lookup(self):
        handler, _ = _setup()
        with pytest.raises(ValidationError):
            handler.handle("missing", {})

    def test_unknown_item(self):
        handler, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            handler.handle("999", {"description": "x"})

    def test_blank_name_rejected_and_not_saved(self):
        handler, item_repo = _setup()
        with pytest.raises(ValidationError):
            handler.handle("1", {"inventory_name": ""})
        assert item_repo.get_by_id("1").name == "Lamp"


class SlowItemRepository(FakeItemRepository):
    """Widens the read-modify-write window so unsynchronized updates would clash."""

    def get_by_id(self, item_id):
        item = super().get_by_id(item_id)
        time.sleep(0.01)
        return item


class TestUpdateItemConcurrency:

    def test_concurrent_updates_are_not_lost(self):
        item_repo = SlowItemRepository([InventoryItem(id="1", name="Lamp")])
        handler = UpdateItemHandler(item_repo, ItemLocks())

        def rename():
            handler.handle("1", {"inventory_name": "Renamed"})

        def describe():
            handler.handle("1", {"description": "described"})

        threads = [threading.Thread(target=rename), threading.Thread(target=describe)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        final = item_repo.get_by_id("1")
        assert final.name == "Renamed"
        assert final.description == "described"

    def test_same_field_race_resolves_to_one_value(self):
        item_repo = SlowItemRepository([InventoryItem(id="1", name="Lamp")])
        handler = UpdateItemHandler(item_repo, ItemLocks())

        threads = [
            threading.Thread(target=handler.handle, args=("1", {"description": value}))
            for value in ("first", "second")
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        final = item_repo.get_by_id("1")
        assert final.description in ("first", "second")
        assert final.name == "Lamp"
