"""HTTP routes. Each route builds the matching use-case handler per request."""

from __future__ import annotations

import json

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile, status
from fastapi.responses import FileResponse
from starlette.concurrency import run_in_threadpool

from inventory_service.application.delete_item import DeleteItemHandler
from inventory_service.application.dto import ItemDTO, ItemView
from inventory_service.application.get_photo import GetPhotoHandler
from inventory_service.application.list_items import ListItemsHandler
from inventory_service.application.register_item import RegisterItemHandler
from inventory_service.application.replace_photo import ReplacePhotoHandler
from inventory_service.application.search_item import SearchItemHandler, parse_flag
from inventory_service.application.show_item import ShowItemHandler
from inventory_service.application.update_item import UpdateItemHandler
from inventory_service.domain.exceptions import ValidationError
from inventory_service.domain.model.value_objects import PhotoUpload
from inventory_service.infrastructure.bootstrap import Storage

router = APIRouter()

PHOTO_FIELD = "photo"


def get_storage(request: Request) -> Storage:
    return request.app.state.storage


# --- Serialization ------------------------------------------------------------


def item_json(dto: ItemDTO) -> dict:
    return {
        "ID": dto.id,
        "inventory_name": dto.name,
        "description": dto.description,
        "photo_url": dto.photo_url,
    }


def view_json(view: ItemView) -> dict:
    body = {
        "ID": view.id,
        "inventory_name": view.name,
        "description": view.description,
    }
    if view.photo_url is not None:
        body["photo_url"] = view.photo_url
    return body


def to_upload(photo: UploadFile | None) -> PhotoUpload | None:
    # Browsers send an empty, nameless part when no file was chosen.
    if photo is None or not photo.filename:
        return None
    return PhotoUpload(content=photo.file.read(), filename=photo.filename, field_tag=PHOTO_FIELD)


async def read_changes(request: Request) -> dict:
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(("application/x-www-form-urlencoded", "multipart/form-data")):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}

    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        changes = json.loads(raw)
    except ValueError as exc:
        raise ValidationError(f"Request body is not valid JSON: {exc}") from exc
    if not isinstance(changes, dict):
        raise ValidationError("Request body must be a JSON object")
    return changes


# --- Routes -------------------------------------------------------------------


@router.get("/")
def index() -> dict:
    return {"message": "Inventory service is running"}


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register_item(
    inventory_name: str | None = Form(None),
    description: str | None = Form(None),
    photo: UploadFile | None = File(None),
    storage: Storage = Depends(get_storage),
) -> dict:
    handler = RegisterItemHandler(storage.items, storage.photos, storage.ids)
    dto = handler.handle(name=inventory_name, description=description, photo=to_upload(photo))
    return item_json(dto)


@router.get("/inventory")
def list_items(storage: Storage = Depends(get_storage)) -> list[dict]:
    return [item_json(dto) for dto in ListItemsHandler(storage.items).handle()]


@router.get("/inventory/{item_id}")
def show_item(item_id: str, storage: Storage = Depends(get_storage)) -> dict:
    return item_json(ShowItemHandler(storage.items).handle(item_id))


@router.put("/inventory/{item_id}")
async def update_item(
    item_id: str, request: Request, storage: Storage = Depends(get_storage)
) -> dict:
    changes = await read_changes(request)
    handler = UpdateItemHandler(storage.items, storage.locks)
    dto = await run_in_threadpool(handler.handle, item_id, changes)
    return item_json(dto)


@router.put("/inventory/{item_id}/photo")
def replace_photo(
    item_id: str,
    photo: UploadFile | None = File(None),
    storage: Storage = Depends(get_storage),
) -> dict:
    handler = ReplacePhotoHandler(storage.items, storage.photos, storage.locks)
    return item_json(handler.handle(item_id, to_upload(photo)))


@router.delete("/inventory/{item_id}")
def delete_item(item_id: str, storage: Storage = Depends(get_storage)) -> dict:
    DeleteItemHandler(storage.items, storage.photos, storage.locks).handle(item_id)
    return {"message": f"Item #{item_id} deleted"}


@router.get("/inventory/{item_id}/photo")
def get_photo(item_id: str, storage: Storage = Depends(get_storage)) -> FileResponse:
    photo = GetPhotoHandler(storage.items, storage.photos).handle(item_id)
    return FileResponse(photo.path, media_type=photo.media_type)


@router.post("/search")
def search_item(
    item_id: str | None = Form(None, alias="id"),
    has_photo: str | None = Form(None),
    storage: Storage = Depends(get_storage),
) -> dict:
    view = SearchItemHandler(storage.items).handle(item_id, include_photo=parse_flag(has_photo))
    return view_json(view)
