"""Unit tests for domain value objects."""

import pytest

from inventory_service.domain.exceptions import ValidationError
from inventory_service.domain.model.value_objects import PhotoUpload


class TestPhotoUpload:

    def test_extension_is_lowercased(self):
        assert PhotoUpload(b"abc", "Cat.JPG").extension == ".jpg"

    def test_extension_empty_without_dot(self):
        assert PhotoUpload(b"abc", "README").extension == ""

    def test_extension_ignores_directories(self):
        assert PhotoUpload(b"abc", "../../etc/passwd").extension == ""

    def test_size(self):
        assert PhotoUpload(b"12345", "a.png").size == 5

    def test_default_field_tag(self):
        assert PhotoUpload(b"x", "a.png").field_tag == "photo"

    def test_none_filename_becomes_empty(self):
        assert PhotoUpload(b"x", None).filename == ""

    def test_content_must_be_bytes(self):
        with pytest.raises(ValidationError, match="must be bytes"):
            PhotoUpload("not bytes", "a.png")

    def test_empty_field_tag_rejected(self):
        with pytest.raises(ValidationError, match="field tag"):
            PhotoUpload(b"x", "a.png", field_tag=" ")

    def test_equality_by_value(self):
        assert PhotoUpload(b"x", "a.png") == PhotoUpload(b"x", "a.png")

    def test_immutable(self):
        upload = PhotoUpload(b"x", "a.png")
        with pytest.raises(AttributeError):
            upload.filename = "b.png"
