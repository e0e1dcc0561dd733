"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from inventory_service.domain.exceptions import ValidationError


@dataclass(frozen=True)
class PhotoUpload:
    """Raw bytes of an uploaded photo plus the name the client gave it.

    ``field_tag`` is the form field the file arrived in; it becomes the
    prefix of the stored blob name.
    """

    content: bytes
    filename: str = ""
    field_tag: str = "photo"

    def __post_init__(self) -> None:
        if not isinstance(self.content, (bytes, bytearray)):
            raise ValidationError(
                f"Photo content must be bytes, got {type(self.content).__name__}"
            )
        if not self.field_tag or not self.field_tag.strip():
            raise ValidationError("Photo field tag cannot be empty")
        if self.filename is None:
            object.__setattr__(self, "filename", "")

    @property
    def extension(self) -> str:
        """Extension of the original filename including the dot, or ''."""
        return os.path.splitext(os.path.basename(self.filename))[1].lower()

    @property
    def size(self) -> int:
        return len(self.content)

    def __str__(self) -> str:
        return f"{self.filename or '<unnamed>'} ({self.size} bytes)"
