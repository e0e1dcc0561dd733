"""Whole-file replacement helpers shared by the file-backed repositories."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


def write_atomic(path: Path, data: bytes) -> None:
    """Write ``data`` to ``path`` so readers see the old or the new file, never half.

    The bytes go to a temporary file in the same directory which is then
    renamed over the target. Raises OSError on failure; the temporary
    file is removed in that case.
    """
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise


def is_safe_name(name: str) -> bool:
    """True if ``name`` refers to a plain file directly inside a directory."""
    return isinstance(name, str) and bool(name) and name not in (".", "..") and os.path.basename(name) == name and "\\" not in name
