"""Atomic JSON file helpers shared by the JSON repositories."""

from __future__ import annotations

import json
import os
import stat
import tempfile
from pathlib import Path
from typing import Any

from catalog_admin.domain.exceptions import StorageError


def dump_json(data: Any) -> str:
    """Deterministic serialization: fixed indent, trailing newline."""
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def write_atomic(file_path: Path, text: str) -> None:
    """Replace *file_path* with *text* in a single rename.

    The content goes to a temporary file in the same directory first, so
    a failed write leaves the previous file untouched.
    """
    tmp_name = None
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=file_path.parent,
            prefix=f".{file_path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        # The temporary file is created 0600; keep the mode of the file it replaces.
        if file_path.exists():
            os.chmod(tmp_name, stat.S_IMODE(file_path.stat().st_mode))
        os.replace(tmp_name, file_path)
    except OSError as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise StorageError(f"Could not write {file_path}: {exc.strerror or exc}") from exc
