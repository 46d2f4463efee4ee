"""File helpers: the server data dump and the target HTML document."""
from __future__ import annotations

import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def server_data_path(storage_root: str | Path, organizer_id: str) -> Path:
    return Path(storage_root) / f"server-data-{organizer_id}.json"


def save_server_data(server_data: dict[str, Any], organizer_id: str, storage_root: str | Path = ".") -> Path:
    """Write ``server_data`` as indented JSON, replacing any earlier dump."""
    path = server_data_path(storage_root, organizer_id)
    path.write_text(json.dumps(server_data, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info("Server data saved to %s", path)
    return path


def read_document(path: str | Path) -> str:
    # newline="" keeps the document's own line endings
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def write_document(path: str | Path, content: str) -> None:
    """Replace the file at ``path`` with ``content`` in a single rename."""
    path = Path(path)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        if path.exists():
            shutil.copymode(path, tmp_name)
        os.replace(tmp_name, path)
    except BaseException:
        os.unlink(tmp_name)
        raise
