"""JSON settings files kept in the configured output directory."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

from fossflow_ai.utils.config import settings
from fossflow_ai.utils.file_utils import ensure_dir, read_text_file


def storage_path(name: str) -> Path:
    """Where *name* lives; nothing is created on disk."""
    return Path(settings.output_dir) / name


def save_json(name: str, payload: Dict[str, Any]) -> str:
    """Write *payload* via a temp file so a crash never leaves half a document."""
    path = storage_path(name)
    ensure_dir(str(path.parent))
    tmp_path = path.with_name(path.name + ".tmp")
    tmp_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    tmp_path.replace(path)
    return str(path)


def load_json(name: str) -> Optional[Dict[str, Any]]:
    """Return the stored document, or None when it was never saved.

    Raises ``json.JSONDecodeError`` for a corrupt file.
    """
    path = storage_path(name)
    if not path.is_file():
        return None
    return json.loads(read_text_file(str(path)))
