"""JSON file persistence for the relay's canonical snapshot."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from loguru import logger


class JsonFileStateStore:
    """Stores one snapshot as a JSON document on disk.

    Writes go to a temporary file that replaces the target, so a crash
    mid-write never leaves a truncated snapshot behind.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def read(self) -> dict[str, Any] | None:
        if not self.path.exists():
            return None
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read snapshot from {self.path}: {e}")
            return None
        if not isinstance(payload, dict):
            logger.warning(f"Ignoring non-object snapshot in {self.path}")
            return None
        return payload

    def write(self, state: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        tmp_path.write_text(json.dumps(state, indent=2), encoding="utf-8")
        tmp_path.replace(self.path)
        logger.debug(f"Wrote snapshot to {self.path}")
