"""Sync relay: holds the canonical snapshot and merges every push into it."""

from __future__ import annotations

import threading
from collections.abc import Mapping
from typing import Any

from loguru import logger

from overload.plans.types import GlobalState
from overload.sync.errors import MissingStatePayloadError
from overload.sync.migration import dump_state, load_state
from overload.sync.reconcile import merge_state
from overload.sync.store import JsonFileStateStore


class SyncRelay:
    """Relay between devices.

    The relay never rejects a push: the candidate is merged with the
    persisted snapshot and the merged result is stored and returned.
    Read-merge-write runs under a process lock so concurrent pushes
    cannot lose each other's sessions.
    """

    def __init__(self, store: JsonFileStateStore):
        self.store = store
        self._lock = threading.Lock()

    def pull(self) -> GlobalState | None:
        raw = self.store.read()
        if raw is None:
            return None
        return load_state(raw)

    def push(self, candidate: GlobalState | Mapping[str, Any] | None) -> GlobalState:
        """Merge a candidate snapshot into the persisted one.

        Raises:
            MissingStatePayloadError: If no candidate was supplied
        """
        if not candidate:
            raise MissingStatePayloadError()
        incoming = candidate if isinstance(candidate, GlobalState) else load_state(candidate)

        with self._lock:
            existing = self.pull()
            merged = merge_state(existing, incoming)
            self.store.write(dump_state(merged))

        logger.info(
            f"Accepted push from {incoming.device_id}, snapshot now at updatedAt={merged.updated_at}"
        )
        return merged
