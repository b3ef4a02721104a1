"""HTTP client for the sync relay.

Transport failures never raise to the caller: every call returns a
SyncResult carrying either a snapshot or a failure reason.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx
from loguru import logger

from overload.config.settings import settings
from overload.plans.types import GlobalState
from overload.sync.errors import SyncTransportError
from overload.sync.migration import dump_state, load_state
from overload.sync.reconcile import merge_state
from overload.utils.calendar import now_ms


@dataclass(frozen=True)
class SyncResult:
    """Outcome of a sync call.

    Attributes:
        state: Snapshot returned by the relay (None if the relay holds none or on failure)
        error: Failure reason, None on success
    """

    state: GlobalState | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class SyncClient:
    """Client for the relay's /sync/state and /sync/push routes."""

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        base_url = settings.sync_url if base_url is None else base_url
        self.base_url = base_url.strip().rstrip("/")
        self.timeout = timeout if timeout is not None else settings.sync_timeout_seconds

    def _extract_state(self, response: httpx.Response, action: str) -> GlobalState | None:
        if response.status_code >= 400:
            raise SyncTransportError(f"Sync {action} failed: {response.status_code}")
        try:
            payload = response.json()
        except ValueError as e:
            raise SyncTransportError(f"Sync {action} failed: invalid JSON response") from e
        raw_state = payload.get("state") if isinstance(payload, dict) else None
        return load_state(raw_state) if raw_state else None

    def pull(self) -> SyncResult:
        if not self.base_url:
            return SyncResult(error="Sync URL is not configured")
        try:
            response = httpx.get(
                f"{self.base_url}/sync/state",
                params={"t": now_ms()},
                timeout=self.timeout,
            )
            return SyncResult(state=self._extract_state(response, "pull"))
        except SyncTransportError as e:
            logger.warning(e.reason)
            return SyncResult(error=e.reason)
        except httpx.RequestError as e:
            logger.warning(f"Sync pull failed: {e}")
            return SyncResult(error=f"Sync pull failed: {e}")

    def push(self, state: GlobalState) -> SyncResult:
        if not self.base_url:
            return SyncResult(error="Sync URL is not configured")
        payload: dict[str, Any] = {"state": dump_state(state)}
        try:
            response = httpx.post(
                f"{self.base_url}/sync/push",
                json=payload,
                timeout=self.timeout,
            )
            return SyncResult(state=self._extract_state(response, "push"))
        except SyncTransportError as e:
            logger.warning(e.reason)
            return SyncResult(error=e.reason)
        except httpx.RequestError as e:
            logger.warning(f"Sync push failed: {e}")
            return SyncResult(error=f"Sync push failed: {e}")


def sync_now(local: GlobalState, client: SyncClient) -> SyncResult:
    """Pull, merge, push, merge back.

    Returns:
        SyncResult with the new local snapshot; on any failure the original
        local snapshot is returned with the failure reason
    """
    pulled = client.pull()
    if not pulled.ok:
        return SyncResult(state=local, error=pulled.error)

    merged = merge_state(local, pulled.state)
    pushed = client.push(merged)
    if not pushed.ok:
        return SyncResult(state=local, error=pushed.error)

    return SyncResult(state=merge_state(merged, pushed.state))
