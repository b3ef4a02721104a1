from overload.sync.client import SyncClient, SyncResult, sync_now
from overload.sync.migration import build_default_state, dump_state, load_state, migrate_raw_state
from overload.sync.reconcile import dedupe_sessions_by_day, merge_profile, merge_sessions, merge_state
from overload.sync.relay import SyncRelay
from overload.sync.store import JsonFileStateStore

__all__ = [
    "JsonFileStateStore",
    "SyncClient",
    "SyncRelay",
    "SyncResult",
    "build_default_state",
    "dedupe_sessions_by_day",
    "dump_state",
    "load_state",
    "merge_profile",
    "merge_sessions",
    "merge_state",
    "migrate_raw_state",
    "sync_now",
]
