"""State reconciler: deterministic, conflict-free merge of two snapshots.

Merge rules:
- Sessions: union keyed by id (or legacy composite), more complete record
  wins, then collapsed to one record per (date, day_key)
- Exercise state: shallow union biased to the authoritative profile, then
  rebuilt by replaying the merged log
- Profile settings / start date: taken from the authoritative profile
- Global settings: sync_url is device-local and always comes from local
- updated_at: max of both sides and the current time

merge_state is idempotent (merge(s, s) == s up to updated_at) and
convergent (two devices that exchange snapshots end up equal).
"""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from overload.catalog.registry import get_program, get_training_days
from overload.catalog.types import Program
from overload.plans.history import sort_sessions
from overload.plans.progress import derive_progress
from overload.plans.progression import rebuild_exercise_states
from overload.plans.types import CURRENT_SCHEMA_VERSION, GlobalSettings, GlobalState, Profile, SessionRecord
from overload.sync.comparators import pick_session, remote_is_authoritative, session_key
from overload.utils.calendar import now_ms as current_ms


def merge_sessions(local: Iterable[SessionRecord], remote: Iterable[SessionRecord]) -> list[SessionRecord]:
    """Union two session logs keyed by session id.

    Returns:
        Chronologically sorted list with one record per key; records without
        an id receive their composite key as id
    """
    merged: dict[str, SessionRecord] = {}
    for session in (*local, *remote):
        key = session_key(session)
        if not session.id:
            session = session.model_copy(update={"id": key})
        merged[key] = pick_session(merged.get(key), session)
    return sort_sessions(merged.values())


def dedupe_sessions_by_day(sessions: Iterable[SessionRecord]) -> list[SessionRecord]:
    """Keep the most complete record per (date, day_key).

    Two devices that logged the same workout separately end up with one
    record; the choice does not depend on input order.
    """
    by_day: dict[tuple, SessionRecord] = {}
    for session in sessions:
        key = (session.date, session.day_key)
        by_day[key] = pick_session(by_day.get(key), session)
    return sort_sessions(by_day.values())


def merge_profile(local: Profile | None, remote: Profile | None, program: Program | None = None) -> Profile | None:
    """Merge two versions of the same profile.

    Args:
        local: This device's profile (None if absent)
        remote: The other side's profile (None if absent)
        program: Program catalog (defaults to the profile's program)

    Returns:
        Merged profile with exercise state and progress rebuilt from the
        merged session log, or None if both sides are absent
    """
    if local is None and remote is None:
        return None

    identity = local or remote
    program = program or get_program(identity.program_id)

    sessions = dedupe_sessions_by_day(
        merge_sessions(
            local.sessions if local is not None else (),
            remote.sessions if remote is not None else (),
        )
    )

    if remote_is_authoritative(local, remote):
        primary, secondary = remote, local
    else:
        primary, secondary = local, remote

    union_states = {
        **(secondary.exercise_states if secondary is not None else {}),
        **primary.exercise_states,
    }

    program_start_date = primary.program_start_date
    if program_start_date is None and secondary is not None:
        program_start_date = secondary.program_start_date

    return Profile(
        id=identity.id,
        name=primary.name or identity.name,
        program_id=identity.program_id,
        program_start_date=program_start_date,
        settings=primary.settings,
        exercise_states=rebuild_exercise_states(program, sessions, union_states),
        sessions=tuple(sessions),
        progress=derive_progress(sessions, get_training_days(program)),
    )


def merge_state(local: GlobalState | None, remote: GlobalState | None, now_ms: int | None = None) -> GlobalState | None:
    """Merge two global snapshots.

    Args:
        local: This device's snapshot
        remote: The relay's (or another device's) snapshot
        now_ms: Current time in ms (defaults to now)

    Returns:
        Merged snapshot, or None if both sides are absent
    """
    if local is None and remote is None:
        return None

    if local is None or remote is None:
        single = local or remote
        # Normalize only: a one-sided merge has nothing newer to stamp
        return single.model_copy(
            update={
                "schema_version": CURRENT_SCHEMA_VERSION,
                "profiles": {
                    profile_id: merge_profile(profile, None) for profile_id, profile in single.profiles.items()
                },
            }
        )

    profile_ids = list(dict.fromkeys([*local.profiles, *remote.profiles]))
    profiles = {
        profile_id: merge_profile(local.profiles.get(profile_id), remote.profiles.get(profile_id))
        for profile_id in profile_ids
    }

    updated_at = max(local.updated_at, remote.updated_at, now_ms if now_ms is not None else current_ms())

    merged = GlobalState(
        schema_version=CURRENT_SCHEMA_VERSION,
        device_id=local.device_id or remote.device_id,
        settings=GlobalSettings(sync_url=local.settings.sync_url),
        active_profile_id=local.active_profile_id or remote.active_profile_id,
        profiles=profiles,
        updated_at=updated_at,
    )

    logger.info(
        f"Merged snapshots from {local.device_id} and {remote.device_id}: "
        f"{len(profiles)} profiles, {sum(len(profile.sessions) for profile in profiles.values())} sessions"
    )
    return merged
