"""Snapshot loading, schema migration and normalization.

Raw snapshots arrive from disk, from the relay or from an older client.
load_state turns any of them into a canonical GlobalState:

1. migrate_raw_state upgrades the raw dict through the registered schema
   steps (v1 flat single-athlete -> v2 profile map)
2. Every field is sanitized: sessions without a date are dropped, legacy
   sessions get composite ids, non-finite numbers fall back to catalog
   defaults
3. Each profile is deduplicated and its exercise state and progress are
   rebuilt from the session log
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Callable, Mapping
from typing import Any

from loguru import logger
from pydantic import ValidationError

from overload.catalog.registry import PROGRAMS_BY_ID, get_program_profile, get_training_days
from overload.catalog.types import Program, ProfileDefaults
from overload.config.settings import settings
from overload.plans.constants import LADDER_FLOOR_REPS
from overload.plans.day_plan import get_sets_per_exercise
from overload.plans.progress import derive_progress
from overload.plans.progression import rebuild_exercise_states
from overload.plans.types import (
    CURRENT_SCHEMA_VERSION,
    ExerciseState,
    GlobalSettings,
    GlobalState,
    Profile,
    ProfileSettings,
    SessionRecord,
)
from overload.sync.comparators import build_legacy_session_id
from overload.sync.reconcile import dedupe_sessions_by_day, merge_sessions
from overload.utils.calendar import now_ms as current_ms
from overload.utils.calendar import parse_iso_date, today_utc
from overload.utils.ids import create_device_id
from overload.utils.rounding import is_finite_number

LEGACY_PROFILE_ID = "jacob"


# -------------------------------------------------------------------
# Schema migrations
# -------------------------------------------------------------------


def detect_schema_version(raw: Mapping[str, Any]) -> int:
    version = raw.get("schemaVersion")
    if isinstance(version, int) and not isinstance(version, bool):
        return version
    return 2 if isinstance(raw.get("profiles"), Mapping) else 1


def _migrate_v1_to_v2(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Wrap the legacy single-athlete snapshot into the profile map."""
    raw_settings = raw.get("settings") if isinstance(raw.get("settings"), Mapping) else {}
    profile_settings = {
        key: raw_settings[key] for key in ("bodyweightKg", "restSeconds") if raw_settings.get(key) is not None
    }
    return {
        "schemaVersion": 2,
        "deviceId": raw.get("deviceId"),
        "settings": {"syncUrl": raw_settings.get("syncUrl") or ""},
        "activeProfileId": LEGACY_PROFILE_ID,
        "profiles": {
            LEGACY_PROFILE_ID: {
                "id": LEGACY_PROFILE_ID,
                "programId": LEGACY_PROFILE_ID,
                "programStartDate": raw.get("programStartDate"),
                "settings": profile_settings,
                "exerciseStates": raw.get("exerciseStates") or {},
                "sessions": raw.get("sessions") or [],
            }
        },
        "updatedAt": raw.get("updatedAt"),
    }


MIGRATIONS: dict[int, Callable[[Mapping[str, Any]], dict[str, Any]]] = {
    1: _migrate_v1_to_v2,
}


def migrate_raw_state(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Upgrade a raw snapshot dict to the current schema version.

    Snapshots from a newer schema are passed through unchanged.
    """
    data = dict(raw)
    version = detect_schema_version(data)
    while version < CURRENT_SCHEMA_VERSION:
        step = MIGRATIONS.get(version)
        if step is None:
            logger.warning(f"No migration registered for schema version {version}")
            break
        logger.info(f"Migrating snapshot from schema version {version}")
        data = step(data)
        version = detect_schema_version(data)
    return data


# -------------------------------------------------------------------
# Field sanitizers (raw camelCase dicts in, clean dicts out)
# -------------------------------------------------------------------


def _finite(value: Any, default: float | None) -> float | None:
    return float(value) if is_finite_number(value) else default


def _positive_int(value: Any, default: int | None) -> int | None:
    if is_finite_number(value) and value > 0:
        return int(value)
    return default


def _sanitize_sets(raw_sets: Any) -> list[dict[str, int]]:
    if not isinstance(raw_sets, list):
        return []
    sets = []
    for raw_set in raw_sets:
        if not isinstance(raw_set, Mapping) or not is_finite_number(raw_set.get("reps")):
            continue
        sets.append(
            {
                "reps": max(int(raw_set["reps"]), 0),
                "durationSec": max(int(_finite(raw_set.get("durationSec"), 0)), 0),
            }
        )
    return sets


def _sanitize_performance(raw: Any, program: Program | None) -> dict[str, Any] | None:
    if not isinstance(raw, Mapping) or not isinstance(raw.get("id"), str):
        return None
    exercise_id = raw["id"]
    definition = program.get_exercise(exercise_id) if program is not None else None

    default_weight = definition.start_weight_kg if definition is not None else None
    weight_kg = _finite(raw.get("weightKg"), default_weight)
    if weight_kg is None:
        logger.warning(f"Dropping performance of {exercise_id} without a usable weight")
        return None

    default_reps = LADDER_FLOOR_REPS
    if definition is not None and definition.fixed_target_reps is not None:
        default_reps = definition.fixed_target_reps

    return {
        "id": exercise_id,
        "name": raw.get("name") if isinstance(raw.get("name"), str) else (definition.name if definition else ""),
        "targetReps": _positive_int(raw.get("targetReps"), default_reps),
        "weightKg": weight_kg,
        "incrementKg": _finite(raw.get("incrementKg"), definition.increment_kg if definition else 0.0),
        "bodyweightKg": _finite(raw.get("bodyweightKg"), None),
        "maxWeightKg": _finite(raw.get("maxWeightKg"), definition.max_weight_kg if definition else None),
        "usesBodyweight": bool(raw.get("usesBodyweight", definition.uses_bodyweight if definition else False)),
        "sets": _sanitize_sets(raw.get("sets")),
        "success": bool(raw.get("success", False)),
    }


def _sanitize_session(raw: Any, program: Program | None) -> dict[str, Any] | None:
    if not isinstance(raw, Mapping):
        return None
    session_date = parse_iso_date(raw.get("date"))
    day_key = raw.get("dayKey")
    if session_date is None or not isinstance(day_key, str) or not day_key:
        logger.warning(f"Dropping session {raw.get('id')!r} without a valid date or day")
        return None

    raw_exercises = raw.get("exercises") if isinstance(raw.get("exercises"), list) else []
    exercises = [
        performance
        for performance in (_sanitize_performance(item, program) for item in raw_exercises)
        if performance is not None
    ]

    session_id = raw.get("id")
    if not isinstance(session_id, str) or not session_id:
        session_id = build_legacy_session_id(
            session_date.isoformat(), day_key, (exercise["id"] for exercise in exercises)
        )

    return {
        "id": session_id,
        "date": session_date.isoformat(),
        "dayKey": day_key,
        "weekNumber": _positive_int(raw.get("weekNumber"), 1),
        "setsPerExercise": _positive_int(raw.get("setsPerExercise"), get_sets_per_exercise(program)),
        "exercises": exercises,
        "startedAt": int(raw["startedAt"]) if is_finite_number(raw.get("startedAt")) else None,
        "createdAt": int(raw["createdAt"]) if is_finite_number(raw.get("createdAt")) else None,
    }


def _load_sessions(raw_sessions: Any, program: Program | None) -> list[SessionRecord]:
    if not isinstance(raw_sessions, list):
        return []
    sessions = []
    for raw in raw_sessions:
        cleaned = _sanitize_session(raw, program)
        if cleaned is None:
            continue
        try:
            sessions.append(SessionRecord.model_validate(cleaned))
        except ValidationError as e:
            logger.warning(f"Dropping malformed session {cleaned['id']}: {e}")
    return sessions


def _load_exercise_states(raw_states: Any) -> dict[str, ExerciseState]:
    if not isinstance(raw_states, Mapping):
        return {}
    states = {}
    for exercise_id, raw in raw_states.items():
        if not isinstance(raw, Mapping):
            continue
        weight_kg = _finite(raw.get("weightKg"), None)
        target_reps = _positive_int(raw.get("targetReps"), None)
        if weight_kg is None or target_reps is None:
            # Left out so normalization refills the catalog default
            logger.warning(f"Ignoring non-finite exercise state for {exercise_id}")
            continue
        states[exercise_id] = ExerciseState(
            weight_kg=weight_kg,
            target_reps=target_reps,
            consecutive_failures=_positive_int(raw.get("consecutiveFailures"), 0),
        )
    return states


def _load_profile_settings(raw_settings: Any, defaults: ProfileDefaults) -> ProfileSettings:
    raw_settings = raw_settings if isinstance(raw_settings, Mapping) else {}
    bodyweight_kg = _finite(raw_settings.get("bodyweightKg"), None)
    return ProfileSettings(
        bodyweight_kg=bodyweight_kg if bodyweight_kg is not None and bodyweight_kg > 0 else defaults.bodyweight_kg,
        rest_seconds=_positive_int(raw_settings.get("restSeconds"), defaults.rest_seconds),
    )


# -------------------------------------------------------------------
# Public API
# -------------------------------------------------------------------


def build_profile_state(
    profile_id: str,
    raw_profile: Mapping[str, Any] | None = None,
    today: dt.date | None = None,
) -> Profile:
    """Build a canonical profile from a raw (possibly partial) profile dict.

    Args:
        profile_id: Profile key in the snapshot
        raw_profile: Raw camelCase profile dict (None builds a fresh profile)
        today: Default program start date (defaults to today, UTC)

    Returns:
        Profile with deduplicated sessions, rebuilt exercise state and
        derived progress
    """
    raw_profile = raw_profile if isinstance(raw_profile, Mapping) else {}
    program_id = raw_profile.get("programId") if isinstance(raw_profile.get("programId"), str) else profile_id
    profile_config = get_program_profile(program_id)
    program = profile_config.program if profile_config is not None else None
    defaults = profile_config.default_settings if profile_config is not None else ProfileDefaults()

    sessions = dedupe_sessions_by_day(merge_sessions(_load_sessions(raw_profile.get("sessions"), program), ()))
    name = raw_profile.get("name")
    if not isinstance(name, str) or not name:
        name = profile_config.name if profile_config is not None else profile_id

    return Profile(
        id=profile_id,
        name=name,
        program_id=program_id,
        program_start_date=parse_iso_date(raw_profile.get("programStartDate")) or today or today_utc(),
        settings=_load_profile_settings(raw_profile.get("settings"), defaults),
        exercise_states=rebuild_exercise_states(
            program, sessions, _load_exercise_states(raw_profile.get("exerciseStates"))
        ),
        sessions=tuple(sessions),
        progress=derive_progress(sessions, get_training_days(program)),
    )


def _default_active_profile_id() -> str:
    if settings.default_profile_id in PROGRAMS_BY_ID:
        return settings.default_profile_id
    return next(iter(PROGRAMS_BY_ID))


def build_default_state(
    device_id: str | None = None,
    now_ms: int | None = None,
    today: dt.date | None = None,
) -> GlobalState:
    """Fresh snapshot with every shipped profile and no history."""
    return GlobalState(
        schema_version=CURRENT_SCHEMA_VERSION,
        device_id=device_id or create_device_id(),
        settings=GlobalSettings(),
        active_profile_id=_default_active_profile_id(),
        profiles={profile_id: build_profile_state(profile_id, None, today) for profile_id in PROGRAMS_BY_ID},
        updated_at=now_ms if now_ms is not None else current_ms(),
    )


def load_state(raw: Any, today: dt.date | None = None, now_ms: int | None = None) -> GlobalState:
    """Load any raw snapshot into a canonical GlobalState.

    Args:
        raw: Decoded JSON snapshot of any schema version (garbage and None
            yield the default state)
        today: Default program start date for new profiles
        now_ms: Fallback updated_at for snapshots without one

    Returns:
        Canonical GlobalState
    """
    if not isinstance(raw, Mapping):
        if raw is not None:
            logger.warning(f"Ignoring snapshot of unexpected type {type(raw).__name__}")
        return build_default_state(now_ms=now_ms, today=today)

    data = migrate_raw_state(raw)
    raw_profiles = data.get("profiles") if isinstance(data.get("profiles"), Mapping) else {}
    profile_ids = list(dict.fromkeys([*PROGRAMS_BY_ID, *raw_profiles]))
    profiles = {
        profile_id: build_profile_state(profile_id, raw_profiles.get(profile_id), today) for profile_id in profile_ids
    }

    raw_settings = data.get("settings") if isinstance(data.get("settings"), Mapping) else {}
    sync_url = raw_settings.get("syncUrl") if isinstance(raw_settings.get("syncUrl"), str) else ""

    active_profile_id = data.get("activeProfileId")
    if active_profile_id not in profiles:
        active_profile_id = _default_active_profile_id()

    device_id = data.get("deviceId")
    updated_at = data.get("updatedAt")

    return GlobalState(
        schema_version=CURRENT_SCHEMA_VERSION,
        device_id=device_id if isinstance(device_id, str) and device_id else create_device_id(),
        settings=GlobalSettings(sync_url=sync_url.strip()),
        active_profile_id=active_profile_id,
        profiles=profiles,
        updated_at=int(updated_at) if is_finite_number(updated_at) else (now_ms if now_ms is not None else current_ms()),
    )


def dump_state(state: GlobalState) -> dict[str, Any]:
    """JSON-ready camelCase dict for persistence and transport."""
    return state.model_dump(mode="json", by_alias=True)
