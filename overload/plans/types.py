"""Athlete state models.

These models define the persisted snapshot shape shared between devices:
- ExerciseState: cached per-exercise progression (always rebuilt from history)
- SessionRecord: append-only log entry, the durable source of truth
- ProgressSnapshot: derived week/day progress (never authoritative)
- Profile / GlobalState: the full snapshot exchanged through the sync relay

Python attributes are snake_case; the JSON wire format is camelCase.
"""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

CURRENT_SCHEMA_VERSION = 2


class SnapshotModel(BaseModel):
    """Base for persisted models: camelCase aliases, immutable instances."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class ExerciseState(SnapshotModel):
    """Per-athlete, per-exercise progression cache.

    Attributes:
        weight_kg: Current working weight
        target_reps: Current rep target on the ladder
        consecutive_failures: Failed sessions in a row since the last success or deload
    """

    weight_kg: float
    target_reps: int
    consecutive_failures: int = 0


class SetRecord(SnapshotModel):
    reps: int
    duration_sec: int = 0


class ExercisePerformance(SnapshotModel):
    """One exercise as prescribed and performed within a session.

    Carries everything the progression engine needs, so history can be
    replayed without trusting any cached state.
    """

    id: str
    name: str = ""
    target_reps: int
    weight_kg: float
    increment_kg: float = 0.0
    bodyweight_kg: float | None = None
    max_weight_kg: float | None = None
    uses_bodyweight: bool = False
    sets: tuple[SetRecord, ...] = ()
    success: bool = False


class SessionRecord(SnapshotModel):
    """Immutable log entry for a finished workout.

    Attributes:
        id: Unique within a profile
        date: Calendar date the session was performed
        day_key: Training day of the cycle
        week_number: Program week at the time of performance
        sets_per_exercise: Sets prescribed per exercise
        exercises: Performed exercises with recorded sets
        started_at: Draft start time (ms since epoch)
        created_at: Record creation time (ms since epoch), merge tie-breaker
    """

    id: str
    date: dt.date
    day_key: str
    week_number: int = 1
    sets_per_exercise: int = 3
    exercises: tuple[ExercisePerformance, ...] = ()
    started_at: int | None = None
    created_at: int | None = None


class SessionDraft(SnapshotModel):
    """In-progress workout, turned into a SessionRecord when finished."""

    id: str
    date: dt.date
    day_key: str
    week_number: int
    sets_per_exercise: int
    exercises: tuple[ExercisePerformance, ...] = ()
    started_at: int | None = None


class ProgressSnapshot(SnapshotModel):
    last_completed_date: dt.date | None = None
    last_completed_day_key: str | None = None
    last_completed_week_number: int | None = None
    current_week_number: int = 1
    completed_days: tuple[str, ...] = ()


class ProfileSettings(SnapshotModel):
    bodyweight_kg: float = 105.0
    rest_seconds: int = 90


class Profile(SnapshotModel):
    id: str
    name: str = ""
    program_id: str
    program_start_date: dt.date | None = None
    settings: ProfileSettings = Field(default_factory=ProfileSettings)
    exercise_states: dict[str, ExerciseState] = Field(default_factory=dict)
    sessions: tuple[SessionRecord, ...] = ()
    progress: ProgressSnapshot = Field(default_factory=ProgressSnapshot)


class GlobalSettings(SnapshotModel):
    sync_url: str = ""


class GlobalState(SnapshotModel):
    """Full per-device snapshot.

    updated_at is a logical timestamp used only as a merge tie-breaker.
    """

    schema_version: int = CURRENT_SCHEMA_VERSION
    device_id: str
    settings: GlobalSettings = Field(default_factory=GlobalSettings)
    active_profile_id: str | None = None
    profiles: dict[str, Profile] = Field(default_factory=dict)
    updated_at: int = 0


class PlannedExercise(SnapshotModel):
    """An exercise materialized for today's plan."""

    id: str
    name: str
    description: str = ""
    type: str
    uses_bodyweight: bool = False
    increment_kg: float
    weight_kg: float
    bodyweight_kg: float | None = None
    target_reps: int
    max_weight_kg: float | None = None


class PullupReadiness(SnapshotModel):
    ready_for_negatives: bool = False
    ready_for_pullup: bool = False
    qualifying_successes: int = 0
    average_weight_kg: float = 0.0


class TodayPlan(SnapshotModel):
    day_key: str | None
    week_number: int
    sets_per_exercise: int
    exercises: tuple[PlannedExercise, ...] = ()
