"""Session recorder.

Closes a workout: folds each performed exercise through the progression
engine, appends an immutable SessionRecord to the log and recomputes week
progress from the full log.
"""

from __future__ import annotations

import datetime as dt

from loguru import logger

from overload.catalog.registry import get_program, get_training_days
from overload.catalog.types import Program
from overload.plans.day_plan import build_day_plan, get_sets_per_exercise, plan_today
from overload.plans.errors import UnknownExerciseError
from overload.plans.history import performance_succeeded
from overload.plans.progress import derive_progress
from overload.plans.progression import rebuild_exercise_states
from overload.plans.types import ExercisePerformance, Profile, SessionDraft, SessionRecord, SetRecord
from overload.utils.calendar import now_ms as current_ms
from overload.utils.calendar import today_utc
from overload.utils.ids import create_session_id


def start_session(
    profile: Profile,
    program: Program | None = None,
    day_key: str | None = None,
    today: dt.date | None = None,
    now_ms: int | None = None,
) -> SessionDraft:
    """Open a draft for today's plan (or an explicitly chosen day).

    Args:
        profile: Athlete profile
        program: Program catalog (defaults to the profile's program)
        day_key: Override the day picked from progress
        today: Session date (defaults to today, UTC)
        now_ms: Start timestamp in ms (defaults to now)

    Returns:
        SessionDraft with every planned exercise and no sets recorded
    """
    program = program or get_program(profile.program_id)
    plan = plan_today(profile, program)
    if day_key is not None and day_key != plan.day_key and program is not None:
        exercises = build_day_plan(
            program,
            day_key,
            plan.week_number,
            profile.exercise_states,
            profile.sessions,
            profile.settings.bodyweight_kg,
        )
    else:
        day_key = plan.day_key or ""
        exercises = list(plan.exercises)

    return SessionDraft(
        id=create_session_id(),
        date=today or today_utc(),
        day_key=day_key,
        week_number=plan.week_number,
        sets_per_exercise=get_sets_per_exercise(program),
        exercises=tuple(
            ExercisePerformance(
                id=exercise.id,
                name=exercise.name,
                target_reps=exercise.target_reps,
                weight_kg=exercise.weight_kg,
                increment_kg=exercise.increment_kg,
                bodyweight_kg=exercise.bodyweight_kg,
                max_weight_kg=exercise.max_weight_kg,
                uses_bodyweight=exercise.uses_bodyweight,
            )
            for exercise in exercises
        ),
        started_at=now_ms if now_ms is not None else current_ms(),
    )


def record_set(draft: SessionDraft, exercise_id: str, reps: int, duration_sec: int = 0) -> SessionDraft:
    """Return a new draft with one more set recorded for exercise_id.

    Raises:
        UnknownExerciseError: If the exercise is not part of the draft
    """
    if all(exercise.id != exercise_id for exercise in draft.exercises):
        raise UnknownExerciseError(exercise_id, draft.id)

    new_set = SetRecord(reps=reps, duration_sec=duration_sec)
    return draft.model_copy(
        update={
            "exercises": tuple(
                exercise.model_copy(update={"sets": (*exercise.sets, new_set)}) if exercise.id == exercise_id else exercise
                for exercise in draft.exercises
            )
        }
    )


def finish_session(
    profile: Profile,
    draft: SessionDraft,
    program: Program | None = None,
    now_ms: int | None = None,
) -> Profile:
    """Close a draft and return the updated profile.

    Args:
        profile: Profile the draft belongs to
        draft: Workout with recorded sets
        program: Program catalog (defaults to the profile's program)
        now_ms: Record creation time in ms (defaults to now)

    Returns:
        New profile with updated exercise state, the appended session and
        recomputed progress
    """
    program = program or get_program(profile.program_id)

    performed = tuple(
        exercise.model_copy(update={"success": performance_succeeded(exercise)}) for exercise in draft.exercises
    )

    record = SessionRecord(
        id=draft.id,
        date=draft.date,
        day_key=draft.day_key,
        week_number=draft.week_number,
        sets_per_exercise=draft.sets_per_exercise,
        exercises=performed,
        started_at=draft.started_at,
        created_at=now_ms if now_ms is not None else current_ms(),
    )
    sessions = (*profile.sessions, record)
    # Replayed from the full log so a backdated session lands in order
    exercise_states = rebuild_exercise_states(program, sessions, profile.exercise_states)

    logger.info(
        f"Finished {record.day_key} (week {record.week_number}) for profile {profile.id}: "
        f"{sum(1 for exercise in performed if exercise.success)}/{len(performed)} exercises successful"
    )

    return profile.model_copy(
        update={
            "exercise_states": exercise_states,
            "sessions": sessions,
            "progress": derive_progress(sessions, get_training_days(program)),
        }
    )
