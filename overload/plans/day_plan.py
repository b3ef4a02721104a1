"""Day plan builder.

Materializes today's exercises from the program template, the athlete's
exercise state and history:
- Template prefix grows with the program week (3 -> 6 exercises)
- Mobility days always use the full template
- Strong lat pulldown history swaps in pull-ups or adds negatives
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from loguru import logger

from overload.catalog.registry import get_next_training_day_key, get_training_days
from overload.catalog.types import ExerciseDefinition, Program
from overload.plans.constants import (
    LADDER_CEILING_REPS,
    MOBILITY_DAY_KEY,
    NEGATIVES_BODYWEIGHT_RATIO,
    NEGATIVES_MIN_SUCCESSES,
    PULL_DAY_PREFIX,
    PULLDOWN_EXERCISE_ID,
    PULLDOWN_LOOKBACK,
    PULLUP_BODYWEIGHT_RATIO,
    PULLUP_EXERCISE_ID,
    PULLUP_MIN_SUCCESSES,
    PULLUP_NEGATIVE_EXERCISE_ID,
)
from overload.plans.history import iter_performances, performance_succeeded
from overload.plans.progression import default_exercise_state, normalize_weight
from overload.plans.types import ExerciseState, PlannedExercise, Profile, PullupReadiness, SessionRecord, TodayPlan


def get_exercise_count(week_number: int) -> int:
    if week_number <= 4:
        return 3
    if week_number <= 8:
        return 4
    if week_number <= 12:
        return 5
    return 6


def get_sets_per_exercise(program: Program | None) -> int:
    return program.sets_per_exercise if program is not None else 3


def evaluate_pullup_transition(history: Iterable[SessionRecord], bodyweight_kg: float) -> PullupReadiness:
    """Check whether pulldown strength justifies bodyweight pulling.

    Looks at the four most recent lat pulldown performances. Only successes
    at the ladder ceiling count.

    Args:
        history: The profile's session log
        bodyweight_kg: Athlete bodyweight

    Returns:
        PullupReadiness with both thresholds evaluated
    """
    recent = list(iter_performances(history, PULLDOWN_EXERCISE_ID))[-PULLDOWN_LOOKBACK:]
    qualifying = [p for p in recent if performance_succeeded(p) and p.target_reps == LADDER_CEILING_REPS]
    average_weight = sum(p.weight_kg for p in qualifying) / len(qualifying) if qualifying else 0.0

    return PullupReadiness(
        ready_for_negatives=len(qualifying) >= NEGATIVES_MIN_SUCCESSES
        and average_weight >= bodyweight_kg * NEGATIVES_BODYWEIGHT_RATIO,
        ready_for_pullup=len(qualifying) >= PULLUP_MIN_SUCCESSES
        and average_weight >= bodyweight_kg * PULLUP_BODYWEIGHT_RATIO,
        qualifying_successes=len(qualifying),
        average_weight_kg=average_weight,
    )


def build_planned_exercise(
    definition: ExerciseDefinition,
    exercise_states: Mapping[str, ExerciseState],
    bodyweight_kg: float | None,
) -> PlannedExercise:
    state = exercise_states.get(definition.id) or default_exercise_state(definition)
    weight_kg = normalize_weight(
        state.weight_kg,
        uses_bodyweight=definition.uses_bodyweight,
        max_weight_kg=definition.max_weight_kg,
    )
    target_reps = definition.fixed_target_reps if definition.fixed_target_reps is not None else state.target_reps

    return PlannedExercise(
        id=definition.id,
        name=definition.name,
        description=definition.description,
        type=definition.type,
        uses_bodyweight=definition.uses_bodyweight,
        increment_kg=definition.increment_kg,
        weight_kg=weight_kg,
        bodyweight_kg=bodyweight_kg,
        target_reps=target_reps,
        max_weight_kg=definition.max_weight_kg,
    )


def build_day_plan(
    program: Program,
    day_key: str,
    week_number: int,
    exercise_states: Mapping[str, ExerciseState],
    history: Iterable[SessionRecord],
    bodyweight_kg: float,
) -> list[PlannedExercise]:
    """Build the ordered exercise list for a training day.

    Args:
        program: Program catalog
        day_key: Day of the cycle to plan
        week_number: Current program week (drives template length)
        exercise_states: Athlete's current exercise state
        history: Session log used for the bodyweight progression rule
        bodyweight_kg: Athlete bodyweight

    Returns:
        Planned exercises in template order (empty for rest/unknown days)
    """
    template = program.day_templates.get(day_key, ())
    if not template:
        return []

    count = len(template) if day_key == MOBILITY_DAY_KEY else get_exercise_count(week_number)
    planned = [
        build_planned_exercise(definition, exercise_states, bodyweight_kg)
        for definition in (program.get_exercise(exercise_id) for exercise_id in template[:count])
        if definition is not None
    ]

    readiness = evaluate_pullup_transition(history, bodyweight_kg)

    pullup = program.get_exercise(PULLUP_EXERCISE_ID)
    if readiness.ready_for_pullup and pullup is not None:
        logger.debug(
            f"Substituting pull-ups for lat pulldown on {day_key} "
            f"(avg {readiness.average_weight_kg:.1f}kg over {readiness.qualifying_successes} sessions)"
        )
        planned = [
            build_planned_exercise(pullup, exercise_states, bodyweight_kg)
            if exercise.id == PULLDOWN_EXERCISE_ID
            else exercise
            for exercise in planned
        ]
    elif readiness.ready_for_negatives and day_key.startswith(PULL_DAY_PREFIX):
        negative = program.get_exercise(PULLUP_NEGATIVE_EXERCISE_ID)
        if negative is not None and all(exercise.id != negative.id for exercise in planned):
            planned.append(build_planned_exercise(negative, exercise_states, bodyweight_kg))

    return planned


def plan_today(profile: Profile, program: Program | None) -> TodayPlan:
    """Pick today's day key and week from derived progress and build its plan."""
    week_number = profile.progress.current_week_number
    if program is None:
        return TodayPlan(day_key=None, week_number=week_number, sets_per_exercise=3)

    last_day_key = profile.progress.last_completed_day_key
    day_key = get_next_training_day_key(program, last_day_key) if last_day_key else next(
        iter(get_training_days(program)), None
    )
    exercises = (
        build_day_plan(
            program,
            day_key,
            week_number,
            profile.exercise_states,
            profile.sessions,
            profile.settings.bodyweight_kg,
        )
        if day_key
        else []
    )

    return TodayPlan(
        day_key=day_key,
        week_number=week_number,
        sets_per_exercise=get_sets_per_exercise(program),
        exercises=tuple(exercises),
    )
