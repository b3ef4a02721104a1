"""Progression engine.

Pure functions that evolve per-exercise state from completed performances:
- Rep ladder: 5 -> 6 -> 7 reps at the same weight, then add one increment
  and drop back to 5 reps
- Max-weight caps: hold at the ladder ceiling instead of exceeding the cap
- Deload: two failed sessions in a row cut the weight by 5% and reset reps
- Replay: exercise state is rebuilt by folding the session log through
  update_exercise_state, so cached state never diverges from history
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from loguru import logger

from overload.catalog.types import ExerciseDefinition, Program
from overload.plans.constants import (
    DELOAD_FACTOR,
    FAILURES_BEFORE_DELOAD,
    LADDER_CEILING_REPS,
    LADDER_FLOOR_REPS,
    WEIGHT_STEP_KG,
)
from overload.plans.history import performance_succeeded, sort_sessions
from overload.plans.types import ExercisePerformance, ExerciseState, SessionRecord
from overload.utils.rounding import is_finite_number, round_to


def normalize_weight(weight_kg: float, *, uses_bodyweight: bool = False, max_weight_kg: float | None = None) -> float:
    """Clamp weight to [0, cap] and round to the plate step.

    Added load on bodyweight exercises is left unrounded.
    """
    if max_weight_kg is not None:
        weight_kg = min(weight_kg, max_weight_kg)
    weight_kg = max(weight_kg, 0.0)
    if uses_bodyweight:
        return weight_kg
    return round_to(weight_kg, WEIGHT_STEP_KG)


def default_exercise_state(definition: ExerciseDefinition) -> ExerciseState:
    weight_kg = normalize_weight(
        definition.start_weight_kg,
        uses_bodyweight=definition.uses_bodyweight,
        max_weight_kg=definition.max_weight_kg,
    )
    target_reps = definition.fixed_target_reps if definition.fixed_target_reps is not None else LADDER_FLOOR_REPS
    return ExerciseState(weight_kg=weight_kg, target_reps=target_reps)


def create_initial_exercise_state(program: Program | None) -> dict[str, ExerciseState]:
    if program is None:
        return {}
    return {exercise_id: default_exercise_state(definition) for exercise_id, definition in program.exercise_library.items()}


def _is_valid_state(state: ExerciseState) -> bool:
    return (
        is_finite_number(state.weight_kg)
        and is_finite_number(state.target_reps)
        and state.target_reps > 0
        and state.consecutive_failures >= 0
    )


def normalize_exercise_states(
    program: Program | None,
    states: Mapping[str, ExerciseState] | None,
) -> dict[str, ExerciseState]:
    """Fill missing catalog exercises with defaults and repair invalid entries.

    Args:
        program: Program providing catalog defaults (None keeps only valid given states)
        states: Possibly partial or corrupted state map

    Returns:
        State map covering every catalog exercise plus any valid extra entries
    """
    states = states or {}
    normalized: dict[str, ExerciseState] = {}

    if program is not None:
        for exercise_id, definition in program.exercise_library.items():
            state = states.get(exercise_id)
            if state is None:
                normalized[exercise_id] = default_exercise_state(definition)
                continue
            if not _is_valid_state(state):
                logger.warning(f"Replacing invalid exercise state for {exercise_id} with catalog default")
                normalized[exercise_id] = default_exercise_state(definition)
                continue
            normalized[exercise_id] = ExerciseState(
                weight_kg=normalize_weight(
                    state.weight_kg,
                    uses_bodyweight=definition.uses_bodyweight,
                    max_weight_kg=definition.max_weight_kg,
                ),
                target_reps=definition.fixed_target_reps
                if definition.fixed_target_reps is not None
                else state.target_reps,
                consecutive_failures=state.consecutive_failures,
            )

    for exercise_id, state in states.items():
        if exercise_id in normalized:
            continue
        if _is_valid_state(state):
            normalized[exercise_id] = state
        else:
            logger.warning(f"Dropping invalid state for unknown exercise {exercise_id}")

    return normalized


def update_exercise_state(
    state: ExerciseState | None,
    performance: ExercisePerformance,
    definition: ExerciseDefinition | None = None,
) -> ExerciseState:
    """Compute the next exercise state after one performed exercise.

    The next weight and rep target are derived from what the session record
    prescribed (performance.weight_kg / performance.target_reps); only the
    failure counter is carried over from the current state.

    Args:
        state: Current state (None falls back to the catalog default)
        performance: Completed exercise with recorded sets
        definition: Catalog definition, used for fixed rep targets and defaults

    Returns:
        Next exercise state
    """
    if state is None:
        if definition is not None:
            state = default_exercise_state(definition)
        else:
            state = ExerciseState(weight_kg=performance.weight_kg, target_reps=performance.target_reps)

    increment_kg = performance.increment_kg
    if not increment_kg or not performance.sets:
        return state

    uses_bodyweight = performance.uses_bodyweight or bool(definition and definition.uses_bodyweight)
    max_weight_kg = performance.max_weight_kg
    if max_weight_kg is None and definition is not None:
        max_weight_kg = definition.max_weight_kg
    fixed_target_reps = definition.fixed_target_reps if definition is not None else None

    weight_kg = performance.weight_kg
    target_reps = performance.target_reps

    def _weight(value: float) -> float:
        return normalize_weight(value, uses_bodyweight=uses_bodyweight, max_weight_kg=max_weight_kg)

    if performance_succeeded(performance):
        if fixed_target_reps is None and target_reps < LADDER_CEILING_REPS:
            return ExerciseState(weight_kg=_weight(weight_kg), target_reps=target_reps + 1)

        next_weight = weight_kg + increment_kg
        hold_reps = fixed_target_reps if fixed_target_reps is not None else target_reps
        if max_weight_kg is not None and next_weight > max_weight_kg:
            logger.debug(f"{performance.id}: at cap {max_weight_kg}kg, holding {weight_kg}kg x {hold_reps}")
            return ExerciseState(weight_kg=_weight(weight_kg), target_reps=hold_reps)

        reset_reps = fixed_target_reps if fixed_target_reps is not None else LADDER_FLOOR_REPS
        return ExerciseState(weight_kg=_weight(next_weight), target_reps=reset_reps)

    failures = state.consecutive_failures + 1
    if failures >= FAILURES_BEFORE_DELOAD:
        deload_weight = _weight(weight_kg * DELOAD_FACTOR)
        logger.debug(f"{performance.id}: {failures} failures in a row, deload {weight_kg}kg -> {deload_weight}kg")
        return ExerciseState(
            weight_kg=deload_weight,
            target_reps=fixed_target_reps if fixed_target_reps is not None else LADDER_FLOOR_REPS,
        )

    return ExerciseState(weight_kg=_weight(weight_kg), target_reps=target_reps, consecutive_failures=failures)


def apply_performances(
    states: Mapping[str, ExerciseState],
    performances: Iterable[ExercisePerformance],
    program: Program | None = None,
) -> dict[str, ExerciseState]:
    """Fold performances into a state map, returning a new map."""
    next_states = dict(states)
    for performance in performances:
        definition = program.get_exercise(performance.id) if program is not None else None
        next_states[performance.id] = update_exercise_state(next_states.get(performance.id), performance, definition)
    return next_states


def rebuild_exercise_states(
    program: Program | None,
    sessions: Iterable[SessionRecord],
    base_states: Mapping[str, ExerciseState] | None = None,
) -> dict[str, ExerciseState]:
    """Rebuild exercise state by replaying the full session log.

    Every exercise that appears in history is replayed from its catalog
    default. base_states only supplies values for exercises never performed.

    Args:
        program: Program providing catalog defaults
        sessions: Session log in any order
        base_states: States to keep for exercises absent from history

    Returns:
        Rebuilt state map
    """
    states = normalize_exercise_states(program, base_states)

    replayed: dict[str, ExerciseState] = {}
    for session in sort_sessions(sessions):
        for performance in session.exercises:
            if performance.id not in replayed:
                definition = program.get_exercise(performance.id) if program is not None else None
                replayed[performance.id] = (
                    default_exercise_state(definition)
                    if definition is not None
                    else ExerciseState(weight_kg=performance.weight_kg, target_reps=performance.target_reps)
                )
        replayed = apply_performances(replayed, session.exercises, program)

    return {**states, **replayed}
