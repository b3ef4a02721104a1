"""Read helpers over the append-only session log."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from overload.plans.types import ExercisePerformance, SessionRecord


def session_sort_key(session: SessionRecord) -> tuple:
    return (session.date, session.created_at or session.started_at or 0, session.id)


def sort_sessions(sessions: Iterable[SessionRecord]) -> list[SessionRecord]:
    """Order sessions chronologically.

    Date first, then creation time, then id, so that two devices holding the
    same set of records always replay them in the same order.
    """
    return sorted(sessions, key=session_sort_key)


def performance_succeeded(performance: ExercisePerformance) -> bool:
    """Every recorded set met or beat the target. No recorded sets is not a success."""
    if not performance.sets:
        return False
    return all(set_record.reps >= performance.target_reps for set_record in performance.sets)


def iter_performances(sessions: Iterable[SessionRecord], exercise_id: str) -> Iterator[ExercisePerformance]:
    for session in sort_sessions(sessions):
        for performance in session.exercises:
            if performance.id == exercise_id:
                yield performance


def total_set_count(session: SessionRecord) -> int:
    return sum(len(performance.sets) for performance in session.exercises)
